from fastapi import APIRouter, Depends

from hello_api.core.config import AppSettings
from hello_api.dependencies import get_settings, get_uptime_service
from hello_api.schemas.greetings import HealthResponse
from hello_api.services.uptime_service import UptimeService

router = APIRouter()

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Simple health check"
)
def health_check(
    settings: AppSettings = Depends(get_settings),
    uptime_service: UptimeService = Depends(get_uptime_service),
):
    """
    Confirms the server is alive and reports process uptime in seconds.
    """
    return HealthResponse(
        status="OK",
        uptime=uptime_service.uptime_seconds(),
        environment=settings.NODE_ENV,
    )
