"""
Dependency providers for the endpoint handlers.
"""
from fastapi import Request

from hello_api.core.config import AppSettings
from hello_api.services.uptime_service import UptimeService


# --- Single instances ---
_uptime_service = UptimeService()


# --- Provider functions ---
def get_settings(request: Request) -> AppSettings:
    # Settings are attached by create_app; there is no module-level settings object.
    return request.app.state.settings

def get_uptime_service() -> UptimeService: return _uptime_service
