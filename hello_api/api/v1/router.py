from fastapi import APIRouter
from hello_api.api.v1.endpoints import (
    greetings,
    health,
)

api_router = APIRouter()

# --- HTTP API Endpoints ---
api_router.include_router(greetings.router, tags=["Greetings"])
api_router.include_router(health.router, tags=["Health"])
