"""
Response models for the greeting and health endpoints.
"""
from pydantic import BaseModel, Field
from typing import Literal, Optional


class GreetingResponse(BaseModel):
    """Body returned by the testing routes."""
    message: str
    timestamp: str = Field(..., description="ISO-8601 UTC time the response was built.")


class RootGreetingResponse(GreetingResponse):
    """Body returned by `/`, which also echoes the environment name."""
    environment: Optional[str] = Field(None, description="Configured NODE_ENV, null when unset.")


class HealthResponse(BaseModel):
    status: Literal["OK"] = "OK"
    uptime: float = Field(..., ge=0.0, description="Seconds since the process started.")
    environment: Optional[str] = None
