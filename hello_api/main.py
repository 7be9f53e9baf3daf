from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import traceback

from hello_api.api.v1.router import api_router
from hello_api.core.config import AppSettings
from hello_api.core.logging import configure_logging, logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The "App running on port" line is logged by run.AppServer once the socket is bound.
    yield

    logger.info("Application shutdown.")


async def global_exception_handler(request: Request, exc: Exception):
    error_details = traceback.format_exc()
    logger.error(f"Unhandled exception for request {request.method} {request.url}:\n{error_details}")
    return JSONResponse(status_code=500, content={"detail": "An internal server error occurred."})


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Builds the application around an explicit settings object.

    With no argument the settings are read from the environment, which lets
    `uvicorn --factory hello_api.main:create_app` work as an entry point too.
    """
    if settings is None:
        settings = AppSettings()
    configure_logging(settings)

    app = FastAPI(title="Hello API", lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(Exception, global_exception_handler)

    # HTTP API router, mounted at the root so paths match exactly
    app.include_router(api_router)

    return app
