from fastapi import APIRouter, Depends

from hello_api.core.clock import utc_timestamp
from hello_api.core.config import AppSettings
from hello_api.dependencies import get_settings
from hello_api.schemas.greetings import GreetingResponse, RootGreetingResponse

ROOT_MESSAGE = "Hello from Node.js Docker App!"
TESTING_MESSAGE = "Hello from Node.js Docker App testing api!"

# Leftover experiment routes, kept for compatibility and marked deprecated in the schema.
TESTING_ROUTE_PATHS = ("/test", "/testing", "/gdgdfgdg", "/ci-cd", "/he")

router = APIRouter()


@router.get("/", response_model=RootGreetingResponse, summary="Greeting with environment name")
def read_root(settings: AppSettings = Depends(get_settings)):
    """Returns the root greeting, the current time and the configured environment name."""
    return RootGreetingResponse(
        message=ROOT_MESSAGE,
        timestamp=utc_timestamp(),
        environment=settings.NODE_ENV,
    )


def read_testing_greeting():
    """Testing greeting; every path in TESTING_ROUTE_PATHS serves this same body."""
    return GreetingResponse(message=TESTING_MESSAGE, timestamp=utc_timestamp())


for _path in TESTING_ROUTE_PATHS:
    router.add_api_route(
        _path,
        read_testing_greeting,
        methods=["GET"],
        response_model=GreetingResponse,
        summary="Testing greeting",
        deprecated=True,
    )
