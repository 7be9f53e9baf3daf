import uvicorn

from hello_api.core.config import AppSettings
from hello_api.core.logging import logger
from hello_api.main import create_app


class AppServer(uvicorn.Server):
    """uvicorn server that announces the port only after its sockets are bound."""

    def __init__(self, config: uvicorn.Config, settings: AppSettings):
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # Bind and lifespan failures exit inside super().startup(), before started is set.
        if self.started:
            logger.info(f"App running on port {self.settings.PORT} in {self.settings.NODE_ENV} mode")


def main() -> None:
    # Settings are read once here and passed down; a bad PORT aborts startup.
    settings = AppSettings()
    app = create_app(settings)

    config = uvicorn.Config(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
    # Bind failures (e.g. port already in use) propagate and end the process.
    AppServer(config, settings).run()


if __name__ == "__main__":
    main()
