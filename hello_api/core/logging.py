import sys
from loguru import logger

from hello_api.core.config import AppSettings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(settings: AppSettings) -> None:
    """Replaces loguru's default sink with a colourised stderr sink at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        colorize=True,
    )


# Other modules import the logger from here: 'from hello_api.core.logging import logger'
__all__ = ["logger", "configure_logging"]
