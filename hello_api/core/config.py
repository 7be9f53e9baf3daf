from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from pathlib import Path
from typing import Optional

env_path = Path("hello_api") / "config" / ".env"

DEFAULT_PORT = 3000


class AppSettings(BaseSettings):
    """
    Process configuration read from environment variables and the optional .env file.

    Built once at process entry and handed to `create_app`; handlers reach it
    through `hello_api.dependencies.get_settings`.
    """
    # --- Server ---
    PORT: int = Field(
        DEFAULT_PORT,
        ge=0,
        le=65535,
        description="TCP port to bind (empty or unset falls back to 3000)",
    )
    HOST: str = Field("0.0.0.0", description="Interface to bind, all interfaces by default")

    # --- Environment ---
    NODE_ENV: Optional[str] = Field(
        default=None,
        description="Deployment stage label echoed verbatim in responses (e.g. production)",
    )

    # --- General ---
    LOG_LEVEL: str = Field(
        "INFO",
        description="Application log level (e.g. DEBUG, INFO, WARNING)",
    )

    @field_validator("PORT", mode="before")
    @classmethod
    def _empty_port_means_default(cls, value):
        if value is None:
            return DEFAULT_PORT
        if isinstance(value, str) and not value.strip():
            return DEFAULT_PORT
        return value

    model_config = SettingsConfigDict(env_file=env_path, env_file_encoding='utf-8', extra='ignore')
