"""Runtime settings read from the environment.

Only settings about how the tool runs live here. The rendering constants
(canvas, lanes, colors, poll geometry) belong to `nicoass.config.render`
and come from an optional YAML file instead.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseSettings):
    """Settings taken from ``NICOASS_*`` variables or a ``.env`` file.

    Example:
        >>> Config(app_env="production").is_production
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="NICOASS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="nicoass", description="Name stamped on log events")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Selects the log renderer"
    )
    log_level: LogLevel = Field(default="INFO", description="Root log level")
    locale: str = Field(default="en", description="Message catalog used by the CLI")
    render_config_path: str | None = Field(
        default=None, description="YAML file overriding the rendering constants"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        # NICOASS_LOG_LEVEL=debug is common in shells
        return v.upper() if isinstance(v, str) else v

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_config() -> Config:
    """Return the process-wide settings, read on first use."""
    return Config()
