"""Environment-driven settings.

Values come from `FORECAST_*` environment variables, with a `.env` file in the
working directory loaded into the environment first.
"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forecast_agent.errors import ConfigurationError, ErrorCode


def _load_dotenv() -> None:
    path = Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path, override=True)


_load_dotenv()


class Settings(BaseSettings):
    """Agent, plugin and telemetry settings."""

    model_config = SettingsConfigDict(
        env_file=None,
        env_prefix="FORECAST_",
        case_sensitive=False,
        extra="ignore",
    )

    env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool | None = Field(
        None, description="Emit JSON logs (defaults to True in production)"
    )

    plugin_name: str = Field(
        "Weather", min_length=1, description="Name the weather plugin is registered under"
    )
    random_seed: int | None = Field(
        None, description="Seed for the forecast random source (unseeded when unset)"
    )

    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4317"
    otel_service_name: str = "forecast-agent"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("random_seed", "log_json", mode="before")
    @classmethod
    def empty_string_as_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_production(self) -> bool:
        return self.env == "production"

    def is_development(self) -> bool:
        return self.env == "development"

    def effective_log_level(self) -> str:
        """``DEBUG`` when ``debug`` is set, otherwise ``log_level``."""
        return "DEBUG" if self.debug else self.log_level

    def use_json_logs(self) -> bool:
        """Whether to render JSON logs; unset means JSON only in production."""
        return self.is_production() if self.log_json is None else self.log_json


_settings_instance: Settings | None = None


def get_settings(reload: bool = False) -> Settings:
    """Return the process-wide settings, building them on first use.

    Args:
        reload: Re-read the environment even if settings were already built

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    global _settings_instance

    if reload or _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e.error_count()} error(s)",
                code=ErrorCode.CONFIG_INVALID,
                details={
                    "fields": [".".join(str(p) for p in err["loc"]) for err in e.errors()]
                },
            ) from e

    return _settings_instance


def reload_settings() -> Settings:
    """Shorthand for ``get_settings(reload=True)``."""
    return get_settings(reload=True)
