"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENVIRONMENT_NAME = "development"
DEFAULT_APPLICATION_VERSION = "1.0.0"
DEFAULT_HOSTNAME = "unknown"

_LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the probe HTTP service.

    Environment variable names map directly to field names in uppercase.
    Example: `app_version` reads from `APP_VERSION`.

    Attributes:
        app_host: Host interface for web server binding.
        port: Web server port.
        app_env: Deployment environment label.
        node_env: Legacy deployment environment label used when `app_env` is unset.
        app_version: Version string reported by health and info endpoints.
        hostname: Host label reported by the info endpoint.
        log_level: Root logging level name.
        shutdown_timeout_seconds: Optional bound on the graceful connection drain.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_host: str = Field(default="0.0.0.0", min_length=1)
    port: int = Field(default=3000, ge=1, le=65535)
    app_env: str | None = Field(default=None)
    node_env: str | None = Field(default=None)
    app_version: str = Field(default=DEFAULT_APPLICATION_VERSION)
    hostname: str = Field(default=DEFAULT_HOSTNAME)
    log_level: str = Field(default="INFO")
    shutdown_timeout_seconds: int | None = Field(default=None, ge=1)

    @field_validator("app_env", "node_env")
    @classmethod
    def _validate_optional_label(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None

    @field_validator("app_version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        return value.strip() or DEFAULT_APPLICATION_VERSION

    @field_validator("hostname")
    @classmethod
    def _validate_hostname(cls, value: str) -> str:
        return value.strip() or DEFAULT_HOSTNAME

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _LOG_LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVEL_NAMES)}")
        return normalized_value

    @property
    def environment_name(self) -> str:
        """Return the resolved deployment environment label.

        Returns:
            str: `APP_ENV`, else `NODE_ENV`, else `development`.
        """

        return self.app_env or self.node_env or DEFAULT_ENVIRONMENT_NAME


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid, for example a
            non-numeric or out-of-range `PORT`.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
