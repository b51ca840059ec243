"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from realm_clone.core.errors import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REALM_CLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Realm names used when the CLI is not given them
    default_old_realm: str = "ajax-dev"
    default_new_realm: str = "ajax-demo"

    # Output
    output_dir: Path = Path(".")
    output_template: str = "{realm}-realm-export.json"
    indent: int = Field(default=2, ge=0)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    @field_validator("output_template")
    @classmethod
    def _template_has_realm(cls, value: str) -> str:
        if "{realm}" not in value:
            raise ValueError("output_template must contain the {realm} placeholder")
        return value

    @field_validator("default_old_realm", "default_new_realm")
    @classmethod
    def _realm_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("realm names must not be blank")
        return value


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create settings instance.

    Raises:
        ConfigError: If a REALM_CLONE_* value (or .env entry) is invalid
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            details = [
                f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigError(
                f"Invalid REALM_CLONE_* settings ({len(details)} error(s))",
                details=details,
                cause=e,
            ) from e
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
