# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to verbosity, target prefix and spinner settings

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="CRUNCHY_CLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Logging Configuration
    log_level: Literal["ERROR", "WARN", "INFO", "DEBUG", "TRACE"] = Field(
        default="INFO", description="Verbosity used when no -v/-q flag is given"
    )
    log_prefix: str = Field(
        default="crunchy_cli", description="Target prefix a record needs to be rendered by the CLI sink"
    )
    intercept_stdlib: bool = Field(
        default=True, description="Forward records of the standard logging module to the CLI sink"
    )

    # Progress Configuration
    progress_tick_ms: int = Field(default=200, gt=0, description="Spinner animation tick in milliseconds")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
