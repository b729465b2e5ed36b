"""Configuration management using pydantic-settings."""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class WarehouseSettings(BaseSettings):
    """Warehouse configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WAREHOUSE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalog behaviour
    reset_on_open: bool = Field(
        default=True,
        description="Empty a named catalog every time it is opened",
    )

    # Logging configuration
    log_level: LogLevel = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format string",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def get_settings(**overrides: Any) -> WarehouseSettings:
    """Get the warehouse settings instance."""
    return WarehouseSettings(**overrides)
