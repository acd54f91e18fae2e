"""Configuration management using pydantic-settings."""
import logging
import sys
from enum import Enum

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Supported log renderers."""
    JSON = "json"
    CONSOLE = "console"


class IngestionSettings(BaseSettings):
    """Ingestion settings loaded from environment variables.

    All settings prefixed with QUOTE_INGEST_ (e.g., QUOTE_INGEST_LOG_LEVEL=DEBUG)
    """

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_format: LogFormat = Field(
        default=LogFormat.JSON,
        description="Log renderer (json, console)"
    )

    # Spreadsheet Loading
    header_scan_rows: int = Field(
        default=25,
        ge=1,
        le=500,
        description="Rows scanned from the top of a sheet when locating the header row"
    )
    csv_encoding: str = Field(
        default="utf-8-sig",
        description="Encoding used to read CSV files"
    )
    max_file_size_mb: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Maximum spreadsheet size accepted by the loader (MB)"
    )

    model_config = SettingsConfigDict(
        env_prefix="QUOTE_INGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = IngestionSettings()


def configure_logging(log_level: str = "INFO", log_format: LogFormat = LogFormat.JSON) -> None:
    """Configure structlog on top of stdlib logging."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == LogFormat.CONSOLE
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Initialize logging on module import (after settings are loaded)
configure_logging(settings.log_level, settings.log_format)
