"""Error handling module."""
from quote_ingest.errors.exceptions import (
    DataIngestionError,
    GridLoadError,
    ConfigurationError,
)

__all__ = [
    "DataIngestionError",
    "GridLoadError",
    "ConfigurationError",
]
