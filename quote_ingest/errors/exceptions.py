"""Custom exception hierarchy for quotation ingestion errors.

The ingestion engine itself is total: bad rows, unknown categories and empty
grids produce degenerate output, not exceptions. These errors cover the
surfaces around it (file loading, caller-supplied configuration).
"""


class DataIngestionError(Exception):
    """Base exception for all quotation ingestion errors."""

    def __init__(self, message: str, *args, **kwargs):
        """Initialize error with message."""
        self.message = message
        super().__init__(message, *args, **kwargs)


class GridLoadError(DataIngestionError):
    """Raised when a spreadsheet file cannot be read into a grid."""
    pass


class ConfigurationError(DataIngestionError):
    """Raised when caller-supplied alias or hint tables are invalid."""
    pass
