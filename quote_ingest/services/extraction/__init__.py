"""Row extraction service."""
from quote_ingest.services.extraction.row_extractor import (
    RowExtractor,
    extract_items,
)

__all__ = [
    "RowExtractor",
    "extract_items",
]
