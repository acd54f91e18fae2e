"""Data models for the ingestion engine.

Grid and mapping types are plain dataclasses; items handed to the caller
are validated pydantic models.
"""
from quote_ingest.models.grid import (
    Cell,
    TextCell,
    NumberCell,
    EmptyCell,
    EMPTY,
    RawGrid,
    to_cell,
)
from quote_ingest.models.column_mapping import (
    ColumnRole,
    ColumnMapping,
    DEFAULT_PRODUCT_COLUMN,
    DEFAULT_PRICE_COLUMN,
)
from quote_ingest.models.quotation import (
    QuotationItem,
    IngestionSummary,
)

__all__ = [
    # Grid
    "Cell",
    "TextCell",
    "NumberCell",
    "EmptyCell",
    "EMPTY",
    "RawGrid",
    "to_cell",
    # Column mapping
    "ColumnRole",
    "ColumnMapping",
    "DEFAULT_PRODUCT_COLUMN",
    "DEFAULT_PRICE_COLUMN",
    # Output
    "QuotationItem",
    "IngestionSummary",
]
