"""Spreadsheet ingestion and category normalization for agricultural quotations.

A consultant imports a supplier price sheet; this package finds the product,
supplier, category, price-per-hectare, dose and unit columns, extracts the
priced rows, resolves a category for each item and summarizes the result.

    from quote_ingest import RawGrid, ingest

    grid = RawGrid.from_values(
        ["Nome", "Empresa", "Tipo", "R$/ha"],
        [["Glifosato", "Fornecedor A", "Herbicida", "85,00"]],
    )
    items, summary = ingest(grid)

Importing the package configures structlog from ``quote_ingest.config``
settings, so log events go through stdlib logging to stderr and obey
QUOTE_INGEST_LOG_LEVEL.
"""
from quote_ingest import config  # noqa: F401  configures logging on import
from quote_ingest.models import (
    ColumnMapping,
    ColumnRole,
    IngestionSummary,
    QuotationItem,
    RawGrid,
)
from quote_ingest.parsers import ColumnDetector, detect_columns
from quote_ingest.services import (
    CategoryClassifier,
    IngestionPipeline,
    IngestionReport,
    IngestionResult,
    RowExtractor,
    ingest,
)
from quote_ingest.utils import normalize, parse_price

__version__ = "0.1.0"

__all__ = [
    "ColumnMapping",
    "ColumnRole",
    "IngestionSummary",
    "QuotationItem",
    "RawGrid",
    "ColumnDetector",
    "detect_columns",
    "CategoryClassifier",
    "IngestionPipeline",
    "IngestionReport",
    "IngestionResult",
    "RowExtractor",
    "ingest",
    "normalize",
    "parse_price",
]
