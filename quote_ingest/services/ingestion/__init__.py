"""Ingestion pipeline service."""
from quote_ingest.services.ingestion.pipeline import (
    IngestionPipeline,
    IngestionReport,
    IngestionResult,
    ingest,
)

__all__ = [
    "IngestionPipeline",
    "IngestionReport",
    "IngestionResult",
    "ingest",
]
