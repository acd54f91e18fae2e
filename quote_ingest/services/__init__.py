"""Business logic services for quotation ingestion.

Available Services:
    - classification: Category resolution from category cells and product names
    - extraction: Per-row item extraction and validity filtering
    - ingestion: End-to-end pipeline from raw grid to items and summary
"""
from quote_ingest.services.classification import (
    CategoryClassifier,
    ClassificationResult,
    ClassificationMethod,
)
from quote_ingest.services.extraction import RowExtractor, extract_items
from quote_ingest.services.ingestion import (
    IngestionPipeline,
    IngestionReport,
    IngestionResult,
    ingest,
)

__all__: list[str] = [
    # Classification
    "CategoryClassifier",
    "ClassificationResult",
    "ClassificationMethod",
    # Extraction
    "RowExtractor",
    "extract_items",
    # Pipeline
    "IngestionPipeline",
    "IngestionReport",
    "IngestionResult",
    "ingest",
]
