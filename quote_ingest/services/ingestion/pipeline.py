"""Ingestion pipeline: raw grid to validated items and summary.

    grid.headers ──► ColumnDetector ──► ColumnMapping
    grid.rows + mapping ──► RowExtractor (+ CategoryClassifier) ──► items
    items ──► IngestionSummary

Every run is independent. The pipeline keeps no state between calls, so
the same grid always produces the same items and summary, and separate
grids may be ingested from separate threads.
"""
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

import structlog

from quote_ingest.models.column_mapping import ColumnMapping
from quote_ingest.models.grid import RawGrid
from quote_ingest.models.quotation import IngestionSummary, QuotationItem
from quote_ingest.parsers.column_detector import ColumnDetector
from quote_ingest.services.classification.classifier import CategoryClassifier
from quote_ingest.services.extraction.row_extractor import RowExtractor

logger = structlog.get_logger(__name__)


class IngestionResult(NamedTuple):
    """Items and summary of one run; unpacks as ``items, summary``."""
    items: List[QuotationItem]
    summary: IngestionSummary


@dataclass(frozen=True)
class IngestionReport:
    """Full outcome of one run, including the detected column mapping."""
    mapping: ColumnMapping
    items: List[QuotationItem] = field(default_factory=list)
    summary: IngestionSummary = field(default_factory=IngestionSummary)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_result(self) -> IngestionResult:
        return IngestionResult(self.items, self.summary)


class IngestionPipeline:
    """Orchestrates column detection, row extraction and summarization."""

    def __init__(
        self,
        detector: Optional[ColumnDetector] = None,
        classifier: Optional[CategoryClassifier] = None,
    ):
        self.detector = detector or ColumnDetector()
        self.extractor = RowExtractor(classifier)
        self._log = logger.bind(component="IngestionPipeline")

    def run(self, grid: RawGrid) -> IngestionReport:
        """Ingest a grid and return mapping, items and summary."""
        mapping = self.detector.detect(grid.headers)

        if grid.is_empty:
            self._log.info(
                "ingestion_skipped_empty_grid",
                header_count=grid.width,
                row_count=len(grid.rows),
            )
            return IngestionReport(mapping=mapping)

        items = self.extractor.extract(grid, mapping)
        summary = IngestionSummary.from_items(items)

        self._log.info(
            "ingestion_completed",
            mapping=mapping.as_dict(),
            item_count=summary.item_count,
            distinct_products=summary.distinct_products,
            distinct_suppliers=summary.distinct_suppliers,
            distinct_categories=summary.distinct_categories,
        )
        return IngestionReport(mapping=mapping, items=items, summary=summary)

    def ingest(self, grid: RawGrid) -> IngestionResult:
        """Ingest a grid and return ``(items, summary)``."""
        return self.run(grid).to_result()


def ingest(grid: RawGrid) -> IngestionResult:
    """Convenience function to ingest a grid with the default components."""
    return IngestionPipeline().ingest(grid)
