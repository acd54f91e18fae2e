"""Row extractor: applies a column mapping to every data row.

Each row yields at most one QuotationItem. Rows without a product name or
without a positive price are dropped and logged, never raised: a supplier
sheet with a few subtotal or note rows must still import the rest.
"""
from decimal import Decimal
from typing import List, Optional, Sequence

import structlog

from quote_ingest.models.column_mapping import ColumnMapping
from quote_ingest.models.grid import Cell, RawGrid
from quote_ingest.models.quotation import QuotationItem
from quote_ingest.services.classification.classifier import CategoryClassifier
from quote_ingest.utils.price_parser import parse_price

logger = structlog.get_logger(__name__)


class RowExtractor:
    """Turns grid rows into validated quotation items."""

    def __init__(self, classifier: Optional[CategoryClassifier] = None):
        self.classifier = classifier or CategoryClassifier()
        self._log = logger.bind(component="RowExtractor")

    def extract(self, grid: RawGrid, mapping: ColumnMapping) -> List[QuotationItem]:
        """Extract the valid items of a grid.

        Args:
            grid: Header labels and data rows (blank rows already removed)
            mapping: Column index per role

        Returns:
            Items in row order; invalid rows are skipped
        """
        items: List[QuotationItem] = []
        dropped = 0

        for row_number, row in enumerate(grid.rows, start=1):
            item = self._extract_row(row, row_number, mapping)
            if item is None:
                dropped += 1
                continue
            items.append(item)

        self._log.info(
            "rows_extracted",
            total_rows=len(grid.rows),
            valid_items=len(items),
            dropped_rows=dropped,
        )
        return items

    def _extract_row(
        self,
        row: Sequence[Cell],
        row_number: int,
        mapping: ColumnMapping,
    ) -> Optional[QuotationItem]:
        product = RawGrid.cell(row, mapping.product).as_text()
        price = parse_price(RawGrid.cell(row, mapping.price_per_area).value)

        if not product:
            self._log.debug("row_dropped", row_number=row_number, reason="missing_product")
            return None
        if price <= Decimal("0"):
            self._log.debug(
                "row_dropped",
                row_number=row_number,
                reason="non_positive_price",
                product=product[:50],
            )
            return None

        supplier = self._optional_text(row, mapping.supplier) or ""
        raw_category = self._optional_text(row, mapping.category) or ""

        return QuotationItem(
            product=product,
            supplier=supplier,
            category=self.classifier.classify(raw_category, product),
            price_per_area=price,
            dose=self._optional_text(row, mapping.dose),
            unit=self._optional_text(row, mapping.unit),
        )

    @staticmethod
    def _optional_text(row: Sequence[Cell], index: Optional[int]) -> Optional[str]:
        """Trimmed cell text, or None when the column is not present."""
        if index is None:
            return None
        return RawGrid.cell(row, index).as_text()


def extract_items(grid: RawGrid, mapping: ColumnMapping) -> List[QuotationItem]:
    """Convenience function to extract items with the default classifier."""
    return RowExtractor().extract(grid, mapping)
