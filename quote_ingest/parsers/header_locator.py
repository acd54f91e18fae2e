"""Header row locator for sheets with title or contact rows above the table.

Supplier sheets often start with a company banner, a date line or a blank
row before the real header. Each of the first rows is scored by how many
of its cells look like quotation headers and how many are text rather than
numbers; the best scoring row is taken as the header.
"""
from typing import Any, List, Sequence

import structlog

from quote_ingest.models.grid import header_text
from quote_ingest.utils.price_parser import looks_numeric
from quote_ingest.utils.text import normalize

logger = structlog.get_logger(__name__)

DEFAULT_MAX_SCAN_ROWS = 25

HEADER_HINTS = (
    'produto', 'descricao', 'item', 'fornecedor', 'categoria', 'valor',
    'preco', 'custo', 'dose', 'unid', '/ha',
)

HEADER_HIT_WEIGHT = 5
MAX_COUNTED_CELLS = 12


def score_header_row(row: Sequence[Any]) -> int:
    """Score a row as a header candidate; blank rows score -1."""
    values: List[str] = [v for v in (header_text(c) for c in row) if v]
    if not values:
        return -1

    normalized = [normalize(v) for v in values]
    header_hits = sum(
        1 for h in normalized if any(hint in h for hint in HEADER_HINTS)
    )
    textish = sum(1 for v in values if not looks_numeric(v))
    return header_hits * HEADER_HIT_WEIGHT + textish + min(len(values), MAX_COUNTED_CELLS)


def find_header_row(matrix: Sequence[Sequence[Any]], max_scan: int = DEFAULT_MAX_SCAN_ROWS) -> int:
    """Return the index of the most header-like row among the first rows.

    Args:
        matrix: Sheet rows as decoded by the spreadsheet reader
        max_scan: Number of rows inspected from the top

    Returns:
        Row index of the header; 0 when no row has content
    """
    best_index = 0
    best_score = -1

    for row_idx, row in enumerate(matrix[:max_scan]):
        score = score_header_row(row)
        if score > best_score:
            best_score = score
            best_index = row_idx

    logger.debug("header_row_located", row_index=best_index, score=best_score)
    return best_index
