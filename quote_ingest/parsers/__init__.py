"""Header analysis for quotation spreadsheets."""
from quote_ingest.parsers.column_detector import (
    ColumnDetector,
    HeaderPatternMatcher,
    detect_columns,
)
from quote_ingest.parsers.header_locator import (
    find_header_row,
    score_header_row,
)

__all__ = [
    "ColumnDetector",
    "HeaderPatternMatcher",
    "detect_columns",
    "find_header_row",
    "score_header_row",
]
