"""Text and number helpers shared by the ingestion components."""
from quote_ingest.utils.text import normalize, title_case
from quote_ingest.utils.price_parser import parse_price, looks_numeric

__all__ = [
    "normalize",
    "title_case",
    "parse_price",
    "looks_numeric",
]
