"""Spreadsheet loaders producing RawGrid instances."""
from quote_ingest.loaders.grid_loader import (
    build_grid,
    load_grid,
    load_matrix,
    SUPPORTED_EXTENSIONS,
)

__all__ = [
    "build_grid",
    "load_grid",
    "load_matrix",
    "SUPPORTED_EXTENSIONS",
]
