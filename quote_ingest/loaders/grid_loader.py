"""Spreadsheet loader producing the RawGrid consumed by the pipeline.

Reads CSV and Excel workbooks with pandas (openpyxl engine for Excel).
Only the first worksheet of a workbook is read. The loader:

- locates the header row below any title/contact rows
- drops data rows whose cells are all blank
- keeps native cell types (numbers stay numbers, text stays text)
"""
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pandas as pd
import structlog

from quote_ingest.config import settings
from quote_ingest.errors.exceptions import GridLoadError
from quote_ingest.models.grid import RawGrid, to_cell
from quote_ingest.parsers.header_locator import find_header_row

logger = structlog.get_logger(__name__)

CSV_EXTENSIONS = ('.csv', '.txt')
EXCEL_EXTENSIONS = ('.xlsx', '.xlsm')
SUPPORTED_EXTENSIONS = CSV_EXTENSIONS + EXCEL_EXTENSIONS


def _is_blank_row(row: Sequence[Any]) -> bool:
    return all(to_cell(cell).is_blank() for cell in row)


def build_grid(matrix: Sequence[Sequence[Any]], header_scan_rows: Optional[int] = None) -> RawGrid:
    """Build a RawGrid from a sheet matrix.

    Args:
        matrix: All sheet rows, top to bottom, as decoded values
        header_scan_rows: Rows inspected when locating the header
            (defaults to settings.header_scan_rows)

    Returns:
        RawGrid whose headers are the located header row and whose rows are
        the non-blank rows below it
    """
    if not matrix:
        return RawGrid(headers=())

    max_scan = header_scan_rows or settings.header_scan_rows
    header_idx = find_header_row(matrix, max_scan=max_scan)
    headers = tuple(matrix[header_idx])
    rows = tuple(
        tuple(row) for row in matrix[header_idx + 1:]
        if not _is_blank_row(row)
    )
    return RawGrid(headers=headers, rows=rows)


def _sniff_delimiter(path: Path, encoding: str) -> str:
    """Pick ';' or ',' by counting them in the first 2 KB."""
    with path.open("r", encoding=encoding, errors="ignore") as f:
        sample = f.read(2048)
    return ";" if sample.count(";") > sample.count(",") else ","


def _max_field_count(path: Path, encoding: str, sep: str) -> int:
    """Widest line in the file, so title rows above the header do not fix the width."""
    with path.open("r", encoding=encoding, errors="ignore") as f:
        return max((line.count(sep) + 1 for line in f if line.strip()), default=0)


def _read_csv_matrix(path: Path, encoding: str, delimiter: Optional[str]) -> List[List[Any]]:
    sep = delimiter or _sniff_delimiter(path, encoding)
    width = _max_field_count(path, encoding, sep)
    if width == 0:
        return []
    try:
        df = pd.read_csv(
            path,
            header=None,
            names=list(range(width)),
            sep=sep,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            encoding=encoding,
        )
    except pd.errors.EmptyDataError:
        return []
    return df.values.tolist()


def _read_excel_matrix(path: Path) -> List[List[Any]]:
    df = pd.read_excel(
        path,
        sheet_name=0,
        header=None,
        dtype=object,
        engine="openpyxl",
    )
    return df.values.tolist()


def load_matrix(
    file_path: str | Path,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> List[List[Any]]:
    """Read the first sheet of a spreadsheet file as a list of rows.

    Raises:
        GridLoadError: If the file is missing, too large, of an unsupported
            type, or cannot be read
    """
    path = Path(file_path)
    if not path.exists():
        raise GridLoadError(f"Spreadsheet file not found: {path}")

    extension = path.suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise GridLoadError(
            f"Unsupported spreadsheet type '{extension}'. "
            f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    size_mb = path.stat().st_size / (1024 * 1024)
    if size_mb > settings.max_file_size_mb:
        raise GridLoadError(
            f"Spreadsheet is {size_mb:.1f} MB, limit is {settings.max_file_size_mb} MB"
        )

    try:
        if extension in CSV_EXTENSIONS:
            return _read_csv_matrix(path, encoding or settings.csv_encoding, delimiter)
        return _read_excel_matrix(path)
    except Exception as e:
        raise GridLoadError(f"Could not read spreadsheet {path.name}: {e}") from e


def load_grid(
    file_path: str | Path,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> RawGrid:
    """Load a spreadsheet file into a RawGrid.

    Args:
        file_path: Path to a .csv/.txt or .xlsx/.xlsm file
        delimiter: CSV delimiter; sniffed between ';' and ',' when omitted
        encoding: CSV encoding; defaults to settings.csv_encoding

    Returns:
        RawGrid for the first sheet (empty grid for an empty file)

    Raises:
        GridLoadError: If the file cannot be loaded
    """
    log = logger.bind(file_path=str(file_path))
    matrix = load_matrix(file_path, delimiter=delimiter, encoding=encoding)
    if not matrix:
        log.warning("empty_spreadsheet")
        return RawGrid(headers=())

    grid = build_grid(matrix)
    log.info(
        "grid_loaded",
        total_rows=len(matrix),
        header_count=grid.width,
        data_rows=len(grid.rows),
    )
    return grid
