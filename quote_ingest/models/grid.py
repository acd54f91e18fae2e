"""Raw spreadsheet grid handed to the ingestion engine.

The spreadsheet reader decodes each cell into text, a number or nothing.
Those three shapes are modelled as an explicit variant so that every
coercion rule (trimming, numeric rendering, blank detection) lives here
instead of being scattered over the engine.
"""
import math
import numbers
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Iterable, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class TextCell:
    """Cell holding free text."""
    value: str

    def as_text(self) -> str:
        return self.value.strip()

    def is_blank(self) -> bool:
        return not self.value.strip()


@dataclass(frozen=True)
class NumberCell:
    """Cell holding a numeric value, exactly as the reader decoded it."""
    value: Union[int, float, Decimal]

    def as_text(self) -> str:
        value = self.value
        if isinstance(value, int):
            return str(value)
        if isinstance(value, Decimal):
            integral = value == value.to_integral_value()
        else:
            integral = value.is_integer()
        if integral:
            return str(int(value))
        return str(value)

    def is_blank(self) -> bool:
        return False


@dataclass(frozen=True)
class EmptyCell:
    """Cell with no content. Use the module-level ``EMPTY`` instance."""
    value: ClassVar[None] = None

    def as_text(self) -> str:
        return ""

    def is_blank(self) -> bool:
        return True


EMPTY = EmptyCell()

Cell = Union[TextCell, NumberCell, EmptyCell]


def to_cell(value: Any) -> Cell:
    """Coerce a decoded spreadsheet value into a Cell.

    - None and whitespace-only text become EMPTY
    - integers, finite Decimals and floats become NumberCell holding the
      value unchanged (NaN becomes EMPTY)
    - bool, dates and anything else become TextCell(str(value))
    """
    if isinstance(value, (TextCell, NumberCell, EmptyCell)):
        return value
    if value is None:
        return EMPTY
    if isinstance(value, bool):
        return TextCell(str(value))
    if isinstance(value, Decimal) and value.is_finite():
        return NumberCell(value)
    if isinstance(value, numbers.Integral):
        return NumberCell(int(value))
    if isinstance(value, (numbers.Real, Decimal)):
        number = float(value)
        if math.isnan(number):
            return EMPTY
        return NumberCell(number)
    text = str(value)
    if not text.strip():
        return EMPTY
    return TextCell(text)


def header_text(value: Any) -> str:
    """Render a header cell as a trimmed string."""
    return to_cell(value).as_text()


@dataclass(frozen=True)
class RawGrid:
    """Header labels plus data rows, every row sized to the header width.

    Attributes:
        headers: One label per column
        rows: Data rows as tuples of cells, padded or truncated to len(headers)
    """
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[Cell, ...], ...] = field(default_factory=tuple)

    def __post_init__(self):
        headers = tuple(header_text(h) for h in self.headers)
        width = len(headers)
        rows = tuple(self._fit_row(row, width) for row in self.rows)
        object.__setattr__(self, "headers", headers)
        object.__setattr__(self, "rows", rows)

    @staticmethod
    def _fit_row(row: Iterable[Any], width: int) -> Tuple[Cell, ...]:
        cells = [to_cell(v) for v in list(row)[:width]]
        cells.extend([EMPTY] * (width - len(cells)))
        return tuple(cells)

    @classmethod
    def from_values(
        cls,
        headers: Sequence[Any],
        rows: Iterable[Sequence[Any]] = (),
    ) -> "RawGrid":
        """Build a grid from plain Python values."""
        return cls(headers=tuple(headers), rows=tuple(tuple(r) for r in rows))

    @property
    def width(self) -> int:
        return len(self.headers)

    @property
    def is_empty(self) -> bool:
        return not self.headers or not self.rows

    @staticmethod
    def cell(row: Sequence[Cell], index: Optional[int]) -> Cell:
        """Return the cell at ``index``; EMPTY when absent or out of range."""
        if index is None or index < 0 or index >= len(row):
            return EMPTY
        return row[index]
