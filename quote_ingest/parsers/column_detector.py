"""Column detector for supplier quotation spreadsheets.

Supplier sheets arrive with any column order and with headers written in
Portuguese or English, with or without accents. The detector maps each
header to one of the column roles using keyword patterns:

- product, supplier and category by keyword containment
- price per hectare by explicit "/ha" style labels
- a generic price column ("preco", "valor", "custo") as fallback
- dose and unit by keyword or exact label

Headers are tested against the roles in a fixed priority order and the
first matching role consumes the header. Roles keep the first column that
names them; a specific price-per-hectare header is the one exception and
replaces a column chosen by the generic price fallback.

When nothing matches, product stays on column 0 and price on column 3.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import structlog

from quote_ingest.models.column_mapping import (
    ColumnMapping,
    ColumnRole,
    DEFAULT_PRICE_COLUMN,
    DEFAULT_PRODUCT_COLUMN,
)
from quote_ingest.models.grid import header_text
from quote_ingest.utils.text import normalize

logger = structlog.get_logger(__name__)


class HeaderPatternMatcher:
    """Matches normalized header labels to column roles."""

    KEYWORDS: Dict[ColumnRole, Tuple[str, ...]] = {
        ColumnRole.PRODUCT: (
            'produto', 'product', 'insumo', 'nome', 'item', 'descricao',
            'cultivo', 'marca',
        ),
        ColumnRole.SUPPLIER: (
            'fornecedor', 'empresa', 'supplier', 'fabricante', 'brand',
        ),
        ColumnRole.CATEGORY: (
            'categoria', 'category', 'tipo', 'grupo', 'classe', 'segmento',
        ),
    }

    PRICE_PER_AREA_LABELS: Tuple[str, ...] = ('preco_ha', 'r$/ha', 'preco/ha', '/ha')
    GENERIC_PRICE_WORDS: Tuple[str, ...] = ('preco', 'valor', 'custo')

    DOSE_WORDS: Tuple[str, ...] = ('dose',)
    DOSE_EXACT: Tuple[str, ...] = ('kg/ha', 'l/ha')

    UNIT_WORDS: Tuple[str, ...] = ('unid', 'unit')
    UNIT_EXACT: Tuple[str, ...] = ('un', 'kg')

    @staticmethod
    def _contains_any(text: str, words: Sequence[str]) -> bool:
        return any(word in text for word in words)

    @classmethod
    def is_price_per_area(cls, header: str) -> bool:
        if 'valor' in header and 'ha' in header:
            return True
        return cls._contains_any(header, cls.PRICE_PER_AREA_LABELS)

    @classmethod
    def match(cls, header: str) -> Tuple[Optional[ColumnRole], bool]:
        """Match a header to a role.

        Args:
            header: Header label (any case, accents allowed)

        Returns:
            (role, is_generic_price). ``is_generic_price`` is True when the
            header only matched the generic price fallback. The role is None
            when no pattern matches.
        """
        normalized = normalize(header).strip()
        if not normalized:
            return None, False

        for role in (ColumnRole.PRODUCT, ColumnRole.SUPPLIER, ColumnRole.CATEGORY):
            if cls._contains_any(normalized, cls.KEYWORDS[role]):
                return role, False

        if cls.is_price_per_area(normalized):
            return ColumnRole.PRICE_PER_AREA, False

        if cls._contains_any(normalized, cls.GENERIC_PRICE_WORDS):
            return ColumnRole.PRICE_PER_AREA, True

        if cls._contains_any(normalized, cls.DOSE_WORDS) or normalized in cls.DOSE_EXACT:
            return ColumnRole.DOSE, False

        if cls._contains_any(normalized, cls.UNIT_WORDS) or normalized in cls.UNIT_EXACT:
            return ColumnRole.UNIT, False

        return None, False


@dataclass
class DetectedColumn:
    """A header that matched a role."""
    index: int
    header_text: str
    role: ColumnRole
    generic_price: bool = False


@dataclass
class _DetectionState:
    """Working state of a single detect() call."""
    indices: Dict[ColumnRole, int] = field(default_factory=dict)
    price_from_fallback: bool = False
    matches: List[DetectedColumn] = field(default_factory=list)

    def assign(self, column: DetectedColumn) -> bool:
        role = column.role
        if role == ColumnRole.PRICE_PER_AREA:
            if role not in self.indices:
                self.indices[role] = column.index
                self.price_from_fallback = column.generic_price
                return True
            if self.price_from_fallback and not column.generic_price:
                self.indices[role] = column.index
                self.price_from_fallback = False
                return True
            return False

        if role in self.indices:
            return False
        self.indices[role] = column.index
        return True


class ColumnDetector:
    """Infers the column mapping of a quotation sheet from its headers."""

    def __init__(self, matcher: Optional[HeaderPatternMatcher] = None):
        self.matcher = matcher or HeaderPatternMatcher()
        self._log = logger.bind(component="ColumnDetector")

    def detect(self, headers: Sequence[Any]) -> ColumnMapping:
        """Detect which column holds each role.

        Args:
            headers: Header labels in column order. Non-string labels are
                rendered as text, None as an empty label.

        Returns:
            ColumnMapping with product/price defaults where nothing matched
        """
        state = _DetectionState()

        for idx, raw in enumerate(headers):
            label = header_text(raw)
            role, generic = self.matcher.match(label)
            if role is None:
                continue
            column = DetectedColumn(idx, label, role, generic)
            if state.assign(column):
                state.matches.append(column)

        mapping = ColumnMapping(
            product=state.indices.get(ColumnRole.PRODUCT, DEFAULT_PRODUCT_COLUMN),
            supplier=state.indices.get(ColumnRole.SUPPLIER),
            category=state.indices.get(ColumnRole.CATEGORY),
            price_per_area=state.indices.get(ColumnRole.PRICE_PER_AREA, DEFAULT_PRICE_COLUMN),
            dose=state.indices.get(ColumnRole.DOSE),
            unit=state.indices.get(ColumnRole.UNIT),
        )

        self._log.debug(
            "columns_detected",
            header_count=len(headers),
            mapping=mapping.as_dict(),
            matched_headers=[(c.header_text, c.role.value) for c in state.matches],
            price_from_fallback=state.price_from_fallback,
            defaulted=[
                role.value for role in (ColumnRole.PRODUCT, ColumnRole.PRICE_PER_AREA)
                if role not in state.indices
            ],
        )
        return mapping


def detect_columns(headers: Sequence[Any]) -> ColumnMapping:
    """Convenience function to detect the column mapping."""
    return ColumnDetector().detect(headers)
