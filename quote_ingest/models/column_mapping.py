"""Column roles and the mapping from roles to spreadsheet columns."""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Optional


class ColumnRole(str, Enum):
    """Semantic fields located in a quotation spreadsheet."""
    PRODUCT = "product"
    SUPPLIER = "supplier"
    CATEGORY = "category"
    PRICE_PER_AREA = "price_per_area"
    DOSE = "dose"
    UNIT = "unit"


DEFAULT_PRODUCT_COLUMN = 0
DEFAULT_PRICE_COLUMN = 3


@dataclass(frozen=True)
class ColumnMapping:
    """Column index per role; None means the role is not present.

    ``product`` and ``price_per_area`` always hold an index, falling back to
    positional defaults when no header names them.
    """
    product: int = DEFAULT_PRODUCT_COLUMN
    supplier: Optional[int] = None
    category: Optional[int] = None
    price_per_area: int = DEFAULT_PRICE_COLUMN
    dose: Optional[int] = None
    unit: Optional[int] = None

    def get(self, role: ColumnRole) -> Optional[int]:
        return getattr(self, role.value)

    def is_present(self, role: ColumnRole) -> bool:
        return self.get(role) is not None

    def as_dict(self) -> Dict[str, Optional[int]]:
        return asdict(self)
