"""Pydantic models for quotation items produced by the ingestion engine."""
from collections import Counter
from decimal import Decimal
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


class QuotationItem(BaseModel):
    """Validated priced line item extracted from a supplier spreadsheet.

    Instances are immutable; the persistence layer that receives them is
    responsible for identifiers and timestamps.
    """

    product: str = Field(
        ...,
        min_length=1,
        description="Product name as written in the spreadsheet"
    )
    supplier: str = Field(
        default="",
        description="Supplier name (empty string when unknown)"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Canonical category or best-effort label"
    )
    price_per_area: Decimal = Field(
        ...,
        gt=0,
        description="Price per hectare"
    )
    dose: Optional[str] = Field(
        default=None,
        description="Dose text (None when the sheet has no dose column)"
    )
    unit: Optional[str] = Field(
        default=None,
        description="Unit text (None when the sheet has no unit column)"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "product": "Glifosato",
                "supplier": "Fornecedor A",
                "category": "Herbicida",
                "price_per_area": "85.00",
                "dose": "2,5",
                "unit": "L/ha",
            }
        },
    )


class IngestionSummary(BaseModel):
    """Aggregate statistics over the items of one ingestion run."""

    item_count: int = Field(default=0, ge=0)
    distinct_products: int = Field(default=0, ge=0)
    distinct_suppliers: int = Field(default=0, ge=0)
    distinct_categories: int = Field(default=0, ge=0)
    items_per_category: Dict[str, int] = Field(
        default_factory=dict,
        description="Item count per category, largest first"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_items(cls, items: Iterable[QuotationItem]) -> "IngestionSummary":
        """Compute the summary for a sequence of items.

        An empty supplier name counts as one distinct supplier.
        """
        items = list(items)
        per_category = Counter(item.category for item in items)
        ordered = sorted(per_category.items(), key=lambda kv: (-kv[1], kv[0]))
        return cls(
            item_count=len(items),
            distinct_products=len({item.product for item in items}),
            distinct_suppliers=len({item.supplier for item in items}),
            distinct_categories=len(per_category),
            items_per_category=dict(ordered),
        )
