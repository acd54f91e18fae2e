"""Unit tests for grid cells, RawGrid, ColumnMapping and the quotation models."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from quote_ingest.models import (
    EMPTY,
    ColumnMapping,
    ColumnRole,
    IngestionSummary,
    NumberCell,
    QuotationItem,
    RawGrid,
    TextCell,
    to_cell,
)


class TestToCell:
    """Test coercion of decoded values into cells."""

    @pytest.mark.parametrize("value", [None, "", "   ", float("nan")])
    def test_blank_values_are_empty(self, value):
        assert to_cell(value) is EMPTY

    def test_numbers(self):
        assert to_cell(120) == NumberCell(120.0)
        assert to_cell(Decimal("9.5")) == NumberCell(9.5)

    def test_decimal_is_stored_exactly(self):
        value = Decimal("123.456789012345678")
        cell = to_cell(value)
        assert cell.value == value
        assert isinstance(cell.value, Decimal)

    def test_large_int_is_stored_exactly(self):
        assert to_cell(12345678901234567891).value == 12345678901234567891

    def test_non_finite_decimal(self):
        assert to_cell(Decimal("NaN")) is EMPTY
        assert to_cell(Decimal("Infinity")) == NumberCell(float("inf"))

    def test_text_keeps_original(self):
        assert to_cell("  Glifosato ") == TextCell("  Glifosato ")

    def test_bool_becomes_text(self):
        assert to_cell(True) == TextCell("True")

    def test_existing_cell_is_returned(self):
        cell = TextCell("x")
        assert to_cell(cell) is cell


class TestCellText:
    """Test rendering cells as trimmed text."""

    def test_integral_number_has_no_fraction(self):
        assert NumberCell(420.0).as_text() == "420"

    def test_fractional_number(self):
        assert NumberCell(0.25).as_text() == "0.25"

    @pytest.mark.parametrize("value,expected", [
        (420, "420"),
        (Decimal("420.00"), "420"),
        (Decimal("2.50"), "2.50"),
    ])
    def test_int_and_decimal_text(self, value, expected):
        assert NumberCell(value).as_text() == expected

    def test_text_is_trimmed(self):
        assert TextCell("  Ureia  ").as_text() == "Ureia"

    def test_empty(self):
        assert EMPTY.as_text() == ""
        assert EMPTY.is_blank()
        assert EMPTY.value is None


class TestRawGrid:
    """Test grid construction and cell access."""

    def test_short_rows_are_padded(self):
        grid = RawGrid.from_values(["A", "B", "C"], [["x"]])
        assert grid.rows[0] == (TextCell("x"), EMPTY, EMPTY)

    def test_long_rows_are_truncated(self):
        grid = RawGrid.from_values(["A", "B"], [["x", "y", "z"]])
        assert len(grid.rows[0]) == 2

    def test_headers_are_rendered_as_text(self):
        grid = RawGrid.from_values([" Produto ", None, 2024], [])
        assert grid.headers == ("Produto", "", "2024")

    @pytest.mark.parametrize("headers,rows", [
        ([], [["x"]]),
        (["Produto"], []),
    ])
    def test_is_empty(self, headers, rows):
        assert RawGrid.from_values(headers, rows).is_empty

    def test_cell_out_of_range_is_empty(self):
        grid = RawGrid.from_values(["A", "B"], [["x", "y"]])
        assert RawGrid.cell(grid.rows[0], 3) is EMPTY
        assert RawGrid.cell(grid.rows[0], None) is EMPTY
        assert RawGrid.cell(grid.rows[0], 1) == TextCell("y")


class TestColumnMapping:
    """Test mapping defaults and role access."""

    def test_defaults(self):
        mapping = ColumnMapping()
        assert mapping.product == 0
        assert mapping.price_per_area == 3
        assert not mapping.is_present(ColumnRole.SUPPLIER)

    def test_get_by_role(self):
        mapping = ColumnMapping(supplier=2)
        assert mapping.get(ColumnRole.SUPPLIER) == 2
        assert mapping.as_dict()["supplier"] == 2


class TestQuotationItem:
    """Test item validation."""

    def test_valid_item(self):
        item = QuotationItem(
            product="Glifosato",
            category="Herbicida",
            price_per_area=Decimal("85.00"),
        )
        assert item.supplier == ""
        assert item.dose is None
        assert item.unit is None

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1")])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValidationError):
            QuotationItem(product="X", category="Outros", price_per_area=price)

    def test_empty_product_rejected(self):
        with pytest.raises(ValidationError):
            QuotationItem(product="", category="Outros", price_per_area=Decimal("1"))

    def test_item_is_frozen(self):
        item = QuotationItem(product="X", category="Outros", price_per_area=Decimal("1"))
        with pytest.raises(ValidationError):
            item.product = "Y"


class TestIngestionSummary:
    """Test summary aggregation."""

    def _item(self, product, supplier, category):
        return QuotationItem(
            product=product,
            supplier=supplier,
            category=category,
            price_per_area=Decimal("10"),
        )

    def test_empty_summary(self):
        summary = IngestionSummary.from_items([])
        assert summary == IngestionSummary()
        assert summary.item_count == 0
        assert summary.items_per_category == {}

    def test_distinct_counts(self):
        summary = IngestionSummary.from_items([
            self._item("Glifosato", "A", "Herbicida"),
            self._item("Glifosato", "B", "Herbicida"),
            self._item("Ureia", "", "Fertilizante"),
        ])
        assert summary.item_count == 3
        assert summary.distinct_products == 2
        assert summary.distinct_suppliers == 3
        assert summary.distinct_categories == 2

    def test_items_per_category_ordering(self):
        summary = IngestionSummary.from_items([
            self._item("a", "", "Outros"),
            self._item("b", "", "Fungicida"),
            self._item("c", "", "Outros"),
            self._item("d", "", "Adjuvante"),
        ])
        assert list(summary.items_per_category.items()) == [
            ("Outros", 2),
            ("Adjuvante", 1),
            ("Fungicida", 1),
        ]
