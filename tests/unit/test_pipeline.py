"""Unit tests for the ingestion pipeline."""
import os
import subprocess
import sys
from decimal import Decimal
from pathlib import Path

import pytest

from quote_ingest import ingest
from quote_ingest.models import ColumnMapping, IngestionSummary, RawGrid
from quote_ingest.services.classification import CategoryClassifier
from quote_ingest.services.ingestion import IngestionPipeline, IngestionResult


@pytest.fixture
def pipeline() -> IngestionPipeline:
    return IngestionPipeline()


class TestEndToEnd:
    """Test the full grid to items flow."""

    def test_sample_quotation(self, quotation_grid):
        items, summary = ingest(quotation_grid)

        assert len(items) == 2
        glifosato, ureia = items
        assert (glifosato.product, glifosato.supplier, glifosato.category) == (
            "Glifosato", "Fornecedor A", "Herbicida",
        )
        assert glifosato.price_per_area == Decimal("85.00")
        assert (ureia.product, ureia.supplier, ureia.category) == (
            "Ureia", "Fornecedor A", "Fertilizante",
        )
        assert ureia.price_per_area == Decimal("120.00")

        assert summary.item_count == 2
        assert summary.distinct_products == 2
        assert summary.distinct_suppliers == 1
        assert summary.distinct_categories == 2

    def test_result_is_named_tuple(self, quotation_grid):
        result = ingest(quotation_grid)
        assert isinstance(result, IngestionResult)
        assert result.summary.item_count == len(result.items)

    def test_report_exposes_mapping(self, pipeline, full_grid):
        report = pipeline.run(full_grid)
        assert report.mapping == ColumnMapping(
            product=1, supplier=2, category=0, price_per_area=5, dose=3, unit=4,
        )
        assert report.summary.items_per_category == {
            "Semente": 2,
            "Biologico Especial": 1,
            "Fungicida": 1,
        }
        assert report.summary.distinct_suppliers == 3

    def test_header_order_does_not_matter(self, pipeline):
        rows = [["Glifosato", "Fornecedor A", "Herbicida", "85,00"]]
        original = pipeline.ingest(RawGrid.from_values(["Nome", "Empresa", "Tipo", "R$/ha"], rows))
        shuffled = pipeline.ingest(RawGrid.from_values(
            ["R$/ha", "Tipo", "Nome", "Empresa"],
            [[r[3], r[2], r[0], r[1]] for r in rows],
        ))
        assert original.items == shuffled.items

    def test_idempotent(self, pipeline, full_grid):
        first = pipeline.ingest(full_grid)
        second = pipeline.ingest(full_grid)
        assert [i.model_dump_json() for i in first.items] == [i.model_dump_json() for i in second.items]
        assert first.summary == second.summary

    def test_custom_classifier(self, quotation_grid):
        pipeline = IngestionPipeline(classifier=CategoryClassifier(hints=[]))
        items, _ = pipeline.ingest(quotation_grid)
        assert items[1].category == "Outros"


class TestEmptyInput:
    """Test degenerate grids."""

    @pytest.mark.parametrize("grid", [
        RawGrid(headers=()),
        RawGrid.from_values(["Nome", "Empresa", "Tipo", "R$/ha"], []),
        RawGrid.from_values([], [["Glifosato"]]),
    ])
    def test_empty_grid(self, pipeline, grid):
        report = pipeline.run(grid)
        assert report.is_empty
        assert report.items == []
        assert report.summary == IngestionSummary()

    def test_no_valid_rows(self, pipeline):
        grid = RawGrid.from_values(["Produto", "R$/ha"], [["Glifosato", ""], ["", "10"]])
        items, summary = pipeline.ingest(grid)
        assert items == []
        assert summary.item_count == 0


class TestLogOutput:
    """Test that ingestion logs stay off stdout."""

    def test_ingest_writes_nothing_to_stdout(self, quotation_grid, capsys):
        ingest(quotation_grid)
        assert capsys.readouterr().out == ""

    def test_fresh_import_logs_to_stderr(self):
        """Public API used alone, with debug logging on, in a new interpreter."""
        project_root = Path(__file__).resolve().parents[2]
        code = (
            "from quote_ingest import RawGrid, ingest\n"
            "ingest(RawGrid.from_values(['Produto', 'R$/ha'], "
            "[['Glifosato', '85,00'], ['', '10']]))\n"
        )
        env = dict(os.environ, QUOTE_INGEST_LOG_LEVEL="DEBUG")

        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            cwd=project_root,
            env=env,
            check=False,
        )

        assert result.returncode == 0, result.stderr
        assert result.stdout == ""
        assert "ingestion_completed" in result.stderr
