"""Pytest configuration and shared fixtures for the test suite."""
import pytest

from quote_ingest.models.grid import RawGrid
from quote_ingest.services.classification.classifier import CategoryClassifier


@pytest.fixture
def classifier() -> CategoryClassifier:
    return CategoryClassifier()


@pytest.fixture
def quotation_grid() -> RawGrid:
    """Small supplier sheet: one row without product, one without category."""
    return RawGrid.from_values(
        ["Nome", "Empresa", "Tipo", "R$/ha"],
        [
            ["Glifosato", "Fornecedor A", "Herbicida", "85,00"],
            ["", "Fornecedor B", "Herbicida", "90,00"],
            ["Ureia", "Fornecedor A", "", "120,00"],
        ],
    )


@pytest.fixture
def full_grid() -> RawGrid:
    """Sheet using every column role, with headers in a non-default order."""
    return RawGrid.from_values(
        ["Categoria", "Descrição do Produto", "Fabricante", "Dose", "Unidade", "Valor/Ha"],
        [
            ["FUNGICIDAS", "Priori Xtra", "Syngenta", "0,3", "L/ha", "145,90"],
            ["Trat. Sementes", "Cruiser 350 FS", "Syngenta", "0,2", "L", "R$ 98,50"],
            ["", "Semente de Soja Hibrida", "Brasmax", "", "sc", 420],
            ["Biologico Especial", "Trichoderma", "Koppert", "1", "kg", "1.234,56"],
            ["Herbicida", "Subtotal", "", "", "", ""],
        ],
    )
