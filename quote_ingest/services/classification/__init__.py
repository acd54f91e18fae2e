"""Category classification service.

Key Components:
    - CategoryClassifier: Alias table + product-name hint cascade
    - CATEGORY_ALIASES / PRODUCT_HINTS: Default Brazilian Portuguese vocabulary
"""
from quote_ingest.services.classification.classifier import (
    CategoryClassifier,
    ClassificationResult,
    ClassificationMethod,
    CATEGORY_ALIASES,
    PRODUCT_HINTS,
    CANONICAL_CATEGORIES,
    DEFAULT_CATEGORY,
)

__all__ = [
    "CategoryClassifier",
    "ClassificationResult",
    "ClassificationMethod",
    "CATEGORY_ALIASES",
    "PRODUCT_HINTS",
    "CANONICAL_CATEGORIES",
    "DEFAULT_CATEGORY",
]
