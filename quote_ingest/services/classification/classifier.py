"""Category classifier for agricultural input quotations.

Supplier spreadsheets label categories inconsistently ("FUNGICIDAS",
"Trat. Sementes", "Adubo foliar") or leave the column blank. The classifier
resolves a category for every item through a short-circuiting cascade:

1. Exact alias match on the normalized category cell
2. Alias contained in the category cell (plurals, compound labels)
3. Unknown but non-empty category cell: kept, in title case
4. Blank category cell: regex hints over the product name
5. "Outros"

Example:
    classifier = CategoryClassifier()
    classifier.classify("Fungicidas", "Qualquer Produto")   # "Fungicida"
    classifier.classify("", "Semente de Soja Hibrida")      # "Semente"
    classifier.classify("Biologico Especial", "X")          # "Biologico Especial"

The vocabulary below is Brazilian Portuguese. Callers targeting another
locale pass their own alias and hint tables to the constructor.
"""
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Pattern, Sequence, Tuple, Union

import structlog

from quote_ingest.errors.exceptions import ConfigurationError
from quote_ingest.utils.text import normalize, title_case

logger = structlog.get_logger(__name__)

DEFAULT_CATEGORY = "Outros"

CANONICAL_CATEGORIES: Tuple[str, ...] = (
    "Fungicida", "Inseticida", "Herbicida", "Acaricida", "Nematicida",
    "Semente", "Fertilizante", "Nutricao", "Foliar", "Adjuvante",
    "Regulador", "Outros",
)

# Normalized alias → canonical category. Order matters for substring matching.
CATEGORY_ALIASES: Mapping[str, str] = MappingProxyType({
    "fungicida": "Fungicida", "fungicidas": "Fungicida",
    "inseticida": "Inseticida", "inseticidas": "Inseticida",
    "insecticida": "Inseticida", "insecticidas": "Inseticida",
    "herbicida": "Herbicida", "herbicidas": "Herbicida", "dessecante": "Herbicida",
    "acaricida": "Acaricida", "acaricidas": "Acaricida",
    "nematicida": "Nematicida", "nematicidas": "Nematicida",
    "semente": "Semente", "sementes": "Semente", "seed": "Semente", "seeds": "Semente",
    "tratamento de sementes": "Semente", "trat. sementes": "Semente",
    "fertilizante": "Fertilizante", "fertilizantes": "Fertilizante",
    "adubo": "Fertilizante", "adubos": "Fertilizante",
    "corretivo": "Fertilizante", "corretivos": "Fertilizante",
    "calcario": "Fertilizante", "gesso": "Fertilizante", "micronutriente": "Fertilizante",
    "nutricao": "Nutricao", "nutricao foliar": "Nutricao",
    "foliar": "Foliar", "foliares": "Foliar",
    "adjuvante": "Adjuvante", "adjuvantes": "Adjuvante",
    "espalhante": "Adjuvante", "espalhantes": "Adjuvante", "oleo mineral": "Adjuvante",
    "regulador": "Regulador", "reguladores": "Regulador",
    "bioestimulante": "Regulador", "bioestimulantes": "Regulador",
    "outros": "Outros", "other": "Outros", "insumo": "Outros",
})

# (pattern over the normalized product name, category). First match wins;
# crop and seed words come first so "Semente de Soja" never reads as a fertilizer.
PRODUCT_HINTS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"\b(soja|milho|trigo|sorgo|girassol|algodao|feijao|semente|hibrido|cultivar|var\.)\b"),
     "Semente"),
    (re.compile(r"\b(ureia|npk|kcl|cloreto\s+de\s+potassio|superfosfato|fosfato|sulfato|calcario|gesso"
                r"|micronutriente|boro|zinco|manganes|potassio|nitrogenio|fosforo|dap|map|ssp|tsp)\b"),
     "Fertilizante"),
    (re.compile(r"\b(glifosato|atrazina|2,4-d|paraquate|diuron|metolacor|nicosulfuron|clethodim"
                r"|haloxifope|tembotriona|clorimuron|dicamba|saflufenacil)\b"),
     "Herbicida"),
    (re.compile(r"\b(tiametoxam|imidacloprido|clorpirifos|deltametrina|bifentrina|lambda|cihalotrina"
                r"|espinosade|acetamiprid|fipronil|clorantraniliprole)\b"),
     "Inseticida"),
    (re.compile(r"\b(trifloxistrobina|azoxistrobina|tebuconazol|propiconazol|carbendazim|mancozebe"
                r"|tiofanato|difenoconazol|ciproconazol|picoxistrobina|fluxapiroxade|bixafen)\b"),
     "Fungicida"),
    (re.compile(r"\b(abamectina|spiromesifen|clofentezina|bifenazate|dicofol)\b"),
     "Acaricida"),
    (re.compile(r"\b(espalhante|adjuvante|nimbus|assist|aureo|agral|silwet)\b"),
     "Adjuvante"),
    (re.compile(r"\b(stimulate|bioestimul|regulador|ethephon|trinexapac|prohexadion)\b"),
     "Regulador"),
)


class ClassificationMethod(str, Enum):
    """How the category was determined."""
    ALIAS = "alias"
    ALIAS_SUBSTRING = "alias_substring"
    PASSTHROUGH = "passthrough"
    PRODUCT_HINT = "product_hint"
    DEFAULT = "default"


@dataclass(frozen=True)
class ClassificationResult:
    """Result of category classification."""
    category: str
    method: ClassificationMethod
    matched_pattern: Optional[str] = None

    @property
    def is_canonical(self) -> bool:
        """True unless the category is a passthrough of unknown sheet text."""
        return self.method != ClassificationMethod.PASSTHROUGH


HintSpec = Tuple[Union[str, Pattern[str]], str]


class CategoryClassifier:
    """Alias- and hint-based category classifier.

    Attributes:
        aliases: Read-only mapping of normalized alias phrase to category
        hints: Ordered (compiled pattern, category) pairs
    """

    def __init__(
        self,
        aliases: Optional[Mapping[str, str]] = None,
        hints: Optional[Sequence[HintSpec]] = None,
    ):
        """Initialize classifier with vocabulary tables.

        Args:
            aliases: Replacement alias table. Keys are normalized on load.
            hints: Replacement product hints, as compiled patterns or pattern
                strings, evaluated in the given order.

        Raises:
            ConfigurationError: If a table entry is unusable
        """
        self.aliases = CATEGORY_ALIASES if aliases is None else self._load_aliases(aliases)
        self.hints = PRODUCT_HINTS if hints is None else self._load_hints(hints)
        self._log = logger.bind(component="CategoryClassifier")

    @staticmethod
    def _load_aliases(aliases: Mapping[str, str]) -> Mapping[str, str]:
        loaded = {}
        for alias, category in aliases.items():
            key = normalize(alias).strip()
            if not key:
                raise ConfigurationError(f"Empty alias for category {category!r}")
            if not isinstance(category, str) or not category.strip():
                raise ConfigurationError(f"Alias {alias!r} maps to an empty category")
            loaded[key] = category.strip()
        return MappingProxyType(loaded)

    @staticmethod
    def _load_hints(hints: Sequence[HintSpec]) -> Tuple[Tuple[Pattern[str], str], ...]:
        loaded = []
        for pattern, category in hints:
            if not isinstance(category, str) or not category.strip():
                raise ConfigurationError(f"Hint {pattern!r} maps to an empty category")
            if isinstance(pattern, str):
                try:
                    pattern = re.compile(pattern)
                except re.error as e:
                    raise ConfigurationError(f"Invalid hint pattern {pattern!r}: {e}") from e
            elif not isinstance(pattern, re.Pattern):
                raise ConfigurationError(f"Hint pattern must be a string or compiled regex, got {type(pattern).__name__}")
            loaded.append((pattern, category.strip()))
        return tuple(loaded)

    def classify(self, raw_category: Optional[str], product_name: Optional[str] = "") -> str:
        """Resolve the category for an item. Never raises.

        Args:
            raw_category: Category cell text (may be empty or None)
            product_name: Product name, used only when the category is blank

        Returns:
            Canonical category, title-cased sheet label, or "Outros"
        """
        return self.classify_detailed(raw_category, product_name).category

    def classify_detailed(
        self,
        raw_category: Optional[str],
        product_name: Optional[str] = "",
    ) -> ClassificationResult:
        """Resolve the category and report which rule produced it."""
        raw = "" if raw_category is None else str(raw_category)
        key = normalize(raw).strip()

        if key:
            category = self.aliases.get(key)
            if category:
                return ClassificationResult(category, ClassificationMethod.ALIAS, key)

            for alias, category in self.aliases.items():
                if alias in key:
                    return ClassificationResult(category, ClassificationMethod.ALIAS_SUBSTRING, alias)

            label = title_case(raw)
            self._log.debug("category_passthrough", raw_category=raw[:50], label=label)
            return ClassificationResult(label, ClassificationMethod.PASSTHROUGH)

        if product_name:
            name = normalize(product_name)
            for pattern, category in self.hints:
                if pattern.search(name):
                    return ClassificationResult(category, ClassificationMethod.PRODUCT_HINT, pattern.pattern)

        return ClassificationResult(DEFAULT_CATEGORY, ClassificationMethod.DEFAULT)

    def get_all_categories(self) -> List[str]:
        """Get sorted list of categories reachable through the tables."""
        categories = set(self.aliases.values())
        categories.update(category for _, category in self.hints)
        categories.add(DEFAULT_CATEGORY)
        return sorted(categories)
