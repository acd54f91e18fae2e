"""Accent and case normalization for header, category and product matching."""
import re
import unicodedata
from typing import Any


def normalize(text: Any) -> str:
    """Reduce text to its comparable form: lower case, no diacritics.

    Examples:
        >>> normalize("Nutrição")
        'nutricao'
        >>> normalize("VALOR/HA")
        'valor/ha'
        >>> normalize(None)
        ''
    """
    if text is None:
        return ""
    decomposed = unicodedata.normalize("NFD", str(text).lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def title_case(text: str) -> str:
    """Capitalize each whitespace-separated word, lower-casing the rest.

    Whitespace between words is preserved as written.
    """
    return re.sub(
        r"\S+",
        lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(),
        text.strip(),
    )
