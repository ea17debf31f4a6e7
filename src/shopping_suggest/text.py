"""Text folding shared by matching, highlighting and membership keys.

All matching decisions are case- and accent-insensitive:
- Unicode NFD decomposition, combining marks dropped (Café → Cafe)
- surrounding whitespace trimmed
- lowercased
"""

from __future__ import annotations

import unicodedata


def strip_diacritics(value: object) -> str:
    """Decompose *value* and drop combining marks. ``None`` gives ``""``."""
    if value is None:
        return ""
    decomposed = unicodedata.normalize("NFD", str(value))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(value: object) -> str:
    if value is None:
        return ""
    return strip_diacritics(value).strip().lower()


def is_subsequence(query: str, target: str) -> bool:
    """True if every character of *query* appears in *target* in order.

    Example: "mzn" is a subsequence of "manzana".
    """
    q = 0
    for ch in target:
        if q == len(query):
            break
        if ch == query[q]:
            q += 1
    return q == len(query)
