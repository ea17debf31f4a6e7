"""Default aisles, their badge colours, and helpers around the injected translator.

The translator is the host application's i18n function: English aisle name in,
localized display name out. Nothing here ships its own translation table.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from .text import normalize_text

Translator = Callable[[str], str | None]

DEFAULT_AISLES: tuple[str, ...] = (
    "Produce",
    "Dairy",
    "Meat & Seafood",
    "Bakery",
    "Pantry",
    "Frozen",
    "Personal Care",
    "Household",
    "Other",
)

DEFAULT_AISLE_COLORS: dict[str, str] = {
    "Produce": "#22c55e",
    "Dairy": "#f97316",
    "Meat & Seafood": "#ef4444",
    "Bakery": "#f59e0b",
    "Pantry": "#a855f7",
    "Frozen": "#0ea5e9",
    "Personal Care": "#ec4899",
    "Household": "#14b8a6",
    "Other": "#6b7280",
}

_COLORS_BY_KEY = {normalize_text(name): color for name, color in DEFAULT_AISLE_COLORS.items()}


def default_aisle_color(english_name: str | None) -> str | None:
    if not english_name:
        return None
    return _COLORS_BY_KEY.get(normalize_text(english_name))


def localize_aisle(english_name: str | None, translator: Translator | None = None) -> str | None:
    """Display name for an English aisle; the English name when no translation exists."""
    if english_name is None:
        return None
    name = english_name.strip()
    if not name:
        return None
    if translator is None:
        return name
    localized = translator(name)
    if localized is None or not str(localized).strip():
        return name
    return str(localized)


def map_english_to_localized(aisles: Iterable[str], translator: Translator | None) -> list[str]:
    return [localize_aisle(aisle, translator) or aisle for aisle in aisles]


def map_localized_to_english(aisles: Iterable[str], translator: Translator | None) -> list[str]:
    """Inverse of map_english_to_localized for the default aisles; custom names pass through."""
    reverse: dict[str, str] = {}
    for english in DEFAULT_AISLES:
        localized = localize_aisle(english, translator)
        if localized:
            reverse[localized] = english
    return [reverse.get(aisle, aisle) for aisle in aisles]


def translator_from_mapping(mapping: Mapping[str, str]) -> Translator:
    """Build a translator from a static ``{english: localized}`` table."""
    table = dict(mapping)

    def translate(english_name: str) -> str:
        return table.get(english_name, english_name)

    return translate
