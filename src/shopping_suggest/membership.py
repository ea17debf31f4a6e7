"""List membership: is a suggested (name, aisle) pair already on the active list?

Membership is aisle-qualified. "Setas" in Produce and "Setas" in Frozen are
different items.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from .text import normalize_text

if TYPE_CHECKING:
    from .schemas import ExistingItemRef


def resolve_aisle_name(aisle: object) -> str:
    """Aisle field as a plain name: ``"Dairy"``, ``{"name": "Dairy"}`` or ``None``."""
    if aisle is None:
        return ""
    if isinstance(aisle, str):
        return aisle
    if isinstance(aisle, Mapping):
        name = aisle.get("name")
    else:
        name = getattr(aisle, "name", None)
    return name if isinstance(name, str) else ""


def membership_key(name: object, aisle: object) -> str:
    return f"{normalize_text(name)}::{normalize_text(aisle)}"


def build_membership_keys(existing_items: Iterable[ExistingItemRef]) -> frozenset[str]:
    return frozenset(
        membership_key(item.name, item.aisle)
        for item in existing_items
        if item.name
    )


def is_in_current_list(name: str, english_aisle: str | None, keys: frozenset[str]) -> bool:
    return membership_key(name, english_aisle) in keys
