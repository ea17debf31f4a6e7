"""Item suggestions for the add-item inputs.

Every keystroke recomputes the whole list from the history and list snapshots
the caller passes in; nothing is cached between calls.

Pipeline:
  1. classify history against the query (exact / partial / fuzzy)
  2. sort each tier by purchase count desc, then name asc
  3. walk tiers exact → partial → fuzzy, keeping the first entry per usage key,
     until the result cap is reached
  4. decorate survivors: list membership, localized aisle, badge colours,
     highlight runs
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .aisles import Translator, localize_aisle
from .colors import resolve_badge_colors
from .config import settings
from .highlight import build_highlight_segments
from .matcher import MatchGroups, classify_matches
from .membership import build_membership_keys, is_in_current_list
from .schemas import (
    ExistingItemRef,
    MatchType,
    Suggestion,
    TopItem,
    UsageHistoryEntry,
)
from .text import normalize_text

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


@dataclass(frozen=True)
class RankedEntry:
    entry: UsageHistoryEntry
    match_type: MatchType
    usage_key: str


def usage_key_for(entry: UsageHistoryEntry) -> str:
    """Dedup identity of a history row: its explicit key, else ``name::aisle``."""
    if entry.usage_key:
        return entry.usage_key
    return f"{normalize_text(entry.item_name)}::{normalize_text(entry.last_aisle)}"


def _usage_order(entry: UsageHistoryEntry) -> tuple[int, str]:
    return -entry.purchase_count, entry.item_name or ""


def _coerce(model: type[_M], records: Iterable[object] | None, kind: str) -> list[_M]:
    out: list[_M] = []
    for record in records or ():
        try:
            out.append(model.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping malformed %s record (%d errors): %r", kind, e.error_count(), record)
    return out


def rank_groups(groups: MatchGroups, limit: int | None = None) -> list[RankedEntry]:
    """Merge classified tiers into one deduplicated, capped list.

    First occurrence of a usage key wins, so a row seen in a stronger tier (or
    with more purchases in the same tier) hides its duplicates.
    """
    cap = settings.suggest_max_results if limit is None else limit
    seen: set[str] = set()
    ranked: list[RankedEntry] = []
    for match_type, group in groups.by_priority():
        for entry in sorted(group, key=_usage_order):
            if len(ranked) >= cap:
                return ranked
            key = usage_key_for(entry)
            if key in seen:
                continue
            seen.add(key)
            ranked.append(RankedEntry(entry=entry, match_type=match_type, usage_key=key))
    return ranked


def _decorate(
    ranked: RankedEntry,
    query: str,
    member_keys: frozenset[str],
    aisle_colors: Mapping[str, object] | None,
    translator: Translator | None,
) -> Suggestion:
    entry = ranked.entry
    name = entry.item_name or ""
    english_aisle = entry.last_aisle
    display_aisle = localize_aisle(english_aisle, translator)
    badge = resolve_badge_colors(display_aisle, aisle_colors, english_aisle)
    segments = build_highlight_segments(name, query, ranked.match_type)
    return Suggestion(
        item_name=name,
        match_type=ranked.match_type,
        usage_key=ranked.usage_key,
        purchase_count=entry.purchase_count,
        is_in_current_list=is_in_current_list(name, english_aisle, member_keys),
        display_aisle=display_aisle,
        english_aisle=english_aisle,
        badge_background=badge.background,
        badge_text_color=badge.text,
        badge_border_color=badge.border,
        highlight_segments=tuple(segments),
    )


def rank(
    query: str | None,
    usage_history: Iterable[object] | None,
    existing_items: Iterable[object] | None = None,
    aisle_colors: Mapping[str, object] | None = None,
    translator: Translator | None = None,
    *,
    max_results: int | None = None,
) -> list[Suggestion]:
    """Ordered suggestions for *query*; ``[]`` for queries under the length floor.

    *usage_history* rows and *existing_items* may be mappings in the list
    service's shape or already-built models. Malformed rows are skipped.
    """
    if len(normalize_text(query)) < settings.suggest_min_query_length:
        return []

    history = _coerce(UsageHistoryEntry, usage_history, "usage history")
    groups = classify_matches(query, history)
    ranked = rank_groups(groups, max_results)
    if not ranked:
        logger.debug("No suggestions for %r (%d history rows)", query, len(history))
        return []

    member_keys = build_membership_keys(_coerce(ExistingItemRef, existing_items, "existing item"))
    trimmed_query = (query or "").strip()
    suggestions = [
        _decorate(r, trimmed_query, member_keys, aisle_colors, translator)
        for r in ranked
    ]
    logger.debug(
        "Suggestions for %r: %d exact, %d partial, %d fuzzy -> %d returned",
        query, len(groups.exact), len(groups.partial), len(groups.fuzzy), len(suggestions),
    )
    return suggestions


def top_purchased_items(
    usage_history: Iterable[object] | None,
    existing_items: Iterable[object] | None = None,
    translator: Translator | None = None,
    *,
    limit: int | None = None,
) -> list[TopItem]:
    """Most-bought history rows for the "frequently bought" panel."""
    cap = settings.top_items_limit if limit is None else limit
    history = [e for e in _coerce(UsageHistoryEntry, usage_history, "usage history") if e.item_name]
    member_keys = build_membership_keys(_coerce(ExistingItemRef, existing_items, "existing item"))

    seen: set[str] = set()
    items: list[TopItem] = []
    for entry in sorted(history, key=_usage_order):
        if len(items) >= cap:
            break
        key = usage_key_for(entry)
        if key in seen:
            continue
        seen.add(key)
        items.append(TopItem(
            item_name=entry.item_name,
            purchase_count=entry.purchase_count,
            usage_key=key,
            english_aisle=entry.last_aisle,
            display_aisle=localize_aisle(entry.last_aisle, translator),
            is_in_current_list=is_in_current_list(entry.item_name, entry.last_aisle, member_keys),
        ))
    return items
