"""Match-tier classification of purchase history against a typed query.

Tiers, strongest first:
  exact    normalized name equals the normalized query
  partial  normalized name contains the query as a contiguous substring
  fuzzy    query characters appear in the name in order ("mzn" ~ "manzana")

Anything else is dropped. Queries shorter than the configured floor
(3 characters after normalization) classify nothing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .config import settings
from .schemas import MatchType, UsageHistoryEntry
from .text import is_subsequence, normalize_text


@dataclass
class MatchGroups:
    exact: list[UsageHistoryEntry] = field(default_factory=list)
    partial: list[UsageHistoryEntry] = field(default_factory=list)
    fuzzy: list[UsageHistoryEntry] = field(default_factory=list)

    def by_priority(self) -> Iterator[tuple[MatchType, list[UsageHistoryEntry]]]:
        yield MatchType.EXACT, self.exact
        yield MatchType.PARTIAL, self.partial
        yield MatchType.FUZZY, self.fuzzy

    @property
    def total(self) -> int:
        return len(self.exact) + len(self.partial) + len(self.fuzzy)


def classify(normalized_query: str, normalized_name: str) -> MatchType | None:
    """Tier for one already-normalized pair, or None when it does not match."""
    if not normalized_query or not normalized_name:
        return None
    if normalized_name == normalized_query:
        return MatchType.EXACT
    if normalized_query in normalized_name:
        return MatchType.PARTIAL
    if is_subsequence(normalized_query, normalized_name):
        return MatchType.FUZZY
    return None


def classify_matches(
    raw_query: str | None,
    history: Iterable[UsageHistoryEntry],
    min_query_length: int | None = None,
) -> MatchGroups:
    groups = MatchGroups()
    floor = settings.suggest_min_query_length if min_query_length is None else min_query_length
    query = normalize_text(raw_query)
    if not query or len(query) < floor:
        return groups

    for entry in history:
        tier = classify(query, normalize_text(entry.item_name))
        if tier is MatchType.EXACT:
            groups.exact.append(entry)
        elif tier is MatchType.PARTIAL:
            groups.partial.append(entry)
        elif tier is MatchType.FUZZY:
            groups.fuzzy.append(entry)
    return groups
