"""Tests for match-tier classification."""

from shopping_suggest.matcher import MatchGroups, classify, classify_matches
from shopping_suggest.schemas import MatchType, UsageHistoryEntry


def _entries(*names: str) -> list[UsageHistoryEntry]:
    return [UsageHistoryEntry(item_name=n) for n in names]


def _names(group: list[UsageHistoryEntry]) -> list[str]:
    return [e.item_name for e in group]


class TestClassify:
    def test_exact(self):
        assert classify("leche", "leche") is MatchType.EXACT

    def test_partial(self):
        assert classify("leche", "dulce de leche") is MatchType.PARTIAL

    def test_fuzzy(self):
        assert classify("mzn", "manzana") is MatchType.FUZZY

    def test_no_match(self):
        assert classify("leche", "lechuga") is None

    def test_empty_inputs(self):
        assert classify("", "leche") is None
        assert classify("leche", "") is None


class TestClassifyMatches:
    def test_groups_by_tier(self):
        groups = classify_matches("leche", _entries("Leche", "Dulce de Leche", "Lechuga"))
        assert _names(groups.exact) == ["Leche"]
        assert _names(groups.partial) == ["Dulce de Leche"]
        assert groups.fuzzy == []

    def test_accent_and_case_insensitive(self):
        groups = classify_matches("CAFE", _entries("Café"))
        assert _names(groups.exact) == ["Café"]

    def test_query_accent_ignored(self):
        groups = classify_matches("café", _entries("Cafe molido"))
        assert _names(groups.partial) == ["Cafe molido"]

    def test_fuzzy_group(self):
        groups = classify_matches("mzn", _entries("Manzana", "Melón"))
        assert _names(groups.fuzzy) == ["Manzana"]

    def test_short_query_classifies_nothing(self):
        groups = classify_matches("le", _entries("Leche", "le"))
        assert groups.total == 0

    def test_short_after_trimming(self):
        groups = classify_matches("  le  ", _entries("Leche"))
        assert groups.total == 0

    def test_custom_floor(self):
        groups = classify_matches("le", _entries("Leche"), min_query_length=2)
        assert _names(groups.partial) == ["Leche"]

    def test_blank_names_skipped(self):
        history = [UsageHistoryEntry(item_name=None), UsageHistoryEntry(item_name="   ")]
        assert classify_matches("leche", history).total == 0

    def test_input_order_preserved(self):
        groups = classify_matches("pan", _entries("Pan integral", "Pan blanco"))
        assert _names(groups.partial) == ["Pan integral", "Pan blanco"]

    def test_none_query(self):
        assert classify_matches(None, _entries("Leche")).total == 0


class TestMatchGroups:
    def test_priority_order(self):
        order = [t for t, _ in MatchGroups().by_priority()]
        assert order == [MatchType.EXACT, MatchType.PARTIAL, MatchType.FUZZY]
