"""Tests for aisle-qualified list membership."""

from types import SimpleNamespace

from shopping_suggest.membership import (
    build_membership_keys,
    is_in_current_list,
    membership_key,
    resolve_aisle_name,
)
from shopping_suggest.schemas import ExistingItemRef


class TestResolveAisleName:
    def test_string(self):
        assert resolve_aisle_name("Dairy") == "Dairy"

    def test_mapping(self):
        assert resolve_aisle_name({"id": "a1", "name": "Dairy", "color": "#f97316"}) == "Dairy"

    def test_object(self):
        assert resolve_aisle_name(SimpleNamespace(name="Dairy")) == "Dairy"

    def test_missing(self):
        assert resolve_aisle_name(None) == ""
        assert resolve_aisle_name({"id": "a1"}) == ""
        assert resolve_aisle_name({"name": 3}) == ""


class TestMembershipKeys:
    def test_key_is_folded(self):
        assert membership_key(" Café ", "PANTRY") == "cafe::pantry"

    def test_missing_aisle(self):
        assert membership_key("Leche", None) == "leche::"

    def test_build_skips_nameless_items(self):
        keys = build_membership_keys([
            ExistingItemRef(name="Setas", aisle="Produce"),
            ExistingItemRef(name=None, aisle="Dairy"),
        ])
        assert keys == frozenset({"setas::produce"})

    def test_same_name_other_aisle_is_not_member(self):
        keys = build_membership_keys([ExistingItemRef(name="Setas", aisle="Produce")])
        assert is_in_current_list("Setas", "Produce", keys)
        assert not is_in_current_list("Setas", "Frozen", keys)

    def test_object_aisle(self):
        keys = build_membership_keys([ExistingItemRef.model_validate({"name": "Leche", "aisle": {"name": "Dairy"}})])
        assert is_in_current_list("LECHE", "dairy", keys)

    def test_aisleless_items_match_aisleless_suggestions(self):
        keys = build_membership_keys([ExistingItemRef(name="Leche")])
        assert is_in_current_list("Leche", None, keys)
        assert not is_in_current_list("Leche", "Dairy", keys)
