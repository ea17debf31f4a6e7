from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .membership import resolve_aisle_name

_HISTORY_FIELDS = ("item_name", "purchase_count", "last_aisle", "usage_aisle", "usage_key")


class MatchType(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"


def _blank_to_none(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


# --- Collaborator input ---

class UsageHistoryEntry(BaseModel):
    """One row of purchase history, as supplied by the list service."""

    item_name: str | None = None
    purchase_count: int = 0
    last_aisle: str | None = None  # English aisle name
    usage_key: str | None = None

    model_config = {"frozen": True, "from_attributes": True}

    @model_validator(mode="before")
    @classmethod
    def _canonical_aisle(cls, data):
        # Older rows carry the aisle as usage_aisle; it wins when non-blank.
        if not isinstance(data, Mapping):
            if isinstance(data, cls) or not hasattr(data, "item_name"):
                return data
            data = {f: getattr(data, f, None) for f in _HISTORY_FIELDS}
        usage_aisle = _blank_to_none(data.get("usage_aisle"))
        if usage_aisle is not None:
            data = {**data, "last_aisle": usage_aisle}
        return data

    @field_validator("item_name", "last_aisle", mode="before")
    @classmethod
    def _strip(cls, v):
        return _blank_to_none(v)

    @field_validator("usage_key", mode="before")
    @classmethod
    def _explicit_key(cls, v):
        if v is None or not str(v).strip():
            return None
        return str(v)

    @field_validator("purchase_count", mode="before")
    @classmethod
    def _count(cls, v):
        if v is None or isinstance(v, bool):
            return 0
        try:
            count = int(v)
        except (TypeError, ValueError, OverflowError):
            return 0
        return max(count, 0)


class ExistingItemRef(BaseModel):
    """An item already on the active list; aisle arrives as a name or ``{"name": ...}``."""

    name: str | None = None
    aisle: str | None = None

    model_config = {"frozen": True, "from_attributes": True}

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, v):
        return _blank_to_none(v)

    @field_validator("aisle", mode="before")
    @classmethod
    def _resolve_aisle(cls, v):
        return resolve_aisle_name(v) or None


# --- Output ---

class HighlightSegment(BaseModel):
    text: str
    match: bool

    model_config = {"frozen": True}


class Suggestion(BaseModel):
    item_name: str
    match_type: MatchType
    usage_key: str
    purchase_count: int = 0
    is_in_current_list: bool = False
    display_aisle: str | None = None
    english_aisle: str | None = None
    badge_background: str
    badge_text_color: str
    badge_border_color: str
    highlight_segments: tuple[HighlightSegment, ...]

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @property
    def highlighted_text(self) -> str:
        return "".join(seg.text for seg in self.highlight_segments)


class TopItem(BaseModel):
    item_name: str
    purchase_count: int
    usage_key: str
    english_aisle: str | None = None
    display_aisle: str | None = None
    is_in_current_list: bool = False

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}
