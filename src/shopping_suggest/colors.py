"""Hex colour helpers and aisle badge colour resolution.

Badge background, in order of preference:
  1. the user's colour for the localized aisle name (if it is valid hex)
  2. the default colour for the English aisle name
  3. neutral gray
Text colour is picked for contrast against the background; the border is the
background at reduced alpha.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from .aisles import default_aisle_color
from .config import settings

_HEX_COLOR_RE = re.compile(r"#(?:[0-9a-f]{3}){1,2}", re.IGNORECASE)


@dataclass(frozen=True)
class BadgeColors:
    background: str
    text: str
    border: str


def is_valid_hex_color(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return _HEX_COLOR_RE.fullmatch(value) is not None


def normalize_hex_color(value: object) -> str | None:
    """``#ABC`` → ``#aabbcc``; None for anything that is not #rgb / #rrggbb."""
    if not is_valid_hex_color(value):
        return None
    digits = value[1:].lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def hex_to_rgb(value: object) -> tuple[int, int, int] | None:
    normalized = normalize_hex_color(value)
    if normalized is None:
        return None
    n = int(normalized[1:], 16)
    return (n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF


def _to_linear(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(value: object) -> float:
    """WCAG relative luminance in 0..1; 0 for invalid input."""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return 0.0
    r, g, b = (_to_linear(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrasting_text_color(
    value: object,
    light: str = "#f9fafb",
    dark: str = "#111827",
    threshold: float = 0.55,
) -> str:
    return dark if relative_luminance(value) > threshold else light


def border_color_from_hex(value: object, alpha: float = 0.4) -> str | None:
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None
    r, g, b = rgb
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def resolve_badge_colors(
    display_aisle: str | None,
    aisle_colors: Mapping[str, object] | None,
    english_aisle: str | None,
) -> BadgeColors:
    background = None
    if display_aisle and aisle_colors:
        background = normalize_hex_color(aisle_colors.get(display_aisle))
    if background is None:
        background = default_aisle_color(english_aisle)
    if background is None:
        background = normalize_hex_color(settings.badge_neutral_color) or "#9ca3af"

    text = contrasting_text_color(
        background,
        light=settings.badge_text_light,
        dark=settings.badge_text_dark,
        threshold=settings.badge_contrast_threshold,
    )
    border = border_color_from_hex(background, settings.badge_border_alpha) or settings.badge_border_fallback
    return BadgeColors(background=background, text=text, border=border)
