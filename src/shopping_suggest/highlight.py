"""Per-character highlight runs for a suggestion name.

Matching happens on the accent-stripped, lowercased name while the runs are cut
from the original text, so "Café" highlights with its accent intact. A position
map ties every folded character back to the original character it came from;
one original character may fold to zero, one or several characters.
"""

from __future__ import annotations

from .schemas import HighlightSegment, MatchType
from .text import normalize_text, strip_diacritics


def _fold_with_positions(name: str) -> tuple[str, list[int]]:
    stripped: list[str] = []
    positions: list[int] = []
    for index, ch in enumerate(name):
        for stripped_ch in strip_diacritics(ch):
            stripped.append(stripped_ch)
            positions.append(index)

    # Lowercase as a whole so context rules (Greek final sigma) match normalize_text
    folded = "".join(stripped).lower()
    if len(folded) == len(positions):
        return folded, positions

    # Lowercasing changed the length; realign per character
    pieces: list[str] = []
    realigned: list[int] = []
    for ch, index in zip(stripped, positions):
        for lowered in ch.lower():
            pieces.append(lowered)
            realigned.append(index)
    return "".join(pieces), realigned


def _coalesce(name: str, marked: set[int]) -> list[HighlightSegment]:
    segments: list[HighlightSegment] = []
    run = ""
    run_match = False
    for index, ch in enumerate(name):
        is_match = index in marked
        if run and is_match != run_match:
            segments.append(HighlightSegment(text=run, match=run_match))
            run = ""
        if not run:
            run_match = is_match
        run += ch
    if run:
        segments.append(HighlightSegment(text=run, match=run_match))
    return segments


def build_highlight_segments(
    name: str | None,
    query: str | None,
    match_type: MatchType | None,
) -> list[HighlightSegment]:
    if not name:
        return []
    needle = normalize_text(query)
    if not needle:
        return [HighlightSegment(text=name, match=False)]
    if match_type is MatchType.EXACT:
        return [HighlightSegment(text=name, match=True)]

    folded, positions = _fold_with_positions(name)
    marked: set[int] = set()

    if match_type is MatchType.PARTIAL:
        start = folded.find(needle)
        if start != -1:
            marked.update(positions[start:start + len(needle)])
    elif match_type is MatchType.FUZZY:
        q = 0
        for i, ch in enumerate(folded):
            if q == len(needle):
                break
            if ch == needle[q]:
                marked.add(positions[i])
                q += 1

    if not marked:
        return [HighlightSegment(text=name, match=False)]

    # Stray combining marks (already-decomposed input) follow the character they sit on
    for index, ch in enumerate(name):
        if index - 1 in marked and not strip_diacritics(ch):
            marked.add(index)

    return _coalesce(name, marked)
