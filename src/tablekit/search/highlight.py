"""Search – split text into matched/unmatched runs for highlighting."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["HighlightSegment", "highlight_matches"]


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    is_match: bool


def highlight_matches(text: str, matched_indices: Iterable[int]) -> list[HighlightSegment]:
    """Partition *text* into maximal runs of equal match status.

    Joining the segment texts gives back *text*. Indices outside the
    string are ignored.
    """
    matched = set(matched_indices)
    if not matched:
        return [HighlightSegment(text=text, is_match=False)]

    segments: list[HighlightSegment] = []
    start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or (i in matched) != (start in matched):
            segments.append(HighlightSegment(text=text[start:i], is_match=start in matched))
            start = i
    return segments
