"""Search – fuzzy subsequence matching and ranking for the column picker."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["FuzzyMatch", "fuzzy_match", "fuzzy_search"]

_WORD_SEPARATORS = frozenset(" _-")


@dataclass(frozen=True)
class FuzzyMatch:
    """A scored match; ``matched_indices`` is strictly increasing."""

    text: str
    score: int
    matched_indices: tuple[int, ...] = ()


def _is_upper(ch: str) -> bool:
    return ch == ch.upper() and ch != ch.lower()


def fuzzy_match(pattern: str, target: str) -> FuzzyMatch | None:
    """Match *pattern* as a case-insensitive subsequence of *target*.

    Characters are taken greedily, leftmost first. Returns ``None`` when
    the pattern is not a subsequence. Scoring, summed over matched
    positions:

    * +1 per matched character
    * +2 x run length for each character directly after the previous match
      (the cursor starts just before index 0, so a match there opens a run)
    * +10 for a match at index 0
    * +5 after a space, underscore or hyphen, otherwise +3 for an uppercase
      letter following a non-uppercase character (camelCase)

    then ``max(0, 20 - len(target))`` and ``10 * len(pattern) // len(target)``.
    """
    if not pattern:
        return FuzzyMatch(text=target, score=0, matched_indices=())

    pattern_lower = [ch.lower() for ch in pattern]
    target_lower = [ch.lower() for ch in target]

    indices: list[int] = []
    j = 0
    for i, ch in enumerate(target_lower):
        if j == len(pattern_lower):
            break
        if ch == pattern_lower[j]:
            indices.append(i)
            j += 1
    if j != len(pattern_lower):
        return None

    score = 0
    last = -1
    run = 0
    for i in indices:
        score += 1

        if last == i - 1:
            run += 1
            score += run * 2
        else:
            run = 0

        if i == 0:
            score += 10
        else:
            prev, curr = target[i - 1], target[i]
            if prev in _WORD_SEPARATORS:
                score += 5
            elif _is_upper(curr) and not _is_upper(prev):
                score += 3

        last = i

    score += max(0, 20 - len(target))
    score += (10 * len(pattern)) // len(target)

    return FuzzyMatch(text=target, score=score, matched_indices=tuple(indices))


def fuzzy_search(pattern: str, items: Iterable[str], limit: int | None = None) -> list[FuzzyMatch]:
    """Rank *items* against *pattern*, best first.

    An empty pattern returns every item with score 0 in input order. Equal
    scores keep input order. A missing or non-positive *limit* means no limit.
    """
    if not pattern:
        results = [FuzzyMatch(text=item, score=0) for item in items]
    else:
        matches = (fuzzy_match(pattern, item) for item in items)
        results = sorted((m for m in matches if m is not None), key=lambda m: -m.score)
    return results[:limit] if limit and limit > 0 else results
