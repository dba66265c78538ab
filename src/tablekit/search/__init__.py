"""Search – fuzzy matching, ranking and match highlighting."""
from tablekit.search.fuzzy import FuzzyMatch, fuzzy_match, fuzzy_search
from tablekit.search.highlight import HighlightSegment, highlight_matches

__all__ = [
    "FuzzyMatch",
    "HighlightSegment",
    "fuzzy_match",
    "fuzzy_search",
    "highlight_matches",
]
