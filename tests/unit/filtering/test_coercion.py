"""Unit tests for the value coercion helpers."""
from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from tablekit.filtering.coercion import is_empty, to_number, to_text, to_timestamp


def _ms(*args: int) -> float:
    return datetime(*args, tzinfo=timezone.utc).timestamp() * 1000


# ---------------------------------------------------------------------------
# to_number
# ---------------------------------------------------------------------------


class TestToNumber:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("42", 42.0),
            (" -3.5 ", -3.5),
            ("+7", 7.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-1", 0.25),
            ("0x1F", 31.0),
            ("0o17", 15.0),
            ("0b101", 5.0),
        ],
    )
    def test_numeric_literals(self, text: str, expected: float) -> None:
        assert to_number(text) == expected

    def test_infinity_spelling(self) -> None:
        assert to_number("Infinity") == math.inf
        assert to_number("-Infinity") == -math.inf

    @pytest.mark.parametrize(
        "text",
        ["inf", "+inf", "infinity", "-INF", "nan", "NaN", "1_000", "１２", "12abc", "-0x10", "e5", "."],
    )
    def test_other_spellings_are_nan(self, text: str) -> None:
        assert math.isnan(to_number(text))

    @pytest.mark.parametrize("value", [None, "", "   ", object(), [1]])
    def test_missing_and_unsupported_are_nan(self, value) -> None:
        assert math.isnan(to_number(value))

    def test_booleans_and_datetimes(self) -> None:
        assert to_number(True) == 1.0
        assert to_number(False) == 0.0
        assert to_number(datetime(1970, 1, 1, 0, 0, 1)) == 1000.0


# ---------------------------------------------------------------------------
# to_text
# ---------------------------------------------------------------------------


class TestToText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            (True, "true"),
            (2.0, "2"),
            (2.5, "2.5"),
            (math.nan, "NaN"),
            (-math.inf, "-Infinity"),
            ([1, 2], "1,2"),
            (("a", None, 3.0), "a,,3"),
            ([], ""),
        ],
    )
    def test_text_forms(self, value, expected: str) -> None:
        assert to_text(value) == expected


# ---------------------------------------------------------------------------
# to_timestamp
# ---------------------------------------------------------------------------


class TestToTimestamp:
    def test_year_only(self) -> None:
        assert to_timestamp("2024") == _ms(2024, 1, 1)

    def test_year_month(self) -> None:
        assert to_timestamp("2024-06") == _ms(2024, 6, 1)

    def test_full_iso(self) -> None:
        assert to_timestamp("2024-06-15T12:00:00+02:00") == _ms(2024, 6, 15, 10)

    @pytest.mark.parametrize("text", ["2024-13", "June 1, 2024", "24", "", "  "])
    def test_unparsable_text(self, text: str) -> None:
        assert to_timestamp(text) is None

    @pytest.mark.parametrize("value", [True, None, math.nan, math.inf])
    def test_non_dates(self, value) -> None:
        assert to_timestamp(value) is None


# ---------------------------------------------------------------------------
# is_empty
# ---------------------------------------------------------------------------


class TestIsEmpty:
    @pytest.mark.parametrize("value", [{}, {"a": 1}])
    def test_mappings_are_never_empty(self, value) -> None:
        assert is_empty(value) is False

    @pytest.mark.parametrize("value", [[], [None], [""], None, "", 0, math.nan])
    def test_empty_values(self, value) -> None:
        assert is_empty(value) is True
