"""Filtering – loose value coercion shared by the evaluator and value suggestions.

Row values arrive untyped (whatever the data source produced), so every
helper here is total: it returns a value for any input and never raises.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

__all__ = ["is_blank", "is_empty", "to_number", "to_text", "to_timestamp"]

# Numeric text is ASCII decimal or exponent form, the "Infinity" spelling, or a
# 0x/0o/0b integer. "inf", "nan", "1_000" and full-width digits stay non-numeric.
_DECIMAL_RE = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_YEAR_MONTH_RE = re.compile(r"([0-9]{4})(?:-([0-9]{2}))?")


def to_text(value: Any) -> str:
    """Display string of *value*; ``None`` becomes ``""``.

    Booleans render as ``true``/``false`` and integral floats without a
    trailing ``.0`` so that ``1.0`` and ``"1"`` compare equal as text.
    Lists and tuples render as their items' text joined by commas.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    return str(value)


def to_number(value: Any) -> float:
    """Numeric form of *value*, or NaN when it has none.

    ``None`` and blank strings are NaN rather than zero, so a cell nobody
    filled in never satisfies a numeric comparison.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, datetime):
        return _aware(value).timestamp() * 1000
    if isinstance(value, str):
        text = value.strip()
        if _PREFIXED_RE.fullmatch(text):
            return float(int(text, 0))
        if _DECIMAL_RE.fullmatch(text):
            return float(text)
    return math.nan


def to_timestamp(value: Any) -> float | None:
    """Epoch milliseconds for a date-like *value*, or ``None`` if unparsable.

    Accepts ``date``/``datetime`` objects, epoch milliseconds, ISO-8601
    strings and the bare ``YYYY`` / ``YYYY-MM`` forms, which mean the first
    day of that year or month. Naive values are read as UTC. Free-form text
    such as ``"June 1, 2024"`` is not parsed.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, datetime):
        return _aware(value).timestamp() * 1000
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp() * 1000
    if isinstance(value, (int, float)):
        return None if math.isnan(value) or math.isinf(value) else float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            if match := _YEAR_MONTH_RE.fullmatch(text):
                parsed = datetime(int(match[1]), int(match[2] or 1), 1)
            else:
                parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return _aware(parsed).timestamp() * 1000
    return None


def is_empty(value: Any) -> bool:
    """Falsy values, NaN, and values whose text form is empty count as empty.

    Mappings are never empty, even ``{}``: a cell holding an object has
    content whatever its keys. An empty list is empty through its text form.
    """
    if isinstance(value, Mapping):
        return False
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value or to_text(value) == ""


def is_blank(value: Any) -> bool:
    """``None`` or the empty string: a value the user has not filled in yet."""
    return value is None or value == ""


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
