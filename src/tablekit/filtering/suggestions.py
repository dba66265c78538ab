"""Filtering – value suggestions for the filter value input.

Looks at the rows the table already holds to decide whether a column is
numeric (offer a range) or categorical (offer its distinct values).
"""
from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from tablekit.filtering.coercion import is_blank, to_number, to_text
from tablekit.kernel.collation import collation_key

__all__ = ["NumericRange", "column_values", "is_numeric_column", "numeric_range"]

SAMPLE_SIZE = 10
NUMERIC_RATIO = 0.8


@dataclass(frozen=True)
class NumericRange:
    min: float
    max: float


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and not math.isnan(to_number(value))


def is_numeric_column(rows: Sequence[Mapping[str, Any]], column_id: str) -> bool:
    """True when at least 80% of the first ten non-blank values are numbers."""
    if not column_id or not rows:
        return False

    sampled = 0
    numeric = 0
    for row in rows:
        if sampled >= SAMPLE_SIZE:
            break
        value = row.get(column_id)
        if is_blank(value):
            continue
        sampled += 1
        if _is_numeric(value):
            numeric += 1

    return sampled > 0 and numeric / sampled >= NUMERIC_RATIO


def numeric_range(rows: Sequence[Mapping[str, Any]], column_id: str) -> NumericRange | None:
    """Min/max over every numeric value of a numeric column, else ``None``."""
    if not column_id or not rows or not is_numeric_column(rows, column_id):
        return None

    numbers = [
        n for n in (to_number(row.get(column_id)) for row in rows
                    if not is_blank(row.get(column_id)))
        if not math.isnan(n)
    ]
    if not numbers:
        return None
    return NumericRange(min=min(numbers), max=max(numbers))


def column_values(rows: Sequence[Mapping[str, Any]], column_id: str) -> list[str]:
    """Distinct non-blank values of a column as strings, collated."""
    if not column_id or not rows:
        return []
    values = {to_text(row.get(column_id)) for row in rows if not is_blank(row.get(column_id))}
    return sorted(values, key=collation_key)
