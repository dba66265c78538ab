"""Filtering – FilterCondition constructors for the common filter widgets."""
from __future__ import annotations

import uuid
from typing import Any

from tablekit.filtering.types import FilterCondition, FilterOperator

__all__ = ["create_numeric_filter", "create_select_filter", "create_text_filter"]

NUMERIC_OPERATORS: frozenset[FilterOperator] = frozenset({
    FilterOperator.GREATER_THAN,
    FilterOperator.LESS_THAN,
    FilterOperator.GREATER_OR_EQUAL,
    FilterOperator.LESS_OR_EQUAL,
})


def _new_id() -> str:
    return f"filter-{uuid.uuid4().hex}"


def create_text_filter(column_id: str, value: str) -> FilterCondition:
    """Free-text box: substring match."""
    return FilterCondition(id=_new_id(), field=column_id, operator=FilterOperator.CONTAINS, value=value)


def create_select_filter(column_id: str, value: Any) -> FilterCondition:
    """Dropdown: exact match on the chosen option."""
    return FilterCondition(id=_new_id(), field=column_id, operator=FilterOperator.EQUALS, value=value)


def create_numeric_filter(
    column_id: str,
    operator: FilterOperator | str,
    value: float,
) -> FilterCondition:
    op = FilterOperator.parse(operator)
    if op not in NUMERIC_OPERATORS:
        raise ValueError(f"{operator!r} is not a numeric comparison operator")
    return FilterCondition(id=_new_id(), field=column_id, operator=op, value=value)
