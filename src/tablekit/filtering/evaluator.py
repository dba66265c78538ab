"""Filtering – evaluate one FilterCondition against one row value."""
from __future__ import annotations

from typing import Any

from tablekit.filtering.coercion import is_empty, to_number, to_text, to_timestamp
from tablekit.filtering.types import FilterCondition, FilterOperator

__all__ = ["evaluate_condition"]


def evaluate_condition(condition: FilterCondition, row_value: Any) -> bool:
    """Return whether *row_value* satisfies *condition*.

    Text operators compare lower-cased string forms. Numeric operators
    compare numeric forms and are false whenever either side is not a
    number. Date operators are false whenever either side is not a date.
    An operator this function does not know always passes.
    """
    operator = condition.operator
    value = condition.value

    row_text = to_text(row_value).lower()
    filter_text = to_text(value).lower()

    match operator:
        case FilterOperator.EQUALS:
            return row_text == filter_text
        case FilterOperator.NOT_EQUALS:
            return row_text != filter_text
        case FilterOperator.CONTAINS:
            return filter_text in row_text
        case FilterOperator.NOT_CONTAINS:
            return filter_text not in row_text
        case FilterOperator.STARTS_WITH:
            return row_text.startswith(filter_text)
        case FilterOperator.ENDS_WITH:
            return row_text.endswith(filter_text)
        case FilterOperator.IS_EMPTY:
            return is_empty(row_value)
        case FilterOperator.IS_NOT_EMPTY:
            return not is_empty(row_value)
        case FilterOperator.GREATER_THAN:
            return to_number(row_value) > to_number(value)
        case FilterOperator.LESS_THAN:
            return to_number(row_value) < to_number(value)
        case FilterOperator.GREATER_OR_EQUAL:
            return to_number(row_value) >= to_number(value)
        case FilterOperator.LESS_OR_EQUAL:
            return to_number(row_value) <= to_number(value)
        case FilterOperator.IS_BEFORE | FilterOperator.IS_AFTER:
            row_ts = to_timestamp(row_value)
            filter_ts = to_timestamp(value)
            if row_ts is None or filter_ts is None:
                return False
            if operator == FilterOperator.IS_BEFORE:
                return row_ts < filter_ts
            return row_ts > filter_ts
        case _:
            return True
