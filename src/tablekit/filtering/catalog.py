"""Filtering – operator catalog per column data type.

Only the filter-builder UI consults this table when listing choices; the
evaluator accepts any operator for any column.
"""
from __future__ import annotations

from dataclasses import dataclass

from tablekit.filtering.types import ColumnDataType, FilterOperator

__all__ = ["OPERATOR_LABELS", "OperatorOption", "operators_for_type"]


@dataclass(frozen=True)
class OperatorOption:
    value: FilterOperator
    label: str


OPERATOR_LABELS: dict[FilterOperator, str] = {
    FilterOperator.EQUALS: "equals",
    FilterOperator.NOT_EQUALS: "does not equal",
    FilterOperator.CONTAINS: "contains",
    FilterOperator.NOT_CONTAINS: "does not contain",
    FilterOperator.STARTS_WITH: "starts with",
    FilterOperator.ENDS_WITH: "ends with",
    FilterOperator.IS_EMPTY: "is empty",
    FilterOperator.IS_NOT_EMPTY: "is not empty",
    FilterOperator.GREATER_THAN: ">",
    FilterOperator.LESS_THAN: "<",
    FilterOperator.GREATER_OR_EQUAL: ">=",
    FilterOperator.LESS_OR_EQUAL: "<=",
    FilterOperator.IS_BEFORE: "is before",
    FilterOperator.IS_AFTER: "is after",
}

_Op = FilterOperator

_OPERATORS_BY_TYPE: dict[ColumnDataType, tuple[FilterOperator, ...]] = {
    ColumnDataType.TEXT: (
        _Op.EQUALS, _Op.NOT_EQUALS, _Op.CONTAINS, _Op.NOT_CONTAINS,
        _Op.STARTS_WITH, _Op.ENDS_WITH, _Op.IS_EMPTY, _Op.IS_NOT_EMPTY,
    ),
    ColumnDataType.NUMBER: (
        _Op.EQUALS, _Op.NOT_EQUALS, _Op.GREATER_THAN, _Op.LESS_THAN,
        _Op.GREATER_OR_EQUAL, _Op.LESS_OR_EQUAL, _Op.IS_EMPTY, _Op.IS_NOT_EMPTY,
    ),
    ColumnDataType.DATE: (
        _Op.EQUALS, _Op.NOT_EQUALS, _Op.IS_BEFORE, _Op.IS_AFTER,
        _Op.IS_EMPTY, _Op.IS_NOT_EMPTY,
    ),
    ColumnDataType.BOOLEAN: (_Op.EQUALS, _Op.IS_EMPTY, _Op.IS_NOT_EMPTY),
    ColumnDataType.SELECT: (_Op.EQUALS, _Op.NOT_EQUALS, _Op.IS_EMPTY, _Op.IS_NOT_EMPTY),
}


def operators_for_type(data_type: ColumnDataType | str | None = None) -> list[OperatorOption]:
    """Return the ordered operator choices for *data_type* (``text`` when unknown)."""
    try:
        key = ColumnDataType(data_type) if data_type is not None else ColumnDataType.TEXT
    except (TypeError, ValueError):
        key = ColumnDataType.TEXT
    return [OperatorOption(op, OPERATOR_LABELS[op]) for op in _OPERATORS_BY_TYPE[key]]
