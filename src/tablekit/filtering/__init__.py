"""Filtering – row-level filter conditions, evaluation and AND/OR combination."""
from tablekit.filtering.catalog import OPERATOR_LABELS, OperatorOption, operators_for_type
from tablekit.filtering.combinator import active_conditions, apply_filters
from tablekit.filtering.evaluator import evaluate_condition
from tablekit.filtering.factories import (
    create_numeric_filter,
    create_select_filter,
    create_text_filter,
)
from tablekit.filtering.suggestions import (
    NumericRange,
    column_values,
    is_numeric_column,
    numeric_range,
)
from tablekit.filtering.types import (
    ColumnDataType,
    FilterCondition,
    FilterLogic,
    FilterOperator,
)

__all__ = [
    "OPERATOR_LABELS",
    "ColumnDataType",
    "FilterCondition",
    "FilterLogic",
    "FilterOperator",
    "NumericRange",
    "OperatorOption",
    "active_conditions",
    "apply_filters",
    "column_values",
    "create_numeric_filter",
    "create_select_filter",
    "create_text_filter",
    "evaluate_condition",
    "is_numeric_column",
    "numeric_range",
    "operators_for_type",
]
