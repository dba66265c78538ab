"""Filtering – operator, logic and data-type enumerations and FilterCondition."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = ["ColumnDataType", "FilterCondition", "FilterLogic", "FilterOperator"]


class FilterOperator(StrEnum):
    # equality
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    # text
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    # emptiness
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"
    # numeric
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS_OR_EQUAL = "less_or_equal"
    # date
    IS_BEFORE = "is_before"
    IS_AFTER = "is_after"

    @classmethod
    def parse(cls, raw: FilterOperator | str) -> FilterOperator | str:
        """Return the enum member for *raw*, or *raw* itself when unknown.

        Unknown operators are kept verbatim so that conditions written by a
        newer client still round-trip and evaluate (they always pass).
        """
        try:
            return cls(raw)
        except (TypeError, ValueError):
            return raw


EMPTINESS_OPERATORS: frozenset[FilterOperator] = frozenset(
    {FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY}
)


class FilterLogic(StrEnum):
    AND = "and"
    OR = "or"


class ColumnDataType(StrEnum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    SELECT = "select"


@dataclass(frozen=True)
class FilterCondition:
    """One field/operator/value predicate built by a filter UI.

    ``id`` is opaque; ``field`` is the row key to read and is not checked
    against any schema.
    """

    id: str
    field: str
    operator: FilterOperator | str
    value: Any = None

    @property
    def needs_value(self) -> bool:
        return self.operator not in EMPTINESS_OPERATORS

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "field": self.field,
            "operator": str(self.operator),
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FilterCondition:
        """Build a condition from its plain-mapping form.

        Raises ``KeyError`` when ``field`` or ``operator`` is absent.
        """
        return cls(
            id=str(data.get("id", "")),
            field=data["field"],
            operator=FilterOperator.parse(data["operator"]),
            value=data.get("value"),
        )
