"""Filtering – combine conditions across a row collection with AND/OR logic."""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from tablekit.filtering.coercion import is_blank
from tablekit.filtering.evaluator import evaluate_condition
from tablekit.filtering.types import FilterCondition, FilterLogic
from tablekit.observability.logging import get_logger

R = TypeVar("R", bound=Mapping[str, Any])

__all__ = ["active_conditions", "apply_filters"]

_log = get_logger(__name__)


def active_conditions(conditions: Iterable[FilterCondition]) -> list[FilterCondition]:
    """Drop conditions that are not fully specified yet.

    A condition needs a field. Every operator except ``is_empty`` and
    ``is_not_empty`` also needs a non-blank value.
    """
    return [
        c for c in conditions
        if c.field and (not c.needs_value or not is_blank(c.value))
    ]


def apply_filters(
    rows: Sequence[R],
    conditions: Sequence[FilterCondition],
    logic: FilterLogic | str = FilterLogic.AND,
) -> list[R]:
    """Return the rows that pass *conditions*, in their original order.

    With ``and`` logic a row must pass every active condition, with ``or``
    at least one. No active conditions means no filtering.
    """
    if not conditions:
        return list(rows)

    active = active_conditions(conditions)
    if len(active) != len(conditions):
        _log.debug(
            "filter.inactive_conditions_skipped",
            skipped=len(conditions) - len(active),
            active=len(active),
        )
    if not active:
        return list(rows)

    combine = all if logic == FilterLogic.AND else any
    return [
        row for row in rows
        if combine(evaluate_condition(c, row.get(c.field)) for c in active)
    ]
