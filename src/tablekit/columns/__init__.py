"""Columns – column identity, labels and display ordering."""
from tablekit.columns.ordering import (
    ColumnDef,
    ColumnOrderMode,
    column_id,
    column_label,
    next_order_mode,
    order_columns,
)

__all__ = [
    "ColumnDef",
    "ColumnOrderMode",
    "column_id",
    "column_label",
    "next_order_mode",
    "order_columns",
]
