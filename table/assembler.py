"""Table view-model assembly from rows, columns and view state"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from table.column_order import check_column_order
from table.columns import ColumnDef, index_columns
from table.sorting import SortDirection, SortState, sort_rows


@dataclass(frozen=True)
class HeaderView:
    """Header data a renderer needs for sort indicators and drag handles"""
    id: str
    label: str
    sortable: bool
    sorted: Optional[SortDirection] = None


@dataclass(frozen=True)
class TableViewModel:
    headers: List[HeaderView] = field(default_factory=list)
    rows: List[Any] = field(default_factory=list)


def assemble_table(
    rows: Sequence[Any],
    columns: Sequence[ColumnDef],
    column_order: Sequence[str],
    sort_state: Optional[SortState],
) -> TableViewModel:
    """
    Project column definitions into the given order and sort the rows.

    Args:
        rows: Rows in canonical base order
        columns: Static column definitions
        column_order: Exact permutation of the column ids
        sort_state: Active sort, or None for base order

    Returns:
        TableViewModel: Ordered headers and freshly sorted rows

    Raises:
        UnknownColumnError: column_order or sort_state names an undefined column
        InvalidColumnOrderError: column_order is not a permutation of the column ids
    """
    check_column_order(columns, column_order)
    by_id = index_columns(columns)

    headers = []
    for column_id in column_order:
        column = by_id[column_id]
        direction = None
        if sort_state is not None and sort_state.column_id == column_id:
            direction = sort_state.direction
        headers.append(HeaderView(
            id=column.id,
            label=column.label,
            sortable=column.sortable,
            sorted=direction,
        ))

    return TableViewModel(headers=headers, rows=sort_rows(rows, sort_state, columns))
