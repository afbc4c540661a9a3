"""Single-column sort state and row sorting"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence

from table.columns import ColumnDef, UnsortableColumnError, get_column


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction; None stands for unsorted"""
    column_id: str
    direction: SortDirection = SortDirection.ASC


DEFAULT_SORT = SortState(column_id="createdAt", direction=SortDirection.DESC)


def toggle_sort(column_id: str, current: Optional[SortState]) -> Optional[SortState]:
    """
    Advance the sort cycle for a column.

    unsorted -> asc -> desc -> unsorted on the same column; activating any
    other column starts over at asc and drops the previous column's state.
    """
    if current is None or current.column_id != column_id:
        return SortState(column_id=column_id, direction=SortDirection.ASC)
    if current.direction == SortDirection.ASC:
        return SortState(column_id=column_id, direction=SortDirection.DESC)
    return None


def check_sortable(columns: Sequence[ColumnDef], column_id: str) -> ColumnDef:
    column = get_column(columns, column_id)
    if not column.sortable:
        raise UnsortableColumnError(column_id)
    return column


def sort_rows(rows: Sequence[Any], sort_state: Optional[SortState], columns: Sequence[ColumnDef]) -> List[Any]:
    """Stable sort of rows from their given base order; ties keep that order"""
    if sort_state is None:
        return list(rows)

    column = check_sortable(columns, sort_state.column_id)
    return sorted(
        rows,
        key=column.accessor,
        reverse=sort_state.direction == SortDirection.DESC,
    )
