"""Per-table view state owned by whichever view orchestrates the table"""
from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence, Tuple

from table.assembler import TableViewModel, assemble_table
from table.column_order import ColumnOrderModel
from table.columns import REACTION_COLUMNS, ColumnDef
from table.sorting import DEFAULT_SORT, SortState, check_sortable, toggle_sort


@dataclass(frozen=True)
class TableState:
    """Column order and sort for one table instance; transitions return new values"""
    columns: Tuple[ColumnDef, ...]
    column_order: ColumnOrderModel
    sort: Optional[SortState] = DEFAULT_SORT

    @classmethod
    def initial(cls, columns: Sequence[ColumnDef] = REACTION_COLUMNS) -> "TableState":
        return cls(
            columns=tuple(columns),
            column_order=ColumnOrderModel.from_columns(columns),
            sort=DEFAULT_SORT,
        )

    def reorder(self, dragged_id: str, target_id: str) -> "TableState":
        return replace(self, column_order=self.column_order.move(dragged_id, target_id))

    def toggle_sort(self, column_id: str) -> "TableState":
        check_sortable(self.columns, column_id)
        return replace(self, sort=toggle_sort(column_id, self.sort))

    def view(self, rows: Sequence[Any]) -> TableViewModel:
        return assemble_table(rows, self.columns, self.column_order.order, self.sort)
