"""Column ordering and drag-based reordering"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from table.columns import ColumnDef, InvalidColumnOrderError, UnknownColumnError, index_columns


def reorder_columns(dragged_id: str, target_id: str, order: Sequence[str]) -> List[str]:
    """
    Move the dragged column next to the target column.

    A column dragged rightward (it sat before the target) lands immediately
    after the target; a column dragged leftward lands immediately before it.
    All other columns keep their relative order. The input is not mutated.

    Raises:
        UnknownColumnError: dragged_id or target_id is not in order
        InvalidColumnOrderError: dragged_id equals target_id, or an id repeats
    """
    if len(set(order)) != len(order):
        raise InvalidColumnOrderError(f"Column order contains duplicates: {list(order)}")
    if dragged_id == target_id:
        raise InvalidColumnOrderError(f"Cannot drop column {dragged_id!r} onto itself")
    for column_id in (dragged_id, target_id):
        if column_id not in order:
            raise UnknownColumnError(column_id)

    dragged_index = order.index(dragged_id)
    target_index = order.index(target_id)

    remaining = [column_id for column_id in order if column_id != dragged_id]
    target_pos = remaining.index(target_id)

    if dragged_index < target_index:
        insert_at = target_pos + 1
    else:
        insert_at = target_pos

    remaining.insert(insert_at, dragged_id)
    return remaining


@dataclass(frozen=True)
class ColumnOrderModel:
    """Left-to-right arrangement of column ids; every change yields a new model"""
    order: Tuple[str, ...]

    @classmethod
    def from_columns(cls, columns: Sequence[ColumnDef]) -> "ColumnOrderModel":
        return cls(order=tuple(column.id for column in columns))

    def move(self, dragged_id: str, target_id: str) -> "ColumnOrderModel":
        return ColumnOrderModel(order=tuple(reorder_columns(dragged_id, target_id, self.order)))


def check_column_order(columns: Sequence[ColumnDef], order: Sequence[str]) -> None:
    """Raise unless order lists every column id exactly once"""
    by_id = index_columns(columns)
    for column_id in order:
        if column_id not in by_id:
            raise UnknownColumnError(column_id)
    if len(order) != len(by_id) or len(set(order)) != len(order):
        raise InvalidColumnOrderError(
            f"Column order {list(order)} must list each of {list(by_id)} exactly once"
        )
