"""Column definitions for the reactions table"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple



class UnknownColumnError(ValueError):
    """Column id is not part of the table's column definitions"""
    def __init__(self, column_id: str):
        self.column_id = column_id
        super().__init__(f"Unknown column: {column_id!r}")


class UnsortableColumnError(ValueError):
    """Column exists but does not accept sorting"""
    def __init__(self, column_id: str):
        self.column_id = column_id
        super().__init__(f"Column is not sortable: {column_id!r}")


class InvalidColumnOrderError(ValueError):
    """Column order is not a permutation of the column ids"""


@dataclass(frozen=True)
class ColumnDef:
    """Static column configuration: id, display label and value accessor"""
    id: str
    label: str
    accessor: Callable[[Any], Any]
    sortable: bool = True


REACTION_COLUMNS: Tuple[ColumnDef, ...] = (
    ColumnDef(id="video", label="Video", accessor=lambda row: row.reaction_to.title),
    ColumnDef(id="reaction", label="Reaction", accessor=lambda row: row.reaction.title),
    ColumnDef(id="reportCount", label="Reports", accessor=lambda row: row.report_count),
    ColumnDef(id="createdAt", label="Created At", accessor=lambda row: row.created_at),
)


def index_columns(columns: Sequence[ColumnDef]) -> Dict[str, ColumnDef]:
    """Map column id to definition, rejecting duplicate ids"""
    by_id: Dict[str, ColumnDef] = {}
    for column in columns:
        if column.id in by_id:
            raise InvalidColumnOrderError(f"Duplicate column id: {column.id!r}")
        by_id[column.id] = column
    return by_id


def get_column(columns: Sequence[ColumnDef], column_id: str) -> ColumnDef:
    for column in columns:
        if column.id == column_id:
            return column
    raise UnknownColumnError(column_id)
