"""Table service: view-model assembly and view-state transitions"""
import logging
import time
from typing import Sequence

from collection.clients.reactions_api import ReactionSource
from service.dto import (
    ColumnOrderRequestDTO,
    ColumnOrderResponseDTO,
    HeaderDTO,
    SortStateDTO,
    SortToggleRequestDTO,
    SortToggleResponseDTO,
    TableRequestDTO,
    TableResponseDTO,
)
from service.errors import DomainValidationError
from service.reactions_service import load_reactions
from table.assembler import assemble_table
from table.column_order import check_column_order, reorder_columns
from table.columns import REACTION_COLUMNS, ColumnDef
from table.sorting import check_sortable, toggle_sort

logger = logging.getLogger(__name__)


def _invalid_column(e: ValueError, trace_id: str) -> DomainValidationError:
    logger.warning("Invalid column request", extra={
        "trace_id": trace_id,
        "error_code": "INVALID_COLUMN",
    })
    return DomainValidationError(str(e), code="INVALID_COLUMN")


def build_table(
    dto: TableRequestDTO,
    *,
    trace_id: str,
    source: ReactionSource,
    columns: Sequence[ColumnDef] = REACTION_COLUMNS
) -> TableResponseDTO:
    """
    Build ordered headers and sorted rows for the reactions table.

    Raises:
        DomainValidationError: Unknown column or malformed column order
        DependencyError: Reactions could not be fetched
    """
    start_time = time.time()
    column_order = dto.column_order if dto.column_order is not None else [c.id for c in columns]
    sort_state = dto.sort.to_state() if dto.sort is not None else None

    # validate before fetching so bad requests fail fast
    try:
        check_column_order(columns, column_order)
        if sort_state is not None:
            check_sortable(columns, sort_state.column_id)
    except ValueError as e:
        raise _invalid_column(e, trace_id) from e

    reactions = load_reactions(source, trace_id=trace_id)
    view = assemble_table(reactions, columns, column_order, sort_state)

    logger.info("Table assembled", extra={
        "trace_id": trace_id,
        "rows": len(view.rows),
        "latency_ms": int((time.time() - start_time) * 1000),
    })

    return TableResponseDTO(
        headers=[
            HeaderDTO(id=h.id, label=h.label, sortable=h.sortable, sorted=h.sorted)
            for h in view.headers
        ],
        rows=view.rows,
    )


def move_column(
    dto: ColumnOrderRequestDTO,
    *,
    trace_id: str,
    columns: Sequence[ColumnDef] = REACTION_COLUMNS
) -> ColumnOrderResponseDTO:
    """Apply a drag-and-drop of one column header onto another"""
    try:
        check_column_order(columns, dto.order)
        order = reorder_columns(dto.dragged_id, dto.target_id, dto.order)
    except ValueError as e:
        raise _invalid_column(e, trace_id) from e

    logger.info("Column moved", extra={"trace_id": trace_id})
    return ColumnOrderResponseDTO(order=order)


def toggle_column_sort(
    dto: SortToggleRequestDTO,
    *,
    trace_id: str,
    columns: Sequence[ColumnDef] = REACTION_COLUMNS
) -> SortToggleResponseDTO:
    """Advance the sort cycle for the clicked column header"""
    try:
        check_sortable(columns, dto.column_id)
        current = dto.current.to_state() if dto.current is not None else None
        next_state = toggle_sort(dto.column_id, current)
    except ValueError as e:
        raise _invalid_column(e, trace_id) from e

    logger.info("Sort toggled", extra={"trace_id": trace_id})
    return SortToggleResponseDTO(sort=SortStateDTO.from_state(next_state))
