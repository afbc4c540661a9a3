import logging
from fastapi import APIRouter, Depends

from app.api.errors import to_http_error
from app.deps.common import get_reaction_source, get_trace_id
from collection.clients.reactions_api import ReactionSource
from service.dto import (
    ColumnOrderRequestDTO,
    ColumnOrderResponseDTO,
    SortToggleRequestDTO,
    SortToggleResponseDTO,
    TableRequestDTO,
    TableResponseDTO,
)
from service.table_service import build_table, move_column, toggle_column_sort

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/table", tags=["table"])


@router.post("", response_model=TableResponseDTO)
def read_table(
    request: TableRequestDTO,
    source: ReactionSource = Depends(get_reaction_source),
    trace_id: str = Depends(get_trace_id)
) -> TableResponseDTO:
    """Reactions table with headers in the requested order and rows sorted"""
    logger.info("Table API request received", extra={"trace_id": trace_id})
    try:
        return build_table(request, trace_id=trace_id, source=source)
    except Exception as e:
        raise to_http_error(e, trace_id)


@router.post("/column-order", response_model=ColumnOrderResponseDTO)
def update_column_order(
    request: ColumnOrderRequestDTO,
    trace_id: str = Depends(get_trace_id)
) -> ColumnOrderResponseDTO:
    """Drop the dragged column header onto the target header"""
    try:
        return move_column(request, trace_id=trace_id)
    except Exception as e:
        raise to_http_error(e, trace_id)


@router.post("/sort", response_model=SortToggleResponseDTO)
def update_sort(
    request: SortToggleRequestDTO,
    trace_id: str = Depends(get_trace_id)
) -> SortToggleResponseDTO:
    """Advance the sort cycle of the clicked column"""
    try:
        return toggle_column_sort(request, trace_id=trace_id)
    except Exception as e:
        raise to_http_error(e, trace_id)
