import logging
from fastapi import APIRouter, Depends

from app.api.errors import to_http_error
from app.deps.common import get_reaction_source, get_settings, get_trace_id
from collection.clients.reactions_api import ReactionSource
from core.config import AppSettings
from service.dto import MetricsResponseDTO
from service.metrics_service import get_metrics

logger = logging.getLogger(__name__)
router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_model=MetricsResponseDTO)
def read_metrics(
    source: ReactionSource = Depends(get_reaction_source),
    trace_id: str = Depends(get_trace_id),
    settings: AppSettings = Depends(get_settings)
) -> MetricsResponseDTO:
    """Summary counts, recent reactions, most reacted-to videos and top channels"""
    logger.info("Metrics API request received", extra={"trace_id": trace_id})
    try:
        return get_metrics(trace_id=trace_id, source=source, top_n=settings.top_n)
    except Exception as e:
        raise to_http_error(e, trace_id)
