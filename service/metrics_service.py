"""Metrics service: fetch reactions and aggregate them"""
import logging
import time

from analysis.aggregation import TOP_N, compute_metrics
from collection.clients.reactions_api import ReactionSource
from service.dto import MetricsResponseDTO
from service.reactions_service import load_reactions

logger = logging.getLogger(__name__)


def get_metrics(
    *,
    trace_id: str,
    source: ReactionSource,
    top_n: int = TOP_N
) -> MetricsResponseDTO:
    """
    Compute summary metrics over all reactions.

    Args:
        trace_id: Request tracing ID
        source: Reaction supplier
        top_n: Length limit of the ranked lists

    Returns:
        MetricsResponseDTO: Ready metrics snapshot

    Raises:
        DependencyError: Reactions could not be fetched
    """
    start_time = time.time()
    logger.info("Starting metrics computation", extra={"trace_id": trace_id})

    reactions = load_reactions(source, trace_id=trace_id)
    metrics = compute_metrics(reactions, top_n=top_n)

    logger.info("Metrics computation completed", extra={
        "trace_id": trace_id,
        "reactions": metrics.reactions,
        "latency_ms": int((time.time() - start_time) * 1000),
    })

    return MetricsResponseDTO(metrics=metrics)
