"""Reaction fetching for the service layer"""
import logging
import time
from typing import List

import httpx

from collection.clients.reactions_api import ReactionSource
from core.models import Reaction
from service.errors import DependencyError

logger = logging.getLogger(__name__)


def load_reactions(source: ReactionSource, *, trace_id: str) -> List[Reaction]:
    """
    Fetch the complete reaction list.

    A failed fetch, including an undecodable or invalid payload, is raised
    as DependencyError so callers never mistake it for an empty but valid
    list.

    Raises:
        DependencyError: Reactions API unreachable, failing or returning bad data
    """
    start_time = time.time()

    try:
        reactions = source.get_reactions()
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Reactions fetch failed", extra={
            "trace_id": trace_id,
            "error_code": "REACTIONS_UNAVAILABLE",
        })
        raise DependencyError(
            f"Reactions service unavailable: {str(e)}",
            code="REACTIONS_UNAVAILABLE"
        ) from e

    logger.info("Reactions loaded", extra={
        "trace_id": trace_id,
        "reactions": len(reactions),
        "latency_ms": int((time.time() - start_time) * 1000),
    })
    return reactions
