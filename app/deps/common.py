"""Common dependencies for FastAPI dependency injection"""
import uuid
from datetime import datetime, timezone
from functools import lru_cache
from typing import Generator

from collection.clients.reactions_api import ReactionsApiClient, ReactionSource
from core.config import AppSettings


@lru_cache
def get_settings() -> AppSettings:
    """
    Application settings dependency.

    Returns:
        AppSettings: Settings loaded once from environment
    """
    return AppSettings()


def get_trace_id() -> str:
    """
    Generate unique trace ID for request tracking.

    Returns:
        str: Unique trace ID
    """
    return f"api_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"


def get_reaction_source() -> Generator[ReactionSource, None, None]:
    """
    Reaction source dependency.

    Yields:
        ReactionSource: HTTP client for the reactions API, closed after the request
    """
    with ReactionsApiClient() as client:
        yield client
