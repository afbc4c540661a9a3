import httpx
import logging
from abc import ABC, abstractmethod
from typing import List, Sequence
from pydantic import TypeAdapter
from pydantic_settings import BaseSettings

from core.models import Reaction

logger = logging.getLogger(__name__)

_reaction_list = TypeAdapter(List[Reaction])

class ReactionsApiSettings(BaseSettings):
    reactions_api_url: str = "https://yt-reactions-server.fly.dev"
    reactions_api_timeout: float = 10.0

    class Config:
        env_file = ".env"
        extra = "ignore"

class ReactionSource(ABC):
    """Supplier of the complete raw reaction list"""

    @abstractmethod
    def get_reactions(self) -> List[Reaction]:
        """Return every reaction record"""
        pass

class StaticReactionSource(ReactionSource):
    """In-memory source for tests and offline runs"""

    def __init__(self, reactions: Sequence[Reaction]):
        self._reactions = list(reactions)

    def get_reactions(self) -> List[Reaction]:
        return list(self._reactions)

class ReactionsApiClient(ReactionSource):
    def __init__(self, settings: ReactionsApiSettings = None, transport: httpx.BaseTransport = None):
        self.settings = settings or ReactionsApiSettings()
        self.base_url = self.settings.reactions_api_url.rstrip("/")
        self.client = httpx.Client(
            timeout=self.settings.reactions_api_timeout,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.client.close()

    def get_reactions(self) -> List[Reaction]:
        """Fetch all reactions from the reactions API"""
        try:
            response = self.client.get(f"{self.base_url}/reactions")
            response.raise_for_status()
            reactions = _reaction_list.validate_python(response.json())

            logger.info("Fetched reactions", extra={"reactions": len(reactions)})
            return reactions

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error {e.response.status_code}: {e}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request error: {e}")
            raise
        except ValueError as e:
            logger.error(f"Invalid reactions payload: {e}")
            raise
