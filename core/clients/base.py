"""Base class for download clients."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import requests

from ..errors import ClientError
from ..models import Item

if TYPE_CHECKING:
    from ..state import AppState

logger = logging.getLogger(__name__)

TIMEOUT = 15


class Client(ABC):
    """Abstract base class for download clients.

    Subclasses implement the blocking ``send``; ``download`` runs it off the
    event loop and turns transport failures into ``ClientError``.
    """

    name: str = "Unknown"

    async def download(self, item: Item, state: "AppState") -> None:
        """Dispatch ``item`` using the settings in ``state.config``."""
        logger.debug("%s: dispatching %r", self.name, item.title)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self.send, item, state)
        except ClientError:
            raise
        except requests.RequestException as e:
            raise ClientError(f"{self.name}: request failed\n{e}") from e
        except (OSError, ValueError) as e:
            raise ClientError(f"{self.name}: {e}") from e

    @abstractmethod
    def send(self, item: Item, state: "AppState") -> None:
        """Blocking dispatch of one item."""
        ...

    def _link(self, item: Item, use_magnet: bool) -> str:
        link = item.link(use_magnet)
        if not link:
            raise ClientError(f"{self.name}: no download link for {item.title}")
        return link
