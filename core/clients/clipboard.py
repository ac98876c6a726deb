"""Copy links to the clipboard."""

import pyperclip

from ..errors import ClientError
from ..models import Item
from .base import Client


class ClipboardClient(Client):
    """Copies the magnet or torrent link instead of downloading."""

    name = "Clipboard"

    def send(self, item: Item, state) -> None:
        link = self._link(item, state.config.clients.clipboard.use_magnet)
        try:
            pyperclip.copy(link)
        except pyperclip.PyperclipException as e:
            raise ClientError(f"{self.name}: failed to copy\n{e}") from e
