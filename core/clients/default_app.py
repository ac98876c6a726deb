"""Open links with the operating system's default handler."""

import os
import platform
import subprocess

from ..errors import ClientError
from ..models import Item
from .base import Client


def open_link(link: str) -> bool:
    """Open a link using the system protocol handler (bypasses browser)."""
    try:
        system = platform.system()
        if system == "Darwin":
            subprocess.run(["open", link], check=True, capture_output=True)
        elif system == "Linux":
            subprocess.run(["xdg-open", link], check=True, capture_output=True)
        elif system == "Windows":
            # no cmd.exe in between, so "&" in magnet links survives
            os.startfile(link)
        else:
            return False
        return True
    except subprocess.CalledProcessError:
        return False


class DefaultAppClient(Client):
    """Default torrent application client."""

    name = "Default App"

    def send(self, item: Item, state) -> None:
        link = self._link(item, state.config.clients.default_app.use_magnet)
        if not open_link(link):
            raise ClientError(f"{self.name}: failed to open link for {item.title}")
