"""Save the .torrent file to disk."""

from pathlib import Path

import requests

from ..errors import ClientError
from ..models import Item
from ..sources.base import HEADERS
from .base import TIMEOUT, Client


class TorrentFileClient(Client):
    """Downloads the torrent file into the configured directory."""

    name = "Download"

    def send(self, item: Item, state) -> None:
        conf = state.config.clients.download
        if not item.torrent_link:
            raise ClientError(f"{self.name}: {item.title} has no torrent file")

        save_dir = Path(conf.save_dir).expanduser()
        target = save_dir / (item.file_name or f"{item.id}.torrent")
        if target.exists() and not conf.overwrite:
            raise ClientError(f"{self.name}: {target} already exists")

        resp = requests.get(item.torrent_link, headers=HEADERS, timeout=TIMEOUT)
        resp.raise_for_status()
        save_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(resp.content)
