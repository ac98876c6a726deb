"""qBittorrent WebUI client."""

import requests

from ..errors import ClientError
from ..models import Item
from .base import TIMEOUT, Client


class QBittorrentClient(Client):
    """Adds torrents through the qBittorrent WebUI API."""

    name = "qBittorrent"

    def send(self, item: Item, state) -> None:
        conf = state.config.clients.qbit
        base_url = conf.base_url.rstrip("/")
        link = self._link(item, conf.use_magnet)

        with requests.Session() as session:
            # qBittorrent rejects requests whose Referer does not match the host
            session.headers["Referer"] = base_url
            resp = session.post(
                f"{base_url}/api/v2/auth/login",
                data={"username": conf.username, "password": conf.password},
                timeout=TIMEOUT,
            )
            resp.raise_for_status()
            if resp.text.strip() != "Ok.":
                raise ClientError(f"{self.name}: login failed for {conf.username!r}")

            data = {"urls": link, "paused": str(conf.paused).lower()}
            if conf.savepath:
                data["savepath"] = conf.savepath
            if conf.category:
                data["category"] = conf.category
            if conf.tags:
                data["tags"] = conf.tags
            resp = session.post(f"{base_url}/api/v2/torrents/add", data=data, timeout=TIMEOUT)
            if resp.status_code != 200 or resp.text.strip() == "Fails.":
                raise ClientError(
                    f"{self.name}: failed to add torrent (HTTP {resp.status_code})\n{resp.text.strip()}"
                )
