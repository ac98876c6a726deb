"""Transmission RPC client."""

import requests

from ..errors import ClientError
from ..models import Item
from .base import TIMEOUT, Client

SESSION_HEADER = "X-Transmission-Session-Id"


class TransmissionClient(Client):
    """Adds torrents through Transmission's JSON-RPC endpoint."""

    name = "Transmission"

    def __init__(self):
        self._session_id: str | None = None

    def send(self, item: Item, state) -> None:
        conf = state.config.clients.transmission
        arguments = {"filename": self._link(item, conf.use_magnet), "paused": conf.paused}
        if conf.download_dir:
            arguments["download-dir"] = conf.download_dir
        payload = {"method": "torrent-add", "arguments": arguments}
        auth = (conf.username, conf.password or "") if conf.username else None

        resp = self._post(conf.base_url, payload, auth)
        if resp.status_code == 409:
            # First contact: the server hands out the CSRF session id with a 409
            self._session_id = resp.headers.get(SESSION_HEADER)
            resp = self._post(conf.base_url, payload, auth)
        if resp.status_code == 401:
            raise ClientError(f"{self.name}: authentication failed")
        resp.raise_for_status()

        result = resp.json().get("result")
        if result != "success":
            raise ClientError(f"{self.name}: {result}")
        if "torrent-duplicate" in resp.json().get("arguments", {}):
            raise ClientError(f"{self.name}: {item.title} was already added")

    def _post(self, url: str, payload: dict, auth) -> requests.Response:
        headers = {SESSION_HEADER: self._session_id} if self._session_id else {}
        return requests.post(url, json=payload, headers=headers, auth=auth, timeout=TIMEOUT)
