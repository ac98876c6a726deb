"""Download client implementations."""

from .base import Client
from .clipboard import ClipboardClient
from .cmd import CmdClient
from .default_app import DefaultAppClient
from .qbittorrent import QBittorrentClient
from .torrent_file import TorrentFileClient
from .transmission import TransmissionClient

CLIENTS: list[Client] = [
    CmdClient(),
    DefaultAppClient(),
    QBittorrentClient(),
    TransmissionClient(),
    TorrentFileClient(),
    ClipboardClient(),
]


def get_client(name: str, clients: list[Client] | None = None) -> Client | None:
    """Find a registered client by display name."""
    for client in clients if clients is not None else CLIENTS:
        if client.name == name:
            return client
    return None


__all__ = [
    "Client",
    "CmdClient",
    "DefaultAppClient",
    "QBittorrentClient",
    "TransmissionClient",
    "TorrentFileClient",
    "ClipboardClient",
    "CLIENTS",
    "get_client",
]
