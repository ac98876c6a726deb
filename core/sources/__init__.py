"""Torrent source implementations."""

from .base import Source
from .nyaa_html import NyaaHtmlSource
from .nyaa_rss import NyaaRssSource
from .piratebay import PirateBaySource

SOURCES: list[Source] = [
    NyaaHtmlSource(),
    NyaaRssSource(),
    PirateBaySource(),
]


def get_source(name: str, sources: list[Source] | None = None) -> Source | None:
    """Find a registered source by display name."""
    for source in sources if sources is not None else SOURCES:
        if source.name == name:
            return source
    return None


__all__ = [
    "Source",
    "NyaaHtmlSource",
    "NyaaRssSource",
    "PirateBaySource",
    "SOURCES",
    "get_source",
]
