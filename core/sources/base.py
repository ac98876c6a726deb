"""Base class for torrent sources."""

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from urllib.parse import quote

import requests

from ..errors import SourceError
from ..models import Category, Filter, LoadResult, Sort, SortDir

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
}
TIMEOUT = 15

TRACKERS = [
    "udp://tracker.opentrackr.org:1337/announce",
    "udp://open.stealth.si:80/announce",
    "udp://tracker.torrent.eu.org:451/announce",
    "udp://tracker.bittor.pw:1337/announce",
    "udp://public.popcorn-tracker.org:6969/announce",
    "udp://tracker.dler.org:6969/announce",
    "udp://exodus.desync.com:6969/announce",
    "udp://open.demonii.com:1337/announce",
]


def add_trackers(magnet: str) -> str:
    """Add public trackers to a magnet link if missing."""
    if not magnet or "&tr=" in magnet:
        return magnet
    tracker_params = "".join(f"&tr={quote(t, safe='')}" for t in TRACKERS)
    return magnet + tracker_params


def magnet_from_hash(info_hash: str, title: str) -> str:
    """Build a magnet link (with public trackers) from an info hash."""
    return add_trackers(f"magnet:?xt=urn:btih:{info_hash}&dn={quote(title)}")


def parse_size(size_str: str) -> int:
    """Parse size string like '1.5 GiB' to bytes."""
    size_str = size_str.upper().strip()
    match = re.match(r"([\d.]+)\s*(B|KB|MB|GB|TB|KIB|MIB|GIB|TIB|BYTES)", size_str)
    if not match:
        return 0
    value = float(match.group(1))
    unit = match.group(2)
    multipliers = {
        "B": 1,
        "BYTES": 1,
        "KB": 1024,
        "KIB": 1024,
        "MB": 1024**2,
        "MIB": 1024**2,
        "GB": 1024**3,
        "GIB": 1024**3,
        "TB": 1024**4,
        "TIB": 1024**4,
    }
    return int(value * multipliers.get(unit, 1))


def parse_int(text: str | None) -> int:
    """Parse a count, treating anything non-numeric as zero."""
    text = (text or "").strip().replace(",", "")
    return int(text) if text.isdigit() else 0


class Source(ABC):
    """Abstract base class for torrent sources.

    Subclasses implement the blocking ``fetch``; ``load`` runs it off the
    event loop and turns transport and parse failures into ``SourceError``.
    """

    name: str = "Unknown"

    async def load(
        self,
        query: str,
        category: Category,
        filter: Filter,
        sort: Sort,
        sort_dir: SortDir,
        page: int,
    ) -> LoadResult:
        """Load one page of results."""
        logger.debug(
            "%s: query=%r category=%s filter=%s sort=%s %s page=%d",
            self.name, query, category.code, filter.label, sort.label, sort_dir.value, page,
        )
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                None, self.fetch, query, category, filter, sort, sort_dir, page
            )
        except SourceError:
            raise
        except requests.RequestException as e:
            raise SourceError(f"{self.name}: request failed\n{e}") from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise SourceError(f"{self.name}: could not parse response\n{e}") from e

    @abstractmethod
    def fetch(
        self,
        query: str,
        category: Category,
        filter: Filter,
        sort: Sort,
        sort_dir: SortDir,
        page: int,
    ) -> LoadResult:
        """Blocking fetch and parse of one page of results."""
        ...

    def _get(self, url: str, **kwargs) -> requests.Response:
        """Make a GET request with standard headers."""
        resp = requests.get(url, headers=HEADERS, timeout=TIMEOUT, **kwargs)
        resp.raise_for_status()
        return resp
