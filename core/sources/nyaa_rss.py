"""nyaa.si source via the RSS feed."""

import re
import xml.etree.ElementTree as ET
from email.utils import parsedate_to_datetime

from ..errors import SourceError
from ..models import Category, Filter, Item, LoadResult, Sort, SortDir
from .base import Source, magnet_from_hash, parse_int, parse_size

NYAA_NS = {"nyaa": "https://nyaa.si/xmlns/nyaa"}


class NyaaRssSource(Source):
    """nyaa.si RSS feed. One page only, sorted locally."""

    name = "Nyaa RSS"

    def __init__(self, base_url: str = "https://nyaa.si"):
        self.base_url = base_url.rstrip("/")

    def fetch(
        self,
        query: str,
        category: Category,
        filter: Filter,
        sort: Sort,
        sort_dir: SortDir,
        page: int,
    ) -> LoadResult:
        resp = self._get(
            self.base_url + "/",
            params={
                "page": "rss",
                "q": query,
                "c": category.code,
                "f": filter.value,
                "m": "",
            },
        )
        return self.parse(resp.content)

    def parse(self, content: bytes | str) -> LoadResult:
        """Parse an RSS document."""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise SourceError(f"{self.name}: invalid RSS feed\n{e}") from e

        items = []
        for node in root.iter("item"):
            item = self._parse_item(node)
            if item:
                items.append(item)
        return LoadResult(items=items, last_page=1, total_results=len(items))

    def _parse_item(self, node: ET.Element) -> Item | None:
        title = node.findtext("title")
        link = node.findtext("link")
        if not title or not link:
            return None

        def ext(key: str) -> str:
            return (node.findtext(f"nyaa:{key}", default="", namespaces=NYAA_NS) or "").strip()

        post_link = node.findtext("guid") or ""
        id_match = re.search(r"/view/(\d+)", post_link) or re.search(r"/(\d+)\.torrent", link)
        item_id = int(id_match.group(1)) if id_match else 0

        timestamp = 0
        date = node.findtext("pubDate") or ""
        if date:
            try:
                parsed = parsedate_to_datetime(date)
            except (TypeError, ValueError):
                parsed = None
            if parsed:
                timestamp = int(parsed.timestamp())
                date = parsed.strftime("%Y-%m-%d %H:%M")

        info_hash = ext("infoHash")
        size = ext("size")
        return Item(
            id=item_id,
            title=title,
            seeders=parse_int(ext("seeders")),
            leechers=parse_int(ext("leechers")),
            downloads=parse_int(ext("downloads")),
            bytes=parse_size(size),
            size=size,
            date=date,
            timestamp=timestamp,
            category=ext("categoryId") or "0_0",
            torrent_link=link,
            magnet_link=magnet_from_hash(info_hash, title) if info_hash else None,
            post_link=post_link or None,
            file_name=f"{item_id}.torrent",
            trusted=ext("trusted") == "Yes",
            remake=ext("remake") == "Yes",
            source=self.name,
        )
