"""nyaa.si source via the HTML listing."""

import math
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from ..models import Category, Filter, Item, LoadResult, Sort, SortDir
from .base import Source, add_trackers, parse_int, parse_size

RESULTS_PER_PAGE = 75


class NyaaHtmlSource(Source):
    """nyaa.si listing page scraper. Supports paging and server-side sort."""

    name = "Nyaa"

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
                "q": query,
                "c": category.code,
                "f": filter.value,
                "p": page,
                "s": sort.value,
                "o": sort_dir.value,
            },
        )
        return self.parse(resp.text)

    def parse(self, html: str) -> LoadResult:
        """Parse a listing page."""
        soup = BeautifulSoup(html, "html.parser")

        items = []
        for row in soup.select("table.torrent-list tbody tr"):
            item = self._parse_row(row)
            if item:
                items.append(item)

        total = self._total_results(soup)
        if total is None:
            total = len(items)
            last_page = self._last_page_from_pagination(soup)
        else:
            last_page = max(1, math.ceil(total / RESULTS_PER_PAGE))
        return LoadResult(items=items, last_page=last_page, total_results=total)

    def _parse_row(self, row) -> Item | None:
        cols = row.find_all("td")
        if len(cols) < 8:
            return None

        title_link = None
        for a in cols[1].find_all("a"):
            if "comments" in (a.get("class") or []):
                continue
            if a.get("href", "").startswith("/view/"):
                title_link = a
        if not title_link:
            return None

        href = title_link["href"]
        id_match = re.search(r"/view/(\d+)", href)
        item_id = int(id_match.group(1)) if id_match else 0
        title = title_link.get("title") or title_link.get_text(strip=True)

        category = ""
        cat_link = cols[0].find("a")
        if cat_link:
            cat_match = re.search(r"c=(\d+_\d+)", cat_link.get("href", ""))
            if cat_match:
                category = cat_match.group(1)

        torrent_link = None
        magnet_link = None
        for a in cols[2].find_all("a"):
            link = a.get("href", "")
            if link.startswith("magnet:"):
                magnet_link = add_trackers(link)
            elif link.endswith(".torrent"):
                torrent_link = urljoin(self.base_url, link)

        size = cols[3].get_text(strip=True)
        classes = row.get("class") or []

        return Item(
            id=item_id,
            title=title,
            seeders=parse_int(cols[5].get_text()),
            leechers=parse_int(cols[6].get_text()),
            downloads=parse_int(cols[7].get_text()),
            bytes=parse_size(size),
            size=size,
            date=cols[4].get_text(strip=True),
            timestamp=parse_int(cols[4].get("data-timestamp")),
            category=category or "0_0",
            torrent_link=torrent_link,
            magnet_link=magnet_link,
            post_link=urljoin(self.base_url, href),
            file_name=f"{item_id}.torrent",
            trusted="success" in classes,
            remake="danger" in classes,
            source=self.name,
        )

    @staticmethod
    def _total_results(soup: BeautifulSoup) -> int | None:
        info = soup.select_one(".pagination-page-info")
        if info:
            match = re.search(r"out of (\d+) results", info.get_text())
            if match:
                return int(match.group(1))
        return None

    @staticmethod
    def _last_page_from_pagination(soup: BeautifulSoup) -> int:
        pages = [
            int(a.get_text(strip=True))
            for a in soup.select("ul.pagination li a")
            if a.get_text(strip=True).isdigit()
        ]
        return max(pages, default=1)
