"""Data models for nyaa."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Item:
    """A single torrent listing returned by a source."""

    id: int
    title: str
    seeders: int
    leechers: int
    downloads: int
    bytes: int
    source: str
    category: str = "0_0"
    size: str = ""
    date: str = ""
    timestamp: int = 0
    torrent_link: str | None = None
    magnet_link: str | None = None
    post_link: str | None = None
    file_name: str | None = None
    trusted: bool = False
    remake: bool = False

    @property
    def size_formatted(self) -> str:
        """Size as reported by the source, or computed from bytes."""
        return self.size or format_size(self.bytes)

    def link(self, use_magnet: bool = True) -> str | None:
        """Preferred download link for this item."""
        if use_magnet:
            return self.magnet_link or self.torrent_link
        return self.torrent_link or self.magnet_link


def format_size(size_bytes: float) -> str:
    """Format bytes to human-readable size."""
    for unit in ["B", "KiB", "MiB", "GiB", "TiB"]:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} PiB"


@dataclass(frozen=True)
class Category:
    """A listing category. Codes follow nyaa's ``major_minor`` scheme."""

    name: str
    code: str
    icon: str = ""
    color: str = "white"

    @property
    def is_major(self) -> bool:
        return self.code.endswith("_0")


CATEGORIES = [
    Category("All Categories", "0_0"),
    Category("Anime", "1_0", "Anim", "magenta"),
    Category("Anime Music Video", "1_1", "AMV", "magenta"),
    Category("English-translated", "1_2", "Subs", "magenta"),
    Category("Non-English-translated", "1_3", "Subs", "green"),
    Category("Raw", "1_4", "Raw", "grey62"),
    Category("Audio", "2_0", "Audio", "red"),
    Category("Lossless", "2_1", "Lossless", "red"),
    Category("Lossy", "2_2", "Lossy", "red"),
    Category("Literature", "3_0", "Lit", "green"),
    Category("English-translated", "3_1", "Lit", "green"),
    Category("Non-English-translated", "3_2", "Lit", "yellow"),
    Category("Raw", "3_3", "Lit", "grey62"),
    Category("Live Action", "4_0", "Live", "yellow"),
    Category("English-translated", "4_1", "Live", "yellow"),
    Category("Idol/Promotional Video", "4_2", "Idol", "yellow"),
    Category("Non-English-translated", "4_3", "Live", "yellow"),
    Category("Raw", "4_4", "Live", "grey62"),
    Category("Pictures", "5_0", "Pics", "cyan"),
    Category("Graphics", "5_1", "Gfx", "cyan"),
    Category("Photos", "5_2", "Photo", "cyan"),
    Category("Software", "6_0", "Soft", "blue"),
    Category("Applications", "6_1", "Apps", "blue"),
    Category("Games", "6_2", "Game", "blue"),
]

ALL_CATEGORIES = CATEGORIES[0]


def find_category(value: str) -> Category | None:
    """Look up a category by code (``1_2``) or display name."""
    for category in CATEGORIES:
        if category.code == value:
            return category
    lowered = value.lower()
    for category in CATEGORIES:
        if category.name.lower() == lowered:
            return category
    return None


class Filter(Enum):
    """Server-side listing filter. Values are nyaa's ``f`` parameter."""

    NO_FILTER = 0
    NO_REMAKES = 1
    TRUSTED_ONLY = 2
    BATCHES = 3

    @property
    def label(self) -> str:
        return _FILTER_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Filter":
        for item, name in _FILTER_LABELS.items():
            if name.lower() == label.lower():
                return item
        raise ValueError(f"Unknown filter: {label}")


_FILTER_LABELS = {
    Filter.NO_FILTER: "No Filter",
    Filter.NO_REMAKES: "No Remakes",
    Filter.TRUSTED_ONLY: "Trusted Only",
    Filter.BATCHES: "Batches",
}


class SortDir(Enum):
    DESC = "desc"
    ASC = "asc"


class Sort(Enum):
    """Sort keys. Values are nyaa's ``s`` parameter."""

    DATE = "id"
    DOWNLOADS = "downloads"
    SEEDERS = "seeders"
    LEECHERS = "leechers"
    SIZE = "size"

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_label(cls, label: str) -> "Sort":
        for item in cls:
            if item.label.lower() == label.lower():
                return item
        raise ValueError(f"Unknown sort: {label}")

    def key(self, item: Item):
        """Value of ``item`` this sort orders by."""
        if self is Sort.DATE:
            return (item.timestamp, item.id)
        if self is Sort.SIZE:
            return item.bytes
        return getattr(item, self.value)


def sort_items(items: list[Item], sort: Sort, ascending: bool = False) -> list[Item]:
    """Return ``items`` ordered by ``sort``. Ties keep their original order."""
    return sorted(items, key=sort.key, reverse=not ascending)


@dataclass
class LoadResult:
    """What a source returns for one page of results."""

    items: list[Item] = field(default_factory=list)
    last_page: int = 1
    total_results: int = 0
