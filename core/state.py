"""Application state and the mode machine's value types."""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from .config import AppConfig
from .models import ALL_CATEGORIES, Category, Filter, Item, LoadResult, Sort, SortDir, sort_items


class LoadKind(Enum):
    """The backend operation pending while in Loading mode."""

    SEARCHING = "Searching"
    SORTING = "Sorting"
    FILTERING = "Filtering"
    CATEGORIZING = "Categorizing"
    DOWNLOADING = "Downloading"


class ModeKind(Enum):
    NORMAL = "Normal"
    SEARCH = "Search"
    CATEGORY = "Category"
    SORT = "Sort"
    FILTER = "Filter"
    THEME = "Theme"
    SOURCES = "Sources"
    CLIENTS = "Clients"
    LOADING = "Loading"
    ERROR = "Error"
    PAGE = "Page"
    HELP = "Help"


@dataclass(frozen=True)
class Mode:
    """The active surface. ``load`` is set only for Loading, ``direction`` only for Sort."""

    kind: ModeKind
    load: LoadKind | None = None
    direction: SortDir | None = None

    @classmethod
    def loading(cls, load: LoadKind) -> "Mode":
        return cls(ModeKind.LOADING, load=load)

    @classmethod
    def sort(cls, direction: SortDir) -> "Mode":
        return cls(ModeKind.SORT, direction=direction)

    def __str__(self) -> str:
        return self.kind.value


Mode.NORMAL = Mode(ModeKind.NORMAL)
Mode.SEARCH = Mode(ModeKind.SEARCH)
Mode.CATEGORY = Mode(ModeKind.CATEGORY)
Mode.FILTER = Mode(ModeKind.FILTER)
Mode.THEME = Mode(ModeKind.THEME)
Mode.SOURCES = Mode(ModeKind.SOURCES)
Mode.CLIENTS = Mode(ModeKind.CLIENTS)
Mode.ERROR = Mode(ModeKind.ERROR)
Mode.PAGE = Mode(ModeKind.PAGE)
Mode.HELP = Mode(ModeKind.HELP)


@dataclass(frozen=True)
class KeyPress:
    """A key event: the typed character when printable, else textual's key name."""

    key: str


@dataclass
class AppState:
    """Everything the orchestrator and the surfaces share."""

    mode: Mode = field(default_factory=lambda: Mode.loading(LoadKind.SEARCHING))
    source: str = "Nyaa"
    client: str = "Command"
    theme: str = "Default"
    items: list[Item] = field(default_factory=list)
    cursor: int | None = None
    page: int = 1
    last_page: int = 1
    total_results: int = 0
    category: Category = ALL_CATEGORIES
    filter: Filter = Filter.NO_FILTER
    sort: Sort = Sort.DATE
    ascending: bool = False
    query: str = ""
    errors: deque[str] = field(default_factory=deque)
    config: AppConfig = field(default_factory=AppConfig)
    should_quit: bool = False

    @property
    def sort_dir(self) -> SortDir:
        return SortDir.ASC if self.ascending else SortDir.DESC

    def quit(self) -> None:
        self.should_quit = True

    def show_error(self, error) -> None:
        """Queue a message for the error popup. Blank messages get a placeholder."""
        message = str(error).strip()
        if not message:
            message = type(error).__name__ if isinstance(error, Exception) else "Unknown error"
        self.errors.append(message)

    def selected_item(self) -> Item | None:
        """The highlighted result, if any."""
        if self.cursor is None or not 0 <= self.cursor < len(self.items):
            return None
        return self.items[self.cursor]

    def apply_result(self, result: LoadResult) -> None:
        """Replace the result set with a successful load."""
        self.items = sort_items(result.items, self.sort, self.ascending)
        self.last_page = max(1, result.last_page)
        self.total_results = result.total_results
        self.page = min(max(1, self.page), self.last_page)
        self.cursor = 0 if self.items else None
