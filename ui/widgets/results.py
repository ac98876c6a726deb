"""Results table, the surface for Normal mode."""

from rich.table import Table
from rich.text import Text

from core.models import SortDir, find_category
from core.state import AppState, KeyPress, LoadKind, Mode

from ..themes import get_theme
from .base import popup_panel

PAGE_JUMP = 10

MODE_KEYS = {
    "/": Mode.SEARCH,
    "i": Mode.SEARCH,
    "c": Mode.CATEGORY,
    "s": Mode.sort(SortDir.DESC),
    "S": Mode.sort(SortDir.ASC),
    "f": Mode.FILTER,
    "t": Mode.THEME,
    "p": Mode.PAGE,
    "ctrl+s": Mode.SOURCES,
    "d": Mode.CLIENTS,
}


def format_number(n: int) -> str:
    """Shorten large counts."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 10_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


class ResultsWidget:
    def __init__(self):
        self.offset = 0

    def _visible_rows(self, area) -> int:
        # borders plus the header row
        return max(1, (getattr(area, "height", 0) or 0) - 3)

    def draw(self, target, state: AppState, area) -> None:
        theme = get_theme(state.theme)
        rows = self._visible_rows(area)
        cursor = state.cursor or 0
        if cursor < self.offset:
            self.offset = cursor
        elif cursor >= self.offset + rows:
            self.offset = cursor - rows + 1
        self.offset = max(0, min(self.offset, max(0, len(state.items) - rows)))

        table = Table(box=None, expand=True, header_style="bold", pad_edge=False)
        table.add_column("Cat", width=5, no_wrap=True)
        table.add_column("Name", ratio=1, no_wrap=True, overflow="ellipsis")
        table.add_column("Size", justify="right", width=10, no_wrap=True)
        table.add_column("Date", width=16, no_wrap=True)
        table.add_column("S", justify="right", width=6, no_wrap=True)
        table.add_column("L", justify="right", width=6, no_wrap=True)
        table.add_column("D", justify="right", width=6, no_wrap=True)

        for i, item in enumerate(state.items[self.offset : self.offset + rows], start=self.offset):
            category = find_category(item.category)
            icon = Text(category.icon, style=category.color) if category else Text("")
            if item.trusted:
                title = Text(item.title, style=theme.trusted)
            elif item.remake:
                title = Text(item.title, style=theme.remake)
            else:
                title = Text(item.title)
            table.add_row(
                icon,
                title,
                item.size_formatted,
                item.date,
                Text(format_number(item.seeders), style="green"),
                Text(format_number(item.leechers), style="red"),
                format_number(item.downloads),
                style=f"on {theme.hl_bg}" if i == state.cursor else "",
            )

        title = f"Results {state.page}/{state.last_page} ({state.total_results} total)"
        target.update(popup_panel(table, title, theme, getattr(area, "width", None) or None, border=theme.border))

    def handle_input(self, state: AppState, key: KeyPress) -> None:
        k = key.key
        if k == "q":
            state.quit()
        elif k in ("j", "down"):
            self._move(state, 1)
        elif k in ("k", "up"):
            self._move(state, -1)
        elif k in ("J", "pagedown", "ctrl+d"):
            self._move(state, PAGE_JUMP)
        elif k in ("K", "pageup", "ctrl+u"):
            self._move(state, -PAGE_JUMP)
        elif k in ("g", "home"):
            self._select(state, 0)
        elif k in ("G", "end"):
            self._select(state, len(state.items) - 1)
        elif k == "enter":
            state.mode = Mode.loading(LoadKind.DOWNLOADING)
        elif k == "r":
            state.mode = Mode.loading(LoadKind.SEARCHING)
        elif k in ("n", "l", "right"):
            if state.page < state.last_page:
                state.page += 1
                state.mode = Mode.loading(LoadKind.SEARCHING)
        elif k in ("b", "h", "left"):
            if state.page > 1:
                state.page -= 1
                state.mode = Mode.loading(LoadKind.SEARCHING)
        elif k in MODE_KEYS:
            state.mode = MODE_KEYS[k]

    def _move(self, state: AppState, delta: int) -> None:
        if state.cursor is None:
            self._select(state, 0)
        else:
            self._select(state, state.cursor + delta)

    def _select(self, state: AppState, index: int) -> None:
        if not state.items:
            state.cursor = None
            return
        state.cursor = max(0, min(index, len(state.items) - 1))

    @classmethod
    def get_help(cls) -> list[tuple[str, str]] | None:
        return [
            ("Enter", "Download"),
            ("q", "Quit"),
            ("/, i", "Search"),
            ("c", "Categories"),
            ("f", "Filters"),
            ("s", "Sort"),
            ("S", "Sort reverse"),
            ("t", "Themes"),
            ("p", "Goto page"),
            ("n, l, →", "Next page"),
            ("b, h, ←", "Previous page"),
            ("r", "Reload"),
            ("Ctrl-s", "Sources"),
            ("d", "Download client"),
            ("j, ↓", "Down"),
            ("k, ↑", "Up"),
            ("J, K", "Down/up 10"),
            ("g", "Top"),
            ("G", "Bottom"),
            ("?, F1", "Help"),
        ]
