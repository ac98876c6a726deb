"""Shared pieces for surfaces: the list-selection table and popup framing."""

from rich import box
from rich.panel import Panel
from rich.table import Table

from core.state import AppState, KeyPress, Mode

from ..themes import Theme, get_theme


class SelectTable:
    """A list of rows with one highlighted index."""

    def __init__(self, items: list):
        self.items = list(items)
        self.selected = 0

    def next_wrap(self, delta: int) -> None:
        if self.items:
            self.selected = (self.selected + delta) % len(self.items)

    def select(self, index: int) -> None:
        if self.items:
            self.selected = max(0, min(index, len(self.items) - 1))


def popup_panel(renderable, title: str, theme: Theme, width: int, border: str | None = None) -> Panel:
    """Frame a popup body."""
    return Panel(
        renderable,
        title=title,
        title_align="left",
        width=width,
        box=box.ROUNDED,
        border_style=border or theme.border_focused,
        style=f"{theme.fg} on {theme.bg}",
    )


class ListPopup:
    """A popup that picks one entry from a fixed list.

    Subclasses set ``title``, ``close_keys`` and implement ``confirm`` and
    ``current``.
    """

    title = ""
    close_keys: tuple[str, ...] = ("escape", "q")
    width = 30

    def __init__(self, labels: list[str]):
        self.table = SelectTable(labels)

    def current(self, state: AppState) -> int | None:
        """Index of the entry currently in effect, marked in the list."""
        return None

    def confirm(self, state: AppState, index: int) -> None:
        raise NotImplementedError

    def get_title(self, state: AppState) -> str:
        return self.title

    def draw(self, target, state: AppState, area) -> None:
        theme = get_theme(state.theme)
        current = self.current(state)
        grid = Table.grid(expand=True)
        grid.add_column()
        for i, label in enumerate(self.table.items):
            marker = "• " if i == current else "  "
            style = f"on {theme.hl_bg}" if i == self.table.selected else ""
            grid.add_row(f"{marker}{label}", style=style)
        target.update(popup_panel(grid, self.get_title(state), theme, self.width))

    def handle_input(self, state: AppState, key: KeyPress) -> None:
        k = key.key
        if k in self.close_keys:
            state.mode = Mode.NORMAL
        elif k in ("j", "down"):
            self.table.next_wrap(1)
        elif k in ("k", "up"):
            self.table.next_wrap(-1)
        elif k in ("G", "end"):
            self.table.select(len(self.table.items) - 1)
        elif k in ("g", "home"):
            self.table.select(0)
        elif k == "enter" and self.table.items:
            self.confirm(state, self.table.selected)

    @classmethod
    def get_help(cls) -> list[tuple[str, str]] | None:
        close = ", ".join(_key_label(k) for k in cls.close_keys)
        return [
            ("Enter", "Confirm"),
            (close, "Close"),
            ("j, ↓", "Down"),
            ("k, ↑", "Up"),
            ("g", "Top"),
            ("G", "Bottom"),
        ]


def _key_label(key: str) -> str:
    if key == "escape":
        return "Esc"
    if key.startswith("ctrl+"):
        return "Ctrl-" + key[5:]
    return key
