"""Help popup listing the key bindings of the mode it was opened from."""

from rich.table import Table

from core.state import AppState, KeyPress, Mode

from ..themes import get_theme
from .base import SelectTable, popup_panel


class HelpPopup:
    def __init__(self):
        self.table = SelectTable([])
        self.prev_mode: Mode = Mode.NORMAL

    def with_items(self, items: list[tuple[str, str]], mode: Mode) -> None:
        self.table = SelectTable(items)
        self.prev_mode = mode

    def draw(self, target, state: AppState, area) -> None:
        theme = get_theme(state.theme)
        grid = Table.grid(padding=(0, 2))
        grid.add_column(style=theme.trusted, no_wrap=True)
        grid.add_column()
        for i, (key, action) in enumerate(self.table.items):
            style = f"on {theme.hl_bg}" if i == self.table.selected else ""
            grid.add_row(key, action, style=style)
        target.update(popup_panel(grid, f"Help: {self.prev_mode}", theme, 40))

    def handle_input(self, state: AppState, key: KeyPress) -> None:
        k = key.key
        if k in ("escape", "q", "?", "f1"):
            state.mode = self.prev_mode
        elif k in ("j", "down"):
            self.table.next_wrap(1)
        elif k in ("k", "up"):
            self.table.next_wrap(-1)
        elif k == "G":
            self.table.select(len(self.table.items) - 1)
        elif k == "g":
            self.table.select(0)

    @classmethod
    def get_help(cls) -> list[tuple[str, str]] | None:
        return None
