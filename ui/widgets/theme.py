"""Theme popup."""

from core.state import AppState, Mode

from ..themes import THEMES
from .base import ListPopup


class ThemePopup(ListPopup):
    title = "Theme"
    close_keys = ("escape", "t", "q")
    width = 32

    def __init__(self):
        super().__init__([t.name for t in THEMES])

    def current(self, state: AppState) -> int | None:
        names = self.table.items
        return names.index(state.theme) if state.theme in names else None

    def confirm(self, state: AppState, index: int) -> None:
        state.theme = self.table.items[index]
        state.mode = Mode.NORMAL
