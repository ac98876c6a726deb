"""Source selection popup."""

from core.state import AppState, LoadKind, Mode

from .base import ListPopup


class SourcesPopup(ListPopup):
    title = "Source"
    close_keys = ("escape", "ctrl+s", "q")

    def current(self, state: AppState) -> int | None:
        names = self.table.items
        return names.index(state.source) if state.source in names else None

    def confirm(self, state: AppState, index: int) -> None:
        state.source = self.table.items[index]
        state.page = 1
        state.mode = Mode.loading(LoadKind.SEARCHING)
