"""Download client selection popup. Confirming downloads with the new client."""

from core.state import AppState, LoadKind, Mode

from .base import ListPopup


class ClientsPopup(ListPopup):
    title = "Download Client"
    close_keys = ("escape", "d", "q")

    def current(self, state: AppState) -> int | None:
        names = self.table.items
        return names.index(state.client) if state.client in names else None

    def confirm(self, state: AppState, index: int) -> None:
        state.client = self.table.items[index]
        state.mode = Mode.loading(LoadKind.DOWNLOADING)
