"""Filter popup."""

from core.models import Filter
from core.state import AppState, LoadKind, Mode

from .base import ListPopup

FILTERS = list(Filter)


class FilterPopup(ListPopup):
    title = "Filter"
    close_keys = ("escape", "f", "q")

    def __init__(self):
        super().__init__([f.label for f in FILTERS])

    def current(self, state: AppState) -> int | None:
        return FILTERS.index(state.filter)

    def confirm(self, state: AppState, index: int) -> None:
        state.filter = FILTERS[index]
        state.page = 1
        state.mode = Mode.loading(LoadKind.FILTERING)
