"""Sort popup. The direction comes from the mode it was opened in."""

from core.models import Sort, SortDir
from core.state import AppState, LoadKind, Mode

from .base import ListPopup

SORTS = list(Sort)


class SortPopup(ListPopup):
    close_keys = ("escape", "s", "S", "q")

    def __init__(self):
        super().__init__([s.label for s in SORTS])

    def get_title(self, state: AppState) -> str:
        if state.mode.direction is SortDir.ASC:
            return "Sort Ascending"
        return "Sort Descending"

    def current(self, state: AppState) -> int | None:
        return SORTS.index(state.sort)

    def confirm(self, state: AppState, index: int) -> None:
        state.sort = SORTS[index]
        state.ascending = state.mode.direction is SortDir.ASC
        state.mode = Mode.loading(LoadKind.SORTING)
