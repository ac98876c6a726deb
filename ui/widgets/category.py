"""Category popup."""

from core.models import CATEGORIES
from core.state import AppState, LoadKind, Mode

from .base import ListPopup


class CategoryPopup(ListPopup):
    title = "Category"
    close_keys = ("escape", "c", "q")
    width = 36

    def __init__(self):
        super().__init__(
            [c.name if c.is_major else f"  {c.name}" for c in CATEGORIES]
        )

    def current(self, state: AppState) -> int | None:
        return CATEGORIES.index(state.category) if state.category in CATEGORIES else None

    def confirm(self, state: AppState, index: int) -> None:
        state.category = CATEGORIES[index]
        state.page = 1
        state.mode = Mode.loading(LoadKind.CATEGORIZING)
