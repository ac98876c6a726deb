"""Error popup. Shows one queued message at a time."""

from rich.text import Text

from core.state import AppState, KeyPress, Mode

from ..themes import get_theme
from .base import popup_panel


class ErrorPopup:
    def __init__(self):
        self.message = ""

    def with_error(self, message: str) -> None:
        self.message = message

    def draw(self, target, state: AppState, area) -> None:
        theme = get_theme(state.theme)
        longest = max((len(line) for line in self.message.splitlines()), default=0)
        width = max(34, longest + 4)
        if area is not None and getattr(area, "width", 0):
            width = min(width, max(10, area.width - 4))
        target.update(
            popup_panel(
                Text(self.message, style=theme.remake),
                "Error: Press any key to dismiss",
                theme,
                width,
                border=theme.remake,
            )
        )

    def handle_input(self, state: AppState, key: KeyPress) -> None:
        # Any key dismisses; the next queued message is shown on the next frame
        self.message = ""
        if not state.errors:
            state.mode = Mode.NORMAL

    @classmethod
    def get_help(cls) -> list[tuple[str, str]] | None:
        return None
