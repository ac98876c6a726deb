"""Goto-page popup."""

from rich.text import Text

from core.state import AppState, KeyPress, LoadKind, Mode

from ..themes import get_theme
from .base import popup_panel


class PagePopup:
    def __init__(self):
        self.input = ""

    def draw(self, target, state: AppState, area) -> None:
        theme = get_theme(state.theme)
        body = Text(self.input)
        body.append(" ", style="reverse")
        target.update(popup_panel(body, f"Goto Page (1-{state.last_page})", theme, 30))

    def handle_input(self, state: AppState, key: KeyPress) -> None:
        k = key.key
        if k in ("escape", "q"):
            self.input = ""
            state.mode = Mode.NORMAL
        elif k.isdigit() and len(k) == 1:
            self.input += k
        elif k == "backspace":
            self.input = self.input[:-1]
        elif k == "enter" and self.input:
            state.page = max(1, min(int(self.input), state.last_page))
            self.input = ""
            state.mode = Mode.loading(LoadKind.SEARCHING)

    @classmethod
    def get_help(cls) -> list[tuple[str, str]] | None:
        return [
            ("Enter", "Confirm"),
            ("Esc, q", "Close"),
            ("0-9", "Page number"),
            ("Backspace", "Delete"),
        ]
