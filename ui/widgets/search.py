"""Search bar: the query input plus the active source, category, filter and sort."""

from rich.color import Color as RichColor
from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.color import Color
from textual.containers import Horizontal
from textual.widgets import Input, Static

from core.models import find_category
from core.state import AppState, KeyPress, LoadKind, Mode, ModeKind

from ..themes import get_theme

# Editing keys mapped to Input actions
EDIT_ACTIONS = {
    "backspace": "action_delete_left",
    "delete": "action_delete_right",
    "left": "action_cursor_left",
    "right": "action_cursor_right",
    "home": "action_home",
    "ctrl+a": "action_home",
    "end": "action_end",
    "ctrl+e": "action_end",
    "ctrl+w": "action_delete_left_word",
    "ctrl+u": "action_delete_left_all",
}


class SearchInput(Input, inherit_bindings=False):
    """Query field. Shows a cursor while focused but never edits itself.

    Keys bubble up to the screen and come back as Input actions from
    ``SearchWidget``.
    """

    async def _on_key(self, event: events.Key) -> None:
        event.prevent_default()


class SearchBar(Horizontal):
    """The widget ``SearchWidget`` draws into."""

    def compose(self) -> ComposeResult:
        yield SearchInput(placeholder="Press / to search", select_on_focus=False, id="search-input")
        yield Static(id="search-status")

    @property
    def field(self) -> SearchInput:
        return self.query_one(SearchInput)

    def focus_field(self, focused: bool) -> None:
        field = self.field
        if focused and self.screen.focused is not field:
            self.screen.set_focus(field)
        elif not focused and self.screen.focused is field:
            self.screen.set_focus(None)

    def show_status(self, status: Text, title: str, border: str) -> None:
        self.query_one("#search-status", Static).update(status)
        self.border_title = title
        self.styles.border = ("round", Color.from_rich_color(RichColor.parse(border)))


class SearchWidget:
    def __init__(self):
        self.field: Input | None = None
        self.editing = False

    def _begin(self, state: AppState) -> None:
        """Start an edit from the committed query."""
        self.field.value = state.query
        self.field.cursor_position = len(state.query)
        self.editing = True

    def draw(self, target, state: AppState, area) -> None:
        theme = get_theme(state.theme)
        self.field = target.field
        focused = state.mode.kind is ModeKind.SEARCH

        if focused:
            if not self.editing:
                self._begin(state)
        else:
            self.editing = False
            self.field.value = state.query

        category = find_category(state.category.code) or state.category
        arrow = "▲" if state.ascending else "▼"
        status = Text.assemble(
            (category.name, category.color),
            " · ",
            state.filter.label,
            " · ",
            f"{state.sort.label} {arrow}",
        )

        title = f"Search · {state.source}"
        if state.mode.kind is ModeKind.LOADING:
            title = f"{state.mode.load.value}…"
        target.focus_field(focused)
        target.show_status(status, title, theme.border_focused if focused else theme.border)

    def handle_input(self, state: AppState, key: KeyPress) -> None:
        k = key.key
        if k == "escape":
            self.editing = False
            state.mode = Mode.NORMAL
            return

        field = self.field
        if field is None:
            return
        if not self.editing:
            self._begin(state)

        if k == "enter":
            self.editing = False
            state.query = field.value
            state.page = 1
            state.mode = Mode.loading(LoadKind.SEARCHING)
        elif k in EDIT_ACTIONS:
            getattr(field, EDIT_ACTIONS[k])()
        elif len(k) == 1 and k.isprintable():
            field.insert_text_at_cursor(k)

    @classmethod
    def get_help(cls) -> list[tuple[str, str]] | None:
        return [
            ("Enter", "Confirm"),
            ("Esc", "Stop"),
            ("←, →", "Move cursor"),
            ("Home, Ctrl-a", "Start of line"),
            ("End, Ctrl-e", "End of line"),
            ("Backspace", "Delete left"),
            ("Del", "Delete right"),
            ("Ctrl-w", "Delete word"),
            ("Ctrl-u", "Delete to start"),
        ]
