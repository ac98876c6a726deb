"""Main screen for nyaa."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Static

from core.state import AppState, KeyPress

from ..widgets.search import SearchBar


def to_keypress(event: events.Key) -> KeyPress:
    """Printable keys become their character, everything else textual's key name."""
    if event.is_printable and event.character:
        return KeyPress(event.character)
    return KeyPress(event.key)


class MainScreen(Screen):
    """Search bar over the results table, with one overlay layer for popups."""

    def compose(self) -> ComposeResult:
        yield SearchBar(id="search-bar")
        yield Static(id="results")
        with Container(id="overlay"):
            yield Static(id="popup")

    def on_key(self, event: events.Key) -> None:
        """Forward every key to the orchestrator."""
        event.stop()
        event.prevent_default()
        self.app.push_key(to_keypress(event))

    def render_frame(self, state: AppState, surfaces) -> None:
        """Draw the search bar, the results, then the active popup on top."""
        search_bar = self.query_one(SearchBar)
        surfaces.search.draw(search_bar, state, search_bar.size)

        results = self.query_one("#results", Static)
        surfaces.results.draw(results, state, results.size)

        overlay = self.query_one("#overlay", Container)
        popup = surfaces.popup_for(state.mode)
        if popup is None:
            overlay.display = False
            return
        popup.draw(self.query_one("#popup", Static), state, self.size)
        overlay.display = True
