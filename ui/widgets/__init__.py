"""Surfaces: the search bar, the results table and one popup per mode."""

from core.state import Mode, ModeKind

from .category import CategoryPopup
from .clients import ClientsPopup
from .error import ErrorPopup
from .filter import FilterPopup
from .help import HelpPopup
from .page import PagePopup
from .results import ResultsWidget
from .search import SearchWidget
from .sort import SortPopup
from .sources import SourcesPopup
from .theme import ThemePopup

# Modes drawn without an overlay
BASE_MODES = (ModeKind.NORMAL, ModeKind.SEARCH, ModeKind.LOADING)


class Surfaces:
    """One instance of every surface, looked up by mode."""

    def __init__(self, source_names: list[str], client_names: list[str]):
        self.search = SearchWidget()
        self.results = ResultsWidget()
        self.category = CategoryPopup()
        self.sort = SortPopup()
        self.filter = FilterPopup()
        self.theme = ThemePopup()
        self.sources = SourcesPopup(source_names)
        self.clients = ClientsPopup(client_names)
        self.error = ErrorPopup()
        self.page = PagePopup()
        self.help = HelpPopup()

    def by_mode(self) -> dict:
        return {
            ModeKind.NORMAL: self.results,
            ModeKind.SEARCH: self.search,
            ModeKind.CATEGORY: self.category,
            ModeKind.SORT: self.sort,
            ModeKind.FILTER: self.filter,
            ModeKind.THEME: self.theme,
            ModeKind.SOURCES: self.sources,
            ModeKind.CLIENTS: self.clients,
            ModeKind.ERROR: self.error,
            ModeKind.PAGE: self.page,
            ModeKind.HELP: self.help,
        }

    def popup_for(self, mode: Mode):
        """The overlay to draw on top of the base surfaces, if any."""
        if mode.kind in BASE_MODES:
            return None
        return self.by_mode()[mode.kind]


__all__ = [
    "Surfaces",
    "SearchWidget",
    "ResultsWidget",
    "CategoryPopup",
    "SortPopup",
    "FilterPopup",
    "ThemePopup",
    "SourcesPopup",
    "ClientsPopup",
    "ErrorPopup",
    "PagePopup",
    "HelpPopup",
]
