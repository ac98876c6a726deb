"""nyaa TUI Application."""

import asyncio
import logging
from pathlib import Path

from textual.app import App

from core.clients import CLIENTS, Client
from core.config import ConfigManager, apply_config
from core.errors import ConfigError
from core.orchestrator import Orchestrator
from core.sources import SOURCES, Source
from core.state import AppState, KeyPress
from ui.screens import MainScreen
from ui.themes import THEMES
from ui.widgets import Surfaces

logger = logging.getLogger(__name__)


class NyaaApp(App):
    """nyaa TUI Application.

    Textual owns the terminal; the orchestrator runs as a single async
    worker that pulls keys from a queue filled by ``MainScreen``.
    """

    TITLE = "nyaa"
    CSS_PATH = Path(__file__).parent / "styles.tcss"
    ENABLE_COMMAND_PALETTE = False
    AUTO_FOCUS = None

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        sources: list[Source] | None = None,
        clients: list[Client] | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.config_manager = config_manager or ConfigManager()
        self.sources = sources if sources is not None else SOURCES
        self.clients = clients if clients is not None else CLIENTS
        self.app_state = AppState()
        self.surfaces = Surfaces(
            [s.name for s in self.sources],
            [c.name for c in self.clients],
        )
        self._keys: asyncio.Queue[KeyPress] = asyncio.Queue()
        self.orchestrator = Orchestrator(
            self.app_state,
            self.surfaces.by_mode(),
            self._keys.get,
            self.render_frame,
            sources=self.sources,
            clients=self.clients,
        )

    async def on_mount(self) -> None:
        """Apply the config, show the main screen and start the loop."""
        self.load_config()
        await self.push_screen(MainScreen())
        self.run_worker(self._drive(), name="orchestrator", exclusive=True)

    def load_config(self) -> None:
        """Apply the persisted config; a failure is queued and defaults are used."""
        state = self.app_state
        try:
            config = self.config_manager.load()
        except ConfigError as e:
            logger.warning("Config load failed: %s", e)
            state.show_error(e)
            config = state.config
        apply_config(
            config,
            state,
            [s.name for s in self.sources],
            [c.name for c in self.clients],
            [t.name for t in THEMES],
        )

    def push_key(self, key: KeyPress) -> None:
        self._keys.put_nowait(key)

    def render_frame(self, state: AppState) -> None:
        if isinstance(self.screen, MainScreen):
            self.screen.render_frame(state, self.surfaces)

    async def _drive(self) -> None:
        await self.orchestrator.run()
        self.exit()
