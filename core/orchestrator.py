"""The control loop: render, then either run the pending load or route one key."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

from .clients import CLIENTS, Client, get_client
from .errors import NyaaError
from .sources import SOURCES, Source, get_source
from .state import AppState, KeyPress, LoadKind, Mode, ModeKind

logger = logging.getLogger(__name__)

HelpEntries = list[tuple[str, str]]


class Surface(Protocol):
    """A screen or popup bound to one mode."""

    def draw(self, target: Any, state: AppState, area: Any) -> None: ...

    def handle_input(self, state: AppState, key: KeyPress) -> None: ...

    @classmethod
    def get_help(cls) -> HelpEntries | None: ...


def help_requested(state: AppState, key: KeyPress) -> bool:
    """Global help bindings: ``F1`` anywhere, ``?`` unless typing a query."""
    if key.key == "f1":
        return True
    return key.key == "?" and state.mode.kind is not ModeKind.SEARCH


class Orchestrator:
    """Drives one cooperative loop over the application state.

    ``next_key`` is awaited for input and ``render`` is called once per
    iteration with the state to draw. Only one backend call is ever in
    flight because each is awaited inside the iteration that started it.
    """

    def __init__(
        self,
        state: AppState,
        surfaces: Mapping[ModeKind, Surface],
        next_key: Callable[[], Awaitable[KeyPress]],
        render: Callable[[AppState], None],
        sources: list[Source] | None = None,
        clients: list[Client] | None = None,
    ):
        self.state = state
        self.surfaces = surfaces
        self.next_key = next_key
        self.render = render
        self.sources = sources if sources is not None else SOURCES
        self.clients = clients if clients is not None else CLIENTS

    async def run(self) -> None:
        """Loop until a surface requests quit."""
        while await self.step():
            pass
        logger.debug("Quit requested")

    async def step(self) -> bool:
        """Run one loop iteration. Returns False once quit was requested."""
        state = self.state
        if state.should_quit:
            return False

        self._check_errors()
        self._publish_help()
        self.render(state)

        if state.mode.kind is ModeKind.LOADING:
            load = state.mode.load
            # Leave Loading before awaiting so a redraw never repeats the load
            state.mode = Mode.NORMAL
            if load is LoadKind.DOWNLOADING:
                await self._download()
            else:
                await self._load(load)
            return True

        key = await self.next_key()
        previous = state.mode
        surface = self.surfaces.get(previous.kind)
        if surface is not None:
            surface.handle_input(state, key)
        if (
            state.mode.kind is not ModeKind.HELP
            and previous.kind not in (ModeKind.HELP, ModeKind.ERROR)
            and help_requested(state, key)
        ):
            state.mode = Mode.HELP
        return True

    def _check_errors(self) -> None:
        state = self.state
        if state.errors:
            state.mode = Mode.ERROR
        if state.mode.kind is not ModeKind.ERROR:
            return

        popup = self.surfaces.get(ModeKind.ERROR)
        if popup is None or popup.message:
            return
        if state.errors:
            popup.with_error(state.errors.popleft())
        else:
            state.mode = Mode.NORMAL

    def _publish_help(self) -> None:
        mode = self.state.mode
        surface = self.surfaces.get(mode.kind)
        popup = self.surfaces.get(ModeKind.HELP)
        if surface is None or popup is None:
            return
        entries = surface.get_help()
        if entries:
            popup.with_items(entries, mode)

    async def _load(self, load: LoadKind) -> None:
        state = self.state
        source = get_source(state.source, self.sources)
        if source is None:
            state.show_error(f"Unknown source {state.source!r}")
            return

        logger.debug("%s via %s", load.value, source.name)
        try:
            result = await source.load(
                state.query,
                state.category,
                state.filter,
                state.sort,
                state.sort_dir,
                state.page,
            )
        except NyaaError as e:
            logger.warning("%s failed: %s", load.value, e)
            state.show_error(e)
            return
        except Exception as e:
            logger.exception("%s: unexpected failure while %s", source.name, load.value.lower())
            state.show_error(f"{source.name}: {e}")
            return

        state.apply_result(result)
        logger.info(
            "%s: %d results (page %d/%d, %d total)",
            source.name, len(state.items), state.page, state.last_page, state.total_results,
        )

    async def _download(self) -> None:
        state = self.state
        item = state.selected_item()
        if item is None:
            return
        client = get_client(state.client, self.clients)
        if client is None:
            state.show_error(f"Unknown client {state.client!r}")
            return

        try:
            await client.download(item, state)
        except NyaaError as e:
            logger.warning("Download failed: %s", e)
            state.show_error(e)
            return
        except Exception as e:
            logger.exception("%s: unexpected failure while downloading", client.name)
            state.show_error(f"{client.name}: {e}")
            return
        logger.info("%s: sent %r", client.name, item.title)
