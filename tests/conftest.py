"""Shared fixtures for nyaa tests."""

from __future__ import annotations

from typing import Any

import pytest

from core.clients.base import Client
from core.models import Item, LoadResult
from core.orchestrator import Orchestrator
from core.sources.base import Source
from core.state import AppState, KeyPress, Mode
from ui.widgets import Surfaces


class FakeSource(Source):
    """Source returning canned results (or raising) without touching the network."""

    def __init__(self, name: str = "Nyaa", result: LoadResult | None = None, error: Exception | None = None):
        self.name = name
        self.result = result or LoadResult()
        self.error = error
        self.calls: list[tuple] = []

    async def load(self, query, category, filter, sort, sort_dir, page):
        self.calls.append((query, category, filter, sort, sort_dir, page))
        if self.error is not None:
            raise self.error
        return self.result

    def fetch(self, *args):  # pragma: no cover - load is overridden
        raise AssertionError("fetch should not be called")


class FakeClient(Client):
    """Client recording dispatched items."""

    def __init__(self, name: str = "Command", error: Exception | None = None):
        self.name = name
        self.error = error
        self.sent: list[Item] = []

    async def download(self, item, state):
        self.sent.append(item)
        if self.error is not None:
            raise self.error

    def send(self, item, state):  # pragma: no cover - download is overridden
        raise AssertionError("send should not be called")


class Harness:
    """An orchestrator wired to scripted keys and a frame recorder."""

    def __init__(self, state: AppState, sources: list[Source], clients: list[Client]):
        self.state = state
        self.keys: list[KeyPress] = []
        self.frames: list[Mode] = []
        self.surfaces = Surfaces([s.name for s in sources], [c.name for c in clients])
        self.orchestrator = Orchestrator(
            state,
            self.surfaces.by_mode(),
            self._next_key,
            self._render,
            sources=sources,
            clients=clients,
        )

    async def _next_key(self) -> KeyPress:
        if not self.keys:
            raise AssertionError("orchestrator waited for a key that was never scripted")
        return self.keys.pop(0)

    def _render(self, state: AppState) -> None:
        self.frames.append(state.mode)

    def press(self, *keys: str) -> None:
        self.keys.extend(KeyPress(k) for k in keys)

    async def step(self, count: int = 1) -> bool:
        result = True
        for _ in range(count):
            result = await self.orchestrator.step()
        return result


@pytest.fixture
def make_item():
    """Factory for result records."""

    def _make(
        id: int = 1,
        title: str = "[Group] Show - 01 [1080p].mkv",
        seeders: int = 10,
        leechers: int = 2,
        downloads: int = 100,
        bytes: int = 1024**3,
        **kwargs: Any,
    ) -> Item:
        kwargs.setdefault("source", "Nyaa")
        kwargs.setdefault("timestamp", 1_700_000_000 + id)
        kwargs.setdefault("torrent_link", f"https://nyaa.si/download/{id}.torrent")
        kwargs.setdefault("magnet_link", f"magnet:?xt=urn:btih:{id:040x}")
        kwargs.setdefault("file_name", f"{id}.torrent")
        return Item(
            id=id,
            title=title,
            seeders=seeders,
            leechers=leechers,
            downloads=downloads,
            bytes=bytes,
            **kwargs,
        )

    return _make


@pytest.fixture
def state() -> AppState:
    return AppState()


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def harness(state, source, client) -> Harness:
    return Harness(state, [source, FakeSource("TPB")], [client, FakeClient("Clipboard")])
