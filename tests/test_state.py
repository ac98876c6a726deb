"""Tests for models and application state."""

from __future__ import annotations

import dataclasses

import pytest

from core.models import CATEGORIES, Filter, LoadResult, Sort, SortDir, find_category, sort_items
from core.state import AppState, LoadKind, Mode, ModeKind


def test_initial_state_starts_with_a_search():
    state = AppState()
    assert state.mode == Mode.loading(LoadKind.SEARCHING)
    assert state.page == 1
    assert state.last_page == 1
    assert not state.errors
    assert state.selected_item() is None


def test_mode_values_compare_by_payload():
    assert Mode.sort(SortDir.ASC) != Mode.sort(SortDir.DESC)
    assert Mode.sort(SortDir.ASC).kind is ModeKind.SORT
    assert Mode.loading(LoadKind.FILTERING).load is LoadKind.FILTERING
    assert str(Mode.loading(LoadKind.FILTERING)) == "Loading"
    assert str(Mode.HELP) == "Help"


def test_items_are_immutable(make_item):
    item = make_item()
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.seeders = 0


def test_apply_result_clamps_page(make_item):
    state = AppState(page=9)
    state.apply_result(LoadResult(items=[make_item()], last_page=4, total_results=300))
    assert state.page == 4
    assert state.last_page == 4

    state.apply_result(LoadResult(items=[], last_page=0, total_results=0))
    assert state.page == 1
    assert state.last_page == 1
    assert state.cursor is None


def test_apply_result_sorts_with_direction(make_item):
    state = AppState(sort=Sort.LEECHERS, ascending=True)
    state.apply_result(
        LoadResult(items=[make_item(id=1, leechers=4), make_item(id=2, leechers=2), make_item(id=3, leechers=3)])
    )
    assert [i.leechers for i in state.items] == [2, 3, 4]


def test_sort_is_stable_for_ties(make_item):
    items = [make_item(id=1, seeders=3), make_item(id=2, seeders=3), make_item(id=3, seeders=7)]
    assert [i.id for i in sort_items(items, Sort.SEEDERS)] == [3, 1, 2]
    assert [i.id for i in sort_items(items, Sort.SEEDERS, ascending=True)] == [1, 2, 3]


def test_size_sort_uses_bytes(make_item):
    items = [make_item(id=1, bytes=10), make_item(id=2, bytes=3000), make_item(id=3, bytes=200)]
    assert [i.id for i in sort_items(items, Sort.SIZE)] == [2, 3, 1]


def test_show_error_queues_in_order():
    state = AppState()
    state.show_error("one")
    state.show_error(ValueError("two"))
    assert list(state.errors) == ["one", "two"]


def test_blank_errors_get_a_placeholder():
    state = AppState()
    state.show_error("")
    state.show_error("  ")
    state.show_error(ValueError())
    assert list(state.errors) == ["Unknown error", "Unknown error", "ValueError"]


def test_lookups_round_trip():
    assert find_category("1_2").name == "English-translated"
    assert find_category("software") is CATEGORIES[21]
    assert find_category("9_9") is None
    assert Filter.from_label("trusted only") is Filter.TRUSTED_ONLY
    assert Sort.from_label("Seeders") is Sort.SEEDERS
    with pytest.raises(ValueError):
        Sort.from_label("Popularity")


def test_item_link_preference(make_item):
    item = make_item(magnet_link=None)
    assert item.link(use_magnet=True) == item.torrent_link
    assert make_item().link(use_magnet=True).startswith("magnet:")
    assert make_item(size="").size_formatted == "1.0 GiB"
