"""Tests for resolve_loading_state."""

from __future__ import annotations

import pytest

from infrascope.constants.enums import FetchState
from infrascope.utils.loading_state import LoadingState, resolve_loading_state

pytestmark = [pytest.mark.unit, pytest.mark.fast]


class TestResolveLoadingState:
    def test_data_suppresses_loading_while_others_pending(self) -> None:
        state = resolve_loading_state(
            [FetchState.READY, FetchState.PENDING, FetchState.PENDING], any_data_available=True
        )
        assert state == LoadingState(is_loading=False, is_empty=False)
        assert state.is_ready

    def test_pending_without_data_is_loading(self) -> None:
        state = resolve_loading_state([FetchState.PENDING, FetchState.READY], False)
        assert state.is_loading
        assert not state.is_empty

    def test_all_settled_without_data_is_empty(self) -> None:
        state = resolve_loading_state([FetchState.READY, FetchState.ERROR], False)
        assert not state.is_loading
        assert state.is_empty

    def test_idle_sources_never_count_as_pending(self) -> None:
        state = resolve_loading_state([FetchState.IDLE, FetchState.IDLE], False)
        assert not state.is_loading
        assert state.is_empty

    def test_no_sources(self) -> None:
        state = resolve_loading_state([], False)
        assert state.is_empty

    def test_loading_and_empty_are_never_both_true(self) -> None:
        for states in (
            [FetchState.PENDING],
            [FetchState.READY],
            [FetchState.ERROR, FetchState.PENDING],
            [FetchState.IDLE],
        ):
            for data in (True, False):
                state = resolve_loading_state(states, data)
                assert not (state.is_loading and state.is_empty)
