"""Loading state resolver - one loading/empty verdict from many sources."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from infrascope.constants.enums import FetchState


@dataclass(frozen=True)
class LoadingState:
    """Combined view state of several async sources."""

    is_loading: bool
    is_empty: bool

    @property
    def is_ready(self) -> bool:
        return not self.is_loading and not self.is_empty


def resolve_loading_state(
    states: Iterable[FetchState],
    any_data_available: bool,
) -> LoadingState:
    """Derive loading/empty flags with progressive reveal.

    Data that has already arrived suppresses the loading indicator even while
    other sources are still pending. Idle (disabled) sources never count as
    pending, and errored sources count as finished without data.
    """
    any_pending = any(state is FetchState.PENDING for state in states)
    return LoadingState(
        is_loading=not any_data_available and any_pending,
        is_empty=not any_pending and not any_data_available,
    )
