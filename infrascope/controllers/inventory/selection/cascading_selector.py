"""Cascading selector - vCenter -> cluster -> tag selection state machine.

The selection controls are driven by a pure reducer,
``reduce_selection(state, event) -> state``. Each returned state carries the
effects emitted by the transition that produced it; the presenter turns those
effects into query submissions.

States:
    NoVCenter -> VCenterSelected (no cluster) -> VCenterAndClusterSelected

Tag selection is orthogonal and never resets the vCenter or cluster.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Union

from infrascope.models.selection.selection_scope import SelectionOption, SelectionScope

# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class VCentersLoaded:
    options: tuple[SelectionOption, ...]


@dataclass(frozen=True)
class VCenterSelected:
    vcenter_id: str


@dataclass(frozen=True)
class ClustersLoaded:
    """Cluster list fetched for one vCenter and tag scope."""

    vcenter_id: str
    options: tuple[SelectionOption, ...]
    tag_ids: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ClusterSelected:
    cluster_id: str


@dataclass(frozen=True)
class TagsLoaded:
    options: tuple[SelectionOption, ...]


@dataclass(frozen=True)
class TagToggled:
    tag_id: str


SelectionEvent = Union[
    VCentersLoaded,
    VCenterSelected,
    ClustersLoaded,
    ClusterSelected,
    TagsLoaded,
    TagToggled,
]

# =============================================================================
# Effects
# =============================================================================


@dataclass(frozen=True)
class VCenterChanged:
    vcenter_id: str


@dataclass(frozen=True)
class ClusterChanged:
    cluster_id: str | None


@dataclass(frozen=True)
class TagsChanged:
    tag_ids: frozenset[str]


@dataclass(frozen=True)
class ClustersRequested:
    vcenter_id: str
    tag_ids: frozenset[str]


SelectionEffect = Union[VCenterChanged, ClusterChanged, TagsChanged, ClustersRequested]

# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class SelectionState:
    """Current selections, option lists, and the last transition's effects."""

    vcenter_id: str | None = None
    cluster_id: str | None = None
    tag_ids: frozenset[str] = field(default_factory=frozenset)
    vcenters: tuple[SelectionOption, ...] = ()
    clusters: tuple[SelectionOption, ...] = ()
    tags: tuple[SelectionOption, ...] = ()
    effects: tuple[SelectionEffect, ...] = ()

    @property
    def scope(self) -> SelectionScope:
        return SelectionScope(
            vcenter_id=self.vcenter_id,
            cluster_id=self.cluster_id,
            tag_ids=self.tag_ids,
        )


def reduce_selection(state: SelectionState, event: SelectionEvent) -> SelectionState:
    """Apply one event to the selection state.

    Repeating an event with identical data is harmless: once a vCenter or
    cluster is chosen, a reloaded option list does not re-trigger
    auto-selection and emits no effects.
    """
    state = replace(state, effects=())

    if isinstance(event, VCentersLoaded):
        state = replace(state, vcenters=tuple(event.options))
        if state.vcenter_id is None and event.options:
            return _change_vcenter(state, event.options[0].id)
        return state

    if isinstance(event, VCenterSelected):
        if event.vcenter_id == state.vcenter_id:
            return state
        return _change_vcenter(state, event.vcenter_id)

    if isinstance(event, ClustersLoaded):
        if event.vcenter_id != state.vcenter_id or event.tag_ids != state.tag_ids:
            # List for a superseded scope.
            return state
        state = replace(state, clusters=tuple(event.options))
        if not event.options:
            if state.cluster_id is None:
                return state
            return replace(state, cluster_id=None, effects=(ClusterChanged(None),))
        if state.cluster_id is None:
            first = event.options[0].id
            return replace(state, cluster_id=first, effects=(ClusterChanged(first),))
        return state

    if isinstance(event, ClusterSelected):
        if state.vcenter_id is None or event.cluster_id == state.cluster_id:
            return state
        return replace(
            state,
            cluster_id=event.cluster_id,
            effects=(ClusterChanged(event.cluster_id),),
        )

    if isinstance(event, TagsLoaded):
        return replace(state, tags=tuple(event.options))

    if isinstance(event, TagToggled):
        tag_ids = state.tag_ids ^ {event.tag_id}
        effects: tuple[SelectionEffect, ...] = (TagsChanged(tag_ids),)
        if state.vcenter_id is not None:
            effects += (ClustersRequested(state.vcenter_id, tag_ids),)
        return replace(state, tag_ids=tag_ids, effects=effects)

    raise TypeError(f"Unknown selection event: {event!r}")


def _change_vcenter(state: SelectionState, vcenter_id: str) -> SelectionState:
    return replace(
        state,
        vcenter_id=vcenter_id,
        cluster_id=None,
        clusters=(),
        effects=(
            VCenterChanged(vcenter_id),
            ClusterChanged(None),
            ClustersRequested(vcenter_id, state.tag_ids),
        ),
    )


class CascadingSelector:
    """Stateful wrapper around ``reduce_selection`` used by the dashboard."""

    def __init__(self, state: SelectionState | None = None) -> None:
        self._state = state or SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def scope(self) -> SelectionScope:
        return self._state.scope

    def dispatch(self, event: SelectionEvent) -> tuple[SelectionEffect, ...]:
        """Apply an event and return the effects it emitted."""
        self._state = reduce_selection(self._state, event)
        return self._state.effects

    def dispatch_all(self, events: Sequence[SelectionEvent]) -> tuple[SelectionEffect, ...]:
        effects: tuple[SelectionEffect, ...] = ()
        for event in events:
            effects += self.dispatch(event)
        return effects
