"""Cascading vCenter/cluster/tag selection."""

from infrascope.controllers.inventory.selection.cascading_selector import (
    CascadingSelector,
    ClusterChanged,
    ClusterSelected,
    ClustersLoaded,
    ClustersRequested,
    SelectionEffect,
    SelectionEvent,
    SelectionState,
    TagsChanged,
    TagsLoaded,
    TagToggled,
    VCenterChanged,
    VCenterSelected,
    VCentersLoaded,
    reduce_selection,
)

__all__ = [
    "CascadingSelector",
    "ClusterChanged",
    "ClusterSelected",
    "ClustersLoaded",
    "ClustersRequested",
    "SelectionEffect",
    "SelectionEvent",
    "SelectionState",
    "TagToggled",
    "TagsChanged",
    "TagsLoaded",
    "VCenterChanged",
    "VCenterSelected",
    "VCentersLoaded",
    "reduce_selection",
]
