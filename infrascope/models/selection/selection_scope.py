"""Selection scope models for the vCenter/cluster/tag controls."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SelectionOption:
    """One entry of a vCenter, cluster or tag list."""

    id: str
    name: str


@dataclass(frozen=True)
class SelectionScope:
    """The vCenter/cluster/tag tuple that parameterizes scoped queries.

    ``cluster_id`` is only meaningful relative to ``vcenter_id``.
    """

    vcenter_id: str | None = None
    cluster_id: str | None = None
    tag_ids: frozenset[str] = field(default_factory=frozenset)

    @property
    def key(self) -> tuple[str, str, tuple[str, ...]]:
        """Hashable, order-independent cache key for scoped queries."""
        return (
            self.vcenter_id or "",
            self.cluster_id or "",
            tuple(sorted(self.tag_ids)),
        )

    @property
    def is_ready(self) -> bool:
        """Scoped data queries run once a vCenter or cluster is chosen."""
        return bool(self.vcenter_id or self.cluster_id)

    def to_params(self) -> dict[str, str]:
        """Query-string parameters for scoped endpoints."""
        params: dict[str, str] = {}
        if self.cluster_id:
            params["cluster"] = self.cluster_id
        if self.vcenter_id:
            params["vcenter"] = self.vcenter_id
        if self.tag_ids:
            params["tags"] = ",".join(sorted(self.tag_ids))
        return params
