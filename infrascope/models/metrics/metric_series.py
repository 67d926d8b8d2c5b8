"""Resource usage time-series models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MetricSeriesPoint(BaseModel):
    """Merged usage sample for one timestamp.

    Any subset of the metric fields may be populated when the underlying
    series were sampled at different times.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    timestamp: int
    cpu: float | None = None
    memory: float | None = None
    storage: float | None = None

    @property
    def label(self) -> str:
        """Local ``HH:MM`` rendering used as the chart x-axis name."""
        return datetime.fromtimestamp(self.timestamp).strftime("%H:%M")


class OverviewMetrics(BaseModel):
    """Current system load snapshot for the selected scope."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    esxi_count: int = Field(default=0, alias="esxiCount")
    vms_count: int = Field(default=0, alias="vmsCount")
    routes_count: int = Field(default=0, alias="routesCount")
    testbeds_count: int = Field(default=0, alias="testbedsCount")
    cpu_usage: float = Field(default=0.0, alias="cpuUsage")
    memory_usage: float = Field(default=0.0, alias="memoryUsage")
    storage_usage: float = Field(default=0.0, alias="storageUsage")
