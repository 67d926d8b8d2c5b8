"""Shared fixtures for Infrascope tests."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from infrascope.models.directory.directory_record import DirectoryRecord
from infrascope.utils.mock_api_client import MockApiClient
from infrascope.utils.query_supervisor import QueryResult, QuerySupervisor, drain


@pytest.fixture
def directory_records() -> list[DirectoryRecord]:
    """Three-user directory used across matcher, controller and presenter tests."""
    return [
        DirectoryRecord.model_validate(
            {"_id": "u1", "cn": "Alice", "email": "alice@x", "org": "platform",
             "businessUnit": "infra", "roles": ["admin", "user"], "isActive": True}
        ),
        DirectoryRecord.model_validate(
            {"_id": "u2", "cn": "Alan", "email": "alan@x", "org": "platform",
             "businessUnit": "infra", "isActive": True}
        ),
        DirectoryRecord.model_validate(
            {"_id": "u3", "cn": "Bob", "email": "bob@x", "org": "networking",
             "businessUnit": "edge", "roles": ["viewer"], "isActive": False}
        ),
    ]


@pytest.fixture
def mock_payloads() -> dict[str, Any]:
    return {
        "users": [
            {"_id": "u1", "cn": "Alice", "email": "alice@x", "roles": ["admin"]},
            {"_id": "u2", "cn": "Alan", "email": "alan@x"},
        ],
        "clusters": [
            {"id": "c1", "vc": "vc-a", "tags": ["prod"]},
            {"id": "c2", "vc": "vc-a", "tags": ["dev"]},
            {"id": "c3", "vc": "vc-b", "tags": ["prod"]},
        ],
        "tags": [{"id": "prod", "name": "Production"}, {"id": "dev", "name": "Development"}],
        "usage": {"c1": [{"timestamp": 1000, "cpu": 10, "memory": 20, "storage": 30}]},
        "timeseries": {
            "cpuUsage": [[1000, 50]],
            "memoryUsage": [[1000, 60]],
            "storageUsage": [[2000, 70]],
        },
        "metrics": {"esxiCount": 3, "vmsCount": 40, "cpuUsage": 12.5},
        "subnets": [
            {"_id": {"$oid": "s1"}, "name": "east", "cidr": "10.0.0.0/24", "isActive": True},
            {"_id": {"$oid": "s2"}, "name": "west", "cidr": "10.1.0.0/24", "isActive": False},
        ],
        "routes": [{"_id": {"$oid": "r1"}, "name": "tb-a", "subnet": "east", "type": "anthos"}],
        "datastores": [{"id": "d1", "name": "vsan-1", "status": "healthy"}],
        "flash_arrays": [{"id": "a1", "name": "fa-1", "status": "online"}],
        "flash_blades": [],
    }


@pytest.fixture
def mock_client(mock_payloads: dict[str, Any]) -> MockApiClient:
    return MockApiClient(mock_payloads)


@pytest.fixture
def settle() -> Callable[..., Awaitable[None]]:
    """Let supervisor tasks run and feed published results to ``apply``."""

    async def _settle(
        supervisor: QuerySupervisor,
        apply: Callable[[QueryResult], None] | None = None,
        rounds: int = 20,
    ) -> None:
        for _ in range(rounds):
            await asyncio.sleep(0)
            for result in drain(supervisor):
                if apply is not None:
                    apply(result)

    return _settle
