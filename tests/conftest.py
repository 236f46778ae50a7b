"""Shared fixtures for podfilter tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from podfilter.config import FilterSettings
from podfilter.models import ContainerState
from podfilter.networks.models import Network
from podfilter.networks.registry import StaticNetworkRegistry
from podfilter.pods.lookup import Lookup
from podfilter.pods.snapshot import ContainerSnapshot, PodSnapshot

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

BRIDGE_ID = "2f259bab93aaaaa2542ba43ef33eb990d0999ee1b9924b557b7be53c0b7a1bb9"
BACKEND_ID = "8e1b7d2c4f0a9e3b6c5d7a8f1e2d3c4b5a6978877665544332211ffeeddccbba"


def make_pod(
    pod_id: str = "abcdef0123456789",
    name: str = "web",
    created_time: datetime = T0,
    labels: dict[str, str] | None = None,
    containers: list[dict[str, Any]] | None = None,
    infra_container_id: str | None = None,
) -> PodSnapshot:
    """Build a PodSnapshot from plain values."""
    return PodSnapshot(
        id=pod_id,
        name=name,
        created_time=created_time,
        labels=labels or {},
        containers=[ContainerSnapshot(**c) for c in containers or []],
        infra_container_id=infra_container_id,
    )


@dataclass
class BrokenContainer:
    """Container whose network lookup fails."""

    id: str = "c0ffee"
    name: str = "broken-infra"

    def attached_networks(self) -> Lookup[list[str]]:
        return Lookup.failure("network namespace gone")


@dataclass
class BrokenPod:
    """Pod whose every fallible accessor fails.

    Infallible attributes are ordinary values so that only lookup failures
    are exercised.
    """

    id: str = "abcdef0123456789"
    name: str = "broken"
    created_time: datetime = T0
    labels: dict[str, str] = field(default_factory=dict)

    def child_container_ids(self) -> Lookup[list[str]]:
        return Lookup.failure("pod removed")

    def child_containers(self) -> Lookup[list[Any]]:
        return Lookup.failure("pod removed")

    def child_container_states(self) -> Lookup[list[ContainerState]]:
        return Lookup.failure("pod removed")

    def derived_status(self) -> Lookup[str]:
        return Lookup.failure("pod removed")

    def infra_container(self) -> Lookup[Any]:
        return Lookup.failure("pod removed")


class FakeClock:
    """Manually advanced clock for until filters."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def settings() -> FilterSettings:
    return FilterSettings(ctr_names_first_child_only=False, networks_file=None)


@pytest.fixture
def legacy_settings() -> FilterSettings:
    return FilterSettings(ctr_names_first_child_only=True, networks_file=None)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry() -> StaticNetworkRegistry:
    return StaticNetworkRegistry(
        [
            Network(name="bridge", id=BRIDGE_ID),
            Network(name="backend", id=BACKEND_ID, driver="macvlan"),
        ]
    )


@pytest.fixture
def three_container_pod() -> PodSnapshot:
    return make_pod(
        containers=[
            {"id": "1111aaaa", "name": "web-infra", "state": "running", "networks": ["bridge"]},
            {"id": "2222bbbb", "name": "web-app", "state": "configured"},
            {"id": "3333cccc", "name": "web-sidecar", "state": "stopped"},
        ],
        infra_container_id="1111aaaa",
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings so environment changes in a test take effect."""
    from podfilter.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
