"""Protocols describing the pod entity model consumed by the compilers.

The compilers read pods only through these protocols. Infallible attributes
are plain properties; every accessor that can fail returns a Lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Protocol, runtime_checkable

from podfilter.models import ContainerState
from podfilter.pods.lookup import Lookup


@runtime_checkable
class ContainerHandle(Protocol):
    """A child container of a pod."""

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    def attached_networks(self) -> Lookup[list[str]]:
        """Names of the networks this container is attached to."""
        ...


@runtime_checkable
class Pod(Protocol):
    """A pod as seen by the filter compilers.

    All reads happen at evaluation time; nothing here is snapshotted by the
    compilers.
    """

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def created_time(self) -> datetime: ...

    @property
    def labels(self) -> Mapping[str, str]: ...

    def child_container_ids(self) -> Lookup[list[str]]: ...

    def child_containers(self) -> Lookup[list[ContainerHandle]]: ...

    def child_container_states(self) -> Lookup[list[ContainerState]]: ...

    def derived_status(self) -> Lookup[str]:
        """The pod's aggregate status, e.g. ``"Running"`` or ``"Degraded"``."""
        ...

    def infra_container(self) -> Lookup[ContainerHandle]:
        """The container owning the pod's shared network namespace."""
        ...


__all__ = ["ContainerHandle", "Pod"]
