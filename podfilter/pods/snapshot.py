"""In-memory pod snapshot models.

PodSnapshot and ContainerSnapshot satisfy the Pod and ContainerHandle
protocols from plain data, e.g. parsed inspect output or test fixtures.

Example:
    >>> pod = PodSnapshot.model_validate({
    ...     "id": "4b2c...",
    ...     "name": "web",
    ...     "created_time": "2024-05-01T12:00:00Z",
    ...     "containers": [{"id": "9a1f...", "name": "web-infra", "state": "running"}],
    ...     "infra_container_id": "9a1f...",
    ... })
    >>> pod.derived_status().value
    'Running'
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import Field, field_validator

from podfilter.models import ContainerState, PodFilterBaseModel
from podfilter.pods.lookup import Lookup
from podfilter.pods.status import derive_pod_status


class ContainerSnapshot(PodFilterBaseModel):
    """A child container captured at a point in time.

    Attributes:
        id: Full container ID.
        name: Container name.
        state: Raw runtime state.
        networks: Names of the networks the container is attached to.
    """

    id: str
    name: str
    state: ContainerState = ContainerState.CONFIGURED
    networks: list[str] = Field(default_factory=list)

    def attached_networks(self) -> Lookup[list[str]]:
        return Lookup.success(list(self.networks))


class PodSnapshot(PodFilterBaseModel):
    """A pod captured at a point in time.

    Attributes:
        id: Full pod ID.
        name: Pod name.
        created_time: Creation time; naive values are taken as UTC.
        labels: Pod labels.
        containers: Child containers, infra container included.
        infra_container_id: ID of the infra container, if the pod has one.
    """

    id: str
    name: str
    created_time: datetime
    labels: dict[str, str] = Field(default_factory=dict)
    containers: list[ContainerSnapshot] = Field(default_factory=list)
    infra_container_id: str | None = None

    @field_validator("created_time")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def child_container_ids(self) -> Lookup[list[str]]:
        return Lookup.success([c.id for c in self.containers])

    def child_containers(self) -> Lookup[list[ContainerSnapshot]]:
        return Lookup.success(list(self.containers))

    def child_container_states(self) -> Lookup[list[ContainerState]]:
        return Lookup.success([c.state for c in self.containers])

    def derived_status(self) -> Lookup[str]:
        return Lookup.success(derive_pod_status(c.state for c in self.containers).value)

    def infra_container(self) -> Lookup[ContainerSnapshot]:
        if self.infra_container_id is None:
            return Lookup.failure(f"pod {self.id} has no infra container")
        for container in self.containers:
            if container.id == self.infra_container_id:
                return Lookup.success(container)
        return Lookup.failure(
            f"infra container {self.infra_container_id} of pod {self.id} not found"
        )


__all__ = ["ContainerSnapshot", "PodSnapshot"]
