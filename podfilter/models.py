"""Base Pydantic models and vocabularies shared across podfilter.

Classes:
    PodFilterBaseModel: Base model with strict validation for all podfilter entities
    FilterFamily: The closed set of filter keys a request may name
    ContainerState: Raw container states reported by the runtime
    PodStatus: Pod states derived from child container states
    FilterRequest: A filter family plus its OR-combined values
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PodFilterBaseModel(BaseModel):
    """Base model for all podfilter entities.

    Uses strict validation with extra='forbid' so that malformed snapshots
    or registry files fail loudly instead of silently dropping fields.
    """

    model_config = ConfigDict(extra="forbid")


class FilterFamily(str, Enum):
    """Filter keys understood by the dispatcher.

    The set is closed: each member maps to exactly one compiler.
    """

    ID = "id"
    NAME = "name"
    CTR_IDS = "ctr-ids"
    CTR_NAMES = "ctr-names"
    CTR_NUMBER = "ctr-number"
    CTR_STATUS = "ctr-status"
    STATUS = "status"
    LABEL = "label"
    UNTIL = "until"
    NETWORK = "network"


class ContainerState(str, Enum):
    """Raw container states as reported by the container runtime.

    CONFIGURED: Container exists in the database but not in the runtime
    CREATED: Container created in the runtime but never started
    STOPPED: Container was running and has been stopped by the runtime
    EXITED: Container ran and its process exited
    """

    UNKNOWN = "unknown"
    CONFIGURED = "configured"
    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"
    PAUSED = "paused"
    EXITED = "exited"
    REMOVING = "removing"
    STOPPING = "stopping"


class PodStatus(str, Enum):
    """Pod states derived from the states of the pod's containers.

    DEAD is accepted by the status filter but never derived.
    """

    CREATED = "Created"
    RUNNING = "Running"
    STOPPED = "Stopped"
    PAUSED = "Paused"
    EXITED = "Exited"
    DEAD = "Dead"
    DEGRADED = "Degraded"
    ERROR = "Error"


class FilterRequest(PodFilterBaseModel):
    """A single filter request.

    Values are OR-combined: a pod satisfies the request if it matches any
    value. Combining several requests is AND.

    Attributes:
        family: Which matching discipline to use.
        values: Raw filter values as supplied by the caller.
    """

    family: FilterFamily
    values: list[str] = Field(default_factory=list)


__all__ = [
    "PodFilterBaseModel",
    "FilterFamily",
    "ContainerState",
    "PodStatus",
    "FilterRequest",
]
