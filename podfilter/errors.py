"""Exception hierarchy for podfilter.

Compile-time failures derive from FilterCompileError and are raised before any
pod is evaluated. Registry failures derive from NetworkRegistryError. Lookup
failures during evaluation are never raised out of a predicate; they travel
inside a failed Lookup as a PodLookupError.
"""


class PodFilterError(Exception):
    """Base class for all podfilter errors."""

    pass


class FilterCompileError(PodFilterError):
    """Raised when a filter request cannot be compiled into a predicate."""

    pass


class InvalidFilterError(FilterCompileError):
    """Raised when a filter request names an unknown filter family.

    Attributes:
        family: The unrecognized family name.
    """

    def __init__(self, family: str) -> None:
        self.family = family
        super().__init__(f"invalid filter: {family}")


class InvalidStatusError(FilterCompileError):
    """Raised when a status filter value is outside its family's vocabulary.

    Attributes:
        value: The rejected filter value.
        pod_level: True for the pod-level status filter, False for ctr-status.
    """

    def __init__(self, value: str, pod_level: bool = False) -> None:
        self.value = value
        self.pod_level = pod_level
        kind = "pod status" if pod_level else "status"
        super().__init__(f"{value} is not a valid {kind}")


class MissingRegistryError(FilterCompileError):
    """Raised when the network filter is compiled without a network registry."""

    def __init__(self) -> None:
        super().__init__("network filter requires a network registry")


class NetworkRegistryError(PodFilterError):
    """Base class for network registry failures."""

    pass


class NetworkNotFoundError(NetworkRegistryError):
    """Raised when no network matches a name or ID.

    Attributes:
        name: The name or ID that was looked up.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unable to find network with name or ID {name}: network not found")


class AmbiguousNetworkError(NetworkRegistryError):
    """Raised when an ID prefix matches more than one network.

    Attributes:
        name: The ambiguous ID prefix.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"more than one result for network ID {name}")


class NetworkConfigError(NetworkRegistryError):
    """Raised when a network registry file cannot be read or validated."""

    pass


class PodLookupError(PodFilterError):
    """Describes a failed read against the pod entity model."""

    pass


class TimestampError(PodFilterError):
    """Raised when an until value cannot be turned into an instant."""

    pass


__all__ = [
    "PodFilterError",
    "FilterCompileError",
    "InvalidFilterError",
    "InvalidStatusError",
    "MissingRegistryError",
    "NetworkRegistryError",
    "NetworkNotFoundError",
    "AmbiguousNetworkError",
    "NetworkConfigError",
    "PodLookupError",
    "TimestampError",
]
