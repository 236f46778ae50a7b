"""Pydantic models for network registry entries."""

from pydantic import Field

from podfilter.models import PodFilterBaseModel


class Network(PodFilterBaseModel):
    """A network known to the registry.

    Attributes:
        name: Canonical network name.
        id: Full network ID (hex).
        driver: Network driver, e.g. "bridge" or "macvlan".
        labels: Network labels.
    """

    name: str
    id: str
    driver: str = "bridge"
    labels: dict[str, str] = Field(default_factory=dict)


class NetworkRegistryConfig(PodFilterBaseModel):
    """Top-level layout of a network registry YAML file."""

    networks: list[Network] = Field(default_factory=list)


__all__ = ["Network", "NetworkRegistryConfig"]
