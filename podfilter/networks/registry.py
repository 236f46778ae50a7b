"""Network registry protocol and a static in-memory implementation.

Classes:
    NetworkRegistry: Protocol consumed by the network filter compiler
    StaticNetworkRegistry: Registry over a fixed list of networks

Example:
    >>> registry = StaticNetworkRegistry([Network(name="podman", id="2f259bab93aa...")])
    >>> registry.resolve("2f25").name
    'podman'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from podfilter.errors import AmbiguousNetworkError, NetworkNotFoundError
from podfilter.networks.models import Network

logger = logging.getLogger(__name__)


@runtime_checkable
class NetworkRegistry(Protocol):
    """Resolves user-supplied network names or IDs to registry entries."""

    def resolve(self, name_or_id: str) -> Network:
        """Resolve a name or ID to its network.

        Raises:
            NetworkNotFoundError: If no network matches.
            NetworkRegistryError: For any other resolution failure.
        """
        ...


class StaticNetworkRegistry:
    """Registry over a fixed, in-memory list of networks.

    Resolution matches an exact name first, then a unique ID prefix. The
    registry is read-only after construction, so concurrent resolve() calls
    are safe.

    Attributes:
        _networks: Networks in registration order.
    """

    def __init__(self, networks: Iterable[Network] = ()) -> None:
        self._networks: tuple[Network, ...] = tuple(networks)

    def resolve(self, name_or_id: str) -> Network:
        """Resolve a network by exact name or by unique ID prefix.

        Args:
            name_or_id: Network name, full ID, or ID prefix.

        Returns:
            The matching Network.

        Raises:
            NetworkNotFoundError: If nothing matches.
            AmbiguousNetworkError: If the value prefixes more than one ID.
        """
        for network in self._networks:
            if network.name == name_or_id:
                return network

        match: Network | None = None
        for network in self._networks:
            if network.id.startswith(name_or_id):
                if match is not None:
                    raise AmbiguousNetworkError(name_or_id)
                match = network

        if match is None:
            raise NetworkNotFoundError(name_or_id)
        logger.debug(f"Resolved network ID prefix {name_or_id} to {match.name}")
        return match

    def list_all(self) -> list[Network]:
        return list(self._networks)

    def count(self) -> int:
        return len(self._networks)


__all__ = ["NetworkRegistry", "StaticNetworkRegistry"]
