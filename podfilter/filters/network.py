"""Network filter: match pods whose infra container joins a given network.

Filter values are canonicalized through the network registry once, at
compile time. Values naming no network are dropped; any other registry
error aborts compilation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from podfilter.errors import MissingRegistryError, NetworkNotFoundError
from podfilter.filters.context import CompileContext, PodPredicate
from podfilter.pods.contract import Pod

logger = logging.getLogger(__name__)


def compile_network(values: Sequence[str], context: CompileContext) -> PodPredicate:
    """Compile the network filter.

    Args:
        values: Network names or ID prefixes.
        context: Must carry a network registry.

    Returns:
        Predicate matching pods attached to any resolved network. With no
        resolvable values the predicate matches nothing.

    Raises:
        MissingRegistryError: If the context has no registry.
        NetworkRegistryError: If resolution fails for a reason other than
            the network not existing.
    """
    if context.registry is None:
        raise MissingRegistryError()

    names: list[str] = []
    for value in values:
        try:
            network = context.registry.resolve(value)
        except NetworkNotFoundError:
            logger.debug(f"Skipping unknown network in filter: {value}")
            continue
        names.append(network.name)
    resolved = frozenset(names)

    def predicate(pod: Pod) -> bool:
        infra = pod.infra_container()
        if not infra.ok:
            return False
        networks = infra.value.attached_networks()
        if not networks.ok or not networks.value:
            return False
        return any(net in resolved for net in networks.value)

    return predicate


__all__ = ["compile_network"]
