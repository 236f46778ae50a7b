"""Apply compiled filters to a pod collection.

Functions:
    compile_filters: Compile a family -> values mapping into predicates.
    select_pods: Keep the pods satisfying every predicate.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, TypeVar

from podfilter.filters.context import Clock, PodPredicate
from podfilter.filters.dispatcher import compile_filter
from podfilter.models import FilterRequest

if TYPE_CHECKING:
    from podfilter.config import FilterSettings
    from podfilter.networks.registry import NetworkRegistry
    from podfilter.pods.contract import Pod

P = TypeVar("P", bound="Pod")


def compile_filters(
    filters: Mapping[str, Sequence[str]] | Iterable[FilterRequest],
    registry: NetworkRegistry | None = None,
    *,
    settings: FilterSettings | None = None,
    clock: Clock | None = None,
) -> list[PodPredicate]:
    """Compile several filter requests.

    All requests are compiled before any is returned, so a bad request is
    reported before scanning begins.

    Args:
        filters: Either a mapping of family name to values, or FilterRequest
            objects.
        registry: Network registry for the network family.
        settings: Behavior switches passed to every compiler.
        clock: Time source passed to every compiler.

    Returns:
        Predicates in request order.

    Raises:
        FilterCompileError: If any request fails to compile.
        NetworkRegistryError: If network resolution fails.
    """
    if isinstance(filters, Mapping):
        requests = list(filters.items())
    else:
        requests = [(request.family, request.values) for request in filters]

    return [
        compile_filter(family, values, registry, settings=settings, clock=clock)
        for family, values in requests
    ]


def select_pods(pods: Iterable[P], predicates: Sequence[PodPredicate]) -> list[P]:
    """Select the pods satisfying all predicates.

    Args:
        pods: Pods to scan.
        predicates: Compiled filters, AND-combined. An empty sequence
            selects every pod.

    Returns:
        Matching pods in input order.
    """
    return [pod for pod in pods if all(predicate(pod) for predicate in predicates)]


__all__ = ["compile_filters", "select_pods"]
