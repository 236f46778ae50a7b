"""Filter dispatcher: map a filter family to its predicate compiler.

The set of families is closed. Every FilterFamily member has exactly one
compiler in COMPILERS; any other family name is rejected before compiling.

Example:
    >>> predicate = compile_filter("status", ["running", "degraded"])
    >>> running = [pod for pod in pods if predicate(pod)]
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from podfilter.config import get_settings
from podfilter.errors import InvalidFilterError
from podfilter.filters.context import Clock, CompileContext, Compiler, PodPredicate, utc_now
from podfilter.filters.identity import (
    compile_ctr_ids,
    compile_ctr_names,
    compile_id,
    compile_name,
)
from podfilter.filters.labels import compile_label, compile_until
from podfilter.filters.network import compile_network
from podfilter.filters.status import compile_ctr_number, compile_ctr_status, compile_status
from podfilter.models import FilterFamily

if TYPE_CHECKING:
    from podfilter.config import FilterSettings
    from podfilter.networks.registry import NetworkRegistry

logger = logging.getLogger(__name__)

COMPILERS: MappingProxyType[FilterFamily, Compiler] = MappingProxyType(
    {
        FilterFamily.ID: compile_id,
        FilterFamily.NAME: compile_name,
        FilterFamily.CTR_IDS: compile_ctr_ids,
        FilterFamily.CTR_NAMES: compile_ctr_names,
        FilterFamily.CTR_NUMBER: compile_ctr_number,
        FilterFamily.CTR_STATUS: compile_ctr_status,
        FilterFamily.STATUS: compile_status,
        FilterFamily.LABEL: compile_label,
        FilterFamily.UNTIL: compile_until,
        FilterFamily.NETWORK: compile_network,
    }
)


def parse_family(family: str | FilterFamily) -> FilterFamily:
    """Convert a family name to FilterFamily.

    Raises:
        InvalidFilterError: If the name is not a known family.
    """
    try:
        return FilterFamily(family)
    except ValueError:
        raise InvalidFilterError(str(family)) from None


def compile_filter(
    family: str | FilterFamily,
    values: Sequence[str],
    registry: NetworkRegistry | None = None,
    *,
    settings: FilterSettings | None = None,
    clock: Clock | None = None,
) -> PodPredicate:
    """Compile one filter request into a pod predicate.

    Args:
        family: Filter family name, e.g. ``"ctr-status"``.
        values: Filter values, OR-combined.
        registry: Network registry; required by the network family only.
        settings: Behavior switches. Defaults to the environment settings.
        clock: Time source for the until family. Defaults to UTC now.

    Returns:
        A predicate ``Pod -> bool`` that never raises on entity lookup
        failures.

    Raises:
        InvalidFilterError: If the family is unknown.
        FilterCompileError: If a value is invalid for the family.
        NetworkRegistryError: If network resolution fails for a reason other
            than the network not existing.
    """
    key = parse_family(family)
    context = CompileContext(
        registry=registry,
        settings=settings if settings is not None else get_settings(),
        clock=clock or utc_now,
    )

    predicate = COMPILERS[key](values, context)
    logger.debug(f"Compiled {key.value} filter with {len(values)} value(s)")
    return predicate


__all__ = ["COMPILERS", "parse_family", "compile_filter"]
