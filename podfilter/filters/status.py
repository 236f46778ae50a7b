"""Aggregate count and status filters: ctr-number, ctr-status, status.

The two status families use different vocabularies and different
normalization: ctr-status folds ``stopped`` into ``exited`` on both sides,
while the pod-level status filter compares the lowercased derived status
as-is.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from podfilter.errors import InvalidStatusError
from podfilter.filters.context import CompileContext, PodPredicate
from podfilter.models import ContainerState
from podfilter.pods.contract import Pod

CONTAINER_STATUS_VALUES: frozenset[str] = frozenset(
    {"created", "running", "paused", "stopped", "exited", "unknown"}
)
POD_STATUS_VALUES: frozenset[str] = frozenset(
    {"stopped", "running", "paused", "exited", "dead", "created", "degraded"}
)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_count(value: str) -> int | None:
    if not _INT_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None


def normalize_container_state(state: ContainerState | str) -> str:
    """Map a raw container state onto the ctr-status vocabulary.

    ``configured`` reads as ``created`` and ``stopped`` as ``exited``; other
    states pass through unchanged.
    """
    raw = state.value if isinstance(state, ContainerState) else str(state)
    if raw == ContainerState.CONFIGURED.value:
        return ContainerState.CREATED.value
    if raw == ContainerState.STOPPED.value:
        return ContainerState.EXITED.value
    return raw


def compile_ctr_number(values: Sequence[str], context: CompileContext) -> PodPredicate:
    """Match pods whose number of containers equals any value.

    Values are parsed on each evaluation; unparsable values never match.
    """
    wanted = tuple(values)

    def predicate(pod: Pod) -> bool:
        ctr_ids = pod.child_container_ids()
        if not ctr_ids.ok:
            return False
        count = len(ctr_ids.value)
        for value in wanted:
            if _parse_count(value) == count:
                return True
        return False

    return predicate


def compile_ctr_status(values: Sequence[str], context: CompileContext) -> PodPredicate:
    """Match pods having any container in any of the given states.

    Raises:
        InvalidStatusError: If a value is not a container status.
    """
    for value in values:
        if value not in CONTAINER_STATUS_VALUES:
            raise InvalidStatusError(value)
    wanted = frozenset("exited" if value == "stopped" else value for value in values)

    def predicate(pod: Pod) -> bool:
        states = pod.child_container_states()
        if not states.ok:
            return False
        return any(normalize_container_state(state) in wanted for state in states.value)

    return predicate


def compile_status(values: Sequence[str], context: CompileContext) -> PodPredicate:
    """Match pods whose derived status is any of the given statuses.

    Raises:
        InvalidStatusError: If a value is not a pod status.
    """
    for value in values:
        if value not in POD_STATUS_VALUES:
            raise InvalidStatusError(value, pod_level=True)
    wanted = frozenset(values)

    def predicate(pod: Pod) -> bool:
        status = pod.derived_status()
        if not status.ok:
            return False
        return status.value.lower() in wanted

    return predicate


__all__ = [
    "CONTAINER_STATUS_VALUES",
    "POD_STATUS_VALUES",
    "normalize_container_state",
    "compile_ctr_number",
    "compile_ctr_status",
    "compile_status",
]
