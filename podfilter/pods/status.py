"""Pod status derivation from child container states.

Functions:
    derive_pod_status: Aggregate child container states into a PodStatus.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from podfilter.models import ContainerState, PodStatus


def derive_pod_status(states: Iterable[ContainerState]) -> PodStatus:
    """Derive the aggregate pod status from its containers' states.

    Rules, checked in order:
        - no containers: CREATED
        - some but not all running: DEGRADED
        - all running: RUNNING
        - all paused: PAUSED
        - all exited (or stopped): EXITED
        - some exited (or stopped): STOPPED
        - any state outside the known lifecycle: ERROR
        - otherwise: CREATED

    Args:
        states: Raw states of every container in the pod.

    Returns:
        The derived PodStatus.
    """
    counts: Counter[PodStatus] = Counter()
    total = 0
    for state in states:
        total += 1
        if state in (ContainerState.EXITED, ContainerState.STOPPED):
            counts[PodStatus.EXITED] += 1
        elif state == ContainerState.RUNNING:
            counts[PodStatus.RUNNING] += 1
        elif state == ContainerState.PAUSED:
            counts[PodStatus.PAUSED] += 1
        elif state in (ContainerState.CREATED, ContainerState.CONFIGURED):
            counts[PodStatus.CREATED] += 1
        else:
            counts[PodStatus.ERROR] += 1

    if total == 0:
        return PodStatus.CREATED

    running = counts[PodStatus.RUNNING]
    if 0 < running < total:
        return PodStatus.DEGRADED
    if running == total:
        return PodStatus.RUNNING
    if counts[PodStatus.PAUSED] == total:
        return PodStatus.PAUSED
    if counts[PodStatus.EXITED] == total:
        return PodStatus.EXITED
    if counts[PodStatus.EXITED] > 0:
        return PodStatus.STOPPED
    if counts[PodStatus.ERROR] > 0:
        return PodStatus.ERROR
    return PodStatus.CREATED


__all__ = ["derive_pod_status"]
