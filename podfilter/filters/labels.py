"""Label and creation-time filters: label, until."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timezone

from podfilter.errors import TimestampError
from podfilter.filters.context import CompileContext, PodPredicate
from podfilter.pods.contract import Pod
from podfilter.utils.labels import match_label_filters
from podfilter.utils.timestamps import compute_until_instant


def compile_label(values: Sequence[str], context: CompileContext) -> PodPredicate:
    wanted = tuple(values)

    def predicate(pod: Pod) -> bool:
        return match_label_filters(wanted, pod.labels)

    return predicate


def compile_until(values: Sequence[str], context: CompileContext) -> PodPredicate:
    """Match pods created strictly before the instant the values describe.

    The instant is recomputed against the context clock on every
    evaluation, so a relative value such as ``10m`` tracks the current time
    for long-lived predicates. Unparsable values never match. A zoneless
    creation time is read as UTC.
    """
    wanted = tuple(values)
    clock = context.clock

    def predicate(pod: Pod) -> bool:
        try:
            until = compute_until_instant(wanted, now=clock())
        except TimestampError:
            return False
        created = pod.created_time
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return created < until

    return predicate


__all__ = ["compile_label", "compile_until"]
