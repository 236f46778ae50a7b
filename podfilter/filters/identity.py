"""Identifier and name filters: id, name, ctr-ids, ctr-names.

ID families treat hex-only values as lowercase ID prefixes and anything else
as a regex searched in the ID. Name families always use regex search.
"""

from __future__ import annotations

from collections.abc import Sequence

from podfilter.filters.context import CompileContext, PodPredicate
from podfilter.pods.contract import Pod
from podfilter.utils.regex import match_any_regex, match_id


def compile_id(values: Sequence[str], context: CompileContext) -> PodPredicate:
    wanted = tuple(values)

    def predicate(pod: Pod) -> bool:
        return match_id(pod.id, wanted)

    return predicate


def compile_name(values: Sequence[str], context: CompileContext) -> PodPredicate:
    wanted = tuple(values)

    def predicate(pod: Pod) -> bool:
        return match_any_regex(pod.name, wanted)

    return predicate


def compile_ctr_ids(values: Sequence[str], context: CompileContext) -> PodPredicate:
    """Match pods having any child container whose ID matches any value."""
    wanted = tuple(values)

    def predicate(pod: Pod) -> bool:
        ctr_ids = pod.child_container_ids()
        if not ctr_ids.ok:
            return False
        return any(match_id(ctr_id, wanted) for ctr_id in ctr_ids.value)

    return predicate


def compile_ctr_names(values: Sequence[str], context: CompileContext) -> PodPredicate:
    """Match pods having a child container whose name matches any value.

    With ``ctr_names_first_child_only`` set, only the first enumerated child
    is inspected.
    """
    wanted = tuple(values)
    first_child_only = context.settings.ctr_names_first_child_only

    def predicate(pod: Pod) -> bool:
        ctrs = pod.child_containers()
        if not ctrs.ok:
            return False
        candidates = ctrs.value[:1] if first_child_only else ctrs.value
        return any(match_any_regex(ctr.name, wanted) for ctr in candidates)

    return predicate


__all__ = ["compile_id", "compile_name", "compile_ctr_ids", "compile_ctr_names"]
