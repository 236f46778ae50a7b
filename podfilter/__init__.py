"""
podfilter: compile pod filter requests into predicates.

A filter request names a filter family (``id``, ``status``, ``network``...)
and one or more values. compile_filter() validates the request and returns a
predicate ``Pod -> bool`` that can be applied to any number of pods, from any
thread. Lookup failures while evaluating a pod exclude that pod; they never
raise.
"""

from podfilter.config import FilterSettings, get_settings
from podfilter.errors import (
    FilterCompileError,
    InvalidFilterError,
    InvalidStatusError,
    NetworkNotFoundError,
    NetworkRegistryError,
    PodFilterError,
)
from podfilter.filters import PodPredicate, compile_filter, compile_filters, select_pods
from podfilter.models import FilterFamily, FilterRequest

__all__: list[str] = [
    "FilterSettings",
    "get_settings",
    "PodFilterError",
    "FilterCompileError",
    "InvalidFilterError",
    "InvalidStatusError",
    "NetworkRegistryError",
    "NetworkNotFoundError",
    "PodPredicate",
    "compile_filter",
    "compile_filters",
    "select_pods",
    "FilterFamily",
    "FilterRequest",
]
