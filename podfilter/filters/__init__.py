"""Filter compilation: turn filter requests into pod predicates.

Submodules:
- dispatcher: family -> compiler table and compile_filter()
- identity: id, name, ctr-ids, ctr-names
- status: ctr-number, ctr-status, status
- labels: label, until
- network: network
- apply: compile_filters() and select_pods()
"""

from podfilter.filters.apply import compile_filters, select_pods
from podfilter.filters.context import CompileContext, PodPredicate
from podfilter.filters.dispatcher import COMPILERS, compile_filter, parse_family

__all__: list[str] = [
    "COMPILERS",
    "CompileContext",
    "PodPredicate",
    "compile_filter",
    "compile_filters",
    "parse_family",
    "select_pods",
]
