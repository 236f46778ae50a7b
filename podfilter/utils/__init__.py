"""Matching helpers shared by the filter compilers."""

from podfilter.utils.labels import match_label_filters, parse_label_filter
from podfilter.utils.regex import NOT_HEX_RE, is_id_prefix, match_any_regex, match_id
from podfilter.utils.timestamps import compute_until_instant, parse_duration

__all__: list[str] = [
    "NOT_HEX_RE",
    "is_id_prefix",
    "match_any_regex",
    "match_id",
    "match_label_filters",
    "parse_label_filter",
    "compute_until_instant",
    "parse_duration",
]
