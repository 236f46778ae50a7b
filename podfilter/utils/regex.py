"""Identifier and regex matching helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable

# Any character that cannot appear in a hex ID
NOT_HEX_RE = re.compile(r"[^0-9a-fA-F]")


def is_id_prefix(value: str) -> bool:
    """Return True if value could be a (partial) hex ID, including "".

    Examples:
        >>> is_id_prefix("4b2C")
        True
        >>> is_id_prefix("4b.*")
        False
    """
    return NOT_HEX_RE.search(value) is None


def match_any_regex(candidate: str, patterns: Iterable[str]) -> bool:
    """Return True if any pattern matches anywhere in candidate.

    Patterns are searched, not anchored. A pattern that fails to compile is
    skipped.

    Args:
        candidate: String to test, e.g. a pod or container name.
        patterns: Regular expressions to try in order.

    Returns:
        True on the first matching pattern, False if none match.
    """
    for pattern in patterns:
        try:
            if re.search(pattern, candidate):
                return True
        except (re.error, OverflowError, RecursionError):
            continue
    return False


def match_id(candidate: str, values: Iterable[str]) -> bool:
    """Match an ID against identifier filter values.

    Hex-only values are lowercase prefixes of the ID; anything else is a
    regex searched in the ID. Invalid regexes match nothing.

    Args:
        candidate: Full ID as reported by the entity model.
        values: Raw filter values.

    Returns:
        True if any value matches.
    """
    for want in values:
        if is_id_prefix(want):
            if candidate.startswith(want.lower()):
                return True
        elif match_any_regex(candidate, (want,)):
            return True
    return False


__all__ = ["NOT_HEX_RE", "is_id_prefix", "match_any_regex", "match_id"]
