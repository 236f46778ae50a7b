"""Label filter matching."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def parse_label_filter(value: str) -> tuple[str, str | None]:
    """Split a label filter into (key, expected value).

    Examples:
        >>> parse_label_filter("app=web")
        ('app', 'web')
        >>> parse_label_filter("app")
        ('app', None)
        >>> parse_label_filter("app=")
        ('app', None)
    """
    key, sep, expected = value.partition("=")
    if not sep or expected == "":
        return key, None
    return key, expected


def match_label_filters(values: Iterable[str], labels: Mapping[str, str]) -> bool:
    """Return True if labels satisfy every label filter.

    Unlike other filter families, label values are AND-combined: ``key``
    requires the key to be present and ``key=value`` requires an exact value.

    Args:
        values: Label filters such as ``"app"`` or ``"tier=frontend"``.
        labels: The entity's labels.

    Returns:
        True if all filters match (vacuously True for no filters).
    """
    for value in values:
        key, expected = parse_label_filter(value)
        if key not in labels:
            return False
        if expected is not None and labels[key] != expected:
            return False
    return True


__all__ = ["parse_label_filter", "match_label_filters"]
