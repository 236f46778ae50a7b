"""Value-or-error result returned by pod entity accessors.

Accessors that can fail (child enumeration, status fetch, infra lookup)
return a Lookup instead of raising, so a predicate can treat any failure
as "no match" with a plain ``if not result.ok`` check.

Example:
    >>> ids = pod.child_container_ids()
    >>> if not ids.ok:
    ...     return False
    >>> count = len(ids.value)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from podfilter.errors import PodLookupError

T = TypeVar("T")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of a fallible read against the pod entity model.

    Exactly one of ``value`` and ``error`` is meaningful: a successful lookup
    has ``error is None``.

    Attributes:
        value: The looked-up value (None on failure).
        error: The failure reason (None on success).
    """

    value: T | None = None
    error: PodLookupError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Lookup[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: PodLookupError | str) -> Lookup[T]:
        if isinstance(error, str):
            error = PodLookupError(error)
        return cls(error=error)


__all__ = ["Lookup"]
