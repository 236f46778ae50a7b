"""Shared types for the predicate compilers.

Classes:
    CompileContext: Collaborators a compiler may need besides its values

Type aliases:
    PodPredicate: A compiled filter, ``Pod -> bool``
    Clock: Zero-argument callable returning the current time
    Compiler: ``(values, context) -> PodPredicate``
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from podfilter.config import FilterSettings, get_settings

if TYPE_CHECKING:
    from podfilter.networks.registry import NetworkRegistry
    from podfilter.pods.contract import Pod

PodPredicate = Callable[["Pod"], bool]
Clock = Callable[[], datetime]
Compiler = Callable[[Sequence[str], "CompileContext"], PodPredicate]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CompileContext:
    """Collaborators available to every compiler.

    Attributes:
        registry: Network registry; only the network family uses it.
        settings: Behavior switches, see FilterSettings.
        clock: Time source for the until family.
    """

    registry: NetworkRegistry | None = None
    settings: FilterSettings = field(default_factory=get_settings)
    clock: Clock = utc_now


__all__ = ["PodPredicate", "Clock", "Compiler", "CompileContext", "utc_now"]
