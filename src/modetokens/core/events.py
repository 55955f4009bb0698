"""
Structured export events.

The selector, resolver and exporter never log directly. They report what
happened to an injected EventSink so callers decide where diagnostics go:
``logging_sink`` forwards to the standard logging tree, ``EventCollector``
keeps them in memory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class EventKind(StrEnum):
    """What an export event reports."""

    COLLECTION_SELECTED = "collection-selected"
    AMBIGUOUS_COLLECTION = "ambiguous-collection"
    CANDIDATES_SELECTED = "candidates-selected"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    ALIAS_FOLLOWED = "alias-followed"
    SINGLE_MODE = "single-mode"
    MODE_FALLBACK = "mode-fallback"
    MISSING_MODE = "missing-mode"
    CYCLE = "cycle"
    DANGLING_ALIAS = "dangling-alias"
    MISSING_COLLECTION = "missing-collection"
    NON_HEX_STRING = "non-hex-string"
    UNRECOGNIZED_VALUE = "unrecognized-value"
    VARIABLE_EXPORTED = "variable-exported"
    VARIABLE_SKIPPED = "variable-skipped"


# Resolution failures: the variable is dropped, the run continues.
RESOLUTION_FAILURES: frozenset[EventKind] = frozenset(
    {
        EventKind.MISSING_MODE,
        EventKind.CYCLE,
        EventKind.DANGLING_ALIAS,
        EventKind.MISSING_COLLECTION,
        EventKind.NON_HEX_STRING,
        EventKind.UNRECOGNIZED_VALUE,
    }
)

_WARNING_KINDS: frozenset[EventKind] = RESOLUTION_FAILURES | {
    EventKind.AMBIGUOUS_COLLECTION,
    EventKind.MODE_FALLBACK,
    EventKind.VARIABLE_SKIPPED,
}


@dataclass(frozen=True)
class ExportEvent:
    """One diagnostic record from an export run."""

    kind: EventKind
    message: str
    variable_name: str | None = None
    mode_id: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def is_warning(self) -> bool:
        return self.kind in _WARNING_KINDS

    @property
    def is_resolution_failure(self) -> bool:
        return self.kind in RESOLUTION_FAILURES


EventSink = Callable[[ExportEvent], None]


def logging_sink(event: ExportEvent) -> None:
    """Forward an event to the logging tree (warnings at WARNING, rest at DEBUG)."""
    level = logging.WARNING if event.is_warning else logging.DEBUG
    logger.log(level, "[%s] %s", event.kind.value, event.message)


class EventCollector:
    """Event sink that records every event, optionally forwarding it."""

    def __init__(self, forward: EventSink | None = None) -> None:
        self.events: list[ExportEvent] = []
        self._forward = forward

    def __call__(self, event: ExportEvent) -> None:
        self.events.append(event)
        if self._forward is not None:
            self._forward(event)

    def of_kind(self, kind: EventKind) -> list[ExportEvent]:
        return [event for event in self.events if event.kind == kind]

    @property
    def warnings(self) -> list[ExportEvent]:
        return [event for event in self.events if event.is_warning]

    def kinds(self) -> list[EventKind]:
        return [event.kind for event in self.events]
