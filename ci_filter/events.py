"""Event sinks injected into the classifier and expander."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping

from ci_filter.models import EventKind

logger = logging.getLogger(__name__)

_DEBUG_KINDS = frozenset(
    {EventKind.FILE_MATCHED, EventKind.FILE_UNMATCHED, EventKind.SCOPE_ABSORBED}
)


@dataclass(frozen=True)
class Event:
    kind: EventKind
    payload: Mapping[str, Any]


class IEventSink(ABC):
    @abstractmethod
    def record(self, kind: EventKind, payload: Mapping[str, Any]) -> None:
        """Receive one event emitted during classification or expansion."""


class NullEventSink(IEventSink):
    def record(self, kind: EventKind, payload: Mapping[str, Any]) -> None:
        return None


class LoggingEventSink(IEventSink):
    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def record(self, kind: EventKind, payload: Mapping[str, Any]) -> None:
        level = logging.DEBUG if kind in _DEBUG_KINDS else logging.INFO
        details = " ".join(f"{key}={_format_value(value)}" for key, value in payload.items())
        self._logger.log(level, "%s %s", kind.value, details)


class RecordingEventSink(IEventSink):
    def __init__(self, forward: IEventSink | None = None) -> None:
        self.events: list[Event] = []
        self._forward = forward

    def record(self, kind: EventKind, payload: Mapping[str, Any]) -> None:
        self.events.append(Event(kind=kind, payload=dict(payload)))
        if self._forward is not None:
            self._forward.record(kind, payload)

    def of_kind(self, kind: EventKind) -> list[Event]:
        return [event for event in self.events if event.kind == kind]


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(sorted(str(item) for item in value)) + "]"
    return str(value)
