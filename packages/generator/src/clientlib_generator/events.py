"""Progress events emitted while generating clientlibs.

Every step of the pipeline reports to a ``GenerationObserver``. The
default ``LoggingObserver`` turns events into structlog records; tests
and embedding tools can pass their own observer instead.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Protocol

from clientlib_common import get_logger

logger = get_logger(__name__)


class EventKind(str, Enum):
    """Pipeline step an event reports on."""

    LIBRARY_STARTED = "library_started"
    LIBRARY_REMOVED = "library_removed"
    DESCRIPTOR_WRITTEN = "descriptor_written"
    MANIFEST_WRITTEN = "manifest_written"
    DIRECTORY_CREATED = "directory_created"
    FILE_COPIED = "file_copied"
    LIBRARY_COMPLETED = "library_completed"


@dataclass(frozen=True)
class GenerationEvent:
    """A single progress event."""

    kind: EventKind
    library: str
    path: Optional[Path] = None
    src: Optional[str] = None
    detail: dict[str, Any] = field(default_factory=dict)


class GenerationObserver(Protocol):
    """Receives pipeline events in the order they happen."""

    def notify(self, event: GenerationEvent) -> None: ...


class LoggingObserver:
    """Observer that logs each event at info level."""

    def notify(self, event: GenerationEvent) -> None:
        context: dict[str, Any] = {"library": event.library}
        if event.src is not None:
            context["src"] = event.src
        if event.path is not None:
            context["path"] = str(event.path)
        context.update(event.detail)
        logger.info(event.kind.value, **context)


class RecordingObserver:
    """Observer that keeps every event in memory."""

    def __init__(self) -> None:
        self.events: list[GenerationEvent] = []

    def notify(self, event: GenerationEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[EventKind]:
        return [event.kind for event in self.events]

    def of_kind(self, kind: EventKind) -> list[GenerationEvent]:
        return [event for event in self.events if event.kind is kind]
