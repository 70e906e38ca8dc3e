"""Publisher and subscription event handles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class EventType(IntEnum):
    """Kinds of events a publisher or subscription may report."""

    LIVELINESS_CHANGED = 0
    REQUESTED_DEADLINE_MISSED = 1
    REQUESTED_QOS_INCOMPATIBLE = 2
    MESSAGE_LOST = 3
    SUBSCRIPTION_INCOMPATIBLE_TYPE = 4
    SUBSCRIPTION_MATCHED = 5
    LIVELINESS_LOST = 6
    OFFERED_DEADLINE_MISSED = 7
    OFFERED_QOS_INCOMPATIBLE = 8
    PUBLISHER_INCOMPATIBLE_TYPE = 9
    PUBLICATION_MATCHED = 10
    INVALID = 11


@dataclass
class Event:
    """An event handle: implementation identifier, payload and kind."""

    implementation_identifier: str | None = None
    data: Any = None
    event_type: EventType = EventType.INVALID

    def fini(self) -> None:
        """Return the event to its zero-initialized state."""
        self.implementation_identifier = None
        self.data = None
        self.event_type = EventType.INVALID


def zero_initialized_event() -> Event:
    """Return an event with no implementation, no data and an invalid type."""
    return Event()