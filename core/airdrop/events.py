"""
Campaign Events

Notification models and the recorder that collects them. A campaign emits
an event only after the operation's state has committed; transport to logs,
queues or websockets is left to subscribers.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


EventKind = Literal["claimed", "funded", "swept"]


class CampaignEvent(BaseModel):
    """Common envelope for every campaign notification."""

    model_config = ConfigDict(extra="forbid")

    event_id: str = Field(default="", description="Deterministic event identifier")
    kind: EventKind
    campaign_id: str
    sequence: int = Field(default=0, ge=0, description="Position in the recorder")
    emitted_at: int = Field(..., description="Campaign clock time, unix ms")


class ClaimedEvent(CampaignEvent):
    """A recipient received their allocation."""

    kind: Literal["claimed"] = "claimed"
    identity: str
    amount: int = Field(..., ge=0)


class FundedEvent(CampaignEvent):
    """Tokens were pulled into the campaign."""

    kind: Literal["funded"] = "funded"
    funder: str
    amount: int = Field(..., gt=0)


class SweptEvent(CampaignEvent):
    """The owner recovered the remaining balance."""

    kind: Literal["swept"] = "swept"
    owner: str
    amount: int = Field(..., ge=0)


EventSubscriber = Callable[[CampaignEvent], None]


def generate_event_id(kind: str, sequence: int, payload: dict[str, Any]) -> str:
    """
    Generate a deterministic event ID.

    Format: ev_{kind}_{hash_prefix}
    """
    stable_str = f"{kind}|{sequence}|{sorted(payload.items())}"
    hash_hex = hashlib.sha256(stable_str.encode()).hexdigest()[:12]
    return f"ev_{kind}_{hash_hex}"


class EventRecorder:
    """
    Records campaign events and fans them out to subscribers.

    Usage:
        recorder = EventRecorder()
        recorder.subscribe(lambda ev: print(ev.kind))
        campaign = Campaign(..., events=recorder)
        ...
        claims = recorder.get_events(kind="claimed")
    """

    def __init__(self) -> None:
        self._events: list[CampaignEvent] = []
        self._subscribers: list[EventSubscriber] = []
        self._lock = threading.RLock()

    def subscribe(self, subscriber: EventSubscriber) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: EventSubscriber) -> None:
        self._subscribers.remove(subscriber)

    def emit(self, event: CampaignEvent) -> CampaignEvent:
        """
        Stamp an event with its sequence and id, store it, and notify.

        Subscriber failures are logged and do not undo the event: the
        operation that produced it has already committed.
        """
        with self._lock:
            event.sequence = len(self._events)
            payload = event.model_dump(exclude={"event_id", "sequence"})
            event.event_id = generate_event_id(event.kind, event.sequence, payload)
            self._events.append(event)

        for subscriber in list(self._subscribers):
            try:
                subscriber(event)
            except Exception as e:
                logger.error(f"Event subscriber failed for {event.event_id}: {e}")

        return event

    def get_events(
        self,
        *,
        kind: Optional[EventKind] = None,
        campaign_id: Optional[str] = None,
    ) -> list[CampaignEvent]:
        with self._lock:
            events = list(self._events)
        if kind is not None:
            events = [e for e in events if e.kind == kind]
        if campaign_id is not None:
            events = [e for e in events if e.campaign_id == campaign_id]
        return events

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


__all__ = [
    "EventKind",
    "CampaignEvent",
    "ClaimedEvent",
    "FundedEvent",
    "SweptEvent",
    "EventSubscriber",
    "EventRecorder",
    "generate_event_id",
]
