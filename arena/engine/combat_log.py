"""Event sink that collects combat narration."""

import logging
from typing import Callable, Optional

from arena.config import DEFAULT_COMBAT_LOG_CAPACITY
from arena.models.events import CombatEvent, EventType, SkipReason

logger = logging.getLogger(__name__)

EventListener = Callable[[CombatEvent], None]


class CombatLog:
    """In-memory record of combat events.

    The engine never formats text itself: every state change is recorded here
    as a CombatEvent and forwarded to subscribed listeners, which decide how
    (or whether) to render it.
    """

    def __init__(self, capacity: Optional[int] = DEFAULT_COMBAT_LOG_CAPACITY) -> None:
        """
        Initialize an empty log.

        Args:
            capacity: Maximum number of events kept; the oldest are dropped first.
                None keeps every event.
        """
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._events: list[CombatEvent] = []
        self._listeners: list[EventListener] = []
        self._next_sequence = 0
        self._round_number = 0

    @property
    def capacity(self) -> Optional[int]:
        """Get log capacity (None when unbounded)."""
        return self._capacity

    @property
    def round_number(self) -> int:
        """Get the round new events are attributed to."""
        return self._round_number

    def start_round(self, round_number: int) -> None:
        """Attribute subsequent events to the given 1-based round."""
        if round_number < 0:
            raise ValueError("round_number must not be negative")
        self._round_number = round_number

    def subscribe(self, listener: EventListener) -> None:
        """Register a callable invoked with every new event."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        """Remove a previously registered listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def record(
        self,
        event_type: EventType,
        actor: str,
        *,
        target: Optional[str] = None,
        amount: Optional[int] = None,
        reason: Optional[SkipReason] = None,
        resources: Optional[dict[str, int]] = None,
    ) -> CombatEvent:
        """
        Record an event and notify listeners.

        Args:
            event_type: What happened
            actor: Acting character name
            target: Affected character name
            amount: Numeric outcome (damage, healing, ...)
            reason: Why an action was skipped
            resources: Snapshot of the actor's resources

        Returns:
            The stored CombatEvent
        """
        event = CombatEvent(
            sequence=self._next_sequence,
            round_number=self._round_number,
            event_type=event_type,
            actor=actor,
            target=target,
            amount=amount,
            reason=reason,
            resources=resources or {},
        )
        self._next_sequence += 1
        self._events.append(event)
        if self._capacity is not None and len(self._events) > self._capacity:
            del self._events[0 : len(self._events) - self._capacity]
        logger.debug(f"Recorded combat event: {event}")

        for listener in list(self._listeners):
            listener(event)
        return event

    def events(self) -> list[CombatEvent]:
        """List all retained events."""
        return self._events.copy()

    def events_for(self, actor: str) -> list[CombatEvent]:
        """List events whose actor is the given character."""
        return [e for e in self._events if e.actor == actor]

    def of_type(self, event_type: EventType) -> list[CombatEvent]:
        """List events of a single type."""
        return [e for e in self._events if e.event_type == event_type]

    def last(self) -> Optional[CombatEvent]:
        """Get the most recent event."""
        if self._events:
            return self._events[-1]
        return None

    def clear(self) -> None:
        """Drop all events and reset sequence and round counters."""
        self._events.clear()
        self._next_sequence = 0
        self._round_number = 0

    def __len__(self) -> int:
        return len(self._events)

    def to_dict(self) -> dict:
        """Serialize the retained events."""
        return {
            "capacity": self._capacity,
            "events": [e.model_dump(mode="json") for e in self._events],
        }
