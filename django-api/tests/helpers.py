"""Shared test dates and an in-memory event store."""

import copy
import uuid
from contextlib import nullcontext
from datetime import date

from events.domain import Clock, Event, EventId, EventKey, SystemClock
from events.stores.interfaces import EventStore

JANUARY_1ST = date(2018, 1, 1)
OCTOBER_31ST = date(2018, 10, 31)
NOVEMBER_1ST = date(2018, 11, 1)


class FakeEventStore(EventStore):
    """In-memory store handing out copies, like a database would."""

    def __init__(self, *events: Event, clock: Clock | None = None) -> None:
        self.clock = clock or SystemClock()
        self._events: dict[EventKey, Event] = {}
        self.saved: list[Event] = []
        self.transactions = 0
        for event in events:
            self.save(event)
        self.saved.clear()

    def find_one_by_held_on(self, held_on: date) -> Event | None:
        matches = sorted(
            (e for e in self._events.values() if e.held_on == held_on),
            key=lambda e: e.name,
        )
        return self._restore(matches[0]) if matches else None

    def find_one(self, example: EventKey) -> Event | None:
        for event in self._events.values():
            if example.matches(event):
                return self._restore(event)
        return None

    def find_open(self) -> list[Event]:
        return [self._restore(e) for e in self._events.values() if e.is_open()]

    def save(self, event: Event) -> Event:
        if event.id is None:
            event.id = EventId(uuid.uuid4())
        self._events[event.as_example()] = copy.deepcopy(event)
        self.saved.append(event)
        return event

    def atomic(self):
        self.transactions += 1
        return nullcontext()

    def _restore(self, event: Event) -> Event:
        return Event.restore(
            id=event.id,
            held_on=event.held_on,
            name=event.name,
            number_of_seats=event.number_of_seats,
            status=event.status,
            registrations=event.registrations,
            clock=self.clock,
        )
