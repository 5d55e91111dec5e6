"""Domain models for events and registrations.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, Self

from events.domain.clock import Clock, SystemClock
from events.domain.errors import (
    DuplicateRegistrationError,
    InvalidArgumentError,
    InvalidStateError,
)
from events.domain.value_objects import Capacity, EventId, EventKey

DEFAULT_NUMBER_OF_SEATS = 20


class EventStatus(Enum):
    """Lifecycle of an event. Only ``OPEN -> CLOSED`` is possible."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Person:
    """Someone who wants a seat, identified by email address."""

    email: str
    name: str = ""

    def __post_init__(self) -> None:
        if not self.email or not self.email.strip():
            raise InvalidArgumentError("Person requires an email address.")


@dataclass(frozen=True)
class Registration:
    """A claim on one seat. Two registrations are equal if the email is."""

    email: str
    name: str = field(default="", compare=False)

    @classmethod
    def for_person(cls, person: Person) -> Self:
        return cls(email=person.email, name=person.name)


class Event:
    """A dated, capacity-limited event people register for.

    Events are equal when date and name match; the storage id plays no
    part, so a freshly built candidate equals the stored event it
    duplicates.
    """

    def __init__(
        self,
        held_on: date,
        name: str,
        number_of_seats: int = DEFAULT_NUMBER_OF_SEATS,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        if held_on is None or held_on <= self._clock.today():
            raise InvalidArgumentError("Event requires a date in the future.")
        if name is None or not name.strip():
            raise InvalidArgumentError("Event requires a non-empty name.")

        self.id: EventId | None = None
        self.held_on = held_on
        self.name = name
        self.status = EventStatus.OPEN
        self._registrations: list[Registration] = []
        self.number_of_seats = number_of_seats

    @classmethod
    def restore(
        cls,
        *,
        id: EventId,
        held_on: date,
        name: str,
        number_of_seats: int,
        status: EventStatus,
        registrations: Iterable[Registration] = (),
        clock: Clock | None = None,
    ) -> Self:
        """Rebuild a stored event without the creation-time date check."""
        event = cls.__new__(cls)
        event._clock = clock or SystemClock()
        event.id = id
        event.held_on = held_on
        event.name = name
        event.status = status
        event._registrations = list(registrations)
        event._number_of_seats = Capacity(number_of_seats).value
        return event

    @property
    def number_of_seats(self) -> int:
        return self._number_of_seats

    @number_of_seats.setter
    def number_of_seats(self, value: int) -> None:
        # Not checked against the current registrations, see DESIGN.md.
        self._number_of_seats = Capacity(value).value

    @property
    def registrations(self) -> tuple[Registration, ...]:
        return tuple(self._registrations)

    @property
    def number_of_free_seats(self) -> int:
        return self._number_of_seats - len(self._registrations)

    def is_past_event(self) -> bool:
        return self.held_on < self._clock.today()

    def is_open(self) -> bool:
        return self.status is EventStatus.OPEN

    def is_closed(self) -> bool:
        return self.status is EventStatus.CLOSED

    def is_full(self) -> bool:
        return len(self._registrations) == self._number_of_seats

    def close(self) -> None:
        self.status = EventStatus.CLOSED

    def register(self, person: Person) -> Registration:
        """Admit ``person`` and return the new registration.

        Checks run in a fixed order so the caller sees the most relevant
        reason: closed, then past, then full, then duplicate email.

        Raises:
            InvalidStateError: If the event is closed, past or full.
            DuplicateRegistrationError: If the email is already registered.
        """
        if self.is_closed():
            raise InvalidStateError("Cannot register for a closed event.")
        if self.is_past_event():
            raise InvalidStateError("Cannot register for a past event.")
        if self.is_full():
            raise InvalidStateError("Cannot register for a full event.")

        registration = Registration.for_person(person)
        if registration in self._registrations:
            raise DuplicateRegistrationError(person.email)
        self._registrations.append(registration)
        return registration

    def as_example(self) -> EventKey:
        return EventKey(held_on=self.held_on, name=self.name)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Event):
            return NotImplemented
        return self.held_on == other.held_on and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.held_on, self.name))

    def __repr__(self) -> str:
        return (
            f"Event(held_on={self.held_on!r}, name={self.name!r}, "
            f"number_of_seats={self._number_of_seats}, status={self.status.value})"
        )
