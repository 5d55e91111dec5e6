"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every mutation runs inside one store transaction. There is no version
check of our own: two concurrent registrations for the last seat are
only kept apart by the database's isolation level.
"""

import logging
from datetime import date
from typing import Protocol

from events.domain import (
    DEFAULT_NUMBER_OF_SEATS,
    DomainError,
    DuplicateEventError,
    Event,
    EventKey,
    EventNotFoundError,
    Person,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventReference(Protocol):
    """Anything that can be turned into a lookup example (events, keys)."""

    def as_example(self) -> EventKey: ...


class EventService:
    """Service for creating events and registering people for them."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def new_event(
        self, held_on: date, name: str, number_of_seats: int | None = None
    ) -> Event:
        """Build an unsaved event dated against the store's clock.

        Raises:
            InvalidArgumentError: If date, name or seats are invalid.
        """
        if number_of_seats is None:
            number_of_seats = DEFAULT_NUMBER_OF_SEATS
        return Event(held_on, name, number_of_seats, clock=self._store.clock)

    def create_event(self, candidate: Event) -> Event:
        """Persist a new event unless one with the same date and name exists.

        Raises:
            DuplicateEventError: If a matching event is already stored.
        """
        with self._store.atomic():
            existing = self._store.find_one(candidate.as_example())
            if existing is not None:
                logger.info(
                    "Rejected duplicate event %s on %s", candidate.name, candidate.held_on
                )
                raise DuplicateEventError(existing)
            event = self._store.save(candidate)
        logger.info("Created event %s on %s (id=%s)", event.name, event.held_on, event.id)
        return event

    def register_for(self, event: EventReference, person: Person) -> Event:
        """Register ``person`` on the stored version of ``event``.

        The event is re-read inside the transaction and admission runs
        on that copy, never on the caller's instance.

        Raises:
            EventNotFoundError: If no stored event matches.
            InvalidStateError: If the event is closed, past or full.
            DuplicateRegistrationError: If the email is already registered.
        """
        example = event.as_example()
        with self._store.atomic():
            stored = self._store.find_one(example)
            if stored is None:
                raise EventNotFoundError(example.held_on, example.name)
            try:
                stored.register(person)
            except DomainError as error:
                logger.info(
                    "Registration of %s for %s on %s refused: %s",
                    person.email,
                    stored.name,
                    stored.held_on,
                    error.message,
                )
                raise
            self._store.save(stored)
        logger.info(
            "Registered %s for %s on %s (%d seats left)",
            person.email,
            stored.name,
            stored.held_on,
            stored.number_of_free_seats,
        )
        return stored

    def list_open_events(self) -> list[Event]:
        """Return all events still open for registration."""
        return self._store.find_open()

    def get_event(self, held_on: date, name: str) -> Event | None:
        """Return the event with this date and name, or None."""
        return self._store.find_one(EventKey(held_on=held_on, name=name))
