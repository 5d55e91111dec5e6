"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date

from events.domain import Clock, Event, EventKey


class EventStore(ABC):
    """Interface for event persistence operations.

    The store's clock is the one every event it returns answers
    "is this past?" with, so the service builds new events with it too.
    """

    clock: Clock

    @abstractmethod
    def find_one_by_held_on(self, held_on: date) -> Event | None:
        """Return an event held on the given date, or None if there is none."""
        ...

    @abstractmethod
    def find_one(self, example: EventKey) -> Event | None:
        """Return the event matching the example's date and name exactly."""
        ...

    @abstractmethod
    def find_open(self) -> list[Event]:
        """Return all open events."""
        ...

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Persist the event and its registrations, assigning an id if new."""
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager spanning one transaction."""
        ...
