"""Domain primitives that enforce validity at creation time."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Self
from uuid import UUID

from events.domain.errors import InvalidArgumentError

if TYPE_CHECKING:
    from events.domain.models import Event


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event, assigned by storage."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing the number of seats."""

    value: int

    def __post_init__(self) -> None:
        if self.value is None or self.value < 0:
            raise InvalidArgumentError("Event requires some seats.")


@dataclass(frozen=True)
class EventKey:
    """Lookup example matching stored events by date and name.

    Seats and status are ignored, so a key built from a fresh candidate
    finds the stored event it would collide with.
    """

    held_on: date
    name: str

    def as_example(self) -> EventKey:
        return self

    def matches(self, event: Event) -> bool:
        return event.held_on == self.held_on and event.name == self.name
