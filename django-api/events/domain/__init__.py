from events.domain.clock import Clock, FixedClock, SystemClock
from events.domain.errors import (
    DomainError,
    DuplicateEventError,
    DuplicateRegistrationError,
    ErrorCode,
    EventNotFoundError,
    InvalidArgumentError,
    InvalidStateError,
)
from events.domain.models import (
    DEFAULT_NUMBER_OF_SEATS,
    Event,
    EventStatus,
    Person,
    Registration,
)
from events.domain.value_objects import Capacity, EventId, EventKey

__all__ = [
    "Event",
    "EventStatus",
    "Person",
    "Registration",
    "DEFAULT_NUMBER_OF_SEATS",
    "EventId",
    "EventKey",
    "Capacity",
    "Clock",
    "SystemClock",
    "FixedClock",
    "DomainError",
    "ErrorCode",
    "InvalidArgumentError",
    "InvalidStateError",
    "DuplicateRegistrationError",
    "DuplicateEventError",
    "EventNotFoundError",
]
