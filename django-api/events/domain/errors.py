"""Domain error codes for the events module."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from events.domain.models import Event


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    DUPLICATE_EVENT = "DUPLICATE_EVENT"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidArgumentError(DomainError):
    """Raised when an event is built or changed with invalid input."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_ARGUMENT, message=message)


class InvalidStateError(DomainError):
    """Raised when registering for a closed, past or full event."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_STATE, message=message)


class DuplicateRegistrationError(DomainError):
    """Raised when an email address is already registered for an event."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REGISTRATION,
            message=f"Already registered with email address {email}",
        )
        self.email = email


class DuplicateEventError(DomainError):
    """Raised when an event with the same date and name already exists.

    The stored event is kept on ``existing`` so callers can point to it.
    """

    def __init__(self, existing: Event) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EVENT,
            message="Event already exists",
        )
        self.existing = existing


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, held_on: date, name: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.held_on = held_on
        self.name = name
