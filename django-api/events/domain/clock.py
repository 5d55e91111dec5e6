"""Clocks deciding what "today" is for event date checks.

A clock is passed explicitly to events, stores and the service so that
tests can pin the date without touching shared state.
"""

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Source of the current date."""

    def today(self) -> date: ...


class SystemClock:
    """Wall clock of the running process."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    """Clock that always reports the same day."""

    day: date

    def today(self) -> date:
        return self.day
