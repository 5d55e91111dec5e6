"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from events.domain import Event, FixedClock, Person

from tests.helpers import JANUARY_1ST, OCTOBER_31ST, FakeEventStore


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(JANUARY_1ST)


@pytest.fixture
def halloween(clock: FixedClock) -> Event:
    return Event(OCTOBER_31ST, "Halloween", clock=clock)


@pytest.fixture
def store(halloween: Event, clock: FixedClock) -> FakeEventStore:
    return FakeEventStore(halloween, clock=clock)


@pytest.fixture
def person() -> Person:
    return Person(email="michael@example.com", name="Michael")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()
