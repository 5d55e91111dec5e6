"""Unit tests for EventService.

These test the transaction boundary, duplicate detection and error mapping
against an in-memory store.
Run with: pytest tests/test_services.py -v
"""

from datetime import date

import pytest

from events.domain import (
    DuplicateEventError,
    DuplicateRegistrationError,
    Event,
    EventKey,
    EventNotFoundError,
    FixedClock,
    InvalidArgumentError,
    InvalidStateError,
    Person,
)
from events.services import EventService

from tests.helpers import NOVEMBER_1ST, OCTOBER_31ST, FakeEventStore


@pytest.fixture
def service(store) -> EventService:
    return EventService(store)


class TestCreateEvent:
    def test_duplicate_event_is_rejected(self, service, store, clock):
        candidate = Event(OCTOBER_31ST, "Halloween", 99, clock=clock)

        with pytest.raises(DuplicateEventError) as excinfo:
            service.create_event(candidate)

        assert excinfo.value.existing == candidate
        assert excinfo.value.existing.number_of_seats == 20
        assert store.saved == []

    def test_new_event_is_saved(self, service, store, clock):
        candidate = Event(NOVEMBER_1ST, "test", clock=clock)

        created = service.create_event(candidate)

        assert created == candidate
        assert created.id is not None
        assert store.saved == [candidate]
        assert store.transactions == 1

    def test_new_event_uses_store_clock(self, service):
        with pytest.raises(InvalidArgumentError):
            service.new_event(date(2017, 12, 31), "too late")

        event = service.new_event(NOVEMBER_1ST, "test")
        assert event.number_of_seats == 20
        assert service.new_event(NOVEMBER_1ST, "test", 3).number_of_seats == 3

    def test_new_and_stored_events_share_one_clock(self, person):
        store = FakeEventStore(clock=FixedClock(date(2018, 10, 31)))
        service = EventService(store)

        with pytest.raises(InvalidArgumentError):
            service.new_event(date(2018, 10, 31), "today")
        event = service.create_event(service.new_event(NOVEMBER_1ST, "tomorrow"))

        store.clock = FixedClock(date(2018, 11, 2))
        with pytest.raises(InvalidStateError, match="past event"):
            service.register_for(event, person)


class TestRegisterFor:
    def test_registers_on_the_stored_event(self, service, store, clock, halloween, person):
        reference = Event(OCTOBER_31ST, "Halloween", 1, clock=clock)

        updated = service.register_for(reference, person)

        assert updated.number_of_free_seats == 19
        assert reference.registrations == ()
        assert store.find_one(halloween.as_example()).number_of_free_seats == 19
        assert store.transactions == 1

    def test_accepts_a_key_as_reference(self, service, person):
        updated = service.register_for(EventKey(OCTOBER_31ST, "Halloween"), person)

        assert [r.email for r in updated.registrations] == [person.email]

    def test_unknown_event_raises_not_found(self, service, person):
        with pytest.raises(EventNotFoundError) as excinfo:
            service.register_for(EventKey(NOVEMBER_1ST, "nope"), person)

        assert excinfo.value.held_on == NOVEMBER_1ST
        assert excinfo.value.name == "nope"

    def test_duplicate_registration_is_not_saved(self, service, store, person):
        key = EventKey(OCTOBER_31ST, "Halloween")
        service.register_for(key, person)

        with pytest.raises(DuplicateRegistrationError):
            service.register_for(key, person)

        assert len(store.find_one(key).registrations) == 1

    def test_closed_event_refuses_registration(self, clock, person):
        closed = Event(NOVEMBER_1ST, "closed", clock=clock)
        closed.close()
        service = EventService(FakeEventStore(closed, clock=clock))

        with pytest.raises(InvalidStateError, match="closed event"):
            service.register_for(closed, person)


class TestQueries:
    def test_list_open_events_skips_closed_ones(self, clock, halloween):
        closed = Event(NOVEMBER_1ST, "closed", clock=clock)
        closed.close()
        service = EventService(FakeEventStore(halloween, closed, clock=clock))

        assert service.list_open_events() == [halloween]

    def test_get_event_returns_none_when_absent(self, service, halloween):
        assert service.get_event(OCTOBER_31ST, "Halloween") == halloween
        assert service.get_event(NOVEMBER_1ST, "Halloween") is None
