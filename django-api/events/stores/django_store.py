"""Django ORM implementation of the EventStore."""

import logging
from contextlib import AbstractContextManager
from datetime import date

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from events import models
from events.domain import (
    Clock,
    DuplicateEventError,
    Event,
    EventId,
    EventKey,
    EventStatus,
    Registration,
    SystemClock,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or SystemClock()

    def find_one_by_held_on(self, held_on: date) -> Event | None:
        record = self._events().filter(held_on=held_on).order_by("name").first()
        return self._to_domain(record) if record else None

    def find_one(self, example: EventKey) -> Event | None:
        record = self._events().filter(held_on=example.held_on, name=example.name).first()
        return self._to_domain(record) if record else None

    def find_open(self) -> list[Event]:
        records = self._events().filter(status=models.Event.Status.OPEN)
        return [self._to_domain(record) for record in records]

    def save(self, event: Event) -> Event:
        with transaction.atomic():
            if event.id is None:
                record = self._insert(event)
                event.id = EventId(record.id)
            else:
                record = models.Event.objects.get(pk=event.id.value)
                record.number_of_seats = event.number_of_seats
                record.status = event.status.value
                record.save(update_fields=["number_of_seats", "status", "updated_at"])
            self._append_registrations(record, event.registrations)
        return event

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def _insert(self, event: Event) -> models.Event:
        try:
            # Savepoint, so a lost race leaves the outer transaction usable.
            with transaction.atomic():
                return models.Event.objects.create(
                    held_on=event.held_on,
                    name=event.name,
                    number_of_seats=event.number_of_seats,
                    status=event.status.value,
                )
        except IntegrityError:
            existing = self.find_one(event.as_example())
            if existing is None:
                raise
            logger.warning(
                "Concurrent insert of event %s on %s rejected", event.name, event.held_on
            )
            raise DuplicateEventError(existing) from None

    def _append_registrations(
        self, record: models.Event, registrations: tuple[Registration, ...]
    ) -> None:
        # Registrations are append-only, so anything past the stored count is new.
        stored = record.registrations.count()
        new = [
            models.Registration(
                event=record,
                email=registration.email,
                name=registration.name,
                position=position,
            )
            for position, registration in enumerate(registrations)
            if position >= stored
        ]
        if new:
            models.Registration.objects.bulk_create(new)

    def _events(self) -> QuerySet[models.Event]:
        return models.Event.objects.prefetch_related("registrations")

    def _to_domain(self, record: models.Event) -> Event:
        return Event.restore(
            id=EventId(record.id),
            held_on=record.held_on,
            name=record.name,
            number_of_seats=record.number_of_seats,
            status=EventStatus(record.status),
            registrations=[
                Registration(email=r.email, name=r.name)
                for r in record.registrations.all()
            ],
            clock=self.clock,
        )
