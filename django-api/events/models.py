"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models

from events.domain.models import DEFAULT_NUMBER_OF_SEATS, EventStatus


class Event(models.Model):
    """Persistence model for events."""

    class Status(models.TextChoices):
        OPEN = EventStatus.OPEN.value, "Open"
        CLOSED = EventStatus.CLOSED.value, "Closed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    held_on = models.DateField()
    name = models.CharField(max_length=512)
    number_of_seats = models.PositiveIntegerField(default=DEFAULT_NUMBER_OF_SEATS)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.OPEN
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        ordering = ["held_on", "name"]
        constraints = [
            models.UniqueConstraint(fields=["held_on", "name"], name="events_uk"),
        ]
        indexes = [
            models.Index(fields=["status", "held_on"], name="events_status_held_on_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.held_on:%Y-%m-%d})"


class Registration(models.Model):
    """Persistence model for registrations, owned by an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="registrations"
    )
    email = models.EmailField(max_length=254)
    name = models.CharField(max_length=255, blank=True, default="")
    position = models.PositiveIntegerField()
    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "registrations"
        ordering = ["position"]
        indexes = [
            models.Index(fields=["event", "position"], name="registrations_event_pos_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event.name}"
