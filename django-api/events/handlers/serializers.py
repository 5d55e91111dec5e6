"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers
from rest_framework.reverse import reverse

from events.domain import Event

# Largest value every supported database accepts for a PositiveIntegerField.
MAX_NUMBER_OF_SEATS = 2147483647


def event_url(event: Event, request=None) -> str:
    return reverse(
        "event-detail",
        kwargs={"held_on": event.held_on, "name": event.name},
        request=request,
    )


class EventSerializer(serializers.Serializer):
    """Serializer for the Event domain model.

    Only the date, the name and the free seats are public; id, total
    seats and status stay internal.
    """

    held_on = serializers.DateField(read_only=True)
    name = serializers.CharField(read_only=True)
    number_of_free_seats = serializers.IntegerField(read_only=True)
    _links = serializers.SerializerMethodField()

    def get__links(self, event: Event) -> dict:
        return {"self": {"href": event_url(event, self.context.get("request"))}}


class EventCreateSerializer(serializers.Serializer):
    """Input format for creating an event. Domain rules are checked later."""

    held_on = serializers.DateField()
    name = serializers.CharField(max_length=512, allow_blank=True, trim_whitespace=False)
    number_of_seats = serializers.IntegerField(
        required=False, allow_null=True, max_value=MAX_NUMBER_OF_SEATS
    )


class RegistrationCreateSerializer(serializers.Serializer):
    """Input format for registering a person for an event."""

    email = serializers.EmailField()
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
