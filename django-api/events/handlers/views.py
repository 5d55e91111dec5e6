"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler for mapping
- Never contain business logic
"""

from datetime import date

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.views import APIView

from events.domain import EventKey, EventNotFoundError, Person
from events.handlers.serializers import (
    EventCreateSerializer,
    EventSerializer,
    RegistrationCreateSerializer,
)
from events.services import EventService
from events.stores import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list_open_events()
        return Response(
            {
                "_embedded": {
                    "events": EventSerializer(
                        events, many=True, context={"request": request}
                    ).data
                },
                "_links": {"self": {"href": reverse("event-list", request=request)}},
            }
        )

    def post(self, request: Request) -> Response:
        payload = EventCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        service = get_event_service()
        candidate = service.new_event(**payload.validated_data)
        event = service.create_event(candidate)
        return Response(
            EventSerializer(event, context={"request": request}).data,
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{held_on}/{name}"""

    def get(self, request: Request, held_on: date, name: str) -> Response:
        event = get_event_service().get_event(held_on, name)
        if event is None:
            raise EventNotFoundError(held_on, name)
        return Response(EventSerializer(event, context={"request": request}).data)


class RegistrationListView(APIView):
    """Handler for POST /api/events/{held_on}/{name}/registrations"""

    def post(self, request: Request, held_on: date, name: str) -> Response:
        payload = RegistrationCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        event = get_event_service().register_for(
            EventKey(held_on=held_on, name=name), Person(**payload.validated_data)
        )
        return Response(
            EventSerializer(event, context={"request": request}).data,
            status=status.HTTP_201_CREATED,
        )
