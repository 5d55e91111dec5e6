from datetime import date

from django.urls import path, register_converter

from events.handlers import EventDetailView, EventListView, RegistrationListView


class IsoDateConverter:
    """Path segment holding an ISO-8601 date such as ``2018-11-01``."""

    regex = r"\d{4}-\d{2}-\d{2}"

    def to_python(self, value: str) -> date:
        return date.fromisoformat(value)

    def to_url(self, value: date | str) -> str:
        return value.isoformat() if isinstance(value, date) else value


register_converter(IsoDateConverter, "isodate")

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    # Names may contain slashes, so the registrations route has to come first.
    path(
        "events/<isodate:held_on>/<path:name>/registrations",
        RegistrationListView.as_view(),
        name="registration-list",
    ),
    path(
        "events/<isodate:held_on>/<path:name>",
        EventDetailView.as_view(),
        name="event-detail",
    ),
]
