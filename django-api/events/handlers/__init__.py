from events.handlers.views import EventDetailView, EventListView, RegistrationListView

__all__ = ["EventListView", "EventDetailView", "RegistrationListView"]
