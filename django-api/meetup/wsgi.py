"""WSGI entry point for the meetup project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "meetup.settings")

application = get_wsgi_application()
