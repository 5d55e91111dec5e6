"""Translate domain errors into HTTP responses.

Registered as DRF's ``EXCEPTION_HANDLER``. Only the error code and the
user-safe message leave the process.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain import DomainError, DuplicateEventError, ErrorCode
from events.handlers.serializers import EventSerializer

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_REGISTRATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_EVENT: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    http_status = STATUS_BY_CODE[exc.code]
    logger.debug("Mapped %s to HTTP %s", exc.code.value, http_status)
    body = {"code": exc.code.value, "message": exc.message}
    if isinstance(exc, DuplicateEventError):
        body["existing"] = EventSerializer(
            exc.existing, context={"request": context.get("request")}
        ).data
    return Response(body, status=http_status)
