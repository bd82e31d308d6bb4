"""Mapping of domain errors to HTTP responses."""

from rest_framework import status
from rest_framework.response import Response

from events.domain.errors import DomainError, ErrorCode, EventConflictError
from events.handlers.serializers import EventSerializer

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RELATED_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    """Build the response for a domain error.

    A conflict answers with the event as currently stored; everything else
    answers with the error code and its user-safe message.
    """
    if isinstance(error, EventConflictError):
        return Response(EventSerializer(error.current).data, status=status.HTTP_409_CONFLICT)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=STATUS_BY_CODE[error.code],
    )
