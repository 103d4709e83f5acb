"""Map domain errors and framework exceptions to HTTP responses.

Every error body has the shape ``{"code": ..., "message": ...}``. Anything
unexpected is logged and reported as an opaque storage failure.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from bookings.domain.errors import DomainError, ErrorCode, StorageFailureError

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.MISSING_FIELDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TIME_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TIME_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PAST_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ROOM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ROOM_UNAVAILABLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_NAME: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROOM_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TIME_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.EMAIL_TAKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_USER_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

FRAMEWORK_CODES = {
    exceptions.NotAuthenticated: ErrorCode.UNAUTHENTICATED,
    exceptions.AuthenticationFailed: ErrorCode.UNAUTHENTICATED,
    exceptions.PermissionDenied: ErrorCode.FORBIDDEN,
    exceptions.NotFound: ErrorCode.NOT_FOUND,
    exceptions.ParseError: ErrorCode.INVALID_INPUT,
    exceptions.ValidationError: ErrorCode.INVALID_INPUT,
}


def error_body(code: str, message: str) -> dict[str, str]:
    return {"code": code, "message": message}


def domain_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER for the bookings API."""
    if isinstance(exc, DomainError):
        set_rollback()
        return Response(
            error_body(exc.code.value, exc.message),
            status=ERROR_STATUS[exc.code],
        )

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is not None:
        code = FRAMEWORK_CODES.get(type(exc))
        code_value = code.value if code else str(exc.default_code).upper()
        message = exc.detail if isinstance(exc.detail, str) else "Invalid request"
        response.data = error_body(code_value, str(message))
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "unknown view")
    set_rollback()
    failure = StorageFailureError()
    return Response(
        error_body(failure.code.value, failure.message),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
