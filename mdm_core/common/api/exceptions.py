# mdm_core/common/api/exceptions.py
"""
Global DRF exception handler.

Every error response body is

    {"error": {"code": ..., "message": ..., "details": ..., "request_id": ...}}

Store failures and anything DRF does not know about are logged here with
their traceback and reach the client only as a generic 500.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    NotAuthenticated,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

REQUEST_ID_META_KEY = "HTTP_X_REQUEST_ID"
SERVER_ERROR_MESSAGE = "Unexpected server error."
FALLBACK_MESSAGE = "Request failed."

# first match wins
ERROR_CODES = (
    (ValidationError, "validation_error"),
    ((NotAuthenticated, AuthenticationFailed), "not_authenticated"),
    (PermissionDenied, "permission_denied"),
    ((NotFound, Http404), "not_found"),
)


def ensure_request_id(request) -> str:
    """
    Correlation id for one request: the caller's X-Request-ID when present,
    otherwise a fresh hex id. Cached on the request.
    """
    if request is None:
        return uuid.uuid4().hex
    rid = getattr(request, "request_id", None)
    if not rid:
        rid = request.META.get(REQUEST_ID_META_KEY) or uuid.uuid4().hex
        request.request_id = rid
    return rid


def build_error_envelope(*, request=None, code: str, message: str, details: Any = None) -> dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
            "request_id": ensure_request_id(request),
        }
    }


class ConflictError(APIException):
    """409 for writes that collide with existing rows (e.g. a duplicate email)."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"


def error_code(exc: Exception) -> str:
    for types, code in ERROR_CODES:
        if isinstance(exc, types):
            return code
    if isinstance(exc, APIException):
        return exc.default_code or "api_error"
    return "error"


def split_detail(data: Any) -> tuple[str, Any]:
    """
    (message, details) from DRF's response.data.
    A "detail" key becomes the message and the remaining keys the details;
    anything else (e.g. serializer field errors) is kept whole as details.
    """
    if isinstance(data, dict) and "detail" in data:
        rest = {k: v for k, v in data.items() if k != "detail"}
        return str(data["detail"]), (rest or None)
    return FALLBACK_MESSAGE, data


def _server_error(request, exc: Exception) -> Response:
    method = getattr(request, "method", "?")
    path = getattr(request, "path", "?")
    rid = ensure_request_id(request)
    if isinstance(exc, DatabaseError):
        logger.error("Store error on %s %s [%s]", method, path, rid, exc_info=exc)
    else:
        logger.error("Unhandled error on %s %s [%s]", method, path, rid, exc_info=exc)

    return Response(
        build_error_envelope(request=request, code="server_error", message=SERVER_ERROR_MESSAGE),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Optional[Response]:
    request = context.get("request")
    response = drf_exception_handler(exc, context)
    if response is None:
        return _server_error(request, exc)

    code = error_code(exc)
    message, details = split_detail(response.data)
    logger.debug(
        "API error %s (%s) on %s: %s",
        response.status_code,
        code,
        getattr(request, "path", "?"),
        message,
    )

    return Response(
        build_error_envelope(request=request, code=code, message=message, details=details),
        status=response.status_code,
        headers=response.headers,
    )
