"""Centralized error kinds and the exception handler for the bridge.

Every failure in the bridge is raised as an ``AppException`` tagged with one
``ErrorKind``. The kind decides the HTTP status, the generic message returned
to the SimpleFin client, and the machine-readable error code. The reason given
when raising is internal: it is logged, never sent to the caller.

Error Kinds:
    TOKEN_DECODE   (400) - bridge token is not valid base64 / UTF-8
    BACKEND_FETCH  (502) - Rotki unreachable, non-2xx, or unparseable
    TRANSLATION    (500) - reserved for Account-Set shape mismatches

Usage in Services:
    from simplefin_rotki.core.exceptions import AppException, ErrorKind

    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"GET {url} failed: {e}") from e

The exception handler converts these to HTTP responses at the boundary.
"""

import logging
from enum import Enum
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from simplefin_rotki.core.middleware import loggable_path

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Failure categories with their HTTP mapping.

    Each member's value is ``(status_code, error_code, detail)``.
    """

    TOKEN_DECODE = (
        status.HTTP_400_BAD_REQUEST,
        "TOKEN_DECODE_ERROR",
        "Invalid bridge token",
    )
    BACKEND_FETCH = (
        status.HTTP_502_BAD_GATEWAY,
        "BACKEND_FETCH_ERROR",
        "Could not fetch balances from backend",
    )
    TRANSLATION = (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "TRANSLATION_ERROR",
        "Could not translate balances",
    )

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def error_code(self) -> str:
        return self.value[1]

    @property
    def detail(self) -> str:
        return self.value[2]


class AppException(Exception):
    """
    The single exception type raised by bridge services.

    Attributes:
        kind: Failure category, decides the HTTP response
        reason: Internal diagnostic message (logged only)
    """

    def __init__(self, kind: ErrorKind, reason: str | None = None) -> None:
        self.kind = kind
        self.reason = reason or kind.detail
        super().__init__(self.reason)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def error_code(self) -> str:
        return self.kind.error_code

    @property
    def detail(self) -> str:
        return self.kind.detail


async def app_exception_handler(
    request: Request,
    exc: AppException,
) -> JSONResponse:
    """
    Convert an ``AppException`` into a JSON error response.

    Response Format:
        {
            "detail": "Generic user-facing message",
            "error_code": "MACHINE_READABLE_CODE"
        }

    Logging:
        - Server errors (5xx): reason with full stack trace
        - Client errors (4xx): reason only
    """
    log_extra = {
        "status_code": exc.status_code,
        "error_code": exc.error_code,
        "request_path": loggable_path(request),
    }
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code}: {exc.reason}", exc_info=exc, extra=log_extra)
    else:
        logger.warning(f"{exc.error_code}: {exc.reason}", extra=log_extra)

    response_body: dict[str, Any] = {
        "detail": exc.detail,
        "error_code": exc.error_code,
    }

    return JSONResponse(
        status_code=exc.status_code,
        content=response_body,
    )
