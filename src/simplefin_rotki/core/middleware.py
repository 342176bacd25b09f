"""Request logging for the bridge.

Bridge paths carry the token, and the token is only the base64 of the user's
Rotki URL, so request lines never log the raw path. They log the matched route
template instead (``/f/{token:path}/accounts``), or the path with the token
segment masked when no route matched.
"""

import logging
import re
import time
from collections.abc import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from simplefin_rotki.core.constants import BridgeConstants

logger = logging.getLogger(__name__)

_TOKEN_SEGMENT = re.compile(
    rf"^{re.escape(BridgeConstants.TOKEN_PATH_PREFIX)}/.*?"
    rf"(?P<suffix>{re.escape(BridgeConstants.ACCOUNTS_SUFFIX)})?$"
)

# Checked in order; the first one present identifies the request in logs
_CORRELATION_HEADERS = ("x-request-id", "x-trace-id", "traceparent")


def loggable_path(request: Request) -> str:
    """Path safe to write to logs: route template, or token-masked path."""
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if template:
        return template

    path = request.url.path
    match = _TOKEN_SEGMENT.match(path)
    if match:
        return f"{BridgeConstants.TOKEN_PATH_PREFIX}/***{match.group('suffix') or ''}"
    return path


def correlation_id(request: Request) -> str | None:
    for name in _CORRELATION_HEADERS:
        value = request.headers.get(name)
        if value:
            return value
    return None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per bridge request: method, route, status, duration.

    The line carries the caller's correlation id when one was sent, so gateway
    logs line up with the Rotki requests that received the forwarded headers.
    Health checks and API docs are not logged.
    """

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        self._quiet_paths = {"/health", "/_health", "/docs", "/openapi.json", "/redoc"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self._quiet_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time

        # The router stores the matched route in the shared scope, so resolve after call_next
        message = (
            f"{request.method} {loggable_path(request)} - "
            f"{response.status_code} ({duration:.3f}s)"
        )
        request_id = correlation_id(request)
        if request_id:
            message += f" [request_id={request_id}]"

        log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(log_level, message)

        response.headers["X-Process-Time"] = f"{duration:.3f}"

        return response
