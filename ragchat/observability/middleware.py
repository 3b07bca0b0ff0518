"""
HTTP middleware for per-request ids and access logging.

CorrelationMiddleware mints the request id that every error body, log line
and X-Request-ID response header shares. RequestLoggingMiddleware runs inside
it, so its log records already carry that id.

Dependencies: fastapi, starlette, ragchat.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ragchat.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Emit one access line per request, or a traceback when the handler blows up."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        request_id = getattr(request.state, "request_id", None)

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            logger.exception(
                f"{route} failed after {_elapsed_ms(started)} ms",
                extra={
                    "request_id": request_id,
                    "route": route,
                    "error_type": type(exc).__name__,
                },
            )
            raise

        duration_ms = _elapsed_ms(started)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"{route} -> {response.status_code} ({duration_ms} ms)",
            extra={
                "request_id": request_id,
                "route": route,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Assign a server-generated request id to every incoming request."""

    async def dispatch(self, request: Request, call_next):
        """
        Bind a new request id for the lifetime of the request.

        Client-supplied X-Request-ID headers are not trusted; the id is always
        generated here, stored on ``request.state`` for handlers and echoed
        back on the response.

        Args:
            request: Incoming request
            call_next: Downstream ASGI handler

        Returns:
            Response: Downstream response carrying the X-Request-ID header
        """
        request_id = set_correlation_id()
        request.state.request_id = request_id
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
