"""
Error handling utilities for API endpoints.

Maps domain exceptions onto the uniform error body
``{code, message, requestId, details?}`` and the HTTP status each
exception declares.

Dependencies: fastapi, ragchat.core.exceptions, ragchat.observability
System role: Uniform HTTP error responses
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ragchat.core.exceptions import (
    BadRequestError,
    InternalError,
    RagChatException,
    RequestCancelledError,
)
from ragchat.models.common import ErrorResponse
from ragchat.observability.correlation import get_correlation_id
from ragchat.observability.log_utils import log_exception_with_context
from ragchat.observability.middleware import REQUEST_ID_HEADER

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def get_request_id(request: Request) -> str:
    """Return the correlation id assigned to this request by the middleware."""
    return getattr(request.state, "request_id", None) or get_correlation_id()


def error_response(exc: RagChatException, request_id: str) -> JSONResponse:
    """
    Build the JSON error response for a domain exception.

    Args:
        exc: Domain exception carrying code and status
        request_id: Correlation id echoed in body and header

    Returns:
        JSONResponse: Error body with the exception's HTTP status
    """
    body = ErrorResponse(
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        details=exc.details or None,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers={REQUEST_ID_HEADER: request_id},
    )


def handle_rag_errors(func: F) -> F:
    """
    Decorator turning domain exceptions raised by an endpoint into error responses.

    The decorated endpoint must accept ``request: Request`` as a keyword argument.
    Unexpected exceptions are logged with traceback and reported as INTERNAL_ERROR
    without leaking their message.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        request: Request = kwargs["request"]
        request_id = get_request_id(request)
        try:
            return await func(*args, **kwargs)

        except (BadRequestError, RequestCancelledError) as e:
            logger.warning(
                f"[{request_id}] {e.code}: {e.message}",
                extra={"request_id": request_id, "code": e.code, "details": e.details},
            )
            return error_response(e, request_id)

        except RagChatException as e:
            logger.error(
                f"[{request_id}] {e.code}: {e.message}",
                extra={"request_id": request_id, "code": e.code, "details": e.details},
            )
            return error_response(e, request_id)

        except Exception as e:
            log_exception_with_context(
                logger,
                f"[{request_id}] Unexpected error in {func.__name__}",
                e,
                request_id=request_id,
            )
            return error_response(InternalError(), request_id)

    return wrapper  # type: ignore[return-value]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request body validation failures as BAD_REQUEST."""
    request_id = get_request_id(request)
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(
        f"[{request_id}] BAD_REQUEST: request body failed validation",
        extra={"request_id": request_id, "error_count": len(errors)},
    )
    return error_response(BadRequestError(details={"errors": errors}), request_id)


def register_exception_handlers(app: FastAPI) -> None:
    """Install application-wide exception handlers."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


__all__ = [
    "error_response",
    "get_request_id",
    "handle_rag_errors",
    "register_exception_handlers",
    "validation_exception_handler",
]
