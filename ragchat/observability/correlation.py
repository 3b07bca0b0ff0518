"""
Request id storage for the current task.

The id lives in a ContextVar so that every coroutine spawned while serving a
request (provider calls, DB work) logs under the same id without passing it
around explicitly.

Dependencies: contextvars, uuid
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar
import uuid

# Empty string means "no request in flight"
correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a request id to the current context.

    Args:
        correlation_id: Id to bind; a new one is minted when omitted

    Returns:
        str: The bound id
    """
    bound = correlation_id if correlation_id else new_correlation_id()
    correlation_id_ctx.set(bound)
    return bound


def get_correlation_id() -> str:
    """Return the bound request id, binding a new one outside of any request."""
    return correlation_id_ctx.get() or set_correlation_id()


def clear_correlation_id() -> None:
    correlation_id_ctx.set("")
