"""
Helpers for putting provider payloads and failures into log records.

Upstream bodies can be large (full completions, 1024-float vectors), so
values are condensed before they reach a log line.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

_MAX_KEYS_SHOWN = 10


def _condense(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        keys = ", ".join(str(key) for key in list(value)[:_MAX_KEYS_SHOWN])
        return f"dict({len(value)} keys: {keys})"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    return repr(value) if value is None else str(value)


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value for a log record without flooding the log.

    Args:
        value: Anything, typically a decoded provider response or raw body
        max_length: Characters kept before the text is cut

    Returns:
        str: Condensed text; collections become size summaries
    """
    try:
        text = _condense(value)
    except Exception as exc:  # str() of arbitrary objects can raise
        return f"<unloggable {type(exc).__name__}>"

    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}... ({len(text)} chars)"


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an unexpected failure at ERROR level with its traceback.

    Args:
        logger: Logger to write to
        message: Summary line
        exc: The exception being reported
        **context: Extra fields, condensed with safe_log_value
    """
    extra = {name: safe_log_value(value) for name, value in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
