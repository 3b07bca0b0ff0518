"""
Router utility functions.

Contains helpers shared by router endpoints to keep them clean.
"""

from ragchat.api.routers.router_utils.disconnect import run_until_disconnected
from ragchat.api.routers.router_utils.error_handling import (
    error_response,
    get_request_id,
    handle_rag_errors,
    register_exception_handlers,
)

__all__ = [
    "error_response",
    "get_request_id",
    "handle_rag_errors",
    "register_exception_handlers",
    "run_until_disconnected",
]
