"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_chat_orchestrator,
    get_ingest_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_chat_orchestrator",
    "get_ingest_service",
    "get_service_cache",
]
