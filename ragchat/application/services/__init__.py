"""Service orchestrators."""

from .chat_orchestrator import ChatOrchestrator, ChatResult
from .ingest_service import IngestService

__all__ = [
    "ChatOrchestrator",
    "ChatResult",
    "IngestService",
]
