"""
Exception hierarchy for the RAG chat service.

Provides layered exception structure for domain-specific errors.
Every exception carries a stable error code and the HTTP status it maps to,
plus a details dict for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RagChatException(Exception):
    """Base exception for all RAG chat application errors."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class BadRequestError(RagChatException):
    """Raised when request input fails validation."""

    code = "BAD_REQUEST"
    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request body",
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class MissingConfigurationError(RagChatException):
    """Raised when a required credential or setting is absent."""

    code = "MISSING_CONFIGURATION"
    status_code = 500

    def __init__(self, setting: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["setting"] = setting
        super().__init__(f"Missing {setting}", details)


class InvalidConfigurationError(RagChatException):
    """Raised when configured values are inconsistent (e.g. chunk overlap >= window)."""

    code = "INVALID_CONFIGURATION"
    status_code = 500


class EmbeddingUpstreamError(RagChatException):
    """Raised when the embedding provider call fails at the transport level."""

    code = "EMBEDDING_UPSTREAM_ERROR"
    status_code = 502

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        upstream_body: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        if upstream_body:
            details["upstream_body"] = upstream_body
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__(message, details)


class EmbeddingResponseInvalidError(RagChatException):
    """Raised when the embedding provider returns no usable vector."""

    code = "EMBEDDING_RESPONSE_INVALID"
    status_code = 502


class UpstreamError(RagChatException):
    """Raised when the chat-completion provider returns a non-success status."""

    code = "UPSTREAM_ERROR"
    status_code = 502

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        upstream_body: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message (upstream body when available)
            upstream_status: HTTP status returned by the provider
            upstream_body: Raw response body returned by the provider
            details: Additional context
        """
        details = details or {}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        if upstream_body:
            details["upstream_body"] = upstream_body
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__(message, details)


class UpstreamTimeoutError(RagChatException):
    """Raised when the chat-completion call exceeds its timeout and is aborted."""

    code = "UPSTREAM_TIMEOUT"
    status_code = 504

    def __init__(self, timeout_ms: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["timeout_ms"] = timeout_ms
        super().__init__(f"Upstream did not respond within {timeout_ms} ms", details)


class UpstreamResponseInvalidError(RagChatException):
    """Raised when the chat-completion provider succeeds without an answer."""

    code = "BAD_UPSTREAM_RESPONSE"
    status_code = 502


class VectorStoreError(RagChatException):
    """Raised when vector store operations fail."""

    code = "VECTOR_STORE_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (insert, scan)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class EmbeddingDimensionMismatchError(VectorStoreError):
    """Raised when vectors of different lengths would be mixed in one corpus."""

    code = "EMBEDDING_DIMENSION_MISMATCH"
    status_code = 409

    def __init__(self, expected: int, actual: int, operation: str | None = None) -> None:
        super().__init__(
            f"Embedding dimension {actual} does not match corpus dimension {expected}",
            operation=operation,
            details={"expected_dimension": expected, "actual_dimension": actual},
        )


class InternalError(RagChatException):
    """Raised for unanticipated failures; message is safe to show callers."""

    def __init__(self, message: str = "Internal server error", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class RequestCancelledError(RagChatException):
    """Raised when the caller disconnects before the response is ready."""

    code = "REQUEST_CANCELLED"
    status_code = 499

    def __init__(self, message: str = "Client closed request") -> None:
        super().__init__(message)
