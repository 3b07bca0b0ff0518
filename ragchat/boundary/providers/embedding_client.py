"""
Embedding provider client.

Converts text into a vector through an OpenAI-compatible /embeddings
endpoint. One outbound call per invocation, bounded by the configured
timeout; retry policy is left to callers.

Dependencies: httpx, ragchat.configs, ragchat.core.exceptions
System role: Embedding generation adapter
"""

import asyncio
import logging
import math
from typing import Any

import httpx

from ragchat.boundary.providers.http import bearer_headers
from ragchat.configs import EmbeddingSettings, ProviderSettings
from ragchat.core.exceptions import (
    EmbeddingResponseInvalidError,
    EmbeddingUpstreamError,
    MissingConfigurationError,
)
from ragchat.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Embedding generator over HTTP."""

    def __init__(
        self,
        provider: ProviderSettings,
        settings: EmbeddingSettings,
        http_client: httpx.AsyncClient,
    ) -> None:
        """
        Initialize embedding client.

        Args:
            provider: Chat provider settings (fallback endpoint and key)
            settings: Embedding-specific settings
            http_client: Shared async HTTP client
        """
        self.provider = provider
        self.settings = settings
        self.http_client = http_client

    @property
    def base_url(self) -> str:
        return self.settings.base_url or self.provider.base_url

    @property
    def api_key(self) -> str | None:
        return self.settings.api_key or self.provider.api_key

    @property
    def model(self) -> str:
        return self.settings.model

    async def embed(self, text: str, request_id: str) -> list[float]:
        """
        Generate embedding for one text.

        Args:
            text: Text to embed
            request_id: Correlation id used in log lines only

        Returns:
            list[float]: Embedding vector

        Raises:
            MissingConfigurationError: If no API key is configured
            EmbeddingUpstreamError: On transport failure, timeout or non-2xx status
            EmbeddingResponseInvalidError: If the response carries no usable vector
        """
        api_key = self.api_key
        if not api_key:
            raise MissingConfigurationError("DEEPSEEK_API_KEY")

        timeout_ms = self.settings.timeout_ms
        try:
            response = await asyncio.wait_for(
                self.http_client.post(
                    f"{self.base_url}/embeddings",
                    json={"model": self.model, "input": text},
                    headers=bearer_headers(api_key),
                ),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(
                f"[{request_id}] {__name__}:embed - Embedding call timed out",
                extra={"request_id": request_id, "timeout_ms": timeout_ms},
            )
            raise EmbeddingUpstreamError(
                f"Embedding upstream did not respond within {timeout_ms} ms",
                details={"timeout_ms": timeout_ms},
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                f"[{request_id}] {__name__}:embed - Embedding transport error: {type(e).__name__}: {e}",
                extra={"request_id": request_id},
            )
            raise EmbeddingUpstreamError(f"Embedding upstream request failed: {e}") from e

        if not response.is_success:
            body = response.text
            logger.error(
                f"[{request_id}] {__name__}:embed - Embedding upstream error {response.status_code}",
                extra={
                    "request_id": request_id,
                    "upstream_status": response.status_code,
                    "upstream_body": safe_log_value(body),
                },
            )
            raise EmbeddingUpstreamError(
                body or f"Embedding upstream HTTP {response.status_code}",
                upstream_status=response.status_code,
                upstream_body=body,
            )

        try:
            data = response.json()
        except ValueError:
            data = None
        return self._extract_vector(data, request_id)

    @staticmethod
    def _extract_vector(data: Any, request_id: str) -> list[float]:
        vector = None
        try:
            vector = data["data"][0]["embedding"]
        except (KeyError, IndexError, TypeError):
            pass

        floats = EmbeddingClient._to_floats(vector)
        if floats is None:
            logger.error(
                f"[{request_id}] {__name__}:embed - Embedding invalid response",
                extra={"request_id": request_id, "response": safe_log_value(data)},
            )
            raise EmbeddingResponseInvalidError("Embedding upstream returned an invalid response")
        return floats

    @staticmethod
    def _to_floats(vector: Any) -> list[float] | None:
        """Return the vector as finite floats, or None when any element is unusable."""
        if not isinstance(vector, list) or not vector:
            return None
        floats = []
        for x in vector:
            if isinstance(x, bool) or not isinstance(x, (int, float)):
                return None
            try:
                value = float(x)
            except (OverflowError, TypeError, ValueError):
                return None
            if not math.isfinite(value):
                return None
            floats.append(value)
        return floats
