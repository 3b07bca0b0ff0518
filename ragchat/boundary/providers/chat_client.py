"""
Chat-completion provider client.

Sends one non-streaming request to an OpenAI-compatible
/chat/completions endpoint under a hard deadline. When the deadline passes
the in-flight request is cancelled and its late response is never read.

Dependencies: httpx, ragchat.configs, ragchat.core.exceptions
System role: Chat completion adapter
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from ragchat.boundary.providers.http import bearer_headers
from ragchat.configs import ProviderSettings
from ragchat.core.exceptions import (
    MissingConfigurationError,
    UpstreamError,
    UpstreamResponseInvalidError,
    UpstreamTimeoutError,
)
from ragchat.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Completion:
    """Answer returned by the provider."""

    content: str
    model: str
    latency_ms: int


class ChatCompletionClient:
    """Chat completion over HTTP."""

    def __init__(self, settings: ProviderSettings, http_client: httpx.AsyncClient) -> None:
        """
        Initialize chat client.

        Args:
            settings: Provider endpoint, model, key and timeout
            http_client: Shared async HTTP client
        """
        self.settings = settings
        self.http_client = http_client

    @property
    def model(self) -> str:
        return self.settings.model

    async def complete(
        self,
        messages: list[dict[str, str]],
        request_id: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> Completion:
        """
        Request one completion.

        Args:
            messages: Full message list including system instructions
            request_id: Correlation id used in log lines only
            temperature: Optional sampling temperature
            max_tokens: Optional completion token limit

        Returns:
            Completion: Answer text, model and call latency

        Raises:
            MissingConfigurationError: If no API key is configured
            UpstreamTimeoutError: If the call exceeds the configured timeout
            UpstreamError: On transport failure or non-2xx status
            UpstreamResponseInvalidError: If the answer is missing or empty
        """
        api_key = self.settings.api_key
        if not api_key:
            raise MissingConfigurationError("DEEPSEEK_API_KEY")

        payload: dict[str, Any] = {
            "model": self.model,
            "stream": False,
            "messages": messages,
        }
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        timeout_ms = self.settings.timeout_ms
        started_at = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                self.http_client.post(
                    f"{self.settings.base_url}/chat/completions",
                    json=payload,
                    headers=bearer_headers(api_key),
                ),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(
                f"[{request_id}] {__name__}:complete - Upstream timed out after {timeout_ms} ms",
                extra={"request_id": request_id, "timeout_ms": timeout_ms},
            )
            raise UpstreamTimeoutError(timeout_ms) from e
        except httpx.HTTPError as e:
            logger.error(
                f"[{request_id}] {__name__}:complete - Upstream transport error: {type(e).__name__}: {e}",
                extra={"request_id": request_id},
            )
            raise UpstreamError(f"Upstream request failed: {e}") from e
        latency_ms = int((time.perf_counter() - started_at) * 1000)

        if not response.is_success:
            body = response.text
            logger.error(
                f"[{request_id}] {__name__}:complete - Upstream error {response.status_code}",
                extra={
                    "request_id": request_id,
                    "upstream_status": response.status_code,
                    "upstream_body": safe_log_value(body),
                },
            )
            raise UpstreamError(
                body or f"Upstream HTTP {response.status_code}",
                upstream_status=response.status_code,
                upstream_body=body,
            )

        try:
            data = response.json()
        except ValueError:
            data = None

        content = None
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            pass
        if not isinstance(content, str) or not content:
            logger.error(
                f"[{request_id}] {__name__}:complete - Upstream invalid response",
                extra={"request_id": request_id, "response": safe_log_value(data)},
            )
            raise UpstreamResponseInvalidError("Upstream returned an invalid response")

        return Completion(content=content, model=self.model, latency_ms=latency_ms)
