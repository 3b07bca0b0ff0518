"""
Chat orchestrator for retrieval-augmented completions.

Orchestrates one chat request: validate → (embed query → retrieve) →
complete → respond. Every external call happens at most once per request;
failures surface as typed exceptions and are never retried here.

Dependencies: ragchat.core, ragchat.boundary.providers, ragchat.configs
System role: Chat orchestration layer
"""

import logging
from dataclasses import dataclass, field

from ragchat.boundary.providers import ChatCompletionClient, EmbeddingClient
from ragchat.boundary.vdb import VectorSearchResult
from ragchat.configs import ChatSettings, RagSettings
from ragchat.core.exceptions import BadRequestError, MissingConfigurationError
from ragchat.core.prompt_builder import build_messages
from ragchat.core.retriever import CosineRetriever
from ragchat.models.chat import ChatRequest
from ragchat.models.citation import Citation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatResult:
    """Outcome of a successful chat request."""

    message: str
    request_id: str
    model: str
    latency_ms: int
    citations: list[Citation] = field(default_factory=list)


class ChatOrchestrator:
    """
    Chat orchestrator.

    Coordinates request validation, optional retrieval, prompt assembly and
    the chat-completion call.
    """

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        retriever: CosineRetriever,
        chat_client: ChatCompletionClient,
        rag_settings: RagSettings,
        chat_settings: ChatSettings,
    ) -> None:
        """
        Initialize chat orchestrator.

        Args:
            embedding_client: Embeds the retrieval query
            retriever: Top-K chunk retrieval
            chat_client: Chat-completion provider client
            rag_settings: Retrieval defaults and topK bound
            chat_settings: Temperature and maxTokens bounds
        """
        self.embedding_client = embedding_client
        self.retriever = retriever
        self.chat_client = chat_client
        self.rag_settings = rag_settings
        self.chat_settings = chat_settings

    def validate(self, request: ChatRequest) -> None:
        """
        Check a request against configured bounds before any network call.

        Args:
            request: Incoming chat request

        Raises:
            BadRequestError: If messages are empty or a numeric field is out of range
            MissingConfigurationError: If no API key is configured
        """
        if not request.messages:
            raise BadRequestError("messages must contain at least one message", field="messages")

        limits = self.chat_settings
        if request.temperature is not None and not (
            limits.temperature_min <= request.temperature <= limits.temperature_max
        ):
            raise BadRequestError(
                f"temperature must be between {limits.temperature_min} and {limits.temperature_max}",
                field="temperature",
            )
        if request.max_tokens is not None and not 1 <= request.max_tokens <= limits.max_tokens_max:
            raise BadRequestError(
                f"maxTokens must be between 1 and {limits.max_tokens_max}",
                field="maxTokens",
            )
        if request.top_k is not None and not 1 <= request.top_k <= self.rag_settings.max_top_k:
            raise BadRequestError(
                f"topK must be between 1 and {self.rag_settings.max_top_k}",
                field="topK",
            )

        if not self.chat_client.settings.api_key:
            raise MissingConfigurationError("DEEPSEEK_API_KEY")

    async def chat(self, request: ChatRequest, request_id: str) -> ChatResult:
        """
        Process one chat request.

        Flow:
        1. Validate request and configuration
        2. If retrieval is requested, embed the latest user message and retrieve top-K chunks
        3. Build system instruction, optional context instruction and conversation
        4. Call the chat-completion provider under its timeout
        5. Return answer with citations

        Args:
            request: Chat request
            request_id: Correlation id echoed to the caller and used in logs

        Returns:
            ChatResult: Answer, model, latency and citations

        Raises:
            BadRequestError, MissingConfigurationError: Before any network call
            EmbeddingUpstreamError, EmbeddingResponseInvalidError: Retrieval failed
            UpstreamError, UpstreamTimeoutError, UpstreamResponseInvalidError: Completion failed
        """
        self.validate(request)

        results: list[VectorSearchResult] = []
        if request.use_retrieval:
            results = await self._retrieve(request, request_id)

        messages = build_messages(
            system_prompt=self.chat_client.settings.system_prompt,
            messages=request.messages,
            results=results,
        )

        completion = await self.chat_client.complete(
            messages=messages,
            request_id=request_id,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )
        logger.info(
            f"[{request_id}] {__name__}:chat - Completed in {completion.latency_ms} ms "
            f"with {len(results)} citations",
            extra={
                "request_id": request_id,
                "model": completion.model,
                "latency_ms": completion.latency_ms,
                "citation_count": len(results),
            },
        )

        return ChatResult(
            message=completion.content,
            request_id=request_id,
            model=completion.model,
            latency_ms=completion.latency_ms,
            citations=[result.to_citation() for result in results],
        )

    async def _retrieve(self, request: ChatRequest, request_id: str) -> list[VectorSearchResult]:
        query = request.latest_user_message()
        if not query:
            logger.info(
                f"[{request_id}] {__name__}:chat - Retrieval requested without a user message, skipping",
                extra={"request_id": request_id},
            )
            return []

        top_k = request.top_k or self.rag_settings.top_k
        query_vector = await self.embedding_client.embed(query, request_id)
        return await self.retriever.retrieve(query_vector, top_k)
