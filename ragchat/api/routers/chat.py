"""Chat API endpoints.

Routes:
- POST /chat - Answer a conversation, optionally grounded in retrieved chunks

Dependencies: ragchat.application.services.chat_orchestrator
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from ragchat.api.deps import get_chat_orchestrator
from ragchat.api.routers.router_utils import (
    get_request_id,
    handle_rag_errors,
    run_until_disconnected,
)
from ragchat.application.services.chat_orchestrator import ChatOrchestrator
from ragchat.models.chat import ChatRequest, ChatResponse
from ragchat.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

LATENCY_HEADER = "X-Latency-Ms"
MODEL_HEADER = "X-Model"


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
@handle_rag_errors
async def chat(
    body: ChatRequest,
    request: Request,
    response: Response,
    orchestrator: ChatOrchestrator = Depends(get_chat_orchestrator),
) -> ChatResponse:
    """Answer a chat request.

    Flow:
    1. Validate request and provider configuration
    2. Retrieve context chunks when requested
    3. Call the chat-completion provider
    4. Return the answer with citations, latency and model headers

    Args:
        body: ChatRequest with messages and options
        request: Incoming request (correlation id, disconnect watching)
        response: Outgoing response for extra headers
        orchestrator: Injected ChatOrchestrator

    Returns:
        ChatResponse: Answer with citations
    """
    request_id = get_request_id(request)
    result = await run_until_disconnected(
        request,
        orchestrator.chat(body, request_id),
        request_id,
    )

    response.headers[LATENCY_HEADER] = str(result.latency_ms)
    response.headers[MODEL_HEADER] = result.model

    return ChatResponse(
        message=result.message,
        request_id=result.request_id,
        model=result.model,
        latency_ms=result.latency_ms,
        citations=result.citations,
    )
