"""Ingestion API endpoints.

Routes:
- POST /rag/ingest - Chunk, embed and store a document

Dependencies: ragchat.application.services.ingest_service
System role: Knowledge-base ingestion HTTP API
"""

from fastapi import APIRouter, Depends, Request

from ragchat.api.deps import get_ingest_service
from ragchat.api.routers.router_utils import (
    get_request_id,
    handle_rag_errors,
    run_until_disconnected,
)
from ragchat.application.services.ingest_service import IngestService
from ragchat.models.common import ErrorResponse
from ragchat.models.ingest import IngestRequest, IngestResponse

router = APIRouter(prefix="/rag", tags=["rag"])


@router.post(
    "/ingest",
    response_model=IngestResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
@handle_rag_errors
async def ingest(
    body: IngestRequest,
    request: Request,
    ingest_service: IngestService = Depends(get_ingest_service),
) -> IngestResponse:
    """Ingest one document into the chunk store.

    Either every chunk of the document is stored or none is.

    Returns:
        IngestResponse: Number of chunks stored
    """
    request_id = get_request_id(request)
    chunks = await run_until_disconnected(
        request,
        ingest_service.ingest(body.source, body.text, request_id),
        request_id,
    )
    return IngestResponse(request_id=request_id, chunks=chunks)
