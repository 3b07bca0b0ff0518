"""
Health check API endpoints.

Routes: GET /health

System role: Liveness probe
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, bool]:
    """Basic health check."""
    return {"ok": True}
