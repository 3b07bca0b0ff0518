"""
Shared HTTP plumbing for provider clients.

Dependencies: httpx
System role: Outbound HTTP connection pool
"""

import httpx


def create_http_client() -> httpx.AsyncClient:
    """
    Create the pooled client shared by all provider calls.

    Per-call deadlines are enforced by the provider clients themselves, so
    the client-level timeout is disabled.

    Returns:
        httpx.AsyncClient: Client to be closed on application shutdown
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(None),
        headers={"Content-Type": "application/json"},
    )


def bearer_headers(api_key: str) -> dict[str, str]:
    """Build provider authorization headers."""
    return {"Authorization": f"Bearer {api_key}"}
