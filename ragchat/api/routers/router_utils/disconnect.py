"""
Client disconnect handling.

Runs endpoint work as a task and cancels it when the caller goes away,
so in-flight provider calls are aborted instead of completing unobserved.

Dependencies: asyncio, fastapi
System role: Request cancellation propagation
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import Request

from ragchat.core.exceptions import RequestCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_until_disconnected(
    request: Request,
    work: Awaitable[T],
    request_id: str,
    poll_interval: float = 0.1,
) -> T:
    """
    Await ``work`` while watching for client disconnect.

    Args:
        request: Incoming request whose connection is watched
        work: Coroutine performing the endpoint's processing
        request_id: Correlation id for logs
        poll_interval: Seconds between disconnect checks

    Returns:
        Result of ``work``

    Raises:
        RequestCancelledError: Client disconnected; ``work`` was cancelled
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
                logger.warning(
                    f"[{request_id}] {__name__}:run_until_disconnected - Client disconnected, work cancelled",
                    extra={"request_id": request_id},
                )
                raise RequestCancelledError()
    finally:
        if not task.done():
            task.cancel()
