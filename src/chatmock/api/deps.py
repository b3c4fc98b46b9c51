"""FastAPI dependency injection helpers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import Request

from chatmock.errors import ClientDisconnectedError
from chatmock.orchestrator import CompletionOrchestrator
from chatmock.providers.registry import ProviderRegistry
from chatmock.rules.store import RuleStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# How often an in-flight completion checks whether its caller is still there.
_DISCONNECT_POLL_SECONDS = 0.5


def get_orchestrator(request: Request) -> CompletionOrchestrator:
    return request.app.state.orchestrator


def get_registry(request: Request) -> ProviderRegistry:
    return request.app.state.registry


def get_rules(request: Request) -> RuleStore:
    return request.app.state.rules


async def run_until_disconnect(request: Request, work: Awaitable[T]) -> T:
    """Await *work*, cancelling it if the client disconnects first.

    Cancellation reaches the upstream HTTP call, which aborts the
    outbound connection.

    Raises:
        ClientDisconnectedError: If the client went away mid-request.
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=_DISCONNECT_POLL_SECONDS)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info(
                    "Client disconnected, cancelling %s %s",
                    request.method,
                    request.url.path,
                )
                task.cancel()
                raise ClientDisconnectedError("client disconnected")
    finally:
        if not task.done():
            task.cancel()
