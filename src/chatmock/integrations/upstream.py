"""HTTP client for calls to upstream chat providers."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from chatmock.config import settings
from chatmock.providers.base import Provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamReply:
    """Raw upstream answer: body bytes and HTTP status."""

    content: bytes
    status_code: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def auth_headers(provider: Provider) -> dict[str, str]:
    """Build the authentication headers for *provider*.

    An access token wins over an API key; the ChatGPT account id is sent
    whenever it is configured, regardless of provider kind.
    """
    headers: dict[str, str] = {}
    token = provider.access_token.strip()
    api_key = provider.api_key.strip()
    if token:
        headers["Authorization"] = f"Bearer {token}"
    elif api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    if provider.account_id.strip():
        headers["chatgpt-account-id"] = provider.account_id
    return headers


def join_url(base_url: str, suffix: str) -> str:
    """Append *suffix* to a provider base URL.

    Raises:
        ValueError: If *base_url* is blank.
    """
    base = base_url.strip().rstrip("/")
    if not base:
        raise ValueError("remote base_url is empty")
    return base + suffix


class UpstreamClient:
    """POSTs JSON to upstream providers.

    Args:
        timeout: Per-call timeout in seconds (defaults to
                 ``CHATMOCK_UPSTREAM_TIMEOUT``).
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``
                   in tests.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else settings.chatmock_upstream_timeout
        self._transport = transport

    async def post_json(
        self, provider: Provider, url: str, payload: dict[str, Any]
    ) -> UpstreamReply:
        """POST *payload* to *url* with *provider*'s credentials.

        ``timeout`` bounds the whole call, body included, not just each
        connect/read/write phase. Cancelling the calling task aborts the
        in-flight request.

        Raises:
            httpx.HTTPError: On connection failures and timeouts.
        """
        headers = {"Content-Type": "application/json", **auth_headers(provider)}
        logger.debug("Upstream request: provider=%s url=%s", provider.name, url)
        try:
            response = await asyncio.wait_for(self._post(url, payload, headers), self.timeout)
        except asyncio.TimeoutError as exc:
            raise httpx.TimeoutException(
                f"no complete response within {self.timeout:g}s"
            ) from exc
        logger.debug(
            "Upstream response: provider=%s status=%d bytes=%d",
            provider.name,
            response.status_code,
            len(response.content),
        )
        return UpstreamReply(content=response.content, status_code=response.status_code)

    async def _post(
        self, url: str, payload: dict[str, Any], headers: dict[str, str]
    ) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            return await client.post(url, json=payload, headers=headers)
