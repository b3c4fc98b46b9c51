"""Base translator interface for the per-kind upstream wire formats."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any

from chatmock.integrations.upstream import UpstreamClient, UpstreamReply, join_url
from chatmock.models.schemas import (
    Choice,
    CompletionRequest,
    CompletionResponse,
    Message,
    Usage,
)
from chatmock.providers.base import Provider


class BaseTranslator(ABC):
    """Abstract base class for upstream protocol translators.

    Each provider kind (OpenAI-compatible, Ollama, ChatGPT backend) has one
    translator that knows the upstream endpoint, how to turn a canonical
    chat request into the upstream body, and how to turn the upstream body
    back into a canonical :class:`CompletionResponse`.
    """

    #: Path appended to the provider's base URL.
    path: str = ""

    @abstractmethod
    def build_payload(self, request: CompletionRequest, model: str) -> dict[str, Any]:
        """Translate a canonical request into the upstream request body.

        Args:
            request: The canonical chat request.
            model: Model name already rewritten for this upstream.

        Returns:
            JSON-serializable request body.
        """
        ...

    @abstractmethod
    def parse_response(self, body: bytes, model: str) -> CompletionResponse:
        """Translate a successful upstream body into the canonical shape.

        Args:
            body: Raw upstream response body.
            model: Model name that was sent upstream.

        Returns:
            The canonical chat completion.

        Raises:
            ValueError: If the body does not decode into the expected shape
                        (``pydantic.ValidationError`` and
                        ``json.JSONDecodeError`` are both ``ValueError``\\s).
        """
        ...

    async def send(
        self,
        upstream: UpstreamClient,
        provider: Provider,
        request: CompletionRequest,
        model: str,
    ) -> UpstreamReply:
        """POST the translated request to *provider* and return the raw reply."""
        url = join_url(provider.base_url, self.path)
        return await upstream.post_json(provider, url, self.build_payload(request, model))

    @staticmethod
    def completion(
        *,
        id: str,
        model: str,
        message: Message,
        usage: Usage | None = None,
    ) -> CompletionResponse:
        """Build a single-choice canonical response stamped with the current time."""
        return CompletionResponse(
            id=id,
            created=int(time.time()),
            model=model,
            choices=[Choice(index=0, finish_reason="stop", message=message)],
            usage=usage or Usage(),
        )
