"""Completion orchestrator — route, translate, call, or fall back to the mock.

Usage::

    orchestrator = CompletionOrchestrator(registry, rules)
    response = await orchestrator.run_completion(request)

Errors surface as :class:`~chatmock.errors.ChatMockError` subclasses that
carry the status code for the caller. Nothing is retried.
"""

from __future__ import annotations

import logging

import httpx

from chatmock.config import settings
from chatmock.errors import (
    InvalidRequestError,
    UpstreamDecodeError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from chatmock.integrations.upstream import UpstreamClient
from chatmock.llm.base import BaseTranslator
from chatmock.llm.providers import get_translator
from chatmock.llm.router import ModelRouter, RouteMatch
from chatmock.llm.usage import estimate_usage
from chatmock.models.schemas import CompletionRequest, CompletionResponse, Message
from chatmock.providers.registry import ProviderRegistry
from chatmock.rules.store import RuleStore

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Mock response: I received your message and no custom rule matched."

# Upstream error bodies are logged up to this many characters.
_LOGGED_BODY_CHARS = 500


class CompletionOrchestrator:
    """Serves canonical chat completions.

    Args:
        registry: Providers to route to.
        rules: Rule store consulted when no provider matches.
        upstream: HTTP client for upstream calls (a default one is built
                  when omitted).
        mock_model: Model name reported by mock replies when the request
                    does not name one.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        rules: RuleStore,
        upstream: UpstreamClient | None = None,
        mock_model: str | None = None,
    ) -> None:
        self.router = ModelRouter(registry)
        self.rules = rules
        self.upstream = upstream or UpstreamClient()
        self.mock_model = mock_model or settings.chatmock_mock_model

    async def run_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Answer *request* from a matching provider or the mock responder.

        Raises:
            InvalidRequestError: If the request has no messages.
            UpstreamTransportError: If the upstream could not be reached.
            UpstreamStatusError: If the upstream answered with a non-2xx status.
            UpstreamDecodeError: If the upstream body could not be translated.
        """
        if not request.messages:
            raise InvalidRequestError("messages must not be empty")

        route = self.router.match(request.model)
        if route is None:
            return self.mock_completion(request)
        return await self._proxy(route, request)

    async def _proxy(self, route: RouteMatch, request: CompletionRequest) -> CompletionResponse:
        provider, model = route
        translator: BaseTranslator = get_translator(provider.provider_kind)
        logger.info(
            "Proxying completion: provider=%s kind=%s model=%s messages=%d",
            provider.name,
            provider.kind,
            model,
            len(request.messages),
        )

        try:
            reply = await translator.send(self.upstream, provider, request, model)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning("Upstream request to %s failed: %s", provider.name, exc)
            raise UpstreamTransportError(f"remote request failed: {exc}") from exc

        if not reply.ok:
            logger.warning(
                "Upstream %s returned status %d: %s",
                provider.name,
                reply.status_code,
                reply.content[:_LOGGED_BODY_CHARS].decode("utf-8", errors="replace"),
            )
            raise UpstreamStatusError(reply.status_code)

        try:
            return translator.parse_response(reply.content, model)
        except ValueError as exc:
            logger.warning("Undecodable response from %s: %s", provider.name, exc)
            raise UpstreamDecodeError("invalid remote response") from exc

    def mock_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Answer from the rule store, keyed on the last message's content."""
        last = request.messages[-1].content
        reply = self.rules.match(last)
        if reply is None:
            reply = FALLBACK_REPLY
        model = request.model if request.model.strip() else self.mock_model
        return BaseTranslator.completion(
            id="chatcmpl-mock",
            model=model,
            message=Message(role="assistant", content=reply),
            usage=estimate_usage(request.messages, reply),
        )
