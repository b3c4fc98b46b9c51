"""Shared test fixtures for the ChatMock test suite."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from chatmock.config import Settings
from chatmock.integrations.upstream import UpstreamClient
from chatmock.models.schemas import CompletionRequest, Message
from chatmock.providers.base import Provider
from chatmock.providers.registry import ProviderRegistry
from chatmock.rules.store import RuleStore
from chatmock.seed import DEFAULT_RULES


class FakeUpstream:
    """Records upstream requests and answers them with a canned response.

    Set ``delay`` to hold each request open; ``cancelled`` records whether
    a held request was cancelled.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b"{}"
        self.error: Exception | None = None
        self.delay = 0.0
        self.cancelled = False

    def reply(self, payload: Any = None, *, status_code: int = 200, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.body = content if content is not None else json.dumps(payload).encode()

    def fail(self, error: Exception) -> None:
        self.error = error

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)

    def client(self, timeout: float = 5.0) -> UpstreamClient:
        return UpstreamClient(timeout=timeout, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_upstream():
    """An upstream that records requests and returns ``{}`` until told otherwise."""
    return FakeUpstream()


@pytest.fixture
def registry():
    """An empty provider registry."""
    return ProviderRegistry()


@pytest.fixture
def rules():
    """A rule store holding the default seed rules."""
    return RuleStore(DEFAULT_RULES)


@pytest.fixture
def test_settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(_env_file=None, chatmock_mock_model="gpt-mock-1")


@pytest.fixture
def client(test_settings, registry, rules, fake_upstream):
    """A test client wired to the shared registry, rules and fake upstream."""
    from chatmock.main import create_app

    app = create_app(
        test_settings,
        registry=registry,
        rules=rules,
        upstream=fake_upstream.client(),
    )
    with TestClient(app) as c:
        yield c


@pytest.fixture
def hello_request():
    """A single-message request that hits the ``hello`` seed rule."""
    return CompletionRequest(messages=[Message(role="user", content="hello there")])


@pytest.fixture
def ollama_provider():
    return Provider(
        name="ollama",
        kind="ollama",
        base_url="http://ollama.test",
        model_prefix="ollama/",
    )


@pytest.fixture
def codex_provider():
    return Provider(
        name="codex",
        kind="codex",
        base_url="http://codex.test",
        api_key="test-key",
        model_prefix="codex/",
    )


@pytest.fixture
def chatgpt_provider():
    return Provider(
        name="chatgpt",
        kind="chatgpt",
        base_url="http://chatgpt.test",
        access_token="chatgpt-token",
        account_id="acct-1",
        model_prefix="chatgpt/",
    )


@pytest.fixture
def sample_ollama_response():
    """A non-streaming Ollama /api/chat reply."""
    return {
        "model": "llama3.1",
        "message": {"role": "assistant", "content": "from ollama"},
        "prompt_eval_count": 2,
        "eval_count": 3,
    }


@pytest.fixture
def sample_openai_response():
    """An OpenAI-compatible chat.completion reply."""
    return {
        "id": "codex-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": "from codex"},
            }
        ],
        "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
    }
