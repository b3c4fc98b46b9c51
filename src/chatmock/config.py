"""ChatMock application configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global application settings loaded from environment / .env file."""

    # General
    chatmock_env: str = "development"
    chatmock_debug: bool = False
    chatmock_host: str = "0.0.0.0"
    chatmock_port: int = 8080

    # Outbound calls to upstream providers (seconds)
    chatmock_upstream_timeout: float = 60.0

    # Model name reported by the mock responder when the request has none
    chatmock_mock_model: str = "gpt-mock-1"

    # Ollama
    chatmock_ollama_base_url: str = ""
    chatmock_ollama_model_prefix: str = "ollama/"
    chatmock_ollama_route_all: bool = False

    # Codex (OpenAI-compatible)
    chatmock_codex_base_url: str = ""
    chatmock_codex_api_key: str = ""
    chatmock_codex_model_prefix: str = "codex/"
    chatmock_codex_route_all: bool = False

    # ChatGPT backend (tokens are obtained out of band)
    chatmock_chatgpt_base_url: str = ""
    chatmock_chatgpt_access_token: str = ""
    chatmock_chatgpt_account_id: str = ""
    chatmock_chatgpt_model_prefix: str = "chatgpt/"
    chatmock_chatgpt_route_all: bool = False

    # Legacy single remote provider
    chatmock_remote_base_url: str = ""
    chatmock_remote_api_key: str = ""
    chatmock_remote_model_prefix: str = "remote/"
    chatmock_remote_route_all: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
