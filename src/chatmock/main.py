"""ChatMock FastAPI application entrypoint."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chatmock import __version__
from chatmock.config import Settings, settings
from chatmock.errors import ChatMockError
from chatmock.integrations.upstream import UpstreamClient
from chatmock.orchestrator import CompletionOrchestrator
from chatmock.providers.registry import ProviderRegistry
from chatmock.rules.store import RuleStore
from chatmock.seed import DEFAULT_RULES, providers_from_settings

# ── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.chatmock_debug else logging.INFO,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
)
# Quiet down noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def create_app(
    config: Settings | None = None,
    *,
    registry: ProviderRegistry | None = None,
    rules: RuleStore | None = None,
    upstream: UpstreamClient | None = None,
) -> FastAPI:
    """Build the application and its long-lived state.

    The provider registry and rule store are created once here and shared
    by every request through ``app.state``.
    """
    config = config or settings
    if registry is None:
        registry = ProviderRegistry(providers_from_settings(config))
    if rules is None:
        rules = RuleStore(DEFAULT_RULES)

    app = FastAPI(
        title="ChatMock",
        description="Mock chat completion server with upstream provider routing",
        version=__version__,
    )
    app.state.registry = registry
    app.state.rules = rules
    app.state.orchestrator = CompletionOrchestrator(
        registry,
        rules,
        upstream=upstream or UpstreamClient(timeout=config.chatmock_upstream_timeout),
        mock_model=config.chatmock_mock_model,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(ChatMockError)
    async def chatmock_error_handler(request: Request, exc: ChatMockError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "invalid JSON payload"})

    # Register API routes
    from chatmock.api.routes import admin, chat, models, ollama

    app.include_router(chat.router, prefix="/v1", tags=["Chat"])
    app.include_router(models.router, prefix="/v1", tags=["Models"])
    app.include_router(admin.router, prefix="/v1", tags=["Admin"])
    app.include_router(ollama.router, prefix="/api", tags=["Ollama"])

    @app.get("/healthz")
    async def health_check():
        return {"status": "ok"}

    logger.info("ChatMock ready (env=%s) with %d provider(s)", config.chatmock_env, len(registry))
    return app


app = create_app()
