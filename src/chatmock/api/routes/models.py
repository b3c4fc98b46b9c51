"""Model listing API route."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from chatmock.api.deps import get_orchestrator, get_registry
from chatmock.models.schemas import ModelInfo, ModelsResponse
from chatmock.orchestrator import CompletionOrchestrator
from chatmock.providers.registry import ProviderRegistry

router = APIRouter()


def build_models_response(registry: ProviderRegistry, mock_model: str) -> ModelsResponse:
    """The mock model first, then one wildcard entry per provider.

    A provider with prefix ``"ollama/"`` is listed as ``"ollama/*"`` and
    owned by its kind.
    """
    created = int(time.time())
    models = [ModelInfo(id=mock_model, created=created, owned_by="chatmock")]
    for provider in registry.list():
        if provider.model_prefix.strip():
            model_id = provider.model_prefix.removesuffix("/") + "/*"
        else:
            model_id = provider.name
        models.append(ModelInfo(id=model_id, created=created, owned_by=provider.kind))
    return ModelsResponse(data=models)


@router.get("/models", response_model=ModelsResponse)
async def list_models(
    registry: ProviderRegistry = Depends(get_registry),
    orchestrator: CompletionOrchestrator = Depends(get_orchestrator),
):
    return build_models_response(registry, orchestrator.mock_model)
