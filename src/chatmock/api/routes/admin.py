"""Administrative API routes — mock rules and upstream providers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from chatmock.api.deps import get_registry, get_rules
from chatmock.errors import InvalidRequestError
from chatmock.models.schemas import ProvidersPayload, RulesPayload
from chatmock.providers.registry import ProviderRegistry
from chatmock.rules.store import RuleStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/rules")
async def list_rules(rules: RuleStore = Depends(get_rules)):
    return {"rules": rules.all()}


@router.put("/rules")
async def replace_rules(
    data: RulesPayload,
    rules: RuleStore = Depends(get_rules),
):
    """Replace the whole rule list."""
    rules.set(data.rules)
    logger.info("Rules replaced (%d rules)", len(data.rules))
    return {"rules": rules.all()}


@router.get("/providers")
async def list_providers(registry: ProviderRegistry = Depends(get_registry)):
    """List providers; credentials are reported only as ``has_*`` flags."""
    return {"providers": registry.redacted_list()}


@router.put("/providers")
async def update_providers(
    data: ProvidersPayload,
    registry: ProviderRegistry = Depends(get_registry),
):
    """Replace all providers (``providers``) or upsert one (``provider``).

    A non-empty ``providers`` list takes precedence over ``provider``.
    """
    if data.providers:
        registry.replace_all(data.providers)
    elif data.provider is not None:
        registry.upsert(data.provider)
    else:
        raise InvalidRequestError("provider or providers is required")
    return {"providers": registry.redacted_list()}
