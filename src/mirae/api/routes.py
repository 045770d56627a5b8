"""
REST API routes for the Mirae reflection chat.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings
from ..content.registry import get_registry
from ..core.orchestrator import ContextValidationError, HybridOrchestrator
from ..llm.client import ChatCompletionClient
from ..llm.generator import ReflectionGenerator
from .schemas import ChatRequest, ChatResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# Shared orchestrator, built on first use
orchestrator: Optional[HybridOrchestrator] = None


def get_orchestrator() -> HybridOrchestrator:
    global orchestrator
    if orchestrator is None:
        settings = Settings.from_env()
        client = ChatCompletionClient(timeout=settings.live_timeout)
        orchestrator = HybridOrchestrator(
            generator=ReflectionGenerator(client),
            settings=settings,
        )
    return orchestrator


@router.get("/status")
async def status(orch: HybridOrchestrator = Depends(get_orchestrator)):
    """Check system status including LLM availability."""
    return {"llm_available": orch.live_configured}


@router.post(
    "/skill-translation/chat",
    response_model=ChatResponse,
    response_model_exclude_none=True,
)
async def chat(request: ChatRequest, orch: HybridOrchestrator = Depends(get_orchestrator)):
    """Next message of the reflection chat: live model first, script otherwise."""
    user_context = request.user_context.model_dump(by_alias=True) if request.user_context else None
    try:
        result = await orch.respond(
            messages=[m.model_dump() for m in request.messages],
            user_context=user_context,
            current_turn=request.current_turn,
            scenario=request.scenario,
            language=request.language,
            force_fallback=request.force_real_api,
        )
    except ContextValidationError as e:
        logger.info(f"[Routes] Rejected chat request: {e}")
        raise HTTPException(400, str(e))
    return ChatResponse(**result)


@router.get("/skill-translation/chat", response_model=HealthResponse)
async def chat_health(orch: HybridOrchestrator = Depends(get_orchestrator)):
    """Health check: live model configuration and scripted fallback availability."""
    return HealthResponse(
        status="ok",
        openai="configured" if orch.live_configured else "not configured",
        fallback="available",
        scenarios=get_registry().scenarios(),
    )
