"""
HybridOrchestrator: one reply per request, whatever happens.

Layers, tried in order:
    1. validate   -- name and at least one course are required (the only error callers see)
    2. live       -- live model under a hard timeout
    3. fallback   -- DialogueMatcher on the latest user message
    4. emergency  -- a fixed apology

The orchestrator is stateless; the caller sends the whole conversation and
the current turn on every request.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from ..config import Settings
from ..content.templates import EMERGENCY_APOLOGY, FALLBACK_WARNING
from ..llm.client import LiveModelError
from ..llm.generator import ReflectionGenerator
from .matcher import DialogueMatcher
from .scenario import resolve_scenario
from .types import (
    PHASE_ARTICULATION,
    PHASE_CLOSING,
    PHASE_RECAP,
    START_SENTINEL,
    UserContext,
    normalize_language,
)

logger = logging.getLogger(__name__)

SOURCE_LIVE = "openai"
SOURCE_FALLBACK = "fallback"
SOURCE_EMERGENCY = "emergency"


class ContextValidationError(ValueError):
    """The request is missing required student context."""


def latest_user_message(messages: List[Dict[str, Any]]) -> str:
    """Content of the most recent user message; the start sentinel when there is none or it is blank."""
    for msg in reversed(messages or []):
        if msg.get("role") == "user":
            content = (msg.get("content") or "").strip()
            return content or START_SENTINEL
    return START_SENTINEL


def phase_for_live_turn(turn: int) -> str:
    """Coarse phase for free-form live replies, from the turn count alone."""
    if turn >= 5:
        return PHASE_CLOSING
    if turn >= 3:
        return PHASE_ARTICULATION
    return PHASE_RECAP


class HybridOrchestrator:
    """
    Request-level policy around the live model and the scripted matcher.

    The live generator is injected by whoever builds the orchestrator; pass
    ``None`` (or an unconfigured client) for scripted replies only.
    """

    def __init__(
        self,
        generator: Optional[ReflectionGenerator] = None,
        matcher: Optional[DialogueMatcher] = None,
        settings: Optional[Settings] = None,
        max_workers: int = 4,
    ):
        self.generator = generator
        self.matcher = matcher or DialogueMatcher()
        self.settings = settings or Settings()
        # Blocking HTTP calls run here; an abandoned call ends once the client's whole-call deadline passes
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="live-model")

    @property
    def live_configured(self) -> bool:
        return self.generator is not None and self.generator.is_available

    def close(self) -> None:
        self._executor.shutdown(wait=False)

    async def respond(
        self,
        messages: List[Dict[str, Any]],
        user_context: Optional[Dict[str, Any]],
        current_turn: int = 0,
        scenario: Optional[str] = None,
        language: Optional[str] = None,
        force_fallback: bool = False,
    ) -> Dict[str, Any]:
        """
        Produce the next assistant message.

        Returns a dict with message, source, currentTurn, and where relevant
        phase, warning and scenario. Raises ContextValidationError only.
        """
        context = self.validate(user_context)
        language = normalize_language(language)
        scenario = resolve_scenario(scenario, context)
        current_turn = max(0, int(current_turn or 0))
        messages = messages or []

        if self._should_try_live(force_fallback):
            reply = await self._ask_live_model(messages, context, scenario, language)
            if reply is not None:
                next_turn = current_turn + 1
                logger.info(f"[Orchestrator] Live reply, turn {current_turn} -> {next_turn}")
                return {
                    "message": reply,
                    "source": SOURCE_LIVE,
                    "currentTurn": next_turn,
                    "phase": phase_for_live_turn(next_turn),
                    "scenario": scenario,
                }

        try:
            utterance = latest_user_message(messages)
            result = self.matcher.next(utterance, current_turn, context, scenario, language)
            logger.info(f"[Orchestrator] Scripted reply ({scenario}/{language}), turn {current_turn} -> {result.next_turn}")
            return {
                "message": result.message,
                "source": SOURCE_FALLBACK,
                "currentTurn": result.next_turn,
                "phase": result.phase,
                "warning": FALLBACK_WARNING[language],
                "scenario": scenario,
            }
        except Exception:
            logger.exception("[Orchestrator] Scripted fallback failed, sending apology")
            return {
                "message": EMERGENCY_APOLOGY[language],
                "source": SOURCE_EMERGENCY,
                "currentTurn": current_turn,
                "scenario": scenario,
            }

    @staticmethod
    def validate(user_context: Optional[Dict[str, Any]]) -> UserContext:
        """Build the context, rejecting requests without a name or courses."""
        if not user_context:
            raise ContextValidationError("Missing required user context")
        context = UserContext.from_dict(user_context)
        if not context.name:
            raise ContextValidationError("Missing required user context: name")
        if not context.courses:
            raise ContextValidationError("Missing required user context: courses must be a non-empty list")
        return context

    def _should_try_live(self, force_fallback: bool) -> bool:
        if force_fallback or not self.settings.live_enabled:
            return False
        return self.live_configured

    async def _ask_live_model(
        self,
        messages: List[Dict[str, Any]],
        context: UserContext,
        scenario: str,
        language: str,
    ) -> Optional[str]:
        """The live reply, or None on timeout or any live-model failure."""
        loop = asyncio.get_running_loop()
        call = loop.run_in_executor(
            self._executor, self.generator.generate, messages, context, scenario, language
        )
        try:
            return await asyncio.wait_for(call, timeout=self.settings.live_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"[Orchestrator] Live model timed out after {self.settings.live_timeout}s")
        except LiveModelError as e:
            logger.warning(f"[Orchestrator] Live model failed: {e}")
        except Exception as e:
            logger.warning(f"[Orchestrator] Live model raised {type(e).__name__}: {e}")
        return None
