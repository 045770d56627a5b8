"""
DialogueMatcher: deterministic scripted replies for when the live model
can't answer.

Given the student's latest message and the turn the conversation is on, the
matcher tries, in order:

    1. start       -- "START" or turn 0 opens the script
    2. bounds      -- past the end of the script: generic reply, stay put
    3. advance     -- reply matches the turn's expected patterns: next turn
    4. vague       -- hedged reply: the turn's vague alternative, stay put
    5. question    -- counter-question: the turn's question alternative, stay put
    6. lookahead   -- reply matches one of the next three turns: jump there
    7. fallback    -- generic reply, stay put

Turn numbers are 1-based; ``current_turn`` is the number of the turn whose
message the student is replying to.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from ..content.registry import ScriptRegistry, get_registry
from ..content.templates import GENERIC_FALLBACKS
from .lexicon import contains_any, is_question, is_vague, normalize
from .motivation import MotivationClassifier
from .types import (
    DEFAULT_LANGUAGE,
    PHASE_CLOSING,
    START_SENTINEL,
    ConversationScript,
    ConversationTurn,
    MatchResult,
    UserContext,
)

logger = logging.getLogger(__name__)

LOOKAHEAD_TURNS = 3


class DialogueMatcher:
    """
    Maps (utterance, turn, context, scenario, language) to the next message.

    Pure apart from the generic-reply pick, which uses ``rng`` so tests can
    seed it.
    """

    def __init__(
        self,
        registry: Optional[ScriptRegistry] = None,
        classifier: Optional[MotivationClassifier] = None,
        rng: Optional[random.Random] = None,
        generic_fallbacks: Optional[Dict[str, List[str]]] = None,
    ):
        self.registry = registry or get_registry()
        self.classifier = classifier or MotivationClassifier()
        self.rng = rng or random.Random()
        self.generic_fallbacks = generic_fallbacks or GENERIC_FALLBACKS

    def next(
        self,
        utterance: str,
        current_turn: int,
        context: UserContext,
        scenario: Optional[str] = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> MatchResult:
        """Decide the next bot message. See the module docstring for the order."""
        script = self.registry.lookup(scenario, language)
        language = script.language
        utterance = utterance or ""

        # 1. Start
        if utterance == START_SENTINEL or current_turn <= 0:
            first = script.turns[0]
            return MatchResult(first.render(context), 1, first.phase)

        # 2. Bounds
        turn = script.turn(current_turn)
        if turn is None:
            return MatchResult(self.generic_reply(language), current_turn, PHASE_CLOSING)

        text = normalize(utterance)

        # 3. Exact advance
        target = script.turn(current_turn + 1)
        if target is not None and contains_any(text, turn.expected_user_patterns):
            return MatchResult(
                self._render_target(target, utterance, context, language),
                target.turn_number,
                target.phase,
            )

        # 4. Vague
        if turn.vague is not None and is_vague(text, language):
            return MatchResult(turn.vague(context), current_turn, turn.phase)

        # 5. Question
        if turn.question is not None and is_question(text, language):
            return MatchResult(turn.question(context), current_turn, turn.phase)

        # 6. Lookahead
        ahead = self._find_ahead(script, text, current_turn)
        if ahead is not None:
            logger.debug(f"[DialogueMatcher] Skipping ahead {current_turn} -> {ahead.turn_number}")
            return MatchResult(ahead.render(context), ahead.turn_number, ahead.phase)

        # 7. Fallback
        return MatchResult(self.generic_reply(language), current_turn, turn.phase)

    def generic_reply(self, language: str) -> str:
        pool = self.generic_fallbacks.get(language) or self.generic_fallbacks[DEFAULT_LANGUAGE]
        return self.rng.choice(pool)

    def _render_target(
        self,
        target: ConversationTurn,
        utterance: str,
        context: UserContext,
        language: str,
    ) -> str:
        if target.motivation_response:
            return self.classifier.respond(utterance, context, language)
        return target.render(context)

    @staticmethod
    def _find_ahead(
        script: ConversationScript, text: str, current_turn: int
    ) -> Optional[ConversationTurn]:
        for number in range(current_turn + 1, current_turn + 1 + LOOKAHEAD_TURNS):
            candidate = script.turn(number)
            if candidate is None:
                break
            if contains_any(text, candidate.expected_user_patterns):
                return candidate
        return None


_default_matcher: Optional[DialogueMatcher] = None


def find_best_match(
    utterance: str,
    current_turn: int,
    context: UserContext,
    scenario: Optional[str] = None,
    language: str = DEFAULT_LANGUAGE,
) -> MatchResult:
    """Module-level convenience around a shared default matcher."""
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = DialogueMatcher()
    return _default_matcher.next(utterance, current_turn, context, scenario, language)
