"""
MotivationClassifier: decides whether a stated reason for studying something
is intrinsic interest ("fit"), external pressure ("fear"), or both.

Keyword presence only, no weighting; English keywords match whole words.
An utterance with neither family is "unknown" and is answered with
``default_variant``.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..content.templates import (
    MOTIVATION_BOTH,
    MOTIVATION_FEAR,
    MOTIVATION_FIT,
    MOTIVATION_RESPONSES,
    MOTIVATION_UNKNOWN,
)
from .lexicon import get_lexicon, normalize
from .types import DEFAULT_LANGUAGE, MessageFn, UserContext

# Ambiguous answers are read optimistically
DEFAULT_MOTIVATION_VARIANT = MOTIVATION_FIT


class MotivationClassifier:
    """Fit / fear classification with per-language closing replies."""

    def __init__(
        self,
        default_variant: str = DEFAULT_MOTIVATION_VARIANT,
        responses: Optional[Dict[str, Dict[str, MessageFn]]] = None,
    ):
        if default_variant not in (MOTIVATION_FIT, MOTIVATION_FEAR, MOTIVATION_BOTH):
            raise ValueError(f"Unknown motivation variant: {default_variant}")
        self.default_variant = default_variant
        self.responses = responses or MOTIVATION_RESPONSES

    def classify(self, utterance: str, language: str) -> str:
        """Return "fit", "fear", "both" or "unknown"."""
        text = normalize(utterance)
        lexicon = get_lexicon(language)
        has_fit = lexicon.mentions(text, lexicon.fit_words)
        has_fear = lexicon.mentions(text, lexicon.fear_words)

        if has_fit and has_fear:
            return MOTIVATION_BOTH
        if has_fit:
            return MOTIVATION_FIT
        if has_fear:
            return MOTIVATION_FEAR
        return MOTIVATION_UNKNOWN

    def resolve(self, utterance: str, language: str) -> str:
        """Like classify(), with "unknown" replaced by the default variant."""
        variant = self.classify(utterance, language)
        if variant == MOTIVATION_UNKNOWN:
            return self.default_variant
        return variant

    def respond(self, utterance: str, context: UserContext, language: str) -> str:
        """Render the closing message for the utterance's motivation."""
        templates = self.responses.get(language) or self.responses[DEFAULT_LANGUAGE]
        return templates[self.resolve(utterance, language)](context)
