"""
Language-indexed keyword tables used by the scripted fallback.

Entries are lowercase. Korean entries are stems matched as plain substrings of
the lowercased, trimmed utterance, so particles attached to a stem still hit.
English entries are matched as whole words or phrases ("how" does not hit
"show"); an entry ending in ``*`` is a stem and also matches longer words
("worr*" hits "worried").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

from .types import DEFAULT_LANGUAGE, LANGUAGE_EN, LANGUAGE_KO


@lru_cache(maxsize=None)
def _compile(words: Tuple[str, ...], whole_words: bool) -> re.Pattern:
    parts = []
    for word in words:
        if not whole_words:
            parts.append(re.escape(word))
        elif word.endswith("*"):
            parts.append(rf"\b{re.escape(word[:-1])}\w*")
        else:
            parts.append(rf"\b{re.escape(word)}\b")
    return re.compile("|".join(parts))


@dataclass(frozen=True)
class Lexicon:
    """Word families for one language."""
    fit_words: Tuple[str, ...]      # interest, curiosity, enjoyment, wanting to learn
    fear_words: Tuple[str, ...]     # necessity, anxiety, obligation, falling behind
    hedge_words: Tuple[str, ...]    # uncertainty markers
    wh_words: Tuple[str, ...]       # question words
    whole_words: bool = False

    def mentions(self, text: str, words: Tuple[str, ...]) -> bool:
        """True if ``text`` (already normalized) contains any of ``words``."""
        if not words:
            return False
        return _compile(words, self.whole_words).search(text) is not None


LEXICONS: Dict[str, Lexicon] = {
    LANGUAGE_KO: Lexicon(
        fit_words=("흥미", "재미", "좋아", "궁금", "배우고 싶", "하고 싶"),
        fear_words=("필요", "걱정", "불안", "갖춰야", "뒤처질", "해야"),
        hedge_words=("모르겠", "잘 모르", "글쎄", "확실하지 않", "생각 안", "별로"),
        wh_words=("뭐", "어떻게", "왜", "언제", "어디"),
    ),
    LANGUAGE_EN: Lexicon(
        fit_words=(
            "interest*", "fun", "funny", "curious", "enjoy*", "like", "likes", "liked",
            "love*", "loving", "excit*", "want to learn", "fascinat*",
        ),
        fear_words=(
            "need*", "worr*", "anxi*", "have to", "has to", "should", "must",
            "fall behind", "behind", "pressure*", "afraid", "scared",
        ),
        hedge_words=(
            "not sure", "don't know", "dont know", "no idea", "dunno",
            "maybe", "i guess", "not really", "hard to say",
        ),
        wh_words=("what", "how", "why", "when", "where", "which", "who"),
        whole_words=True,
    ),
}


def get_lexicon(language: str) -> Lexicon:
    """Lexicon for ``language``, falling back to the default language."""
    return LEXICONS.get(language) or LEXICONS[DEFAULT_LANGUAGE]


def normalize(text: str) -> str:
    return (text or "").lower().strip()


def contains_any(text: str, words) -> bool:
    """True if any of ``words`` occurs as a substring of ``text``. Used for script patterns."""
    return any(w in text for w in words)


def is_vague(text: str, language: str) -> bool:
    lexicon = get_lexicon(language)
    return lexicon.mentions(normalize(text), lexicon.hedge_words)


def is_question(text: str, language: str) -> bool:
    lowered = normalize(text)
    lexicon = get_lexicon(language)
    return "?" in lowered or lexicon.mentions(lowered, lexicon.wh_words)

