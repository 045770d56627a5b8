"""
Message templates shared across scripts: motivation replies, the generic
fallback pool, and the apology/warning strings the orchestrator attaches.
"""

from __future__ import annotations

from typing import Dict, List

from ..core.types import LANGUAGE_EN, LANGUAGE_KO, MessageFn, UserContext

MOTIVATION_FIT = "fit"
MOTIVATION_FEAR = "fear"
MOTIVATION_BOTH = "both"
MOTIVATION_UNKNOWN = "unknown"


# =============================================================================
# FIT / FEAR REPLIES
# =============================================================================

def _fit_en(ctx: UserContext) -> str:
    return (
        "That's what matters most! 💚\n\n"
        "When you follow your interests, the skills you need will naturally follow.\n"
        f"And learning something you enjoy, {ctx.name}, "
        "goes much deeper than learning something just because you have to.\n\n"
        "How confident do you feel about this choice? (Think of it as 1-10 in your mind)"
    )


def _fear_en(ctx: UserContext) -> str:
    return (
        "Thanks for being honest. Many students feel the same way. 🤍\n\n"
        "But let me ask you one question:\n"
        "If there was no worry or anxiety, would you still want to learn these skills?\n\n"
        "Or would you have chosen something completely different?"
    )


def _both_en(ctx: UserContext) -> str:
    return (
        "It's natural to have both! 💜\n\n"
        "You're interested, and you also feel the need.\n"
        "So what if you think about it this way:\n\n"
        "If there was no need, would you still want to learn this?"
    )


def _fit_ko(ctx: UserContext) -> str:
    return (
        "그게 제일 중요해요! 💚\n\n"
        "흥미를 따라가면, 필요한 역량은 자연스럽게 따라와요.\n"
        f"그리고 {ctx.name}님이 좋아하는 걸 하면서 배우는 건 "
        "억지로 필요해서 배우는 것보다 훨씬 깊이 배우게 돼요.\n\n"
        "이 선택에 대해 얼마나 확신이 드세요? (마음속으로 1-10점 정도로 생각해보세요)"
    )


def _fear_ko(ctx: UserContext) -> str:
    return (
        "솔직하게 말해줘서 고마워요. 많은 학생들이 비슷한 마음이에요. 🤍\n\n"
        "그런데 질문 하나만 해볼게요:\n"
        "만약 걱정이나 불안이 없다면, 이 역량들을 배우고 싶으세요?\n\n"
        "아니면 전혀 다른 걸 선택했을 것 같아요?"
    )


def _both_ko(ctx: UserContext) -> str:
    return (
        "둘 다 있는 게 자연스러워요! 💜\n\n"
        "흥미도 있고, 필요성도 느끼는 거죠.\n"
        "그럼 이렇게 생각해보면 어떨까요:\n\n"
        "만약 필요성이 없다면, 그래도 이걸 배우고 싶을까요?"
    )


MOTIVATION_RESPONSES: Dict[str, Dict[str, MessageFn]] = {
    LANGUAGE_EN: {
        MOTIVATION_FIT: _fit_en,
        MOTIVATION_FEAR: _fear_en,
        MOTIVATION_BOTH: _both_en,
    },
    LANGUAGE_KO: {
        MOTIVATION_FIT: _fit_ko,
        MOTIVATION_FEAR: _fear_ko,
        MOTIVATION_BOTH: _both_ko,
    },
}


# =============================================================================
# GENERIC FALLBACKS
# =============================================================================

GENERIC_FALLBACKS: Dict[str, List[str]] = {
    LANGUAGE_EN: [
        "That's an interesting thought. Can you tell me more?",
        "I'd like to understand that better. Can you explain what you mean?",
        "I see. Why does that feel important to you?",
        "That's a good perspective. Want to think about it from another angle?",
    ],
    LANGUAGE_KO: [
        "흥미로운 생각이네요. 좀 더 자세히 말씀해주실 수 있을까요?",
        "그 부분에 대해 더 알고 싶어요. 어떤 의미인지 설명해줄 수 있을까요?",
        "아, 그렇군요. 그게 왜 중요한 것 같아요?",
        "좋은 관점이에요. 다른 각도로도 생각해볼까요?",
    ],
}


# =============================================================================
# ORCHESTRATOR STRINGS
# =============================================================================

FALLBACK_WARNING: Dict[str, str] = {
    LANGUAGE_EN: "Using pre-scripted response (live model unavailable)",
    LANGUAGE_KO: "사전 작성된 응답 사용 중 (실시간 모델 사용 불가)",
}

EMERGENCY_APOLOGY: Dict[str, str] = {
    LANGUAGE_EN: "Sorry, something went wrong. Could you say that again?",
    LANGUAGE_KO: "죄송해요, 잠시 문제가 생겼어요. 다시 한번 말씀해주시겠어요?",
}
