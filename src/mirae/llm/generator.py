"""
ReflectionGenerator: live-model replies for the Mirae reflection chat.

The system prompt is built from the student's context and the detected
scenario, so the model knows who it is talking to and which conversation it
is in. Unlike the scripted path, replies are free-form.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..core.types import (
    LANGUAGE_EN,
    SCENARIO_GENERAL,
    SCENARIO_YEAR1_POST,
    SCENARIO_YEAR1_PRE,
    SCENARIO_YEAR2_RECONSIDERING,
    SCENARIO_YEAR3_PRESSURE,
    UserContext,
)
from .client import ChatCompletionClient, LiveModelError

logger = logging.getLogger(__name__)

# Recent messages sent along with the system prompt
HISTORY_WINDOW = 20

ALLOWED_ROLES = ("user", "assistant")


def build_system_prompt(context: UserContext, scenario: str, language: str) -> str:
    """Base personality with student info, followed by scenario guidance."""
    en = language == LANGUAGE_EN
    unknown = "Unknown" if en else "알 수 없음"
    parts = [PERSONALITY_PROMPT]

    parts.append("\n\n**STUDENT INFO:**")
    parts.append(f"Name: {context.name}")
    parts.append(f"Year Level: {context.year_level or unknown}")
    parts.append(f"Keywords: {', '.join(context.keywords) or unknown}")
    parts.append(f"Strengths: {', '.join(context.energizers) or unknown}")
    if context.joys:
        parts.append(f"Joys: {', '.join(context.joys)}")
    parts.append(f"Interests: {', '.join(context.interests) or unknown}")
    parts.append(f"Selected Courses: {', '.join(context.courses) or ('Not selected yet' if en else '아직 선택 안 함')}")
    parts.append(f"Selection Status: {context.selection_status or unknown}")
    if context.current_semester:
        parts.append(f"Current Semester: {context.current_semester}")
    parts.append(f"Why they're here: {context.trigger_reason or 'general reflection'}")

    parts.append(LANGUAGE_RULES_EN if en else LANGUAGE_RULES_KO)

    guidance = SCENARIO_GUIDANCE.get(scenario, SCENARIO_GUIDANCE[SCENARIO_GENERAL])
    parts.append("\n\n" + guidance.format(
        courses=", ".join(context.courses),
        first_course=context.course(0),
        name=context.name,
    ))
    examples = EXAMPLE_QUESTIONS.get(scenario, EXAMPLE_QUESTIONS[SCENARIO_GENERAL])
    lines = examples[LANGUAGE_EN if en else "ko"]
    parts.append("\n**EXAMPLE QUESTIONS:**")
    parts.extend(
        "✅ " + q.format(first_course=context.course(0), name=context.name) for q in lines
    )
    return "\n".join(parts)


PERSONALITY_PROMPT = """\
You are Mirae (미래), a warm and curious companion helping high school students explore academic paths.

**YOUR PERSONALITY:**
- Warm, patient, curious
- Like a thoughtful friend who asks good questions
- Never judge, never give advice
- Celebrate uniqueness and exploration"""

LANGUAGE_RULES_EN = """

**UNIVERSAL RULES:**
1. Ask ONE question at a time (under 100 words)
2. Use warm, friendly English (conversational but respectful)
3. NEVER recommend specific courses, careers, or paths
4. NEVER evaluate aptitude or intelligence
5. Normalize uncertainty and ambiguity

**PROHIBITED LANGUAGE:**
❌ "This is the best"
❌ "You should..."
❌ "X is better than Y"
❌ "You're talented at..." """

LANGUAGE_RULES_KO = """

**UNIVERSAL RULES:**
1. Ask ONE question at a time (under 100 words)
2. Use warm Korean (해요체 - polite but friendly)
3. NEVER recommend specific courses, careers, or paths
4. NEVER evaluate aptitude or intelligence
5. Normalize uncertainty and ambiguity

**PROHIBITED LANGUAGE:**
❌ "이게 제일 좋아요" (This is best)
❌ "당신은 ~해야 해요" (You should...)
❌ "~가 더 나아요" (X is better than Y)
❌ "당신은 ~에 재능이 있어요" (You're talented at...)"""

SCENARIO_GUIDANCE: Dict[str, str] = {
    SCENARIO_YEAR1_PRE: """\
**CONVERSATION CONTEXT:** Year 1 student BEFORE course selection
**THEIR FEELING:** Overwhelmed by choices, worried about a "wrong" decision

**YOUR GOAL:**
- Help them explore possibilities without pressure
- Frame selection as a learning experiment, not a final decision

**AVOID:**
❌ Asking about courses they "chose" (they haven't yet)
❌ Asking fit vs fear (too early, they're still exploring)""",

    SCENARIO_YEAR1_POST: """\
**CONVERSATION CONTEXT:** Year 1 student AFTER course selection
**THEIR FEELING:** Unsure if they chose "right", comparing to peers

**CONVERSATION FLOW:**
1. Recap their choices: {courses}
2. Articulate skills per course
3. Connect courses (coherence)
4. Unique combination (ownership)
5. Fit vs fear check (THE key question)
6. Closing validation

**FIT VS FEAR IS CRITICAL:**
- Fit = intrinsic motivation: validate and celebrate
- Fear = external pressure: gently probe deeper""",

    SCENARIO_YEAR2_RECONSIDERING: """\
**CONVERSATION CONTEXT:** Year 2+ student reconsidering choices
**THEIR FEELING:** Disappointed or confused, wondering if they made a mistake

**CONVERSATION FLOW:**
1. Experience recap (how was {first_course}?)
2. Expectation vs reality
3. What they learned about themselves
4. Stay or pivot exploration (never directive)

**CRITICAL VALIDATION:**
Changing your path isn't failure, it's learning more about yourself.""",

    SCENARIO_YEAR3_PRESSURE: """\
**CONVERSATION CONTEXT:** Year 3 student or high external pressure
**THEIR FEELING:** Torn between what they want and what's expected

**CONVERSATION FLOW:**
1. Pressure acknowledgment
2. What do others want? (external voice)
3. What do YOU want? (internal voice)
4. Where do they overlap or differ?
5. Agency within constraints

**CULTURAL SENSITIVITY:**
- Never pit the student against their parents
- Understanding yourself and living happily is part of filial piety too""",

    SCENARIO_GENERAL: """\
**CONVERSATION CONTEXT:** General reflection or unclear context
**THEIR FEELING:** Uncertain, seeking clarity

**YOUR GOAL:**
- Listen and adapt to what emerges
- Help {name} articulate what they're really asking
- Use reflective listening""",
}

EXAMPLE_QUESTIONS: Dict[str, Dict[str, List[str]]] = {
    SCENARIO_YEAR1_PRE: {
        "en": [
            "What courses are you curious about?",
            "If you could choose freely without fear of failure or regret, what would you pick?",
        ],
        "ko": [
            "어떤 과목들이 궁금해요?",
            "실패나 후회 없이 자유롭게 선택할 수 있다면, 뭘 고를 것 같아요?",
        ],
    },
    SCENARIO_YEAR1_POST: {
        "en": [
            "Let's imagine the '{first_course}' class. What do you think you'll learn there?",
            "Are you building these skills because they're interesting, or because they're necessary?",
        ],
        "ko": [
            "{first_course} 수업을 상상해볼까요? 어떤 걸 배우게 될 것 같아요?",
            "이 역량들을 키우는 게 흥미로워서예요, 아니면 필요해서예요?",
        ],
    },
    SCENARIO_YEAR2_RECONSIDERING: {
        "en": [
            "You took {first_course} last semester. How was it?",
            "What was different from what you expected?",
        ],
        "ko": [
            "1학기에 {first_course}를 들었는데, 어땠어요?",
            "기대했던 것과 어떤 점이 달랐어요?",
        ],
    },
    SCENARIO_YEAR3_PRESSURE: {
        "en": [
            "What kind of pressure are you feeling most right now?",
            "If all pressure were gone, what would you want to do?",
        ],
        "ko": [
            "지금 어떤 압박을 가장 크게 느끼고 있어요?",
            "만약 모든 압박이 없다면, 뭘 하고 싶어요?",
        ],
    },
    SCENARIO_GENERAL: {
        "en": [
            "What brought you here today?",
            "What's the most confusing part right now?",
        ],
        "ko": [
            "오늘 어떤 고민으로 찾아왔어요?",
            "지금 가장 헷갈리는 부분이 뭐예요?",
        ],
    },
}


class ReflectionGenerator:
    """
    Live-model conversation for the reflection chat.

    Raises LiveModelError instead of returning a placeholder, so the caller
    decides how to fall back.
    """

    def __init__(self, client: Optional[ChatCompletionClient] = None):
        self.client = client

    @property
    def is_available(self) -> bool:
        """Check if live generation is configured."""
        return self.client is not None and self.client.is_available

    def generate(
        self,
        messages: List[Dict[str, str]],
        context: UserContext,
        scenario: str,
        language: str,
    ) -> str:
        """
        Generate the next reply from the running conversation.

        Args:
            messages: Conversation so far, oldest first ({role, content})
            context: Student context for the system prompt
            scenario: Resolved scenario key
            language: "ko" or "en"

        Returns:
            The model's reply, stripped
        """
        if not self.is_available:
            raise LiveModelError(401, "Live model not configured")

        payload = [{"role": "system", "content": build_system_prompt(context, scenario, language)}]
        for msg in messages[-HISTORY_WINDOW:]:
            role = msg.get("role")
            if role in ALLOWED_ROLES and msg.get("content"):
                payload.append({"role": role, "content": msg["content"]})

        logger.info(f"[ReflectionGenerator] Sending {len(payload)} messages ({scenario}, {language})")
        response = self.client.chat_completion(
            messages=payload,
            temperature=0.7,
            max_tokens=200,
            presence_penalty=0.3,
            frequency_penalty=0.2,
        )
        if not response or not response.strip():
            raise LiveModelError(200, "Empty response")
        return response.strip()
