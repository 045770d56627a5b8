"""
English conversation scripts.

Each script assumes the student already went through onboarding (keywords,
strengths, role interests) and picked or is weighing a set of courses.
"""

from __future__ import annotations

from typing import List

from ..core.types import (
    ConversationTurn,
    PHASE_ARTICULATION,
    PHASE_CLOSING,
    PHASE_FIT_FEAR,
    PHASE_PATTERNS,
    PHASE_PRESSURE,
    PHASE_RECAP,
    PHASE_YOURS_VS_THEIRS,
    START_SENTINEL,
    UserContext,
    constant,
)

SKILL_ICONS = ["📊", "🎨", "🖼️", "🔬", "📚", "💡"]
SKILL_SUMMARIES = [
    "Understanding and verifying logically",
    "Finding creative solutions and empathizing",
    "Expressing visually and beautifully",
]


def courses_text(ctx: UserContext) -> str:
    """'A and B', 'A and B, and C', or a plain comma list."""
    if len(ctx.courses) >= 2:
        text = f"{ctx.courses[0]} and {ctx.courses[1]}"
        if len(ctx.courses) > 2:
            text += f", and {ctx.courses[2]}"
        return text
    return ", ".join(ctx.courses)


# =============================================================================
# YEAR 1, AFTER COURSE SELECTION (happy path)
# =============================================================================

def _post_opening(ctx: UserContext) -> str:
    return (
        f"Hi {ctx.name}! 👋\n\n"
        f"Looking at the courses you've chosen, I see you picked {courses_text(ctx)}.\n\n"
        "Let's talk about what skills you'll build through these courses, shall we?\n\n"
        f"Let me start by imagining the {ctx.course(0)} class. "
        "What do you think you'll learn in that class?"
    )


def _post_why_matters(ctx: UserContext) -> str:
    if ctx.interests:
        return (
            "I can feel that you want to solve real-world problems. ✨\n\n"
            f"I remember you showed interest in {ctx.interests[0]} in Role Roulette.\n"
            "Do you see a connection there?"
        )
    return (
        "I can feel that you want to solve real-world problems. ✨\n\n"
        "Have you thought about what specific problems you'd like to solve?"
    )


def _post_balance(ctx: UserContext) -> str:
    if ctx.keywords:
        quoted = " and ".join(f'"{k}"' for k in ctx.keywords[:2])
        return (
            '"Balance" - I really like that word. 🎯\n\n'
            f"I'm reminded of the keywords you chose in Step 0:\n{quoted}\n\n"
            f"It seems like that's showing up in your {ctx.course(0)} + {ctx.course(1)} combination."
        )
    return (
        '"Balance" - I really like that word. 🎯\n\n'
        "I can feel you're looking for balance between creativity and logic."
    )


def _post_third_course(ctx: UserContext) -> str:
    if len(ctx.courses) >= 3:
        return (
            f"Right! Now let's look at {ctx.courses[2]}.\n\n"
            "What skills do you think this class will help you build?"
        )
    # Only two courses: move straight to the pattern
    return (
        f"When you combine these two courses, you get a unique combination, {ctx.name}.\n\n"
        "Many students choose just one or the other, but "
        "you saw how these two strengthen each other. ⭐"
    )


def _post_summary(ctx: UserContext) -> str:
    lines = []
    for idx, course in enumerate(ctx.courses):
        icon = SKILL_ICONS[idx] if idx < len(SKILL_ICONS) else "✨"
        skill = SKILL_SUMMARIES[idx] if idx < len(SKILL_SUMMARIES) else "Building new skills"
        lines.append(f"{icon} {course}: {skill}")
    return (
        f"Let me summarize. The skills you'll build through these courses, {ctx.name}:\n\n"
        + "\n".join(lines)
        + "\n\nDoes that sound right?"
    )


def _post_closing(ctx: UserContext) -> str:
    return (
        "That's what matters most! 💚\n\n"
        "When you follow your interests, the skills you need will naturally follow.\n"
        f"And learning something you enjoy, {ctx.name}, "
        "goes much deeper than learning something just because you have to.\n\n"
        "Thanks for sharing today.\n\n"
        "To summarize:\n"
        "- You chose a unique combination\n"
        "- This choice came from interest (not fear!)\n"
        "- You can always come back to talk through your thoughts\n\n"
        "Mirae is always here. 💙\n\n"
        "Ready to move to the next step?"
    )


YEAR1_POST_SELECTION_EN: List[ConversationTurn] = [
    # Turn 1: Opening & recap
    ConversationTurn(
        turn_number=1,
        phase=PHASE_RECAP,
        trigger=[START_SENTINEL, "INITIAL"],
        message=_post_opening,
        expected_user_patterns=["problem", "creative", "collaboration", "design", "solve", "think", "ability", "skill"],
        vague=lambda ctx: (
            f"That's okay! {ctx.course(0)} usually teaches you to look at problems in new ways "
            "and approach them creatively.\n\n"
            "I'm curious - what drew you to this class?"
        ),
        question=lambda ctx: (
            f"Great question! {ctx.course(0)} covers a lot, but the most important thing is "
            f"what you want to build through this class, {ctx.name}.\n\n"
            "What skills are you curious about?"
        ),
    ),

    # Turn 2: Skill articulation, first course
    ConversationTurn(
        turn_number=2,
        phase=PHASE_ARTICULATION,
        trigger=["problem", "creative", "solve", "collaboration", "design"],
        message=lambda ctx: (
            "Creative problem-solving! That's a really important skill. 💡\n\n"
            f"Why does that feel important to you, {ctx.name}?"
        ),
        expected_user_patterns=["important", "want", "interested", "need", "solve", "world", "people", "help"],
        vague=constant(
            "I understand that feeling. Sometimes it's hard to put into words why something matters.\n\n"
            "Let me ask differently: what do you want to do with this skill?"
        ),
    ),

    # Turn 3: Why it matters
    ConversationTurn(
        turn_number=3,
        phase=PHASE_ARTICULATION,
        trigger=["want", "solve", "help", "people", "world"],
        message=_post_why_matters,
        expected_user_patterns=["yes", "yeah", "right", "social", "environment", "people"],
        vague=constant(
            "That's okay, you don't need to be specific. This is a process of exploration.\n\n"
            'For now, just having the direction of "problem-solving" is enough.'
        ),
    ),

    # Turn 4: Course transition
    ConversationTurn(
        turn_number=4,
        phase=PHASE_ARTICULATION,
        trigger=["yes", "yeah", "right", "connection", "related"],
        message=lambda ctx: (
            f"Nice! So {ctx.course(0)} is your approach to social problems. 👏\n\n"
            f"What role do you think {ctx.course(1, 'the next course')} will play?\n"
            "What skills will you build in this class?"
        ),
        expected_user_patterns=["analyze", "data", "prove", "logic", "numbers", "verify", "evidence"],
    ),

    # Turn 5: Skill articulation, second course
    ConversationTurn(
        turn_number=5,
        phase=PHASE_ARTICULATION,
        trigger=["analyze", "data", "prove", "logic"],
        message=lambda ctx: (
            "Oh, interesting!\n\n"
            f"So {ctx.course(0)} helps you find creative solutions, and "
            f"{ctx.course(1, 'your second course')} helps you verify whether they actually work.\n\n"
            "How does it feel to have both of these together?"
        ),
        expected_user_patterns=["balance", "harmony", "complement", "good", "right", "complete"],
    ),

    # Turn 6: Balance recognition
    ConversationTurn(
        turn_number=6,
        phase=PHASE_PATTERNS,
        trigger=["balance", "harmony", "complement", "good"],
        message=_post_balance,
        expected_user_patterns=["oh", "yeah", "right", "cool", "connection"],
    ),

    # Turn 7: Third course, if any
    ConversationTurn(
        turn_number=7,
        phase=PHASE_ARTICULATION,
        trigger=["yes", "oh", "right"],
        message=_post_third_course,
        expected_user_patterns=["express", "visual", "aesthetic", "beautiful", "art", "design"],
    ),

    # Turn 8: Pattern recognition
    ConversationTurn(
        turn_number=8,
        phase=PHASE_PATTERNS,
        trigger=["express", "visual", "beautiful"],
        message=lambda ctx: (
            "Visual expression and aesthetics!\n\n"
            "When you combine all three courses, what picture emerges?\n\n"
            f"Understanding problems ({ctx.course(1)}),\n"
            f"finding creative solutions ({ctx.course(0)}),\n"
            f"and making them beautiful ({ctx.course(2, 'your third course')}) - is that it?"
        ),
        expected_user_patterns=["yes", "right", "yeah", "exactly"],
    ),

    # Turn 9: Unique edge
    ConversationTurn(
        turn_number=9,
        phase=PHASE_PATTERNS,
        trigger=["yes", "right", "yeah"],
        message=lambda ctx: (
            f"Exactly! This is your unique combination, {ctx.name}. ⭐\n\n"
            f"Many students don't choose {ctx.course(1)} and {ctx.course(0)} together.\n"
            "But you saw how these two strengthen each other.\n\n"
            f"And when you add {ctx.course(2, 'the other course')} to the mix, "
            'you can create solutions that don\'t just "work" but work beautifully.'
        ),
        expected_user_patterns=["special", "good", "cool", "yeah"],
    ),

    # Turn 10: Skills summary
    ConversationTurn(
        turn_number=10,
        phase=PHASE_PATTERNS,
        trigger=["yes", "yeah", "special"],
        message=_post_summary,
        expected_user_patterns=["yes", "right", "yeah"],
    ),

    # Turn 11: Fit vs fear check
    ConversationTurn(
        turn_number=11,
        phase=PHASE_FIT_FEAR,
        trigger=["yes", "right"],
        message=lambda ctx: (
            "Great! Now let me ask you honestly. 🤔\n\n"
            f"For you, {ctx.name}, building these skills is:\n"
            "- Because you're interested and want to learn them?\n"
            "- Or because you feel you need them, should have them?\n\n"
            "It could be both. Be honest!"
        ),
        expected_user_patterns=["interested", "fun", "like", "need", "worry", "anxious"],
    ),

    # Turn 12: Fit vs fear response + closing
    ConversationTurn(
        turn_number=12,
        phase=PHASE_CLOSING,
        trigger=["interested", "fun", "like", "need", "worry"],
        message=_post_closing,
        expected_user_patterns=["yes", "ready", "thanks", "next"],
        motivation_response=True,
    ),
]


# =============================================================================
# GENERAL REFLECTION (default)
# =============================================================================

def _general_opening(ctx: UserContext) -> str:
    return (
        f"Hi {ctx.name}! 👋\n\n"
        f"I see {courses_text(ctx)} on your list.\n\n"
        "What brought you here to think about them today?"
    )


def _general_pattern(ctx: UserContext) -> str:
    noticed = (ctx.energizers or ctx.keywords or ctx.interests)[:2]
    if noticed:
        quoted = " and ".join(f'"{n}"' for n in noticed)
        return (
            f"Earlier you told me about {quoted}. 🎯\n\n"
            f"Do you see any of that in {ctx.course(1, ctx.course(0))} too?"
        )
    return (
        "I'm starting to see what pulls you in. 🎯\n\n"
        f"Do you see the same thing in {ctx.course(1, ctx.course(0))} too?"
    )


GENERAL_REFLECTION_EN: List[ConversationTurn] = [
    ConversationTurn(
        turn_number=1,
        phase=PHASE_RECAP,
        trigger=[START_SENTINEL, "INITIAL"],
        message=_general_opening,
        expected_user_patterns=["course", "class", "chose", "choose", "pick", "decid", "future", "confus", "wonder", "think"],
        vague=constant(
            "That's completely okay. Sometimes we come in without a clear question.\n\n"
            "Which of your courses has been on your mind the most lately?"
        ),
        question=lambda ctx: (
            f"Good question! This is just a space to think out loud about your path, {ctx.name}.\n\n"
            "What's the most confusing part right now?"
        ),
    ),
    ConversationTurn(
        turn_number=2,
        phase=PHASE_ARTICULATION,
        trigger=["course", "class", "choose"],
        message=lambda ctx: (
            "Thanks for telling me. 💡\n\n"
            f"Let's start with {ctx.course(0)}. What part of it are you most curious about?"
        ),
        expected_user_patterns=["learn", "skill", "project", "idea", "people", "problem", "create", "understand", "make"],
        vague=lambda ctx: (
            "That's okay, curiosity doesn't always come with words.\n\n"
            f"Imagine a really good day in {ctx.course(0)}. What would you be doing?"
        ),
    ),
    ConversationTurn(
        turn_number=3,
        phase=PHASE_PATTERNS,
        trigger=["learn", "skill", "project"],
        message=_general_pattern,
        expected_user_patterns=["yes", "yeah", "right", "connect", "similar", "both", "same", "kind of"],
    ),
    ConversationTurn(
        turn_number=4,
        phase=PHASE_FIT_FEAR,
        trigger=["yes", "yeah", "similar"],
        message=lambda ctx: (
            "Now let me ask you honestly. 🤔\n\n"
            f"For you, {ctx.name}, are these courses something you're interested in and want to learn?\n"
            "Or something you feel you need, or should have?\n\n"
            "It could be both!"
        ),
        expected_user_patterns=["interested", "fun", "like", "need", "worry", "anxious", "want", "curious", "enjoy", "have to"],
    ),
    ConversationTurn(
        turn_number=5,
        phase=PHASE_CLOSING,
        trigger=["interested", "need"],
        message=constant(
            "That's what matters most! 💚\n\n"
            "When you follow your interests, the skills you need will naturally follow.\n\n"
            "How confident do you feel about this path? (Think of it as 1-10 in your mind)"
        ),
        expected_user_patterns=["yes", "ready", "thanks", "okay", "ok", "sure"],
        motivation_response=True,
    ),
    ConversationTurn(
        turn_number=6,
        phase=PHASE_CLOSING,
        trigger=["yes", "thanks"],
        message=lambda ctx: (
            f"Thanks for thinking this through with me, {ctx.name}.\n\n"
            "Whatever you decide, you can always come back and talk it over.\n\n"
            "Mirae is always here. 💙"
        ),
    ),
]


# =============================================================================
# YEAR 3 / EXTERNAL PRESSURE
# =============================================================================

YEAR3_PRESSURE_EN: List[ConversationTurn] = [
    ConversationTurn(
        turn_number=1,
        phase=PHASE_PRESSURE,
        trigger=[START_SENTINEL, "INITIAL"],
        message=lambda ctx: (
            f"Hi {ctx.name}. 🤍\n\n"
            f"With {courses_text(ctx)} on your plate and exams getting closer, "
            "there's probably a lot going on.\n\n"
            "What kind of pressure are you feeling most right now?"
        ),
        expected_user_patterns=[
            "parent", "mom", "dad", "teacher", "exam", "csat", "grade", "score",
            "college", "university", "expect", "stress", "pressure", "family",
        ],
        vague=constant(
            "That's okay. Pressure can be hard to name, especially when it comes from many places.\n\n"
            "When you think about next year, what's the first feeling that shows up?"
        ),
    ),
    ConversationTurn(
        turn_number=2,
        phase=PHASE_YOURS_VS_THEIRS,
        trigger=["parent", "teacher", "exam"],
        message=constant(
            "That sounds really heavy. It makes sense to feel that way. 🤍\n\n"
            "What do your parents or teachers seem to want for you?"
        ),
        expected_user_patterns=["want", "expect", "doctor", "law", "major", "stable", "job", "university", "college", "good"],
    ),
    ConversationTurn(
        turn_number=3,
        phase=PHASE_YOURS_VS_THEIRS,
        trigger=["want", "expect"],
        message=constant(
            "Thanks for telling me what they hope for.\n\n"
            "Now just for a moment: if all the pressure were gone, what would you want to do?"
        ),
        expected_user_patterns=["want", "would", "like", "love", "dream", "interest", "design", "art", "science", "make"],
        vague=constant(
            "It's okay not to know yet. Most people don't, at this point.\n\n"
            "Is there anything you lose track of time doing?"
        ),
    ),
    ConversationTurn(
        turn_number=4,
        phase=PHASE_PATTERNS,
        trigger=["want", "would", "love"],
        message=constant(
            "That's your own voice. It matters. ✨\n\n"
            "Where do your heart and their expectations overlap, and where do they differ?"
        ),
        expected_user_patterns=["overlap", "both", "same", "differ", "similar", "agree", "but"],
    ),
    ConversationTurn(
        turn_number=5,
        phase=PHASE_FIT_FEAR,
        trigger=["overlap", "differ"],
        message=lambda ctx: (
            f"Let's bring it back to {ctx.course(0)}. 🤔\n\n"
            "Are you taking it because it interests you, "
            "or because you feel you need it to keep up?\n\n"
            "It could be both. Be honest!"
        ),
        expected_user_patterns=["interested", "fun", "like", "need", "worry", "anxious", "have to", "expect", "want"],
    ),
    ConversationTurn(
        turn_number=6,
        phase=PHASE_CLOSING,
        trigger=["interested", "need"],
        message=constant(
            "That's what matters most! 💚\n\n"
            "How confident do you feel about this path? (Think of it as 1-10 in your mind)"
        ),
        expected_user_patterns=["yes", "ready", "thanks", "okay", "ok", "sure", "think"],
        motivation_response=True,
    ),
    ConversationTurn(
        turn_number=7,
        phase=PHASE_CLOSING,
        trigger=["yes", "thanks"],
        message=lambda ctx: (
            f"Thank you for being so honest today, {ctx.name}.\n\n"
            "Understanding yourself and living well is part of caring for your family too. "
            "You don't have to choose between them today.\n\n"
            "Mirae is always here. 💙"
        ),
    ),
]
