"""
Tests for the scripted DialogueMatcher.

Covers the fixed order of the matching steps (start, bounds, advance, vague,
question, lookahead, fallback) and robustness against arbitrary input.
"""

import random

import pytest

from mirae.content.registry import SCRIPT_TABLE
from mirae.content.templates import GENERIC_FALLBACKS, MOTIVATION_RESPONSES
from mirae.core.matcher import DialogueMatcher, find_best_match
from mirae.core.motivation import MotivationClassifier
from mirae.core.types import (
    PHASE_CLOSING,
    SCENARIO_GENERAL,
    SCENARIO_YEAR1_POST,
    START_SENTINEL,
    UserContext,
)


@pytest.fixture
def ctx():
    return UserContext(name="Mina", courses=("Design Thinking", "Statistics"))


@pytest.fixture
def matcher():
    return DialogueMatcher(rng=random.Random(7))


POST_EN = SCRIPT_TABLE[(SCENARIO_YEAR1_POST, "en")]
POST_KO = SCRIPT_TABLE[(SCENARIO_YEAR1_POST, "ko")]

ODD_INPUTS = [
    "",
    "   ",
    "x" * 10_000,
    "?!?!...,,;;::",
    "안녕 hello ¿qué? 😀 Привет",
    "\n\t\r",
    START_SENTINEL.lower(),
]


# ── Start ───────────────────────────────────────────────────────────────────

class TestStart:
    @pytest.mark.parametrize("scenario", [None, SCENARIO_GENERAL, SCENARIO_YEAR1_POST])
    @pytest.mark.parametrize("language", ["en", "ko"])
    def test_opening_names_courses_and_asks(self, matcher, ctx, scenario, language):
        """START at turn 0 opens with both courses and ends with a question."""
        result = matcher.next(START_SENTINEL, 0, ctx, scenario, language)
        assert result.next_turn == 1
        assert "Design Thinking" in result.message
        assert "Statistics" in result.message
        assert result.message.rstrip().endswith("?")

    def test_start_sentinel_restarts_mid_conversation(self, matcher, ctx):
        result = matcher.next(START_SENTINEL, 7, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 1
        assert result.phase == "recap"

    def test_turn_zero_opens_whatever_is_said(self, matcher, ctx):
        result = matcher.next("hello there", 0, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 1
        assert result.message == POST_EN.turn(1).render(ctx)


# ── Bounds ──────────────────────────────────────────────────────────────────

class TestBounds:
    def test_past_the_end_uses_generic_pool(self, matcher, ctx):
        result = matcher.next("yes", 99, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 99
        assert result.phase == PHASE_CLOSING
        assert result.message in GENERIC_FALLBACKS["en"]

    def test_last_turn_match_does_not_advance(self, matcher, ctx):
        """The terminal turn has nowhere to go even when the reply matches."""
        result = matcher.next("yes, ready", 12, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 12
        assert result.phase == PHASE_CLOSING


# ── Exact advance ───────────────────────────────────────────────────────────

class TestAdvance:
    @pytest.mark.parametrize("key", list(SCRIPT_TABLE.keys()))
    def test_first_expected_pattern_advances(self, key, ctx):
        """Replying with a turn's first expected pattern moves to the next turn."""
        script = SCRIPT_TABLE[key]
        classifier = MotivationClassifier()
        matcher = DialogueMatcher(classifier=classifier, rng=random.Random(0))
        for turn in script.turns[:-1]:
            utterance = turn.expected_user_patterns[0]
            result = matcher.next(utterance, turn.turn_number, ctx, key[0], key[1])
            target = script.turn(turn.turn_number + 1)
            assert result.next_turn == turn.turn_number + 1
            assert result.phase == target.phase
            if target.motivation_response:
                assert result.message == classifier.respond(utterance, ctx, key[1])
            else:
                assert result.message == target.render(ctx)

    def test_interest_at_fit_fear_question_gets_fit_reply(self, matcher, ctx):
        """Scenario: 'I'm really interested in this' at the fit/fear turn."""
        turn = POST_EN.turn(11)
        assert turn.expected_user_patterns[:5] == ["interested", "fun", "like", "need", "worry"]
        result = matcher.next("I'm really interested in this", 11, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 12
        assert result.phase == PHASE_CLOSING
        assert result.message == MOTIVATION_RESPONSES["en"]["fit"](ctx)

    def test_fear_at_fit_fear_question_gets_fear_reply(self, matcher, ctx):
        result = matcher.next("honestly I need it, I worry a lot", 11, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 12
        assert result.message == MOTIVATION_RESPONSES["en"]["fear"](ctx)

    def test_korean_match_is_substring_based(self, matcher, ctx):
        result = matcher.next("창의적인 문제 해결이요", 1, ctx, SCENARIO_YEAR1_POST, "ko")
        assert result.next_turn == 2
        assert result.message == POST_KO.turn(2).render(ctx)

    def test_case_and_whitespace_ignored(self, matcher, ctx):
        result = matcher.next("   PROBLEM solving   ", 1, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 2


# ── Vague / question ────────────────────────────────────────────────────────

class TestAlternatives:
    def test_hedge_stays_on_turn(self, matcher, ctx):
        result = matcher.next("I'm not sure", 1, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 1
        assert result.phase == "recap"
        assert result.message == POST_EN.turn(1).vague(ctx)

    def test_korean_hedge_stays_on_turn(self, matcher, ctx):
        result = matcher.next("잘 모르겠어요", 1, ctx, SCENARIO_YEAR1_POST, "ko")
        assert result.next_turn == 1
        assert result.message == POST_KO.turn(1).vague(ctx)

    def test_constant_vague_alternative(self, matcher, ctx):
        result = matcher.next("hmm, I don't know", 2, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 2
        assert result.message == POST_EN.turn(2).vague(ctx)

    def test_question_stays_on_turn(self, matcher, ctx):
        result = matcher.next("What do you mean?", 1, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 1
        assert result.message == POST_EN.turn(1).question(ctx)

    def test_question_word_inside_another_word_is_not_a_question(self, matcher, ctx):
        result = matcher.next("somehow it clicked", 1, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 1
        assert result.message in GENERIC_FALLBACKS["en"]

    def test_hedge_checked_before_question(self, matcher, ctx):
        result = matcher.next("not sure, why?", 1, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.message == POST_EN.turn(1).vague(ctx)

    def test_advance_checked_before_hedge(self, matcher, ctx):
        result = matcher.next("maybe creative stuff", 1, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 2

    def test_hedge_without_alternative_falls_through(self, matcher, ctx):
        """Turn 4 has no vague alternative, so a hedge ends in the generic pool."""
        result = matcher.next("not sure", 4, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 4
        assert result.message in GENERIC_FALLBACKS["en"]


# ── Lookahead / fallback ────────────────────────────────────────────────────

class TestLookaheadAndFallback:
    def test_jump_to_a_later_turn(self, matcher, ctx):
        """At turn 4, talking about balance matches turn 5's expectations."""
        result = matcher.next("it's all about balance", 4, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 5
        assert result.message == POST_EN.turn(5).render(ctx)

    def test_lookahead_limited_to_three_turns(self, matcher, ctx):
        """'exactly' is only expected at turn 8, four turns after turn 4."""
        result = matcher.next("exactly", 4, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 4
        assert result.message in GENERIC_FALLBACKS["en"]

    def test_unmatched_reply_uses_generic_pool(self, matcher, ctx):
        result = matcher.next("bananas", 4, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 4
        assert result.phase == "articulation"
        assert result.message in GENERIC_FALLBACKS["en"]

    def test_generic_pool_follows_language(self, matcher, ctx):
        result = matcher.next("바나나", 4, ctx, SCENARIO_YEAR1_POST, "ko")
        assert result.message in GENERIC_FALLBACKS["ko"]


# ── Robustness ──────────────────────────────────────────────────────────────

class TestRobustness:
    @pytest.mark.parametrize("utterance", ODD_INPUTS)
    @pytest.mark.parametrize("key", list(SCRIPT_TABLE.keys()))
    def test_never_raises(self, matcher, ctx, utterance, key):
        script = SCRIPT_TABLE[key]
        for current in range(0, len(script) + 3):
            result = matcher.next(utterance, current, ctx, key[0], key[1])
            assert result.message
            assert result.next_turn >= 0

    def test_same_input_same_turn_and_phase(self, ctx):
        a = DialogueMatcher(rng=random.Random(1))
        b = DialogueMatcher(rng=random.Random(2))
        for utterance, turn in [("creative", 1), ("bananas", 4), ("not sure", 1), ("yes", 99)]:
            first = a.next(utterance, turn, ctx, SCENARIO_YEAR1_POST, "en")
            second = b.next(utterance, turn, ctx, SCENARIO_YEAR1_POST, "en")
            assert (first.next_turn, first.phase) == (second.next_turn, second.phase)

    def test_seeded_rng_is_reproducible(self, ctx):
        a = DialogueMatcher(rng=random.Random(3))
        b = DialogueMatcher(rng=random.Random(3))
        assert a.next("bananas", 4, ctx, SCENARIO_YEAR1_POST, "en").message == \
            b.next("bananas", 4, ctx, SCENARIO_YEAR1_POST, "en").message

    def test_module_level_helper(self, ctx):
        result = find_best_match(START_SENTINEL, 0, ctx, SCENARIO_YEAR1_POST, "en")
        assert result.next_turn == 1
        assert result.to_dict()["next_turn"] == 1
