"""Tests for the script registry, script invariants, and scenario detection."""

import pytest

from mirae.content.registry import SCRIPT_TABLE, ScriptRegistry, lookup
from mirae.core.scenario import detect_scenario, resolve_scenario
from mirae.core.types import (
    LANGUAGES,
    PHASE_CLOSING,
    SCENARIOS,
    SCENARIO_GENERAL,
    SCENARIO_YEAR1_POST,
    SCENARIO_YEAR1_PRE,
    SCENARIO_YEAR2_RECONSIDERING,
    SCENARIO_YEAR3_PRESSURE,
    START_SENTINEL,
    ConversationScript,
    ConversationTurn,
    UserContext,
    constant,
)


ALL_PAIRS = [(s, l) for s in SCENARIOS for l in LANGUAGES]


def _ctx(**kwargs):
    base = {"name": "Mina", "courses": ("Design Thinking", "Statistics")}
    base.update(kwargs)
    return UserContext(**base)


class TestLookup:
    @pytest.mark.parametrize("scenario,language", ALL_PAIRS)
    def test_every_pair_has_a_valid_script(self, scenario, language):
        """Every (scenario, language) resolves to a non-empty, well-formed script."""
        script = lookup(scenario, language)
        assert len(script) > 0
        assert START_SENTINEL in script.turns[0].trigger
        assert [t.turn_number for t in script.turns] == list(range(1, len(script) + 1))
        assert script.turns[-1].phase == PHASE_CLOSING
        assert script.language == language

    @pytest.mark.parametrize("key", list(SCRIPT_TABLE.keys()))
    def test_non_terminal_turns_expect_something(self, key):
        script = SCRIPT_TABLE[key]
        for turn in script.turns[:-1]:
            assert turn.expected_user_patterns, f"{key} turn {turn.turn_number}"
            assert all(p == p.lower() for p in turn.expected_user_patterns)

    @pytest.mark.parametrize("key", list(SCRIPT_TABLE.keys()))
    def test_one_motivation_turn_after_fit_fear_question(self, key):
        script = SCRIPT_TABLE[key]
        flagged = [t for t in script.turns if t.motivation_response]
        assert len(flagged) == 1
        previous = script.turn(flagged[0].turn_number - 1)
        assert previous.phase == "fit-fear"

    def test_unmapped_scenario_falls_back_to_general(self):
        assert lookup(SCENARIO_YEAR1_PRE, "en") is SCRIPT_TABLE[(SCENARIO_GENERAL, "en")]
        assert lookup(SCENARIO_YEAR2_RECONSIDERING, "ko") is SCRIPT_TABLE[(SCENARIO_GENERAL, "ko")]
        assert lookup("made_up", "en") is SCRIPT_TABLE[(SCENARIO_GENERAL, "en")]
        assert lookup(None, "en") is SCRIPT_TABLE[(SCENARIO_GENERAL, "en")]

    def test_unknown_language_falls_back_to_default(self):
        script = lookup(SCENARIO_YEAR1_POST, "fr")
        assert script is SCRIPT_TABLE[(SCENARIO_GENERAL, "ko")]

    def test_specific_script_preferred(self):
        assert lookup(SCENARIO_YEAR1_POST, "en") is SCRIPT_TABLE[(SCENARIO_YEAR1_POST, "en")]
        assert len(lookup(SCENARIO_YEAR1_POST, "ko")) == 12

    def test_new_language_is_a_data_change(self):
        """A table with an extra language needs no code change to be served."""
        turns = [
            ConversationTurn(1, "recap", constant("Hola?"), ["si"], trigger=[START_SENTINEL]),
            ConversationTurn(2, PHASE_CLOSING, constant("Adios")),
        ]
        table = dict(SCRIPT_TABLE)
        table[(SCENARIO_GENERAL, "es")] = ConversationScript(SCENARIO_GENERAL, "es", turns)
        registry = ScriptRegistry(table)
        assert registry.lookup(SCENARIO_YEAR3_PRESSURE, "es").language == "es"

    def test_table_without_default_is_rejected(self):
        table = {k: v for k, v in SCRIPT_TABLE.items() if k != (SCENARIO_GENERAL, "ko")}
        with pytest.raises(ValueError):
            ScriptRegistry(table)


class TestScriptInvariants:
    def test_gap_in_turn_numbers_rejected(self):
        turns = [
            ConversationTurn(1, "recap", constant("a"), ["x"], trigger=[START_SENTINEL]),
            ConversationTurn(3, PHASE_CLOSING, constant("b")),
        ]
        with pytest.raises(ValueError):
            ConversationScript("s", "en", turns)

    def test_missing_start_trigger_rejected(self):
        turns = [ConversationTurn(1, PHASE_CLOSING, constant("a"), trigger=["HELLO"])]
        with pytest.raises(ValueError):
            ConversationScript("s", "en", turns)

    def test_last_turn_must_close(self):
        turns = [ConversationTurn(1, "recap", constant("a"), ["x"], trigger=[START_SENTINEL])]
        with pytest.raises(ValueError):
            ConversationScript("s", "en", turns)

    def test_turn_lookup_is_one_based(self):
        script = SCRIPT_TABLE[(SCENARIO_YEAR1_POST, "en")]
        assert script.turn(1).turn_number == 1
        assert script.turn(12).turn_number == 12
        assert script.turn(0) is None
        assert script.turn(13) is None


class TestScriptRendering:
    @pytest.mark.parametrize("key", list(SCRIPT_TABLE.keys()))
    def test_every_message_renders_with_one_course(self, key):
        """Templates never index past the course list."""
        ctx = UserContext(name="Jun", courses=("Biology",))
        for turn in SCRIPT_TABLE[key].turns:
            assert turn.render(ctx)
            for alt in (turn.vague, turn.question):
                if alt is not None:
                    assert alt(ctx)

    def test_optional_context_is_used(self):
        ctx = _ctx(keywords=("curiosity", "order"), interests=("Urban Planner",))
        script = SCRIPT_TABLE[(SCENARIO_YEAR1_POST, "en")]
        assert "Urban Planner" in script.turn(3).render(ctx)
        assert '"curiosity" and "order"' in script.turn(6).render(ctx)

    def test_summary_lists_every_course(self):
        ctx = _ctx(courses=("Design Thinking", "Statistics", "Visual Arts", "Chemistry"))
        summary = SCRIPT_TABLE[(SCENARIO_YEAR1_POST, "en")].turn(10).render(ctx)
        for course in ctx.courses:
            assert course in summary


class TestScenarioDetection:
    def test_year1_without_selection(self):
        assert detect_scenario(_ctx(year_level=1, selection_status="not_started")) == SCENARIO_YEAR1_PRE

    def test_year1_after_selection(self):
        assert detect_scenario(_ctx(year_level=1, selection_status="completed")) == SCENARIO_YEAR1_POST

    def test_year2_doubt(self):
        assert detect_scenario(_ctx(year_level=2, trigger_reason="doubt")) == SCENARIO_YEAR2_RECONSIDERING

    def test_year3_or_pressure(self):
        assert detect_scenario(_ctx(year_level=3)) == SCENARIO_YEAR3_PRESSURE
        assert detect_scenario(_ctx(trigger_reason="pressure")) == SCENARIO_YEAR3_PRESSURE

    def test_no_signals_is_general(self):
        assert detect_scenario(_ctx()) == SCENARIO_GENERAL

    def test_known_request_wins_over_detection(self):
        ctx = _ctx(year_level=3)
        assert resolve_scenario(SCENARIO_YEAR1_POST, ctx) == SCENARIO_YEAR1_POST
        assert resolve_scenario("nonsense", ctx) == SCENARIO_YEAR3_PRESSURE
