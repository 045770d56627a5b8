"""
Script registry: (scenario, language) -> ConversationScript.

Adding a scenario or a language is a new entry in ``SCRIPT_TABLE``. Lookups
never fail; unmapped pairs resolve to the general script of the language, and
unknown languages to the general script of the default language.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..core.types import (
    ConversationScript,
    ConversationTurn,
    DEFAULT_LANGUAGE,
    LANGUAGE_EN,
    LANGUAGE_KO,
    SCENARIO_GENERAL,
    SCENARIO_YEAR1_POST,
    SCENARIO_YEAR3_PRESSURE,
)
from .scripts_en import GENERAL_REFLECTION_EN, YEAR1_POST_SELECTION_EN, YEAR3_PRESSURE_EN
from .scripts_ko import GENERAL_REFLECTION_KO, YEAR1_POST_SELECTION_KO, YEAR3_PRESSURE_KO

_TURNS: Dict[Tuple[str, str], List[ConversationTurn]] = {
    (SCENARIO_YEAR1_POST, LANGUAGE_KO): YEAR1_POST_SELECTION_KO,
    (SCENARIO_YEAR1_POST, LANGUAGE_EN): YEAR1_POST_SELECTION_EN,
    (SCENARIO_YEAR3_PRESSURE, LANGUAGE_KO): YEAR3_PRESSURE_KO,
    (SCENARIO_YEAR3_PRESSURE, LANGUAGE_EN): YEAR3_PRESSURE_EN,
    (SCENARIO_GENERAL, LANGUAGE_KO): GENERAL_REFLECTION_KO,
    (SCENARIO_GENERAL, LANGUAGE_EN): GENERAL_REFLECTION_EN,
}

SCRIPT_TABLE: Dict[Tuple[str, str], ConversationScript] = {
    key: ConversationScript(scenario=key[0], language=key[1], turns=turns)
    for key, turns in _TURNS.items()
}

class ScriptRegistry:
    """Read-only lookup over a script table with a guaranteed default entry."""

    def __init__(
        self,
        table: Optional[Dict[Tuple[str, str], ConversationScript]] = None,
        default_scenario: str = SCENARIO_GENERAL,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        self._table = dict(SCRIPT_TABLE if table is None else table)
        self.default_scenario = default_scenario
        self.default_language = default_language
        if (default_scenario, default_language) not in self._table:
            raise ValueError(
                f"Script table has no default entry ({default_scenario}, {default_language})"
            )

    def lookup(self, scenario: Optional[str], language: Optional[str]) -> ConversationScript:
        """Most specific script available for the pair."""
        for key in (
            (scenario, language),
            (self.default_scenario, language),
            (self.default_scenario, self.default_language),
        ):
            script = self._table.get(key)
            if script is not None:
                return script
        # Unreachable: the default entry is checked in __init__
        return self._table[(self.default_scenario, self.default_language)]

    def scenarios(self) -> List[str]:
        return sorted({scenario for scenario, _ in self._table})


_default_registry: Optional[ScriptRegistry] = None


def get_registry() -> ScriptRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = ScriptRegistry()
    return _default_registry


def lookup(scenario: Optional[str], language: Optional[str]) -> ConversationScript:
    return get_registry().lookup(scenario, language)
