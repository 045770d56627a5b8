"""
Pick a conversation scenario from the student's situation.
"""

from __future__ import annotations

from typing import Optional

from .types import (
    SCENARIOS,
    SCENARIO_GENERAL,
    SCENARIO_YEAR1_POST,
    SCENARIO_YEAR1_PRE,
    SCENARIO_YEAR2_RECONSIDERING,
    SCENARIO_YEAR3_PRESSURE,
    UserContext,
)


def detect_scenario(context: UserContext) -> str:
    """Map year level, selection status and trigger reason to a scenario."""
    year = context.year_level
    status = context.selection_status
    reason = context.trigger_reason

    if year == 1 and (status == "not_started" or not context.courses):
        return SCENARIO_YEAR1_PRE
    if year == 1 and status == "completed" and context.courses:
        return SCENARIO_YEAR1_POST
    if year is not None and year >= 2 and reason in ("doubt", "reflection"):
        return SCENARIO_YEAR2_RECONSIDERING
    if year == 3 or reason == "pressure":
        return SCENARIO_YEAR3_PRESSURE
    return SCENARIO_GENERAL


def resolve_scenario(requested: Optional[str], context: UserContext) -> str:
    """Use the requested scenario when it is a known one, else detect it."""
    if requested in SCENARIOS:
        return requested
    return detect_scenario(context)
