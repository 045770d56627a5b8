"""
Data model for the Mirae dialogue engine.

A conversation script is an ordered list of turns. Every bot message is a
pure function of the student's context; static text is wrapped with
``constant()`` so rendering never needs a type check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

# =============================================================================
# CONSTANTS
# =============================================================================

START_SENTINEL = "START"

PHASE_RECAP = "recap"
PHASE_ARTICULATION = "articulation"
PHASE_PATTERNS = "patterns"
PHASE_FIT_FEAR = "fit-fear"
PHASE_CLOSING = "closing"
PHASE_PRESSURE = "pressure_acknowledgment"
PHASE_YOURS_VS_THEIRS = "yours_vs_theirs"

PHASES = (
    PHASE_RECAP,
    PHASE_ARTICULATION,
    PHASE_PATTERNS,
    PHASE_FIT_FEAR,
    PHASE_CLOSING,
    PHASE_PRESSURE,
    PHASE_YOURS_VS_THEIRS,
)

SCENARIO_YEAR1_PRE = "year1_pre_selection"
SCENARIO_YEAR1_POST = "year1_post_selection"
SCENARIO_YEAR2_RECONSIDERING = "year2_reconsidering"
SCENARIO_YEAR3_PRESSURE = "year3_pressure"
SCENARIO_GENERAL = "general_reflection"

SCENARIOS = (
    SCENARIO_YEAR1_PRE,
    SCENARIO_YEAR1_POST,
    SCENARIO_YEAR2_RECONSIDERING,
    SCENARIO_YEAR3_PRESSURE,
    SCENARIO_GENERAL,
)

LANGUAGE_KO = "ko"
LANGUAGE_EN = "en"
LANGUAGES = (LANGUAGE_KO, LANGUAGE_EN)
DEFAULT_LANGUAGE = LANGUAGE_KO


def normalize_language(language: Optional[str]) -> str:
    """Coerce anything that is not a supported language code to the default."""
    if language in LANGUAGES:
        return language
    return DEFAULT_LANGUAGE


# =============================================================================
# USER CONTEXT
# =============================================================================

@dataclass(frozen=True)
class UserContext:
    """What the student has told us so far. Supplied fresh with every request."""
    name: str
    courses: Tuple[str, ...]
    keywords: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    energizers: Tuple[str, ...] = ()
    joys: Tuple[str, ...] = ()
    year_level: Optional[int] = None
    selection_status: Optional[str] = None
    trigger_reason: Optional[str] = None
    current_semester: Optional[str] = None

    def course(self, index: int, default: str = "") -> str:
        """Return the course at ``index`` or ``default`` when there is none."""
        if 0 <= index < len(self.courses):
            return self.courses[index]
        return default

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserContext":
        """Build a context from the camelCase wire payload."""
        strengths = data.get("strengths") or {}
        return cls(
            name=(data.get("name") or "").strip(),
            courses=tuple(c for c in (data.get("courses") or []) if c),
            keywords=tuple(data.get("keywords") or ()),
            interests=tuple(data.get("interests") or ()),
            energizers=tuple(strengths.get("energizers") or ()),
            joys=tuple(strengths.get("joys") or ()),
            year_level=data.get("yearLevel"),
            selection_status=data.get("selectionStatus"),
            trigger_reason=data.get("triggerReason"),
            current_semester=data.get("currentSemester"),
        )


MessageFn = Callable[[UserContext], str]


def constant(text: str) -> MessageFn:
    """Wrap static text as a message function that ignores its context."""
    def _message(_ctx: UserContext) -> str:
        return text
    return _message


# =============================================================================
# SCRIPTS
# =============================================================================

@dataclass
class ConversationTurn:
    """One scripted exchange step."""
    turn_number: int                       # 1-based
    phase: str
    message: MessageFn
    expected_user_patterns: List[str] = field(default_factory=list)
    trigger: List[str] = field(default_factory=list)
    vague: Optional[MessageFn] = None      # Reply to a hedged answer
    question: Optional[MessageFn] = None   # Reply to a counter-question
    motivation_response: bool = False      # Message comes from the fit/fear classifier

    def render(self, context: UserContext) -> str:
        return self.message(context)


@dataclass
class ConversationScript:
    """Ordered turns for one (scenario, language) pair."""
    scenario: str
    language: str
    turns: List[ConversationTurn]

    def __post_init__(self):
        if not self.turns:
            raise ValueError(f"Script {self.scenario}/{self.language} has no turns")
        if START_SENTINEL not in self.turns[0].trigger:
            raise ValueError(f"Script {self.scenario}/{self.language}: turn 1 must be triggered by {START_SENTINEL}")
        if self.turns[-1].phase != PHASE_CLOSING:
            raise ValueError(f"Script {self.scenario}/{self.language}: last turn must be a closing turn")
        for expected, turn in enumerate(self.turns, start=1):
            if turn.turn_number != expected:
                raise ValueError(
                    f"Script {self.scenario}/{self.language}: turn numbers must be contiguous "
                    f"(expected {expected}, got {turn.turn_number})"
                )
        for turn in self.turns[:-1]:
            if not turn.expected_user_patterns:
                raise ValueError(
                    f"Script {self.scenario}/{self.language}: turn {turn.turn_number} has no expected patterns"
                )

    def __len__(self) -> int:
        return len(self.turns)

    def turn(self, turn_number: int) -> Optional[ConversationTurn]:
        """Look a turn up by its 1-based number; None when out of range."""
        if 1 <= turn_number <= len(self.turns):
            return self.turns[turn_number - 1]
        return None


@dataclass
class MatchResult:
    """What the matcher decided to say next."""
    message: str
    next_turn: int
    phase: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "next_turn": self.next_turn,
            "phase": self.phase,
        }
