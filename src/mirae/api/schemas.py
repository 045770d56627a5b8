"""
Pydantic request/response models for the Mirae reflection API.

Field names follow the camelCase wire format through aliases.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# REQUEST MODELS
# =============================================================================

class ChatMessage(BaseModel):
    """One message of the running conversation."""
    role: str = Field(..., description="user, assistant or system")
    content: str = ""


class Strengths(BaseModel):
    energizers: List[str] = Field(default_factory=list)
    joys: List[str] = Field(default_factory=list)


class UserContextPayload(BaseModel):
    """Student context. Name and courses are checked by the orchestrator."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    courses: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    strengths: Optional[Strengths] = None
    year_level: Optional[int] = Field(None, alias="yearLevel", ge=1, le=3)
    selection_status: Optional[str] = Field(None, alias="selectionStatus")
    trigger_reason: Optional[str] = Field(None, alias="triggerReason")
    current_semester: Optional[str] = Field(None, alias="currentSemester")


class ChatRequest(BaseModel):
    """One turn of the reflection chat. The caller owns the session state."""
    model_config = ConfigDict(populate_by_name=True)

    messages: List[ChatMessage] = Field(default_factory=list)
    user_context: Optional[UserContextPayload] = Field(None, alias="userContext")
    current_turn: int = Field(0, alias="currentTurn", ge=0)
    scenario: Optional[str] = None
    language: str = Field("ko", description="ko or en; anything else is treated as ko")
    force_real_api: bool = Field(False, alias="forceRealAPI", description="skip the live model and answer from the script")


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class ChatResponse(BaseModel):
    """Reply for one turn."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    source: str = Field(..., description="openai, fallback or emergency")
    current_turn: int = Field(..., alias="currentTurn")
    phase: Optional[str] = None
    warning: Optional[str] = None
    scenario: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    openai: str
    fallback: str
    scenarios: List[str] = Field(default_factory=list)
