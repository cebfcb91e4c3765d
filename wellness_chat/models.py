"""
Pydantic Models for Wellness Chat Service

This module defines request/response models and internal data structures
for the wellness support chat service.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal


class ChatMessage(BaseModel):
    """One role-tagged turn of conversation history."""
    role: Literal["system", "user", "assistant"]
    content: str


class WellnessContext(BaseModel):
    """Optional wellness readings used to personalize the system prompt."""
    model_config = ConfigDict(populate_by_name=True)

    mood_rating: Optional[float] = Field(default=None, alias="moodRating", description="Mood, conventionally 0-10")
    stress_level: Optional[float] = Field(default=None, alias="stressLevel", description="Stress, conventionally 0-10")
    sleep_hours: Optional[float] = Field(default=None, alias="sleepHours", description="Hours slept")
    sleep_quality: Optional[float] = Field(default=None, alias="sleepQuality", description="Sleep quality, conventionally 0-10")
    energy_level: Optional[float] = Field(default=None, alias="energyLevel", description="Energy, conventionally 0-10")
    notes: Optional[str] = None


class ReplyResult(BaseModel):
    """Generated reply tagged with where the text came from."""
    text: str
    source: Literal["model", "empty", "fallback"]


class ChatLogEntry(BaseModel):
    """Front-end chat message tagged by sender ('user', 'bot', or anything else)."""
    sender: str
    content: str


class ChatReplyRequest(BaseModel):
    """Request model for chat reply endpoint."""
    message: str = Field(..., description="Current user message")
    history: List[ChatLogEntry] = Field(default_factory=list, description="Prior chat log in chronological order")
    context: Optional[WellnessContext] = Field(default=None, description="Optional wellness readings")


class ChatReplyResponse(BaseModel):
    """Response model for chat reply endpoint."""
    reply: str
    source: Literal["model", "empty", "fallback"]
