from __future__ import annotations

from pydantic import BaseModel, Field

from ..menu.models import MenuEntry


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=1000)


class ConversationContext(BaseModel):
    """Per-session hints. Accepted by the concierge but never carried between turns."""

    mood: str | None = None
    dietary: list[str] = Field(default_factory=list)
    occasion: str | None = None
    last_recommendations: list[str] = Field(default_factory=list)


class ConciergeReply(BaseModel):
    reply: str
    recommendations: list[MenuEntry] = Field(default_factory=list)
    intent: str


class GreetingResponse(BaseModel):
    reply: str
