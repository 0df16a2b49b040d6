from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    role: ChatRole
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatRequest(BaseModel):
    message: str = Field("", description="The user's question for the assistant")
    api_key: str = Field("", description="Gemini API key")

    @field_validator('message', 'api_key', mode='before')
    @classmethod
    def strip_value(cls, v):
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v


class DisplayMessage(BaseModel):
    role: ChatRole
    text: str
    html: str
    created_at: datetime


class ChatResponse(BaseModel):
    reply: Optional[str] = None
    messages: List[DisplayMessage]


class PanelResponse(BaseModel):
    panel_open: bool
