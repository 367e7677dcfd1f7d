"""
Pydantic schemas for the AI tutor chat.
"""
from datetime import datetime
from typing import List

from pydantic import Field, StrictBool, StrictInt

from bacprep.schemas.common import MAX_ID, CamelModel


class ChatMessage(CamelModel):
    content: str
    is_user: StrictBool


class ChatRequest(CamelModel):
    """Body of ``POST /ai/chat``: the full conversation so far."""

    user_id: StrictInt = Field(..., le=MAX_ID)
    messages: List[ChatMessage]


class ChatReply(CamelModel):
    response: str


class AiChatHistory(CamelModel):
    id: int
    user_id: int
    messages: List[ChatMessage]
    created_at: datetime
    updated_at: datetime


class AiChatHistorySave(CamelModel):
    """Store-level payload; ``messages`` replaces whatever was stored."""

    user_id: int
    messages: List[ChatMessage]
