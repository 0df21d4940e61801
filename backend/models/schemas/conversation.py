"""Conversation history contracts."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class ConversationTurn(BaseModel):
    sender: Literal["user", "assistant"]
    text: str
    timestamp: datetime | None = None


class HistoryMessage(BaseModel):
    """A turn reshaped into the role/content form a generator consumes."""
    role: Literal["user", "assistant"]
    content: str
