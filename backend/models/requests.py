from pydantic import BaseModel, Field

from config import settings
from models.schemas.conversation import ConversationTurn


class ChatRequest(BaseModel):
    message: str = Field(..., max_length=settings.max_message_length, description="User message text")
    history: list[ConversationTurn] = Field(default=[], description="Earlier turns, oldest first")
    include_context: bool = Field(default=False, description="Return the generation context")


class BiasCheckRequest(BaseModel):
    text: str = Field(..., max_length=settings.max_message_length, description="Text to check")


class IntentRequest(BaseModel):
    text: str = Field(..., max_length=settings.max_message_length, description="Text to classify")
