"""Pipeline outputs: composed reply, generation context and full chat result."""

from typing import Literal

from pydantic import BaseModel

from models.schemas.bias import BiasResult
from models.schemas.candidates import Attachment
from models.schemas.conversation import HistoryMessage
from models.schemas.entities import EntitySets
from models.schemas.intent import IntentCategory
from models.schemas.knowledge import ScoredChunk


class SentimentResult(BaseModel):
    sentiment: Literal["positive", "negative", "neutral"] = "neutral"
    score: int = 0
    positive: int = 0
    negative: int = 0


class SensitiveInfo(BaseModel):
    has_sensitive_info: bool = False
    emails: list[str] = []
    phones: list[str] = []
    credit_cards: list[str] = []


class ChatReply(BaseModel):
    text: str
    attachment: Attachment | None = None


class AIContext(BaseModel):
    """Everything a downstream generator would need to answer the message."""
    system_instructions: str
    bias_instructions: str = ""
    knowledge_context: str = ""
    recent_conversation: list[HistoryMessage] = []


class ChatResult(BaseModel):
    """Structured output of one pass through the chat pipeline."""
    text: str
    attachment: Attachment | None = None
    intent: IntentCategory = IntentCategory.HELP
    entities: EntitySets = EntitySets()
    query_bias: BiasResult = BiasResult()
    response_bias: BiasResult = BiasResult()
    knowledge: list[ScoredChunk] = []
    sentiment: SentimentResult = SentimentResult()
    context: AIContext | None = None
