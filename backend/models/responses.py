from pydantic import BaseModel

from models.schemas.bias import BiasResult
from models.schemas.candidates import Attachment
from models.schemas.chat import AIContext, SensitiveInfo, SentimentResult
from models.schemas.entities import EntitySets
from models.schemas.intent import IntentCategory


class KnowledgeReference(BaseModel):
    id: str
    topic: str
    source: str = ""
    score: float = 0.0


class ChatResponse(BaseModel):
    text: str
    attachment: Attachment | None = None
    intent: IntentCategory = IntentCategory.HELP
    entities: EntitySets = EntitySets()
    bias: BiasResult = BiasResult()
    knowledge: list[KnowledgeReference] = []
    sentiment: SentimentResult = SentimentResult()
    sensitive_info: SensitiveInfo = SensitiveInfo()
    context: AIContext | None = None


class BiasCheckResponse(BiasResult):
    mitigation_instructions: str = ""


class IntentResponse(BaseModel):
    intent: IntentCategory = IntentCategory.HELP
    scores: dict[IntentCategory, float] = {}
    entities: EntitySets = EntitySets()
    sentiment: SentimentResult = SentimentResult()
    is_question: bool = False
    keywords: list[str] = []
