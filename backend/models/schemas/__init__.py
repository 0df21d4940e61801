"""Pydantic contracts shared by the chat pipeline stages."""

from models.schemas.bias import BiasDetail, BiasResult
from models.schemas.candidates import (
    Attachment,
    CandidateVariant,
    Event,
    Job,
    MalformedCandidateError,
    MentorshipProgram,
    ScoredCandidate,
)
from models.schemas.chat import AIContext, ChatReply, ChatResult, SentimentResult
from models.schemas.conversation import ConversationTurn
from models.schemas.entities import EntitySets
from models.schemas.intent import IntentCategory
from models.schemas.knowledge import KnowledgeChunk, ScoredChunk

__all__ = [
    "AIContext",
    "Attachment",
    "BiasDetail",
    "BiasResult",
    "CandidateVariant",
    "ChatReply",
    "ChatResult",
    "ConversationTurn",
    "EntitySets",
    "Event",
    "IntentCategory",
    "Job",
    "KnowledgeChunk",
    "MalformedCandidateError",
    "MentorshipProgram",
    "ScoredCandidate",
    "ScoredChunk",
    "SentimentResult",
]
