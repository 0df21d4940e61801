"""RAG-lite retrieval: rank static knowledge chunks by keyword overlap.

Stands in for embedding search. Scores per chunk:
    +10  query contains the chunk topic
    +5   per relevance keyword contained in the query
    +15  intent name contains the chunk topic (substring, not equality)
    +2   per query word (len > 3) found among the chunk's content tokens
"""

import logging

from models.schemas.intent import IntentCategory
from models.schemas.knowledge import KnowledgeChunk, ScoredChunk
from services.knowledge_base import KNOWLEDGE_BASE

logger = logging.getLogger(__name__)

W_TOPIC = 10
W_RELEVANCE = 5
W_INTENT = 15
W_CONTENT_WORD = 2
MIN_QUERY_WORD_LENGTH = 4

DEFAULT_LIMIT = 3


def score_chunk(query_lower: str, intent: str, chunk: KnowledgeChunk) -> float:
    score = 0.0

    if chunk.topic in query_lower:
        score += W_TOPIC

    for keyword in chunk.relevance:
        if keyword.lower() in query_lower:
            score += W_RELEVANCE

    if chunk.topic in intent:
        score += W_INTENT

    # No stemming: tokens keep their punctuation ("programs," != "programs")
    content_words = set(chunk.content.lower().split())
    for word in query_lower.split():
        if len(word) >= MIN_QUERY_WORD_LENGTH and word in content_words:
            score += W_CONTENT_WORD

    return score


def retrieve_knowledge(
    query: str | None,
    intent: IntentCategory | str,
    limit: int = DEFAULT_LIMIT,
    knowledge_base: tuple[KnowledgeChunk, ...] = KNOWLEDGE_BASE,
) -> list[ScoredChunk]:
    """Return up to ``limit`` chunks with a positive score, best first.

    Ties keep knowledge-base order (``sorted`` is stable).
    """
    query_lower = (query or "").lower()
    intent_name = intent.value if isinstance(intent, IntentCategory) else str(intent or "")

    scored = [
        ScoredChunk(chunk=chunk, score=score_chunk(query_lower, intent_name, chunk))
        for chunk in knowledge_base
    ]
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    results = [s for s in ranked if s.score > 0][: max(limit, 0)]

    logger.info(
        "Retrieved %d knowledge chunks for intent %s: %s",
        len(results), intent_name, [s.chunk.id for s in results],
    )
    return results


def format_knowledge_context(chunks: list[ScoredChunk] | list[KnowledgeChunk] | None) -> str:
    """Render chunks as a numbered citation block for a generator prompt."""
    if not chunks:
        return ""

    context = "Reference information:\n\n"
    for index, item in enumerate(chunks, start=1):
        chunk = item.chunk if isinstance(item, ScoredChunk) else item
        context += f"[{index}] {chunk.content}\n"
        context += f"Source: {chunk.source}\n\n"
    return context
