"""Orchestrator: message-understanding and retrieval pipeline.

Pipeline:
1. Intent classification (keyword scoring + contextual boosts)
2. Entity extraction and query bias detection (independent)
3. Knowledge retrieval (RAG-lite keyword overlap)
4. Candidate ranking for job/event/mentorship intents (catalog fetch is
   the only await in the pipeline)
5. Template reply composition
6. Bias check of the reply before it is returned
7. Generation context for a downstream model
"""

import logging

from config import Settings, settings as default_settings
from models.schemas.candidates import Attachment, CandidateVariant
from models.schemas.chat import ChatResult
from models.schemas.conversation import ConversationTurn
from models.schemas.intent import IntentCategory
from services import (
    bias_detector,
    entity_extractor,
    intent_classifier,
    knowledge_retriever,
    prompt_builder,
    response_composer,
    sentiment,
)
from services.candidate_ranker import rank_candidates
from services.catalog import CandidateCatalog, get_catalog

logger = logging.getLogger(__name__)

# Intents that pull a ranked candidate from the catalog
INTENT_VARIANTS: dict[IntentCategory, CandidateVariant] = {
    IntentCategory.JOB_SEARCH: CandidateVariant.JOB,
    IntentCategory.EVENT_INFO: CandidateVariant.EVENT,
    IntentCategory.MENTORSHIP: CandidateVariant.MENTORSHIP,
}


async def process_message(
    message: str,
    history: list[ConversationTurn] | None = None,
    catalog: CandidateCatalog | None = None,
    settings: Settings = default_settings,
) -> ChatResult:
    """Run one chat turn through the full pipeline."""
    catalog = catalog or get_catalog()

    # --- Stage 1: Intent ---
    intent = intent_classifier.classify_intent(message)
    logger.info("Detected intent: %s", intent.value)

    # --- Stage 2: Entities + query bias (independent of each other) ---
    entities = entity_extractor.extract_entities(message)
    query_bias = bias_detector.detect_bias(message)
    if query_bias.has_bias:
        logger.info("Biased language in user query: %d rule(s) fired", len(query_bias.bias_details))

    # --- Stage 3: Knowledge retrieval ---
    knowledge = knowledge_retriever.retrieve_knowledge(
        message, intent, limit=settings.knowledge_limit
    )

    # --- Stage 4: Candidate ranking ---
    attachment = None
    variant = INTENT_VARIANTS.get(intent)
    if variant is not None:
        try:
            candidates = await catalog.fetch(variant)
        except Exception as e:
            logger.warning("Candidate provider failed for %s: %s", variant.value, e)
            candidates = []
        ranked = rank_candidates(
            message, candidates, variant, entities=entities, limit=settings.candidate_limit
        )
        if ranked:
            attachment = Attachment(type=variant, data=ranked[0].candidate)
        else:
            logger.info("No %s candidates matched the message", variant.value)

    # --- Stage 5: Compose reply ---
    reply = response_composer.compose_response(
        intent,
        attachment=attachment,
        knowledge_context=knowledge_retriever.format_knowledge_context(knowledge),
        message=message,
    )

    # --- Stage 6: Bias check on the outgoing reply ---
    response_bias = bias_detector.analyze_response_for_bias(reply.text)

    # --- Stage 7: Generation context ---
    context = prompt_builder.build_ai_context(
        message,
        history,
        knowledge,
        bias_details=query_bias.bias_details,
        history_window=settings.history_window,
    )

    return ChatResult(
        text=response_bias.corrected_text,
        attachment=reply.attachment,
        intent=intent,
        entities=entities,
        query_bias=query_bias,
        response_bias=response_bias,
        knowledge=knowledge,
        sentiment=sentiment.analyze_sentiment(message),
        context=context,
    )
