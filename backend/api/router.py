import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_candidate_catalog
from config import settings
from models.requests import BiasCheckRequest, ChatRequest, IntentRequest
from models.responses import (
    BiasCheckResponse,
    ChatResponse,
    IntentResponse,
    KnowledgeReference,
)
from models.schemas.candidates import MalformedCandidateError
from services import (
    bias_detector,
    chat_service,
    conversation,
    entity_extractor,
    intent_classifier,
    sentiment,
)
from services.catalog import CandidateCatalog
from services.knowledge_base import KNOWLEDGE_BASE

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "knowledge_chunks": len(KNOWLEDGE_BASE),
    }


@router.post("/chat", response_model=ChatResponse)
@limiter.limit(settings.rate_limit)
async def chat(
    request: Request,
    body: ChatRequest,
    catalog: CandidateCatalog = Depends(get_candidate_catalog),
):
    if not body.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")

    try:
        result = await chat_service.process_message(body.message, body.history, catalog)
    except MalformedCandidateError as e:
        logger.error("Candidate catalog returned malformed data: %s", e)
        raise HTTPException(status_code=502, detail="Candidate data is malformed")

    return ChatResponse(
        text=result.text,
        attachment=result.attachment,
        intent=result.intent,
        entities=result.entities,
        bias=result.query_bias,
        knowledge=[
            KnowledgeReference(
                id=s.chunk.id, topic=s.chunk.topic, source=s.chunk.source, score=s.score
            )
            for s in result.knowledge
        ],
        sentiment=result.sentiment,
        sensitive_info=conversation.detect_sensitive_info(body.message),
        context=result.context if body.include_context else None,
    )


@router.post("/bias/check", response_model=BiasCheckResponse)
@limiter.limit(settings.rate_limit)
async def bias_check(request: Request, body: BiasCheckRequest):
    result = bias_detector.detect_bias(body.text)
    return BiasCheckResponse(
        **result.model_dump(),
        mitigation_instructions=bias_detector.generate_bias_mitigation_instructions(
            result.bias_details
        ),
    )


@router.post("/intent", response_model=IntentResponse)
@limiter.limit(settings.rate_limit)
async def intent(request: Request, body: IntentRequest):
    return IntentResponse(
        intent=intent_classifier.classify_intent(body.text),
        scores=intent_classifier.score_intents(body.text),
        entities=entity_extractor.extract_entities(body.text),
        sentiment=sentiment.analyze_sentiment(body.text),
        is_question=conversation.is_question(body.text),
        keywords=conversation.extract_keywords(body.text),
    )
