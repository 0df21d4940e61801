"""Keyword-based intent classification for chat messages.

Each category is scored by summing its keyword hits, weighted by where the
keyword first appears and by how long (specific) it is. A handful of
compound phrases then add fixed contextual boosts. The strictly highest
score wins; ties go to the category declared first in ``IntentCategory``.
"""

import logging

from models.schemas.intent import IntentCategory
from services.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

# A keyword starting before this offset counts double
EARLY_POSITION_CUTOFF = 10
EARLY_POSITION_FACTOR = 2.0

# Keywords longer than this are treated as more specific
SPECIFIC_KEYWORD_LENGTH = 6
SPECIFICITY_FACTOR = 1.5


def _contains_any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)


def _keyword_score(text: str, keywords: tuple[str, ...]) -> float:
    score = 0.0
    for keyword in keywords:
        kw = keyword.lower()
        position = text.find(kw)
        if position < 0:
            continue
        position_factor = EARLY_POSITION_FACTOR if position < EARLY_POSITION_CUTOFF else 1.0
        specificity_factor = SPECIFICITY_FACTOR if len(keyword) > SPECIFIC_KEYWORD_LENGTH else 1.0
        score += 1 * position_factor * specificity_factor
    return score


def _apply_context_boosts(text: str, scores: dict[IntentCategory, float]) -> None:
    """Add fixed boosts for compound phrasings that keywords alone miss."""
    # "find ... job" style questions
    if "find" in text and _contains_any(text, ("job", "work", "career")):
        scores[IntentCategory.JOB_SEARCH] += 3

    # time-based questions about events
    if _contains_any(text, ("when", "upcoming", "next")) and _contains_any(
        text, ("event", "webinar", "workshop")
    ):
        scores[IntentCategory.EVENT_INFO] += 3

    if _contains_any(text, ("how to", "what should", "best way")):
        scores[IntentCategory.CAREER_ADVICE] += 2

    if _contains_any(text, ("connect", "meet", "talk to")) and _contains_any(
        text, ("professional", "expert", "experienced")
    ):
        scores[IntentCategory.MENTORSHIP] += 3


def score_intents(
    text: str | None, lexicon: Lexicon = DEFAULT_LEXICON
) -> dict[IntentCategory, float]:
    """Score every intent category against the text (all zeros for empty text)."""
    scores = {category: 0.0 for category in IntentCategory}
    if not text:
        return scores

    text_lower = text.lower()
    for category in IntentCategory:
        scores[category] = _keyword_score(text_lower, lexicon.intent_keywords[category])

    _apply_context_boosts(text_lower, scores)
    return scores


def classify_intent(text: str | None, lexicon: Lexicon = DEFAULT_LEXICON) -> IntentCategory:
    """Return the single best intent for the text, ``help`` when nothing fires."""
    scores = score_intents(text, lexicon)

    top_category = IntentCategory.HELP
    max_score = 0.0
    for category in IntentCategory:
        if scores[category] > max_score:
            max_score = scores[category]
            top_category = category

    if max_score == 0:
        return IntentCategory.HELP

    logger.debug("Intent %s (score %.1f)", top_category.value, max_score)
    return top_category
