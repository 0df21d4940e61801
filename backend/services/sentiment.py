"""Keyword-count sentiment for chat messages."""

from models.schemas.chat import SentimentResult
from services.lexicon import NEGATIVE_KEYWORDS, POSITIVE_KEYWORDS


def analyze_sentiment(message: str | None) -> SentimentResult:
    """Positive minus negative keyword hits; the sign decides the label."""
    if not message:
        return SentimentResult()

    message_lower = message.lower()
    positive = sum(1 for kw in POSITIVE_KEYWORDS if kw in message_lower)
    negative = sum(1 for kw in NEGATIVE_KEYWORDS if kw in message_lower)
    total = positive - negative

    sentiment = "neutral"
    if total > 0:
        sentiment = "positive"
    elif total < 0:
        sentiment = "negative"

    return SentimentResult(sentiment=sentiment, score=total, positive=positive, negative=negative)
