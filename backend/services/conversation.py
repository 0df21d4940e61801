"""Conversation helpers: history windowing, greeting/question detection, PII scan."""

import re

from models.schemas.chat import SensitiveInfo
from models.schemas.conversation import ConversationTurn, HistoryMessage
from services.lexicon import DEFAULT_LEXICON, QUESTION_WORDS, STOPWORDS, Lexicon

DEFAULT_HISTORY_WINDOW = 10

_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_PATTERN = re.compile(r"(?:\+\d{1,3}[\s.-])?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
_CREDIT_CARD_PATTERN = re.compile(r"\b(?:\d{4}[ -]?){3}\d{4}\b")


def format_conversation_history(
    turns: list[ConversationTurn] | None, limit: int = DEFAULT_HISTORY_WINDOW
) -> list[HistoryMessage]:
    """Keep the most recent ``limit`` turns as role/content messages."""
    if not turns or limit <= 0:
        return []
    return [HistoryMessage(role=turn.sender, content=turn.text) for turn in turns[-limit:]]


def is_greeting(message: str | None, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    """True when the message is a greeting or starts with one ("hi", "hello, ...")."""
    if not message:
        return False

    message_lower = message.lower().strip()
    return any(
        message_lower == greeting
        or message_lower.startswith(f"{greeting} ")
        or message_lower.startswith(f"{greeting},")
        for greeting in lexicon.greetings
    )


def is_question(message: str | None) -> bool:
    if not message:
        return False

    trimmed = message.strip()
    if trimmed.endswith("?"):
        return True
    first_word = trimmed.lower().split(" ")[0]
    return first_word in QUESTION_WORDS


def extract_keywords(message: str | None) -> list[str]:
    """Content words of a message: punctuation stripped, stopwords and short words dropped."""
    if not message:
        return []

    words = re.sub(r"[^\w\s]", "", message.lower()).split()
    keywords: list[str] = []
    for word in words:
        if len(word) > 2 and word not in STOPWORDS and word not in keywords:
            keywords.append(word)
    return keywords


def detect_sensitive_info(message: str | None) -> SensitiveInfo:
    """Flag emails, phone numbers and card numbers a user may have pasted."""
    if not message:
        return SensitiveInfo()

    emails = _EMAIL_PATTERN.findall(message)
    phones = _PHONE_PATTERN.findall(message)
    cards = _CREDIT_CARD_PATTERN.findall(message)
    return SensitiveInfo(
        has_sensitive_info=bool(emails or phones or cards),
        emails=emails,
        phones=phones,
        credit_cards=cards,
    )
