from datetime import datetime, timedelta

from models.schemas.conversation import ConversationTurn
from services.conversation import (
    detect_sensitive_info,
    extract_keywords,
    format_conversation_history,
    is_greeting,
    is_question,
)
from services.sentiment import analyze_sentiment


def _turns(n):
    start = datetime(2024, 1, 1)
    return [
        ConversationTurn(
            sender="user" if i % 2 == 0 else "assistant",
            text=f"message {i}",
            timestamp=start + timedelta(minutes=i),
        )
        for i in range(n)
    ]


class TestHistory:
    def test_keeps_last_ten_by_default(self):
        history = format_conversation_history(_turns(12))
        assert len(history) == 10
        assert history[0].content == "message 2"
        assert history[-1].content == "message 11"

    def test_roles(self):
        history = format_conversation_history(_turns(2))
        assert [m.role for m in history] == ["user", "assistant"]

    def test_empty(self):
        assert format_conversation_history(None) == []
        assert format_conversation_history(_turns(3), limit=0) == []


class TestGreeting:
    def test_greetings(self):
        assert is_greeting("Hello")
        assert is_greeting("  good morning ")
        assert is_greeting("hi, can you help?")
        assert is_greeting("hey there")

    def test_not_greetings(self):
        assert not is_greeting("")
        assert not is_greeting(None)
        assert not is_greeting("hiring now")
        assert not is_greeting("say hello")


def test_is_question():
    assert is_question("Any remote roles?")
    assert is_question("how do I apply")
    assert not is_question("Show me jobs")
    assert not is_question("")


def test_extract_keywords():
    assert extract_keywords("What are the best remote jobs for me? Remote!") == [
        "what", "best", "remote", "jobs",
    ]
    assert extract_keywords(None) == []


class TestSensitiveInfo:
    def test_email_and_phone(self):
        info = detect_sensitive_info("Reach me at jane.doe@example.com or +91 987-654-3210")
        assert info.has_sensitive_info
        assert info.emails == ["jane.doe@example.com"]
        assert info.phones == ["+91 987-654-3210"]

    def test_clean_message(self):
        info = detect_sensitive_info("Any data analyst openings?")
        assert not info.has_sensitive_info
        assert info.credit_cards == []


class TestSentiment:
    def test_positive(self):
        result = analyze_sentiment("This was really helpful, thanks!")
        assert result.sentiment == "positive"
        assert result.score == 3

    def test_negative(self):
        result = analyze_sentiment("That was a terrible, useless answer")
        assert result.sentiment == "negative"
        assert result.negative == 2

    def test_negated_phrase_cancels_out(self):
        result = analyze_sentiment("not helpful")
        assert result.sentiment == "neutral"
        assert (result.positive, result.negative) == (1, 1)

    def test_empty(self):
        assert analyze_sentiment("").sentiment == "neutral"
