import dataclasses

import pytest

from models.schemas.intent import IntentCategory
from services.intent_classifier import classify_intent, score_intents
from services.lexicon import DEFAULT_LEXICON, INTENT_KEYWORDS, Lexicon


def _lexicon(**keywords) -> Lexicon:
    table = {category: ("__unused__",) for category in IntentCategory}
    for name, words in keywords.items():
        table[IntentCategory(name)] = words
    return dataclasses.replace(DEFAULT_LEXICON, intent_keywords=table)


def test_empty_text_is_help():
    assert classify_intent("") == IntentCategory.HELP
    assert classify_intent(None) == IntentCategory.HELP


def test_no_signal_is_help():
    assert classify_intent("qqq zzz") == IntentCategory.HELP


def test_job_listing_request():
    assert classify_intent("Show me recent job listings") == IntentCategory.JOB_SEARCH


def test_deterministic():
    text = "Are there any upcoming workshops on leadership?"
    results = {classify_intent(text) for _ in range(5)}
    assert len(results) == 1


def test_event_time_boost():
    assert classify_intent("When is the next webinar?") == IntentCategory.EVENT_INFO


def test_mentorship_connect_boost():
    text = "I want to connect with an experienced professional"
    assert classify_intent(text) == IntentCategory.MENTORSHIP
    assert score_intents(text)[IntentCategory.MENTORSHIP] == pytest.approx(6.0)


def test_how_to_boosts_career_advice():
    assert classify_intent("how to negotiate a promotion") == IntentCategory.CAREER_ADVICE


def test_find_job_boost():
    scores = score_intents("find me a remote full-time job")
    # remote (1) + full-time (1.5) + job (1) + find/job boost (3)
    assert scores[IntentCategory.JOB_SEARCH] == pytest.approx(6.5)
    assert scores[IntentCategory.HELP] == pytest.approx(2.0)


class TestScoringFactors:
    def test_early_keyword_counts_double(self):
        lexicon = _lexicon(job_search=("alpha",))
        assert score_intents("alpha", lexicon)[IntentCategory.JOB_SEARCH] == 2.0

    def test_late_keyword_counts_once(self):
        lexicon = _lexicon(job_search=("alpha",))
        assert score_intents("xxxxxxxxxx alpha", lexicon)[IntentCategory.JOB_SEARCH] == 1.0

    def test_long_keyword_is_more_specific(self):
        lexicon = _lexicon(job_search=("specific",))
        assert score_intents("specific", lexicon)[IntentCategory.JOB_SEARCH] == 3.0

    def test_case_insensitive(self):
        lexicon = _lexicon(job_search=("alpha",))
        assert score_intents("ALPHA", lexicon)[IntentCategory.JOB_SEARCH] == 2.0

    def test_all_zero_for_empty_text(self):
        assert set(score_intents("").values()) == {0.0}


class TestTieBreak:
    def test_first_declared_category_wins(self):
        lexicon = _lexicon(event_info=("zebra",), company_info=("zebra",))
        assert classify_intent("zebra", lexicon) == IntentCategory.EVENT_INFO

    def test_job_search_beats_help_on_tie(self):
        lexicon = _lexicon(job_search=("zebra",), help=("zebra",))
        assert classify_intent("zebra", lexicon) == IntentCategory.JOB_SEARCH


def test_lexicon_rejects_empty_keyword_list():
    table = dict(INTENT_KEYWORDS)
    table[IntentCategory.HELP] = ()
    with pytest.raises(ValueError, match="help"):
        Lexicon(intent_keywords=table)
