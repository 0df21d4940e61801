from models.schemas.candidates import Attachment, CandidateVariant
from models.schemas.intent import IntentCategory
from services.response_composer import (
    EVENT_PROMPT,
    FALLBACK_MESSAGE,
    HELP_MESSAGE,
    JOB_PROMPT,
    KNOWLEDGE_PREAMBLE,
    MENTORSHIP_PROMPT,
    WELCOME_MESSAGE,
    compose_response,
)


def test_greeting_takes_precedence_over_intent(remote_job):
    attachment = Attachment(type=CandidateVariant.JOB, data=remote_job)
    reply = compose_response(IntentCategory.JOB_SEARCH, attachment, message="Hello, any jobs?")
    assert reply.text == WELCOME_MESSAGE
    assert reply.attachment is None


def test_exact_greeting():
    assert compose_response(IntentCategory.HELP, message="hi").text == WELCOME_MESSAGE


def test_greeting_prefix_must_be_a_word():
    reply = compose_response(IntentCategory.JOB_SEARCH, message="hiring managers near me")
    assert reply.text == JOB_PROMPT


def test_job_with_attachment(remote_job):
    attachment = Attachment(type=CandidateVariant.JOB, data=remote_job)
    reply = compose_response(IntentCategory.JOB_SEARCH, attachment, message="remote jobs")
    assert reply.text == (
        "I found a job opportunity that might interest you: Software Engineer at TechCorp. "
        "This Full-time position is located in Remote. "
        "Would you like me to find more similar opportunities?"
    )
    assert reply.attachment == attachment


def test_job_without_attachment():
    reply = compose_response(IntentCategory.JOB_SEARCH)
    assert reply.text == JOB_PROMPT
    assert reply.attachment is None


def test_in_person_event(summit_event):
    attachment = Attachment(type=CandidateVariant.EVENT, data=summit_event)
    reply = compose_response(IntentCategory.EVENT_INFO, attachment)
    assert '"Women in Tech Leadership Summit" on 3/5/2025' in reply.text
    assert "held at Taj Bangalore, MG Road" in reply.text


def test_virtual_event(summit_event):
    event = summit_event.model_copy(update={"virtual": True})
    reply = compose_response(
        IntentCategory.EVENT_INFO, Attachment(type=CandidateVariant.EVENT, data=event)
    )
    assert "It will be held virtually." in reply.text


def test_event_without_attachment():
    assert compose_response(IntentCategory.EVENT_INFO).text == EVENT_PROMPT


def test_mentorship_with_attachment(leadership_program):
    attachment = Attachment(type=CandidateVariant.MENTORSHIP, data=leadership_program)
    reply = compose_response(IntentCategory.MENTORSHIP, attachment)
    assert "led by Dr. Nandita Sharma" in reply.text
    assert "focuses on Executive Leadership Development and runs for 6 months" in reply.text


def test_mentorship_without_duration(leadership_program):
    program = leadership_program.model_copy(update={"duration": ""})
    attachment = Attachment(type=CandidateVariant.MENTORSHIP, data=program)
    reply = compose_response(IntentCategory.MENTORSHIP, attachment)
    assert "focuses on Executive Leadership Development. Would you like" in reply.text
    assert "runs for" not in reply.text


def test_mentorship_without_attachment():
    assert compose_response(IntentCategory.MENTORSHIP).text == MENTORSHIP_PROMPT


def test_mismatched_attachment_falls_back_to_prompt(summit_event):
    attachment = Attachment(type=CandidateVariant.EVENT, data=summit_event)
    reply = compose_response(IntentCategory.JOB_SEARCH, attachment)
    assert reply.text == JOB_PROMPT
    assert reply.attachment is None


def test_help_without_knowledge():
    assert compose_response(IntentCategory.HELP).text == HELP_MESSAGE


def test_help_with_knowledge():
    context = "Reference information:\n\n[1] Alpha.\nSource: Doc A\n\n"
    reply = compose_response(IntentCategory.HELP, knowledge_context=context)
    assert reply.text.startswith(HELP_MESSAGE)
    assert reply.text.endswith(f"{KNOWLEDGE_PREAMBLE}\n\n{context.rstrip()}")


def test_other_intents_use_fallback():
    for intent in (
        IntentCategory.CAREER_ADVICE,
        IntentCategory.SKILL_DEVELOPMENT,
        IntentCategory.COMPANY_INFO,
    ):
        assert compose_response(intent).text == FALLBACK_MESSAGE
