"""Template-based reply assembly.

Greetings are answered first, from the raw message, whatever the classified
intent. Otherwise the intent picks a template, with a richer variant when a
ranked candidate is attached.
"""

from datetime import datetime

from models.schemas.candidates import Attachment, Event, Job, MentorshipProgram
from models.schemas.chat import ChatReply
from models.schemas.intent import IntentCategory
from services.conversation import is_greeting
from services.lexicon import DEFAULT_LEXICON, Lexicon

ASSISTANT_NAME = "Asha"

WELCOME_MESSAGE = (
    f"Hello! I'm {ASSISTANT_NAME}, an AI assistant for JobsForHer Foundation. I can help you "
    "explore career opportunities, find job listings, learn about community events, or "
    "connect with mentorship programs. How can I assist you today?"
)

JOB_PROMPT = (
    "I'd be happy to help you find job opportunities that match your interests and skills. "
    "Could you tell me more about the type of roles you're looking for or any specific "
    "industries you're interested in?"
)

EVENT_PROMPT = (
    "There are several upcoming events hosted by JobsForHer Foundation. These events cover "
    "networking opportunities, skill development workshops, and career fairs. Would you like "
    "me to show you events in a specific category or time frame?"
)

MENTORSHIP_PROMPT = (
    "JobsForHer Foundation offers various mentorship programs designed to help women advance "
    "in their careers. These programs connect mentees with experienced professionals who "
    "provide guidance, feedback, and support. What type of mentorship are you looking for?"
)

HELP_MESSAGE = (
    f"I'd be happy to help! As {ASSISTANT_NAME}, I can assist you with:\n\n"
    "1. Finding job opportunities tailored to your skills and interests\n"
    "2. Discovering upcoming events and workshops\n"
    "3. Exploring mentorship programs\n"
    "4. Providing information about women's career development resources\n\n"
    "What would you like to know more about?"
)

FALLBACK_MESSAGE = (
    f"Thank you for your message. I'm {ASSISTANT_NAME}, an AI assistant dedicated to helping "
    "women advance in their careers. I can provide information about job opportunities, "
    "events, mentorship programs, and more. Could you please specify what kind of career "
    "information you're looking for, and I'll do my best to assist you?"
)

KNOWLEDGE_PREAMBLE = "Here is some information that may help:"


def _format_date(value: datetime) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def _job_text(job: Job) -> str:
    return (
        f"I found a job opportunity that might interest you: {job.title} at {job.company}. "
        f"This {job.type} position is located in {job.location}. "
        "Would you like me to find more similar opportunities?"
    )


def _event_text(event: Event) -> str:
    where = "virtually" if event.virtual else f"at {event.location}"
    return (
        f'I found an upcoming event you might be interested in: "{event.title}" on '
        f"{_format_date(event.date)}. It will be held {where}. "
        "Would you like more details about this event?"
    )


def _mentorship_text(program: MentorshipProgram) -> str:
    runs_for = f" and runs for {program.duration}" if program.duration else ""
    return (
        f'I found a mentorship program that might be a good fit: "{program.title}" led by '
        f"{program.mentor}. This program focuses on {program.focus}{runs_for}. "
        "Would you like to learn more about how to apply?"
    )


def _with_knowledge(text: str, knowledge_context: str) -> str:
    if not knowledge_context:
        return text
    return f"{text}\n\n{KNOWLEDGE_PREAMBLE}\n\n{knowledge_context.rstrip()}"


def compose_response(
    intent: IntentCategory,
    attachment: Attachment | None = None,
    knowledge_context: str = "",
    message: str = "",
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> ChatReply:
    """Pick and fill the reply template for this turn."""
    if is_greeting(message, lexicon):
        return ChatReply(text=WELCOME_MESSAGE, attachment=None)

    data = attachment.data if attachment else None

    if intent == IntentCategory.JOB_SEARCH:
        if isinstance(data, Job):
            return ChatReply(text=_job_text(data), attachment=attachment)
        return ChatReply(text=JOB_PROMPT)

    if intent == IntentCategory.EVENT_INFO:
        if isinstance(data, Event):
            return ChatReply(text=_event_text(data), attachment=attachment)
        return ChatReply(text=EVENT_PROMPT)

    if intent == IntentCategory.MENTORSHIP:
        if isinstance(data, MentorshipProgram):
            return ChatReply(text=_mentorship_text(data), attachment=attachment)
        return ChatReply(text=MENTORSHIP_PROMPT)

    if intent == IntentCategory.HELP:
        return ChatReply(text=_with_knowledge(HELP_MESSAGE, knowledge_context))

    return ChatReply(text=_with_knowledge(FALLBACK_MESSAGE, knowledge_context))
