"""Generation context for a downstream language model.

No model is called from this backend; the context is assembled so a
generator can be plugged in without changing the pipeline.
"""

from models.schemas.bias import BiasDetail
from models.schemas.chat import AIContext
from models.schemas.conversation import ConversationTurn
from models.schemas.knowledge import ScoredChunk
from services.bias_detector import generate_bias_mitigation_instructions
from services.conversation import DEFAULT_HISTORY_WINDOW, format_conversation_history
from services.knowledge_retriever import format_knowledge_context

BASE_SYSTEM_INSTRUCTIONS = (
    "You are Asha, an AI assistant for JobsForHer Foundation. Your purpose is to help women "
    "advance in their careers by providing accurate information about job opportunities, "
    "events, mentorship programs, and professional development resources. Always be "
    "supportive, encouraging, and empowering in your responses. Focus on factual information "
    "and avoid gender stereotypes."
)

# (trigger words, focus sentence); first matching entry wins
FOCUS_INSTRUCTIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("job", "career"),
        "The user appears to be interested in career opportunities, so prioritize information "
        "about relevant job listings, skills required for different roles, and career "
        "development strategies.",
    ),
    (
        ("event", "workshop"),
        "The user appears to be interested in events, so prioritize information about "
        "upcoming workshops, webinars, and networking opportunities.",
    ),
    (
        ("mentor", "guidance"),
        "The user appears to be seeking mentorship or guidance, so prioritize information "
        "about mentorship programs, career coaching, and professional development resources.",
    ),
)


def build_system_instructions(query: str) -> str:
    query_lower = (query or "").lower()
    for triggers, focus in FOCUS_INSTRUCTIONS:
        if any(t in query_lower for t in triggers):
            return f"{BASE_SYSTEM_INSTRUCTIONS} {focus}"
    return BASE_SYSTEM_INSTRUCTIONS


def build_ai_context(
    query: str,
    history: list[ConversationTurn] | None,
    knowledge: list[ScoredChunk],
    bias_details: list[BiasDetail] | None = None,
    history_window: int = DEFAULT_HISTORY_WINDOW,
) -> AIContext:
    """Assemble system instructions, bias steering, citations and recent turns."""
    return AIContext(
        system_instructions=build_system_instructions(query),
        bias_instructions=generate_bias_mitigation_instructions(bias_details),
        knowledge_context=format_knowledge_context(knowledge),
        recent_conversation=format_conversation_history(history, history_window),
    )
