"""Static knowledge base used for keyword-overlap retrieval.

Loaded once at import; never mutated. ``extend_knowledge_base`` returns a
new tuple rather than appending to the shared one.
"""

import logging
from typing import Any

from pydantic import ValidationError

from models.schemas.knowledge import KnowledgeChunk

logger = logging.getLogger(__name__)

KNOWLEDGE_BASE: tuple[KnowledgeChunk, ...] = (
    KnowledgeChunk(
        id="kb-001",
        topic="careers",
        content=(
            "JobsForHer is dedicated to empowering women in their career journeys, "
            "offering resources and opportunities for professional growth, re-entry, "
            "and advancement."
        ),
        source="JobsForHer About Page",
        relevance=("career", "women empowerment", "professional growth"),
    ),
    KnowledgeChunk(
        id="kb-002",
        topic="jobs",
        content=(
            "Our job portal features thousands of verified opportunities from companies "
            "committed to gender diversity. Positions range from entry-level to executive "
            "across various industries and work arrangements including full-time, "
            "part-time, remote, and flexible options."
        ),
        source="JobsForHer Jobs Page",
        relevance=("jobs", "employment", "work opportunities", "remote work", "flexible work"),
    ),
    KnowledgeChunk(
        id="kb-003",
        topic="events",
        content=(
            "JobsForHer hosts regular events including webinars, workshops, networking "
            "sessions, and career fairs. These events feature industry experts and provide "
            "opportunities to learn new skills and connect with potential employers."
        ),
        source="JobsForHer Events Page",
        relevance=("events", "workshops", "networking", "skill development"),
    ),
    KnowledgeChunk(
        id="kb-004",
        topic="mentorship",
        content=(
            "Our mentorship programs connect aspiring professionals with experienced "
            "mentors across diverse fields. These structured programs provide guidance, "
            "feedback, and support for career advancement and personal development."
        ),
        source="JobsForHer Mentorship Page",
        relevance=("mentorship", "guidance", "career development", "coaching"),
    ),
    KnowledgeChunk(
        id="kb-005",
        topic="reskilling",
        content=(
            "JobsForHer partners with learning platforms to offer courses and "
            "certifications in in-demand skills. These resources help women upskill or "
            "reskill for career transitions and advancement opportunities."
        ),
        source="JobsForHer Learning Page",
        relevance=("skills", "learning", "courses", "career transition", "education"),
    ),
    KnowledgeChunk(
        id="kb-006",
        topic="returners",
        content=(
            "JobsForHer provides specialized resources for women returning to the "
            "workforce after a career break. These include returnship programs, "
            "confidence-building workshops, and skill refresher courses."
        ),
        source="JobsForHer Returnship Page",
        relevance=("career break", "returnship", "reentry", "workforce return"),
    ),
    KnowledgeChunk(
        id="kb-007",
        topic="diversity",
        content=(
            "Companies partnering with JobsForHer demonstrate a commitment to gender "
            "diversity and inclusion in the workplace. Many offer specialized programs to "
            "support women's career advancement and work-life balance."
        ),
        source="JobsForHer Partners Page",
        relevance=("diversity", "inclusion", "gender equality", "workplace culture"),
    ),
    KnowledgeChunk(
        id="kb-008",
        topic="remote work",
        content=(
            "Remote work opportunities provide flexibility that can be particularly "
            "valuable for women balancing professional and personal responsibilities. "
            "JobsForHer features numerous remote and hybrid positions across various "
            "industries."
        ),
        source="JobsForHer Remote Jobs Guide",
        relevance=("remote work", "work from home", "flexible work", "hybrid work"),
    ),
    KnowledgeChunk(
        id="kb-009",
        topic="entrepreneurship",
        content=(
            "JobsForHer supports women entrepreneurs through networking events, mentorship "
            "connections, and resources on funding and business development. These "
            "initiatives aim to increase women's participation in business ownership."
        ),
        source="JobsForHer Entrepreneurship Guide",
        relevance=("entrepreneurship", "business", "startup", "women founders"),
    ),
    KnowledgeChunk(
        id="kb-010",
        topic="leadership",
        content=(
            "Women in leadership positions face unique challenges and opportunities. "
            "JobsForHer provides resources, networks, and mentorship specifically designed "
            "to support women in executive roles and those aspiring to leadership."
        ),
        source="JobsForHer Leadership Development Page",
        relevance=("leadership", "executive", "management", "career advancement"),
    ),
)


def validate_knowledge_chunk(data: dict[str, Any]) -> KnowledgeChunk:
    """Build a chunk from raw data. Topic and content must be non-blank."""
    if not str(data.get("topic") or "").strip() or not str(data.get("content") or "").strip():
        raise ValueError("Knowledge chunk requires a topic and content")
    try:
        return KnowledgeChunk.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid knowledge chunk: {e}") from e


def extend_knowledge_base(
    base: tuple[KnowledgeChunk, ...], data: dict[str, Any]
) -> tuple[KnowledgeChunk, ...]:
    """Return a new knowledge base with one validated chunk appended.

    Chunk ids must stay unique.
    """
    chunk = validate_knowledge_chunk(data)
    if any(existing.id == chunk.id for existing in base):
        raise ValueError(f"Duplicate knowledge chunk id: {chunk.id}")
    logger.info("Knowledge chunk added: %s (%s)", chunk.id, chunk.topic)
    return base + (chunk,)
