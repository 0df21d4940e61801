"""Static keyword tables driving the message-understanding pipeline.

All tables are immutable and gathered into a single ``Lexicon`` so each
stage can be handed an alternate lexicon (tests do this) without touching
the stage logic. ``DEFAULT_LEXICON`` is built once at import time.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

from models.schemas.intent import IntentCategory


@dataclass(frozen=True)
class BiasRule:
    """One or more biased surface forms sharing a neutral replacement."""
    surface_forms: tuple[str, ...]
    neutral: str
    kind: Literal["term", "phrase"] = "term"


@dataclass(frozen=True)
class StereotypePattern:
    """Demographic + trait pattern. Flag only: a heuristic, not ground truth."""
    pattern: re.Pattern
    is_biased: bool = True


# ---------------------------------------------------------------------------
# Intent keywords (order within a list does not affect scoring)
# ---------------------------------------------------------------------------
INTENT_KEYWORDS: dict[IntentCategory, tuple[str, ...]] = {
    IntentCategory.JOB_SEARCH: (
        "job", "career", "work", "employment", "position", "vacancy", "opening",
        "hire", "hiring", "apply", "application", "resume", "cv", "interview",
        "salary", "remote", "wfh", "hybrid", "full-time", "part-time", "contract",
        "opportunities", "job listing", "job posting", "recruiter",
    ),
    IntentCategory.EVENT_INFO: (
        "event", "webinar", "workshop", "seminar", "conference", "meetup",
        "networking", "session", "talk", "panel", "discussion", "presentation",
        "summit", "training", "program", "schedule", "agenda", "calendar",
        "upcoming", "register", "registration", "attend", "join",
    ),
    IntentCategory.MENTORSHIP: (
        "mentor", "mentorship", "mentoring", "mentee", "guidance", "advise",
        "advisor", "coach", "coaching", "counseling", "career advice", "guide",
        "support", "development", "growth", "learning", "expertise", "experience",
        "senior", "junior", "professional", "industry expert",
    ),
    IntentCategory.SKILL_DEVELOPMENT: (
        "skill", "skills", "learn", "learning", "course", "training", "education",
        "certification", "certificate", "degree", "qualification", "upskill",
        "reskill", "development", "improve", "enhance", "grow", "study",
        "knowledge", "expertise", "competence", "capability", "ability",
    ),
    IntentCategory.CAREER_ADVICE: (
        "advice", "suggestion", "recommendation", "guidance", "help", "tip",
        "strategy", "plan", "path", "trajectory", "direction", "goal", "objective",
        "aspiration", "advancement", "promotion", "growth", "development",
        "progress", "success", "achievement", "balance", "transition",
    ),
    IntentCategory.COMPANY_INFO: (
        "company", "organization", "employer", "workplace", "business",
        "enterprise", "firm", "corporation", "culture", "values", "mission",
        "vision", "policy", "policies", "benefit", "perk", "review",
        "reputation", "environment", "diversity", "inclusion",
    ),
    IntentCategory.HELP: (
        "help", "assist", "support", "guide", "explain", "show", "tell",
        "find", "search", "look for", "information", "info", "detail",
        "question", "query", "how to", "what is", "how do", "can you",
    ),
}

# ---------------------------------------------------------------------------
# Entity vocabularies
# ---------------------------------------------------------------------------
SKILL_KEYWORDS: tuple[str, ...] = (
    "programming", "coding", "development", "design", "marketing", "sales",
    "management", "leadership", "communication", "analytics", "research",
    "writing", "editing", "accounting", "finance", "hr", "customer service",
    "project management", "product management", "data analysis", "engineering",
    "teaching", "training", "social media", "digital marketing", "consulting",
)

LOCATION_KEYWORDS: tuple[str, ...] = (
    "remote", "wfh", "work from home", "hybrid", "office", "on-site", "onsite",
    "india", "bangalore", "delhi", "mumbai", "chennai", "hyderabad", "pune",
    "kolkata", "ahmedabad", "international", "global", "local", "regional",
)

TIME_KEYWORDS: tuple[str, ...] = (
    "today", "tomorrow", "this week", "next week", "weekend", "month",
    "upcoming", "recent", "latest", "new", "current", "future",
    "morning", "afternoon", "evening", "night", "full-time", "part-time",
)

ROLE_KEYWORDS: tuple[str, ...] = (
    "manager", "director", "executive", "assistant", "associate", "coordinator",
    "specialist", "analyst", "developer", "designer", "engineer", "consultant",
    "advisor", "representative", "officer", "administrator", "supervisor",
    "lead", "head", "chief", "junior", "senior", "entry-level", "internship",
)

INDUSTRY_KEYWORDS: tuple[str, ...] = (
    "tech", "technology", "it", "software", "healthcare", "medical", "finance",
    "banking", "education", "teaching", "retail", "e-commerce", "manufacturing",
    "construction", "media", "entertainment", "hospitality", "tourism",
    "consulting", "legal", "nonprofit", "government", "telecom", "pharmaceutical",
)

JOB_TYPE_KEYWORDS: tuple[str, ...] = (
    "full-time", "part-time", "contract", "remote", "hybrid", "internship",
)

# Time terms the event ranker rewards regardless of the event's actual date
EVENT_TIME_TERMS: tuple[str, ...] = (
    "today", "tomorrow", "this week", "upcoming", "next week", "weekend",
)

# ---------------------------------------------------------------------------
# Bias rules
# ---------------------------------------------------------------------------
BIASED_TERMS: tuple[BiasRule, ...] = (
    BiasRule(("chairman", "chairmen"), "chairperson"),
    BiasRule(("businessman", "businessmen"), "business professional"),
    BiasRule(("fireman", "firemen"), "firefighter"),
    BiasRule(("policeman", "policemen"), "police officer"),
    BiasRule(("mailman", "mailmen"), "mail carrier"),
    BiasRule(("stewardess",), "flight attendant"),
    BiasRule(("manpower",), "workforce"),
    BiasRule(("mankind",), "humanity"),
    BiasRule(("manned",), "staffed"),
    BiasRule(("workman", "workmen"), "worker"),
    BiasRule(("salesman", "salesmen"), "salesperson"),
    BiasRule(("man hours",), "work hours"),
    BiasRule(("cameraman", "cameramen"), "camera operator"),
    BiasRule(("spokesman", "spokesmen"), "spokesperson"),
    BiasRule(("housewife", "housewives"), "homemaker"),
)

# Applied in order; the "-dominated" rewrites can produce "men in the workplace"
# so they run before it.
BIASED_PHRASES: tuple[BiasRule, ...] = (
    BiasRule(("female-dominated profession",), "profession with many women", "phrase"),
    BiasRule(("male-dominated profession",), "profession with many men", "phrase"),
    BiasRule(("men in the workplace",), "people in the workplace", "phrase"),
    BiasRule(("girls in the office",), "employees in the office", "phrase"),
    BiasRule(("he will be the one to",), "they will be the one to", "phrase"),
    BiasRule(("women are better at",), "some people are better at", "phrase"),
    BiasRule(("men are better at",), "some people are better at", "phrase"),
)

# Broad on purpose: any demographic word followed later by a trait word fires,
# so "men" also matches inside "women" and "recommend". Known false positives.
STEREOTYPE_PATTERNS: tuple[StereotypePattern, ...] = tuple(
    StereotypePattern(re.compile(p, re.IGNORECASE))
    for p in (
        r"women.*cook",
        r"women.*nurtur",
        r"men.*leadership",
        r"men.*technical",
        r"women.*emotional",
        r"men.*rational",
        r"women.*soft skills",
        r"men.*hard skills",
    )
)

# ---------------------------------------------------------------------------
# Conversation helpers
# ---------------------------------------------------------------------------
GREETINGS: tuple[str, ...] = (
    "hi", "hello", "hey", "greetings", "good morning", "good afternoon",
    "good evening", "howdy", "hi there", "hello there", "welcome",
)

QUESTION_WORDS: frozenset[str] = frozenset({
    "what", "when", "where", "which", "who", "whom", "whose", "why", "how",
    "can", "could", "would", "will", "do", "does", "is", "are",
})

STOPWORDS: frozenset[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "with",
    "about", "by", "from", "of", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "can", "could", "will", "would",
    "should", "may", "might", "must", "i", "you", "he", "she", "it", "we", "they",
    "me", "him", "her", "us", "them", "my", "your", "his", "its", "our", "their",
    "this", "that", "these", "those", "here", "there",
})

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "good", "great", "excellent", "amazing", "wonderful", "fantastic",
    "helpful", "useful", "thank", "thanks", "appreciate", "like", "love",
    "happy", "excited", "perfect", "best", "enjoy", "pleased", "satisfied",
)

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "bad", "poor", "terrible", "awful", "horrible", "useless", "unhelpful",
    "disappoint", "disappointed", "frustrat", "annoy", "hate", "dislike",
    "worst", "waste", "not good", "not useful", "not helpful", "confused",
)


@dataclass(frozen=True)
class Lexicon:
    """Process-wide keyword configuration consumed by every pipeline stage."""
    intent_keywords: Mapping[IntentCategory, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType(INTENT_KEYWORDS)
    )
    skills: tuple[str, ...] = SKILL_KEYWORDS
    locations: tuple[str, ...] = LOCATION_KEYWORDS
    times: tuple[str, ...] = TIME_KEYWORDS
    roles: tuple[str, ...] = ROLE_KEYWORDS
    industries: tuple[str, ...] = INDUSTRY_KEYWORDS
    job_types: tuple[str, ...] = JOB_TYPE_KEYWORDS
    event_time_terms: tuple[str, ...] = EVENT_TIME_TERMS
    biased_terms: tuple[BiasRule, ...] = BIASED_TERMS
    biased_phrases: tuple[BiasRule, ...] = BIASED_PHRASES
    stereotypes: tuple[StereotypePattern, ...] = STEREOTYPE_PATTERNS
    greetings: tuple[str, ...] = GREETINGS

    def __post_init__(self) -> None:
        missing = [c.value for c in IntentCategory if not self.intent_keywords.get(c)]
        if missing:
            raise ValueError(f"Intent keyword lists must be non-empty: {', '.join(missing)}")


DEFAULT_LEXICON = Lexicon()
