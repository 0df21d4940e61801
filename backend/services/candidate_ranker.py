"""Field-weighted keyword ranking of jobs, events and mentorship programs.

Stands in for semantic search. Each variant has its own scorer; all matching
is case-insensitive substring containment. Most fields test "field contains
query", but job location, type and experience level test "query contains
field". That asymmetry is kept as-is because ranking outcomes depend on it.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Sequence

from pydantic import BaseModel, ValidationError

from models.schemas.candidates import (
    CANDIDATE_MODELS,
    Candidate,
    CandidateVariant,
    Event,
    Job,
    MalformedCandidateError,
    MentorshipProgram,
    ScoredCandidate,
)
from models.schemas.entities import EntitySets
from services.entity_extractor import extract_entities
from services.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3

# Job weights
W_JOB_TITLE = 10
W_JOB_COMPANY = 5
W_JOB_DESCRIPTION = 3
W_JOB_LOCATION = 8
W_JOB_TYPE = 8
W_JOB_SKILL = 7
W_JOB_EXPERIENCE = 5
W_JOB_ENTITY = 10

# Event weights
W_EVENT_TITLE = 10
W_EVENT_DESCRIPTION = 5
W_EVENT_CATEGORY = 8
W_EVENT_SPEAKER = 6
W_EVENT_TIME_TERM = 4

# Mentorship weights
W_MENTOR_TITLE = 10
W_MENTOR_NAME = 8
W_MENTOR_FOCUS = 9
W_MENTOR_DESCRIPTION = 5
W_MENTOR_INDUSTRY = 7


def _field_contains(value: str, query_lower: str) -> bool:
    return bool(value) and query_lower in value.lower()


def _query_contains(query_lower: str, value: str) -> bool:
    return bool(value) and value.lower() in query_lower


def _score_job(job: Job, query_lower: str, entities: EntitySets, lexicon: Lexicon) -> float:
    score = 0.0
    if _field_contains(job.title, query_lower):
        score += W_JOB_TITLE
    if _field_contains(job.company, query_lower):
        score += W_JOB_COMPANY
    if _field_contains(job.description, query_lower):
        score += W_JOB_DESCRIPTION

    # reversed containment: the query mentions the job's value
    if _query_contains(query_lower, job.location):
        score += W_JOB_LOCATION
    if _query_contains(query_lower, job.type):
        score += W_JOB_TYPE
    for skill in job.skills:
        if _query_contains(query_lower, skill):
            score += W_JOB_SKILL
    if _query_contains(query_lower, job.experience_level):
        score += W_JOB_EXPERIENCE

    # entity boosts, one each per category
    if any(_field_contains(job.type, t.lower()) for t in entities.job_types):
        score += W_JOB_ENTITY
    if any(
        _field_contains(item_skill, s.lower()) for s in entities.skills for item_skill in job.skills
    ):
        score += W_JOB_ENTITY
    if any(_field_contains(job.industry, i.lower()) for i in entities.industries):
        score += W_JOB_ENTITY
    return score


def _score_event(event: Event, query_lower: str, entities: EntitySets, lexicon: Lexicon) -> float:
    score = 0.0
    if _field_contains(event.title, query_lower):
        score += W_EVENT_TITLE
    if _field_contains(event.description, query_lower):
        score += W_EVENT_DESCRIPTION
    if _field_contains(event.category, query_lower):
        score += W_EVENT_CATEGORY
    for speaker in event.speakers:
        if _query_contains(query_lower, speaker.name):
            score += W_EVENT_SPEAKER
    # TODO: compare the time term against event.date instead of rewarding any mention
    for term in lexicon.event_time_terms:
        if term in query_lower:
            score += W_EVENT_TIME_TERM
    return score


def _score_mentorship(
    program: MentorshipProgram, query_lower: str, entities: EntitySets, lexicon: Lexicon
) -> float:
    score = 0.0
    if _field_contains(program.title, query_lower):
        score += W_MENTOR_TITLE
    if _field_contains(program.mentor, query_lower):
        score += W_MENTOR_NAME
    if _field_contains(program.focus, query_lower):
        score += W_MENTOR_FOCUS
    if _field_contains(program.description, query_lower):
        score += W_MENTOR_DESCRIPTION
    if _field_contains(program.industry, query_lower):
        score += W_MENTOR_INDUSTRY
    return score


_SCORERS: dict[CandidateVariant, Callable[..., float]] = {
    CandidateVariant.JOB: _score_job,
    CandidateVariant.EVENT: _score_event,
    CandidateVariant.MENTORSHIP: _score_mentorship,
}


def _coerce_candidate(item: Any, variant: CandidateVariant, index: int) -> Candidate:
    """Validate one collection record into the declared variant's model."""
    model = CANDIDATE_MODELS[variant]
    if isinstance(item, model):
        return item
    if isinstance(item, BaseModel):
        raise MalformedCandidateError(
            f"Candidate #{index} is a {type(item).__name__}, expected {model.__name__}"
        )
    try:
        return model.model_validate(item)
    except ValidationError as e:
        raise MalformedCandidateError(
            f"Candidate #{index} is not a valid {variant.value}: {e}"
        ) from e


def score_candidate(
    query: str,
    candidate: Candidate,
    entities: EntitySets | None = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> float:
    """Score a single validated candidate with its variant's scorer.

    Raw records are not accepted here; ``rank_candidates`` validates them.
    """
    if not isinstance(candidate, tuple(CANDIDATE_MODELS.values())):
        raise MalformedCandidateError(
            f"Expected a Job, Event or MentorshipProgram, got {type(candidate).__name__}"
        )
    if entities is None:
        entities = extract_entities(query, lexicon)
    return _SCORERS[candidate.variant](candidate, (query or "").lower(), entities, lexicon)


def rank_candidates(
    query: str | None,
    candidates: Iterable[Candidate | Mapping[str, Any]] | None,
    variant: CandidateVariant | str,
    entities: EntitySets | None = None,
    limit: int = DEFAULT_LIMIT,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> list[ScoredCandidate]:
    """Rank a homogeneous candidate collection against the query.

    Returns up to ``limit`` candidates with a positive score, best first;
    equal scores keep collection order. Raises ``MalformedCandidateError``
    on the first record that does not fit the variant.
    """
    variant = CandidateVariant(variant)
    query = query or ""
    if entities is None:
        entities = extract_entities(query, lexicon)

    query_lower = query.lower()
    scorer = _SCORERS[variant]
    scored = []
    for index, item in enumerate(candidates or ()):
        candidate = _coerce_candidate(item, variant, index)
        scored.append(
            ScoredCandidate(candidate=candidate, score=scorer(candidate, query_lower, entities, lexicon))
        )

    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    results = [s for s in ranked if s.score > 0][: max(limit, 0)]
    logger.info(
        "Ranked %d %s candidates, %d with positive score",
        len(scored), variant.value, len(results),
    )
    return results


def filter_candidates(items: Sequence[Any], filters: Mapping[str, Any] | None) -> list[Any]:
    """Keep items matching every filter.

    List-valued filters match on any overlap (or containment for string
    fields); scalar filters require equality. Falsy filter values are ignored.
    """
    if not filters:
        return list(items)

    def matches(item: Any) -> bool:
        for key, value in filters.items():
            field_value = _get_field(item, key)
            if isinstance(value, (list, tuple, set)) and value:
                if isinstance(field_value, (list, tuple, set)):
                    if not any(v in field_value for v in value):
                        return False
                elif field_value:
                    if not any(field_value == v or str(v) in str(field_value) for v in value):
                        return False
                else:
                    return False
            elif value and not isinstance(value, (list, tuple, set)) and field_value != value:
                return False
        return True

    return [item for item in items if matches(item)]


def search_by_text(
    items: Sequence[Any], query: str | None, fields: Sequence[str] = ("title", "description")
) -> list[Any]:
    """Plain substring search across the given fields. Blank query returns everything."""
    if not query or not query.strip():
        return list(items)

    query_lower = query.lower().strip()
    return [
        item
        for item in items
        if any(
            isinstance(_get_field(item, f), str) and query_lower in _get_field(item, f).lower()
            for f in fields
        )
    ]


def _get_field(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)
