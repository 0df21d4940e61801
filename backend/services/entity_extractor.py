"""Vocabulary-based entity extraction (skills, locations, times, roles, ...)."""

from models.schemas.entities import EntitySets
from services.lexicon import DEFAULT_LEXICON, Lexicon


def _match_vocabulary(text_lower: str, vocabulary: tuple[str, ...]) -> list[str]:
    """Case-insensitive substring membership, in vocabulary order, deduplicated."""
    found: list[str] = []
    for term in vocabulary:
        if term.lower() in text_lower and term not in found:
            found.append(term)
    return found


def extract_entities(text: str | None, lexicon: Lexicon = DEFAULT_LEXICON) -> EntitySets:
    """Extract keyword entities per category. Empty text yields empty sets."""
    if not text:
        return EntitySets()

    text_lower = text.lower()
    return EntitySets(
        skills=_match_vocabulary(text_lower, lexicon.skills),
        locations=_match_vocabulary(text_lower, lexicon.locations),
        times=_match_vocabulary(text_lower, lexicon.times),
        roles=_match_vocabulary(text_lower, lexicon.roles),
        industries=_match_vocabulary(text_lower, lexicon.industries),
        job_types=_match_vocabulary(text_lower, lexicon.job_types),
    )
