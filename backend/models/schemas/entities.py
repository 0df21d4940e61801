"""Keyword entities extracted from a user message."""

from pydantic import BaseModel


class EntitySets(BaseModel):
    """Vocabulary hits per entity category, in vocabulary order, no duplicates."""
    skills: list[str] = []
    locations: list[str] = []
    times: list[str] = []
    roles: list[str] = []
    industries: list[str] = []
    job_types: list[str] = []

    def is_empty(self) -> bool:
        return not any(
            (self.skills, self.locations, self.times, self.roles, self.industries, self.job_types)
        )
