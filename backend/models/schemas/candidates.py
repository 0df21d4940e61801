"""Domain candidates (jobs, events, mentorship programs) ranked against a query.

Each variant is a separate model carrying a ``variant`` tag so the ranker can
dispatch to the matching scorer without probing fields.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Union

from pydantic import BaseModel


class CandidateVariant(str, Enum):
    JOB = "job"
    EVENT = "event"
    MENTORSHIP = "mentorship"


class Job(BaseModel):
    variant: ClassVar[CandidateVariant] = CandidateVariant.JOB

    id: int | str
    title: str
    company: str
    description: str
    location: str = ""
    type: str = ""  # Full-time, Part-time, Contract, ...
    salary: str = ""
    skills: list[str] = []
    experience_level: str = ""
    industry: str = ""
    posted_date: datetime | None = None
    apply_url: str = ""


class Speaker(BaseModel):
    name: str
    role: str = ""


class Event(BaseModel):
    variant: ClassVar[CandidateVariant] = CandidateVariant.EVENT

    id: int | str
    title: str
    description: str
    date: datetime
    location: str = ""
    virtual: bool = False
    category: str = ""
    price: str = ""
    speakers: list[Speaker] = []
    registration_url: str = ""


class MentorshipProgram(BaseModel):
    variant: ClassVar[CandidateVariant] = CandidateVariant.MENTORSHIP

    id: int | str
    title: str
    mentor: str
    focus: str
    description: str
    mentor_title: str = ""
    duration: str = ""
    format: str = ""
    industry: str = ""
    start_date: str = ""
    commitment_hours: str = ""


Candidate = Union[Job, Event, MentorshipProgram]

CANDIDATE_MODELS: dict[CandidateVariant, type[BaseModel]] = {
    CandidateVariant.JOB: Job,
    CandidateVariant.EVENT: Event,
    CandidateVariant.MENTORSHIP: MentorshipProgram,
}


class ScoredCandidate(BaseModel):
    candidate: Candidate
    score: float = 0.0


class Attachment(BaseModel):
    """Structured payload sent alongside a reply (the top-ranked candidate)."""
    type: CandidateVariant
    data: Candidate


class MalformedCandidateError(ValueError):
    """A candidate supplied by a collection provider is missing required fields."""
