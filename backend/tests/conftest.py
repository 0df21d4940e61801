"""Shared test fixtures: small candidate collections and a recording catalog."""

from datetime import datetime

import pytest

from models.schemas.candidates import CandidateVariant, Event, Job, MentorshipProgram, Speaker


class RecordingCatalog:
    """Catalog double that records which variants were fetched."""

    def __init__(self, jobs=None, events=None, mentorships=None):
        self.collections = {
            CandidateVariant.JOB: list(jobs or []),
            CandidateVariant.EVENT: list(events or []),
            CandidateVariant.MENTORSHIP: list(mentorships or []),
        }
        self.fetched: list[CandidateVariant] = []

    async def fetch(self, variant):
        self.fetched.append(variant)
        return list(self.collections[variant])


@pytest.fixture
def remote_job() -> Job:
    return Job(
        id="A",
        title="Software Engineer",
        company="TechCorp",
        description="Develop web applications.",
        type="Full-time",
        location="Remote",
    )


@pytest.fixture
def onsite_job() -> Job:
    return Job(
        id="B",
        title="Software Engineer",
        company="BuildCo",
        description="Develop web applications.",
        type="Contract",
        location="Onsite",
    )


@pytest.fixture
def summit_event() -> Event:
    return Event(
        id=1,
        title="Women in Tech Leadership Summit",
        description="Keynotes, panels and networking.",
        date=datetime(2025, 3, 5, 9, 0),
        location="Taj Bangalore, MG Road",
        virtual=False,
        category="Conference",
        speakers=[Speaker(name="Priya Sharma", role="CTO")],
    )


@pytest.fixture
def leadership_program() -> MentorshipProgram:
    return MentorshipProgram(
        id=1,
        title="Leadership Accelerator Program",
        mentor="Dr. Nandita Sharma",
        focus="Executive Leadership Development",
        description="Coaching for women moving into senior leadership positions.",
        duration="6 months",
        industry="Technology",
    )


@pytest.fixture
def catalog_factory():
    return RecordingCatalog
