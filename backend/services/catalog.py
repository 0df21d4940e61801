"""Candidate collection providers.

The pipeline only needs ``await catalog.fetch(variant)`` returning an
in-memory list. ``StaticCatalog`` serves a small built-in sample so the API
works without a backing service.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

from models.schemas.candidates import CandidateVariant

logger = logging.getLogger(__name__)


class CandidateCatalog(Protocol):
    async def fetch(self, variant: CandidateVariant) -> list[Any]:
        """Return every candidate of the variant (models or raw dicts)."""
        ...


SAMPLE_JOBS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Senior Software Engineer",
        "company": "TechCorp Solutions",
        "location": "Remote",
        "type": "Full-time",
        "salary": "₹20L - ₹30L per annum",
        "description": (
            "We are looking for an experienced software engineer to join our team. You will be "
            "responsible for developing high-quality applications, collaborating with "
            "cross-functional teams, and mentoring junior developers."
        ),
        "skills": ["JavaScript", "React", "Node.js", "AWS"],
        "experience_level": "Senior Level",
        "industry": "Technology",
    },
    {
        "id": 2,
        "title": "Marketing Manager",
        "company": "Brand Innovators",
        "location": "Bangalore",
        "type": "Full-time",
        "salary": "₹15L - ₹20L per annum",
        "description": (
            "Join our dynamic marketing team to drive brand growth and engagement. You will "
            "develop marketing strategies, manage campaigns, analyze performance metrics, and "
            "collaborate with creative teams."
        ),
        "skills": ["Digital Marketing", "SEO", "Content Strategy", "Analytics"],
        "experience_level": "Mid Level",
        "industry": "Marketing & Advertising",
    },
    {
        "id": 3,
        "title": "UX/UI Designer",
        "company": "Creative Solutions Inc",
        "location": "Hybrid - Mumbai",
        "type": "Full-time",
        "salary": "₹12L - ₹18L per annum",
        "description": (
            "Create exceptional user experiences for our digital products. You will conduct "
            "user research, create wireframes, design visually appealing interfaces, and "
            "collaborate with developers to implement your designs."
        ),
        "skills": ["UI Design", "UX Research", "Figma", "Adobe Creative Suite"],
        "experience_level": "Mid Level",
        "industry": "Design",
    },
    {
        "id": 4,
        "title": "Data Analyst",
        "company": "DataWise Analytics",
        "location": "Remote",
        "type": "Full-time",
        "salary": "₹10L - ₹15L per annum",
        "description": (
            "Turn data into actionable insights for our organization. You will collect, "
            "process, and analyze data, create visualizations, and present findings to "
            "stakeholders to drive business decisions."
        ),
        "skills": ["SQL", "Python", "Data Visualization", "Statistical Analysis"],
        "experience_level": "Entry Level",
        "industry": "Data & Analytics",
    },
    {
        "id": 5,
        "title": "HR Business Partner",
        "company": "PeopleFirst Consulting",
        "location": "Pune",
        "type": "Part-time",
        "salary": "₹8L - ₹12L per annum",
        "description": (
            "Partner with business leaders on talent strategy, employee engagement, and "
            "policy rollout across a growing consulting practice."
        ),
        "skills": ["HR", "Communication", "Employee Relations"],
        "experience_level": "Mid Level",
        "industry": "Consulting",
    },
]


def _sample_events(now: datetime) -> list[dict[str, Any]]:
    return [
        {
            "id": 1,
            "title": "Women in Tech Leadership Summit",
            "description": (
                "Join industry leaders for a day of inspiration, learning, and networking. This "
                "summit features keynote speakers, panel discussions, and workshops focused on "
                "advancing women in technology leadership roles."
            ),
            "date": now + timedelta(days=7),
            "location": "Taj Bangalore, MG Road",
            "virtual": False,
            "category": "Conference",
            "price": "₹2,000",
            "speakers": [
                {"name": "Priya Sharma", "role": "CTO, TechInnovate"},
                {"name": "Anita Desai", "role": "VP Engineering, GlobalTech"},
            ],
        },
        {
            "id": 2,
            "title": "Returning to Work: Strategies for Success",
            "description": (
                "This virtual workshop is designed for women returning to the workforce after a "
                "career break. Learn practical strategies for updating your skills, rebuilding "
                "confidence, navigating the job market, and successfully transitioning back to "
                "professional life."
            ),
            "date": now + timedelta(days=3),
            "location": "Online",
            "virtual": True,
            "category": "Workshop",
            "price": "Free",
            "speakers": [{"name": "Meera Kapoor", "role": "Career Coach"}],
        },
        {
            "id": 3,
            "title": "Data Science Career Webinar",
            "description": (
                "An introduction to careers in data science: core skills, portfolio projects, "
                "and how to prepare for technical interviews."
            ),
            "date": now + timedelta(days=14),
            "location": "Online",
            "virtual": True,
            "category": "Webinar",
            "price": "Free",
            "speakers": [{"name": "Kavita Rao", "role": "Lead Data Scientist, Insightful"}],
        },
    ]


SAMPLE_MENTORSHIPS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Leadership Accelerator Program",
        "mentor": "Dr. Nandita Sharma",
        "mentor_title": "CEO, TechInnovations India",
        "focus": "Executive Leadership Development",
        "duration": "6 months",
        "format": "One-on-one sessions + Group workshops",
        "description": (
            "This program is designed for mid-career women looking to advance into senior "
            "leadership positions. It combines personalized coaching with group learning to "
            "develop strategic leadership skills, executive presence, and organizational "
            "influence."
        ),
        "industry": "Technology",
        "start_date": "2024-05-15",
        "commitment_hours": "4-6 hours per month",
    },
    {
        "id": 2,
        "title": "Tech Career Relaunch",
        "mentor": "Rashmi Iyer",
        "mentor_title": "Engineering Director, CloudScale",
        "focus": "Returning to Software Engineering",
        "duration": "3 months",
        "format": "Weekly one-on-one sessions",
        "description": (
            "Structured guidance for women returning to software roles after a career break, "
            "covering skill refreshers, interview preparation, and confidence building."
        ),
        "industry": "Software",
        "start_date": "2024-06-01",
        "commitment_hours": "2 hours per week",
    },
    {
        "id": 3,
        "title": "Finance Futures Circle",
        "mentor": "Lakshmi Menon",
        "mentor_title": "CFO, Horizon Capital",
        "focus": "Finance and Investment Careers",
        "duration": "4 months",
        "format": "Group circles + quarterly one-on-one",
        "description": (
            "A peer circle for early-career women in finance, led by senior practitioners, "
            "focused on career planning and technical finance skills."
        ),
        "industry": "Finance",
        "start_date": "2024-07-10",
        "commitment_hours": "3 hours per month",
    },
]


class StaticCatalog:
    """In-memory provider. Collections are copied on every fetch."""

    def __init__(
        self,
        jobs: list[Any] | None = None,
        events: list[Any] | None = None,
        mentorships: list[Any] | None = None,
    ):
        self._collections: dict[CandidateVariant, list[Any]] = {
            CandidateVariant.JOB: list(SAMPLE_JOBS if jobs is None else jobs),
            CandidateVariant.EVENT: list(
                _sample_events(datetime.now(timezone.utc)) if events is None else events
            ),
            CandidateVariant.MENTORSHIP: list(
                SAMPLE_MENTORSHIPS if mentorships is None else mentorships
            ),
        }

    async def fetch(self, variant: CandidateVariant) -> list[Any]:
        items = list(self._collections.get(CandidateVariant(variant), []))
        logger.debug("Fetched %d %s candidates", len(items), CandidateVariant(variant).value)
        return items


_default_catalog: StaticCatalog | None = None


def get_catalog() -> StaticCatalog:
    """Shared sample catalog, created on first use."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = StaticCatalog()
    return _default_catalog
