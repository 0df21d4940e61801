"""Intent categories a user message can be routed to."""

from enum import Enum


class IntentCategory(str, Enum):
    """Coarse category of what the user is asking about.

    Member order is significant: the classifier breaks score ties in favour
    of the category declared first.
    """
    JOB_SEARCH = "job_search"
    EVENT_INFO = "event_info"
    MENTORSHIP = "mentorship"
    SKILL_DEVELOPMENT = "skill_development"
    CAREER_ADVICE = "career_advice"
    COMPANY_INFO = "company_info"
    HELP = "help"
