from __future__ import annotations

from enum import StrEnum

from .base import GitHubResponse


class InteractionLimit(StrEnum):
    """Group of users allowed to interact"""

    EXISTING_USERS = "existing_users"
    CONTRIBUTORS_ONLY = "contributors_only"
    COLLABORATORS_ONLY = "collaborators_only"


class InteractionExpiry(StrEnum):
    ONE_DAY = "one_day"
    THREE_DAYS = "three_days"
    ONE_WEEK = "one_week"
    ONE_MONTH = "one_month"
    SIX_MONTHS = "six_months"


class Interaction(GitHubResponse):
    """Interaction restriction in place, all fields absent when there is none"""

    limit: InteractionLimit | None = None
    origin: str | None = None
    expires_at: str | None = None
