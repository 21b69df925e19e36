"""User records"""

from __future__ import annotations

from enum import StrEnum

import msgspec

from .base import GitHubResponse, Record


class SubjectType(StrEnum):
    """Subject of a hovercard request"""

    ORGANIZATION = "organization"
    REPOSITORY = "repository"
    ISSUE = "issue"
    PULL_REQUEST = "pull_request"


class UserPlan(Record):
    collaborators: int | None = None
    name: str | None = None
    space: int | None = None
    private_repos: int | None = None


class User(GitHubResponse):
    """A GitHub account, public fields plus the private ones of the authenticated user"""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    received_events_url: str | None = None
    type: str | None = None
    site_admin: bool | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    twitter_username: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    private_gists: int | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    two_factor_authentication: bool | None = None
    plan: UserPlan | None = None
    suspended_at: str | None = None
    business_plus: bool | None = None
    ldap_dn: str | None = None


class Context(Record):
    message: str | None = None
    octicon: str | None = None


class ContextualInformation(GitHubResponse):
    """Hovercard of a user"""

    contexts: list[Context] = msgspec.field(default_factory=list)
