"""Organization records"""

from __future__ import annotations

import msgspec

from .base import GitHubResponse, Record


class Organization(GitHubResponse):
    """The simple organization shape embedded in most payloads"""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    hooks_url: str | None = None
    issues_url: str | None = None
    members_url: str | None = None
    public_members_url: str | None = None
    avatar_url: str | None = None
    description: str | None = None


class OrganizationsList(GitHubResponse):
    total_count: int | None = None
    organizations: list[Organization] = msgspec.field(default_factory=list)


class ParentTeam(Record):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    slug: str | None = None
    url: str | None = None
    html_url: str | None = None


class Team(GitHubResponse):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    privacy: str | None = None
    permission: str | None = None
    url: str | None = None
    html_url: str | None = None
    members_url: str | None = None
    repositories_url: str | None = None
    parent: ParentTeam | None = None
