"""GitHub Actions permissions records"""

from __future__ import annotations

from enum import StrEnum

import msgspec

from .base import GitHubResponse


class EnabledItems(StrEnum):
    """Which organizations (or repositories) may run GitHub Actions"""

    ALL = "all"
    NONE = "none"
    SELECTED = "selected"


class AllowedActions(StrEnum):
    ALL = "all"
    LOCAL_ONLY = "local_only"
    SELECTED = "selected"


class WorkflowPermissions(StrEnum):
    """Default permissions granted to the GITHUB_TOKEN"""

    READ = "read"
    WRITE = "write"


class AccessLevel(StrEnum):
    """Who may reach the actions and workflows of a private repository"""

    NONE = "none"
    ORGANIZATION = "organization"
    ENTERPRISE = "enterprise"


class ActionsPermissions(GitHubResponse):
    allowed_actions: AllowedActions | None = AllowedActions.ALL
    selected_actions_url: str | None = None


class EnterpriseActionsPermissions(ActionsPermissions):
    enabled_organizations: EnabledItems | None = EnabledItems.NONE
    selected_organizations_url: str | None = None


class OrganizationActionsPermissions(ActionsPermissions):
    enabled_repositories: EnabledItems | None = EnabledItems.NONE
    selected_repositories_url: str | None = None


class RepositoryActionsPermissions(ActionsPermissions):
    enabled: bool | None = None


class AARW(GitHubResponse):
    """Allowed actions and reusable workflows"""

    github_owned_allowed: bool | None = None
    verified_allowed: bool | None = None
    patterns_allowed: list[str] = msgspec.field(default_factory=list)


class DefaultWorkflowPermissions(GitHubResponse):
    default_workflow_permissions: WorkflowPermissions | None = None
    can_approve_pull_request_reviews: bool | None = None
