"""Organization members records"""

from __future__ import annotations

from enum import StrEnum

from .base import GitHubResponse, Record
from .organizations import Organization
from .users import User


class InvitationRole(StrEnum):
    ADMIN = "admin"
    DIRECT_MEMBER = "direct_member"
    BILLING_MANAGER = "billing_manager"
    HIRING_MANAGER = "hiring_manager"
    REINSTATE = "reinstate"


class InvitationSource(StrEnum):
    ALL = "all"
    MEMBER = "member"
    SCIM = "scim"


class MemberFilter(StrEnum):
    TWO_FA_DISABLED = "2fa_disabled"
    ALL = "all"


class MemberRole(StrEnum):
    ALL = "all"
    ADMIN = "admin"
    MEMBER = "member"


class MembershipState(StrEnum):
    ACTIVE = "active"
    PENDING = "pending"


class MembershipRole(StrEnum):
    ADMIN = "admin"
    MEMBER = "member"
    BILLING_MANAGER = "billing_manager"


class OrganizationInvitation(GitHubResponse):
    id: int | None = None
    login: str | None = None
    email: str | None = None
    role: InvitationRole | None = None
    created_at: str | None = None
    failed_at: str | None = None
    failed_reason: str | None = None
    inviter: User | None = None
    team_count: int | None = None
    node_id: str | None = None
    invitation_teams_url: str | None = None
    invitation_source: str | None = None


class MembershipPermissions(Record):
    can_create_repository: bool | None = None


class OrganizationMembership(GitHubResponse):
    url: str | None = None
    state: MembershipState | None = None
    role: MembershipRole | None = None
    organization_url: str | None = None
    organization: Organization | None = None
    user: User | None = None
    permissions: MembershipPermissions | None = None
