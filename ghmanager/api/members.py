#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11

"""
Members, invitations and memberships of organizations
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.members import (
    InvitationRole,
    InvitationSource,
    MemberFilter,
    MemberRole,
    MembershipRole,
    MembershipState,
    OrganizationInvitation,
    OrganizationMembership,
)
from ..records.organizations import Team
from ..records.users import User

logger = logging.getLogger(__name__)


class GitHubMembersManager(GitHubCore):
    """Manage who belongs to an organization"""

    # Invitations
    def get_failed_invitations(
        self,
        org,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the failed invitations of an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#list-failed-organization-invitations
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/failed_invitations"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, OrganizationInvitation.from_json_list)

    def get_pending_invitations(
        self,
        org,
        per_page: int | None = None,
        page: int | None = None,
        *,
        role: InvitationRole | None = None,
        invitation_source: InvitationSource | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the pending invitations of an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#list-pending-organization-invitations
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/invitations"
        params = self._params(
            per_page=per_page,
            page=page,
            role=role,
            invitation_source=invitation_source,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, OrganizationInvitation.from_json_list)

    def create_invitation(
        self,
        org,
        *,
        invitee=None,
        email: str | None = None,
        role: InvitationRole | None = None,
        team_ids: list[int] | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Invite a user to an organization, either by user id (or User) or by email.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#create-an-organization-invitation
        """
        return_format = self._return_format(return_format)
        if (invitee is None) == (email is None):
            raise ValueError("You must provide either invitee or email.")
        url = f"/orgs/{self._login(org)}/invitations"
        payload = self._payload(
            invitee_id=self._identifier(invitee) if invitee is not None else None,
            email=email,
            role=role,
            team_ids=[self._identifier(team) for team in team_ids or []] or None,
        )
        resp = self._post(url, json=payload)
        return self._returner(resp, return_format, OrganizationInvitation.from_json)

    def cancel_invitation(self, org, invitation) -> bool:
        """
        Cancel an organization invitation.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#cancel-an-organization-invitation
        """
        url = f"/orgs/{self._login(org)}/invitations/{self._identifier(invitation)}"
        return self._boolean("DELETE", url)

    def get_invitation_teams(
        self,
        org,
        invitation,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the teams a pending invitation grants access to.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#list-organization-invitation-teams
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/invitations/{self._identifier(invitation)}/teams"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, Team.from_json_list)

    # Members
    def get_organization_members(
        self,
        org,
        per_page: int | None = None,
        page: int | None = None,
        *,
        filter: MemberFilter | None = None,
        role: MemberRole | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the members of an organization, the concealed ones too when authenticated as a member.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#list-organization-members
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/members"
        params = self._params(filter=filter, role=role, per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, User.from_json_list)

    def check_organization_membership(self, org, username) -> bool:
        """
        Check whether a user is a member of an organization (204 => member).
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#check-organization-membership-for-a-user
        """
        url = f"/orgs/{self._login(org)}/members/{self._login(username)}"
        return self._boolean("GET", url, false_code=404)

    def remove_organization_member(self, org, username) -> bool:
        """
        Remove a user from an organization, including all of its teams.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#remove-an-organization-member
        """
        url = f"/orgs/{self._login(org)}/members/{self._login(username)}"
        return self._boolean("DELETE", url)

    # Memberships
    def get_organization_membership(
        self,
        org,
        username,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the membership (active or pending) of a user in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#get-organization-membership-for-a-user
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/memberships/{self._login(username)}"
        resp = self._get(url)
        return self._returner(resp, return_format, OrganizationMembership.from_json)

    def set_organization_membership(
        self,
        org,
        username,
        role: MembershipRole | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Invite a user to an organization, or update the role of a member.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#set-organization-membership-for-a-user
        """
        return_format = self._return_format(return_format)
        if role is not None and MembershipRole(role) == MembershipRole.BILLING_MANAGER:
            raise ValueError("The role should be one of these: 'admin', 'member'")
        url = f"/orgs/{self._login(org)}/memberships/{self._login(username)}"
        resp = self._put(url, json=self._payload(role=role))
        return self._returner(resp, return_format, OrganizationMembership.from_json)

    def remove_organization_membership(self, org, username) -> bool:
        """
        Remove a user from an organization, or cancel its pending invitation.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#remove-organization-membership-for-a-user
        """
        url = f"/orgs/{self._login(org)}/memberships/{self._login(username)}"
        return self._boolean("DELETE", url)

    # Public members
    def get_public_organization_members(
        self,
        org,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the members of an organization who made their membership public.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#list-public-organization-members
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/public_members"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, User.from_json_list)

    def check_public_organization_membership(self, org, username) -> bool:
        """
        Check whether a user is a public member of an organization (204 => public).
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#check-public-organization-membership-for-a-user
        """
        url = f"/orgs/{self._login(org)}/public_members/{self._login(username)}"
        return self._boolean("GET", url, false_code=404)

    def set_public_organization_membership(self, org, username) -> bool:
        """
        Publicize the membership of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#set-public-organization-membership-for-the-authenticated-user
        """
        url = f"/orgs/{self._login(org)}/public_members/{self._login(username)}"
        return self._boolean("PUT", url)

    def remove_public_organization_membership(self, org, username) -> bool:
        """
        Conceal the membership of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#remove-public-organization-membership-for-the-authenticated-user
        """
        url = f"/orgs/{self._login(org)}/public_members/{self._login(username)}"
        return self._boolean("DELETE", url)

    # Authenticated user memberships
    def get_authenticated_user_memberships(
        self,
        state: MembershipState | None = None,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the organization memberships of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#list-organization-memberships-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        url = "/user/memberships/orgs"
        params = self._params(state=state, per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, OrganizationMembership.from_json_list)

    def get_authenticated_user_membership(
        self, org, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the membership of the authenticated user in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#get-an-organization-membership-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        url = f"/user/memberships/orgs/{self._login(org)}"
        resp = self._get(url)
        return self._returner(resp, return_format, OrganizationMembership.from_json)

    def update_authenticated_user_membership(
        self, org, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Accept a pending invitation, the only supported state change is to `active`.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members?apiVersion=2022-11-28#update-an-organization-membership-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        url = f"/user/memberships/orgs/{self._login(org)}"
        payload = {"state": MembershipState.ACTIVE.value}
        resp = self._patch(url, json=payload)
        return self._returner(resp, return_format, OrganizationMembership.from_json)
