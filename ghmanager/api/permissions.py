#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11

"""
GitHub Actions permissions for enterprises, organizations and repositories
"""

import logging
from typing import Any

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.base import convert_json
from ..records.organizations import OrganizationsList
from ..records.permissions import (
    AARW,
    AccessLevel,
    AllowedActions,
    DefaultWorkflowPermissions,
    EnabledItems,
    EnterpriseActionsPermissions,
    OrganizationActionsPermissions,
    RepositoryActionsPermissions,
    WorkflowPermissions,
)
from ..records.repositories import RepositoriesList

logger = logging.getLogger(__name__)


def _access_level(data: dict[str, Any] | None) -> AccessLevel | None:
    return convert_json((data or {}).get("access_level"), AccessLevel | None)


class GitHubPermissionsManager(GitHubCore):
    """Manage the GitHub Actions permissions"""

    def _aarw_payload(
        self,
        github_owned_allowed: bool | None,
        verified_allowed: bool | None,
        patterns_allowed: list[str] | None,
    ) -> dict[str, Any]:
        return self._payload(
            github_owned_allowed=github_owned_allowed,
            verified_allowed=verified_allowed,
            patterns_allowed=patterns_allowed,
        )

    # --------------------------------------------------------
    # Enterprise
    # --------------------------------------------------------
    def get_enterprise_actions_permissions(
        self,
        enterprise: str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the GitHub Actions permissions policy for organizations and allowed actions in an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-github-actions-permissions-for-an-enterprise
        """
        return_format = self._return_format(return_format)
        url = f"/enterprises/{enterprise}/actions/permissions"
        resp = self._get(url)
        return self._returner(
            resp, return_format, EnterpriseActionsPermissions.from_json
        )

    def set_enterprise_actions_permissions(
        self,
        enterprise: str,
        enabled_organizations: EnabledItems,
        allowed_actions: AllowedActions | None = None,
    ) -> bool:
        """
        Set the GitHub Actions permissions policy for organizations and allowed actions in an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-github-actions-permissions-for-an-enterprise
        """
        url = f"/enterprises/{enterprise}/actions/permissions"
        payload = self._payload(
            enabled_organizations=enabled_organizations,
            allowed_actions=allowed_actions,
        )
        return self._boolean("PUT", url, json=payload)

    def get_enabled_enterprise_organizations(
        self,
        enterprise: str,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the organizations selected to run GitHub Actions in an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#list-selected-organizations-enabled-for-github-actions-in-an-enterprise
        """
        return_format = self._return_format(return_format)
        url = f"/enterprises/{enterprise}/actions/permissions/organizations"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, OrganizationsList.from_json)

    def enable_selected_enterprise_organizations(
        self, enterprise: str, organizations: list
    ) -> bool:
        """
        Replace the list of organizations selected to run GitHub Actions in an enterprise.
        `organizations` holds organization ids or Organization records.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-selected-organizations-enabled-for-github-actions-in-an-enterprise
        """
        url = f"/enterprises/{enterprise}/actions/permissions/organizations"
        ids = [self._identifier(org) for org in organizations]
        return self._boolean("PUT", url, json={"selected_organization_ids": ids})

    def enable_selected_enterprise_organization(
        self, enterprise: str, organization
    ) -> bool:
        """
        Add an organization to the list selected to run GitHub Actions in an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#enable-a-selected-organization-for-github-actions-in-an-enterprise
        """
        org_id = self._identifier(organization)
        url = f"/enterprises/{enterprise}/actions/permissions/organizations/{org_id}"
        return self._boolean("PUT", url)

    def disable_selected_enterprise_organization(
        self, enterprise: str, organization
    ) -> bool:
        """
        Remove an organization from the list selected to run GitHub Actions in an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#disable-a-selected-organization-for-github-actions-in-an-enterprise
        """
        org_id = self._identifier(organization)
        url = f"/enterprises/{enterprise}/actions/permissions/organizations/{org_id}"
        return self._boolean("DELETE", url)

    def get_enterprise_aarw(
        self,
        enterprise: str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the actions and reusable workflows allowed to run in an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-allowed-actions-and-reusable-workflows-for-an-enterprise
        """
        return_format = self._return_format(return_format)
        url = f"/enterprises/{enterprise}/actions/permissions/selected-actions"
        resp = self._get(url)
        return self._returner(resp, return_format, AARW.from_json)

    def set_enterprise_aarw(
        self,
        enterprise: str,
        github_owned_allowed: bool | None = None,
        verified_allowed: bool | None = None,
        patterns_allowed: list[str] | None = None,
    ) -> bool:
        """
        Set the actions and reusable workflows allowed to run in an enterprise.
        `allowed_actions` must be `selected` for this to apply.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-allowed-actions-and-reusable-workflows-for-an-enterprise
        """
        url = f"/enterprises/{enterprise}/actions/permissions/selected-actions"
        payload = self._aarw_payload(
            github_owned_allowed, verified_allowed, patterns_allowed
        )
        return self._boolean("PUT", url, json=payload)

    def get_default_enterprise_workflow_permissions(
        self,
        enterprise: str,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the default GITHUB_TOKEN workflow permissions of an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-default-workflow-permissions-for-an-enterprise
        """
        return_format = self._return_format(return_format)
        url = f"/enterprises/{enterprise}/actions/permissions/workflow"
        resp = self._get(url)
        return self._returner(resp, return_format, DefaultWorkflowPermissions.from_json)

    def set_default_enterprise_workflow_permissions(
        self,
        enterprise: str,
        default_workflow_permissions: WorkflowPermissions | None = None,
        can_approve_pull_request_reviews: bool | None = None,
    ) -> bool:
        """
        Set the default GITHUB_TOKEN workflow permissions of an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-default-workflow-permissions-for-an-enterprise
        """
        url = f"/enterprises/{enterprise}/actions/permissions/workflow"
        payload = self._payload(
            default_workflow_permissions=default_workflow_permissions,
            can_approve_pull_request_reviews=can_approve_pull_request_reviews,
        )
        return self._boolean("PUT", url, json=payload)

    # --------------------------------------------------------
    # Organization
    # --------------------------------------------------------
    def get_organization_actions_permissions(
        self,
        org,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the GitHub Actions permissions policy for repositories and allowed actions in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-github-actions-permissions-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/actions/permissions"
        resp = self._get(url)
        return self._returner(
            resp, return_format, OrganizationActionsPermissions.from_json
        )

    def set_organization_actions_permissions(
        self,
        org,
        enabled_repositories: EnabledItems,
        allowed_actions: AllowedActions | None = None,
    ) -> bool:
        """
        Set the GitHub Actions permissions policy for repositories and allowed actions in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-github-actions-permissions-for-an-organization
        """
        url = f"/orgs/{self._login(org)}/actions/permissions"
        payload = self._payload(
            enabled_repositories=enabled_repositories,
            allowed_actions=allowed_actions,
        )
        return self._boolean("PUT", url, json=payload)

    def get_enabled_organization_repositories(
        self,
        org,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the repositories selected to run GitHub Actions in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#list-selected-repositories-enabled-for-github-actions-in-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/actions/permissions/repositories"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, RepositoriesList.from_json)

    def enable_selected_organization_repositories(self, org, repositories: list) -> bool:
        """
        Replace the list of repositories selected to run GitHub Actions in an organization.
        `repositories` holds repository ids or Repository records.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-selected-repositories-enabled-for-github-actions-in-an-organization
        """
        url = f"/orgs/{self._login(org)}/actions/permissions/repositories"
        ids = [self._identifier(repository) for repository in repositories]
        return self._boolean("PUT", url, json={"selected_repository_ids": ids})

    def enable_selected_organization_repository(self, org, repository) -> bool:
        """
        Add a repository to the list selected to run GitHub Actions in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#enable-a-selected-repository-for-github-actions-in-an-organization
        """
        repository_id = self._identifier(repository)
        url = f"/orgs/{self._login(org)}/actions/permissions/repositories/{repository_id}"
        return self._boolean("PUT", url)

    def disable_selected_organization_repository(self, org, repository) -> bool:
        """
        Remove a repository from the list selected to run GitHub Actions in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#disable-a-selected-repository-for-github-actions-in-an-organization
        """
        repository_id = self._identifier(repository)
        url = f"/orgs/{self._login(org)}/actions/permissions/repositories/{repository_id}"
        return self._boolean("DELETE", url)

    def get_organization_aarw(
        self,
        org,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the actions and reusable workflows allowed to run in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-allowed-actions-and-reusable-workflows-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/actions/permissions/selected-actions"
        resp = self._get(url)
        return self._returner(resp, return_format, AARW.from_json)

    def set_organization_aarw(
        self,
        org,
        github_owned_allowed: bool | None = None,
        verified_allowed: bool | None = None,
        patterns_allowed: list[str] | None = None,
    ) -> bool:
        """
        Set the actions and reusable workflows allowed to run in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-allowed-actions-and-reusable-workflows-for-an-organization
        """
        url = f"/orgs/{self._login(org)}/actions/permissions/selected-actions"
        payload = self._aarw_payload(
            github_owned_allowed, verified_allowed, patterns_allowed
        )
        return self._boolean("PUT", url, json=payload)

    def get_default_organization_workflow_permissions(
        self,
        org,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the default GITHUB_TOKEN workflow permissions of an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-default-workflow-permissions-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/actions/permissions/workflow"
        resp = self._get(url)
        return self._returner(resp, return_format, DefaultWorkflowPermissions.from_json)

    def set_default_organization_workflow_permissions(
        self,
        org,
        default_workflow_permissions: WorkflowPermissions | None = None,
        can_approve_pull_request_reviews: bool | None = None,
    ) -> bool:
        """
        Set the default GITHUB_TOKEN workflow permissions of an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-default-workflow-permissions-for-an-organization
        """
        url = f"/orgs/{self._login(org)}/actions/permissions/workflow"
        payload = self._payload(
            default_workflow_permissions=default_workflow_permissions,
            can_approve_pull_request_reviews=can_approve_pull_request_reviews,
        )
        return self._boolean("PUT", url, json=payload)

    # --------------------------------------------------------
    # Repository
    # --------------------------------------------------------
    def get_repository_actions_permissions(
        self,
        owner,
        repo: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get whether GitHub Actions is enabled and which actions may run in a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-github-actions-permissions-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/actions/permissions"
        resp = self._get(url)
        return self._returner(
            resp, return_format, RepositoryActionsPermissions.from_json
        )

    def set_repository_actions_permissions(
        self,
        owner,
        repo: str | None = None,
        *,
        enabled: bool,
        allowed_actions: AllowedActions | None = None,
    ) -> bool:
        """
        Set whether GitHub Actions is enabled and which actions may run in a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-github-actions-permissions-for-a-repository
        """
        url = f"{self._repo_path(owner, repo)}/actions/permissions"
        payload = self._payload(enabled=enabled, allowed_actions=allowed_actions)
        return self._boolean("PUT", url, json=payload)

    def get_access_level_outside_repository(
        self,
        owner,
        repo: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the level of access workflows outside of a private repository have to its actions and workflows.
        The parsed value is an `AccessLevel`.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-the-level-of-access-for-workflows-outside-of-the-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/actions/permissions/access"
        resp = self._get(url)
        return self._returner(resp, return_format, _access_level)

    def set_access_level_outside_repository(
        self,
        owner,
        repo: str | None = None,
        *,
        access_level: AccessLevel,
    ) -> bool:
        """
        Set the level of access workflows outside of a private repository have to its actions and workflows.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-the-level-of-access-for-workflows-outside-of-the-repository
        """
        url = f"{self._repo_path(owner, repo)}/actions/permissions/access"
        return self._boolean("PUT", url, json=self._payload(access_level=access_level))

    def get_repository_aarw(
        self,
        owner,
        repo: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the actions and reusable workflows allowed to run in a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-allowed-actions-and-reusable-workflows-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/actions/permissions/selected-actions"
        resp = self._get(url)
        return self._returner(resp, return_format, AARW.from_json)

    def set_repository_aarw(
        self,
        owner,
        repo: str | None = None,
        *,
        github_owned_allowed: bool | None = None,
        verified_allowed: bool | None = None,
        patterns_allowed: list[str] | None = None,
    ) -> bool:
        """
        Set the actions and reusable workflows allowed to run in a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-allowed-actions-and-reusable-workflows-for-a-repository
        """
        url = f"{self._repo_path(owner, repo)}/actions/permissions/selected-actions"
        payload = self._aarw_payload(
            github_owned_allowed, verified_allowed, patterns_allowed
        )
        return self._boolean("PUT", url, json=payload)

    def get_default_repository_workflow_permissions(
        self,
        owner,
        repo: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the default GITHUB_TOKEN workflow permissions of a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#get-default-workflow-permissions-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/actions/permissions/workflow"
        resp = self._get(url)
        return self._returner(resp, return_format, DefaultWorkflowPermissions.from_json)

    def set_default_repository_workflow_permissions(
        self,
        owner,
        repo: str | None = None,
        *,
        default_workflow_permissions: WorkflowPermissions | None = None,
        can_approve_pull_request_reviews: bool | None = None,
    ) -> bool:
        """
        Set the default GITHUB_TOKEN workflow permissions of a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/actions/permissions?apiVersion=2022-11-28#set-default-workflow-permissions-for-a-repository
        """
        url = f"{self._repo_path(owner, repo)}/actions/permissions/workflow"
        payload = self._payload(
            default_workflow_permissions=default_workflow_permissions,
            can_approve_pull_request_reviews=can_approve_pull_request_reviews,
        )
        return self._boolean("PUT", url, json=payload)
