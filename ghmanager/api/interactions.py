"""
Interaction restrictions for organizations, repositories and the authenticated user
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.interactions import Interaction, InteractionExpiry, InteractionLimit

logger = logging.getLogger(__name__)


class _InteractionsManager(GitHubCore):
    """Shared requests, the subclasses only know where the restrictions live"""

    def _get_restrictions(self, url: str, return_format: ReturnFormat):
        resp = self._get(url)
        return self._returner(resp, return_format, Interaction.from_json)

    def _set_restrictions(
        self,
        url: str,
        limit: InteractionLimit,
        expiry: InteractionExpiry | None,
        return_format: ReturnFormat,
    ):
        payload = self._payload(limit=limit, expiry=expiry)
        resp = self._put(url, json=payload)
        return self._returner(resp, return_format, Interaction.from_json)


class GitHubOrganizationInteractionsManager(_InteractionsManager):
    def get_interaction_restrictions(
        self, org, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the interaction restrictions in place for the public repositories of an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/orgs?apiVersion=2022-11-28#get-interaction-restrictions-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/interaction-limits"
        return self._get_restrictions(url, return_format)

    def set_interaction_restrictions(
        self,
        org,
        limit: InteractionLimit,
        expiry: InteractionExpiry | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Limit who may interact with the public repositories of an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/orgs?apiVersion=2022-11-28#set-interaction-restrictions-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/interaction-limits"
        return self._set_restrictions(url, limit, expiry, return_format)

    def remove_interaction_restrictions(self, org) -> bool:
        """
        Remove the interaction restrictions of an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/orgs?apiVersion=2022-11-28#remove-interaction-restrictions-for-an-organization
        """
        url = f"/orgs/{self._login(org)}/interaction-limits"
        return self._boolean("DELETE", url)


class GitHubRepositoryInteractionsManager(_InteractionsManager):
    def get_interaction_restrictions(
        self,
        owner,
        repo: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the interaction restrictions in place for a public repository.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/repos?apiVersion=2022-11-28#get-interaction-restrictions-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/interaction-limits"
        return self._get_restrictions(url, return_format)

    def set_interaction_restrictions(
        self,
        owner,
        repo: str | None = None,
        *,
        limit: InteractionLimit,
        expiry: InteractionExpiry | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Limit who may interact with a public repository.
        Fails with 409 when the owner already has restrictions in place.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/repos?apiVersion=2022-11-28#set-interaction-restrictions-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/interaction-limits"
        return self._set_restrictions(url, limit, expiry, return_format)

    def remove_interaction_restrictions(self, owner, repo: str | None = None) -> bool:
        """
        Remove the interaction restrictions of a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/repos?apiVersion=2022-11-28#remove-interaction-restrictions-for-a-repository
        """
        url = f"{self._repo_path(owner, repo)}/interaction-limits"
        return self._boolean("DELETE", url)


class GitHubUserInteractionsManager(_InteractionsManager):
    endpoint = "/user/interaction-limits"

    def get_interaction_restrictions(
        self, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the interaction restrictions in place for the public repositories of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/user?apiVersion=2022-11-28#get-interaction-restrictions-for-your-public-repositories
        """
        return_format = self._return_format(return_format)
        return self._get_restrictions(self.endpoint, return_format)

    def set_interaction_restrictions(
        self,
        limit: InteractionLimit,
        expiry: InteractionExpiry | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Limit who may interact with the public repositories of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/user?apiVersion=2022-11-28#set-interaction-restrictions-for-your-public-repositories
        """
        return_format = self._return_format(return_format)
        return self._set_restrictions(self.endpoint, limit, expiry, return_format)

    def remove_interaction_restrictions(self) -> bool:
        """
        Remove the interaction restrictions of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/interactions/user?apiVersion=2022-11-28#remove-interaction-restrictions-from-your-public-repositories
        """
        return self._boolean("DELETE", self.endpoint)
