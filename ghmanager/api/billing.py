"""
Billing usage of organizations and users
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.billing import (
    ActionsBilling,
    AdvancedSecurityCommitters,
    PackagesBilling,
    SharedStorageBilling,
)

logger = logging.getLogger(__name__)


class GitHubBillingManager(GitHubCore):
    """Read the billing usage, needs `admin:org` or `user` scope"""

    # Organization
    def get_organization_actions_billing(
        self, org, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the GitHub Actions minutes used by an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/billing/billing?apiVersion=2022-11-28#get-github-actions-billing-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/settings/billing/actions"
        resp = self._get(url)
        return self._returner(resp, return_format, ActionsBilling.from_json)

    def get_advanced_security_active_committers(
        self,
        org,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the GitHub Advanced Security active committers of an organization per repository.
        GitHub Docs:
        https://docs.github.com/en/rest/billing/billing?apiVersion=2022-11-28#get-github-advanced-security-active-committers-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/settings/billing/advanced-security"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, AdvancedSecurityCommitters.from_json)

    def get_organization_packages_billing(
        self, org, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the GitHub Packages bandwidth used by an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/billing/billing?apiVersion=2022-11-28#get-github-packages-billing-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/settings/billing/packages"
        resp = self._get(url)
        return self._returner(resp, return_format, PackagesBilling.from_json)

    def get_organization_shared_storage_billing(
        self, org, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the estimated shared storage paid by an organization for Actions and Packages.
        GitHub Docs:
        https://docs.github.com/en/rest/billing/billing?apiVersion=2022-11-28#get-shared-storage-billing-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/settings/billing/shared-storage"
        resp = self._get(url)
        return self._returner(resp, return_format, SharedStorageBilling.from_json)

    # User
    def get_user_actions_billing(
        self, username, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the GitHub Actions minutes used by a user.
        GitHub Docs:
        https://docs.github.com/en/rest/billing/billing?apiVersion=2022-11-28#get-github-actions-billing-for-a-user
        """
        return_format = self._return_format(return_format)
        url = f"/users/{self._login(username)}/settings/billing/actions"
        resp = self._get(url)
        return self._returner(resp, return_format, ActionsBilling.from_json)

    def get_user_packages_billing(
        self, username, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the GitHub Packages bandwidth used by a user.
        GitHub Docs:
        https://docs.github.com/en/rest/billing/billing?apiVersion=2022-11-28#get-github-packages-billing-for-a-user
        """
        return_format = self._return_format(return_format)
        url = f"/users/{self._login(username)}/settings/billing/packages"
        resp = self._get(url)
        return self._returner(resp, return_format, PackagesBilling.from_json)

    def get_user_shared_storage_billing(
        self, username, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the estimated shared storage paid by a user for Actions and Packages.
        GitHub Docs:
        https://docs.github.com/en/rest/billing/billing?apiVersion=2022-11-28#get-shared-storage-billing-for-a-user
        """
        return_format = self._return_format(return_format)
        url = f"/users/{self._login(username)}/settings/billing/shared-storage"
        resp = self._get(url)
        return self._returner(resp, return_format, SharedStorageBilling.from_json)
