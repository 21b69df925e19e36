"""
Social accounts linked to user profiles
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.socialaccounts import SocialAccount

logger = logging.getLogger(__name__)


class GitHubSocialAccountsManager(GitHubCore):
    def get_social_accounts(
        self,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the social accounts of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/users/social-accounts?apiVersion=2022-11-28#list-social-accounts-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        params = self._params(per_page=per_page, page=page)
        resp = self._get("/user/social_accounts", params=params)
        return self._returner(resp, return_format, SocialAccount.from_json_list)

    def add_social_accounts(
        self,
        account_urls: list[str],
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Add social accounts to the authenticated user's profile.
        GitHub Docs:
        https://docs.github.com/en/rest/users/social-accounts?apiVersion=2022-11-28#add-social-accounts-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        payload = {"account_urls": [getattr(u, "url", u) for u in account_urls]}
        resp = self._post("/user/social_accounts", json=payload)
        return self._returner(resp, return_format, SocialAccount.from_json_list)

    def delete_social_accounts(self, account_urls: list[str]) -> bool:
        """
        Remove social accounts from the authenticated user's profile.
        `account_urls` holds urls or SocialAccount records.
        GitHub Docs:
        https://docs.github.com/en/rest/users/social-accounts?apiVersion=2022-11-28#delete-social-accounts-for-the-authenticated-user
        """
        payload = {"account_urls": [getattr(u, "url", u) for u in account_urls]}
        return self._boolean("DELETE", "/user/social_accounts", json=payload)

    def get_user_social_accounts(
        self,
        username,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the social accounts of a user.
        GitHub Docs:
        https://docs.github.com/en/rest/users/social-accounts?apiVersion=2022-11-28#list-social-accounts-for-a-user
        """
        return_format = self._return_format(return_format)
        params = self._params(per_page=per_page, page=page)
        resp = self._get(f"/users/{self._login(username)}/social_accounts", params=params)
        return self._returner(resp, return_format, SocialAccount.from_json_list)
