"""
GPG keys of users
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.gpgkeys import GPGKey

logger = logging.getLogger(__name__)


class GitHubGPGKeysManager(GitHubCore):
    def get_gpg_keys(
        self,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the GPG keys of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/users/gpg-keys?apiVersion=2022-11-28#list-gpg-keys-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        params = self._params(per_page=per_page, page=page)
        resp = self._get("/user/gpg_keys", params=params)
        return self._returner(resp, return_format, GPGKey.from_json_list)

    def create_gpg_key(
        self,
        armored_public_key: str,
        name: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Add a GPG key to the authenticated user's account.
        GitHub Docs:
        https://docs.github.com/en/rest/users/gpg-keys?apiVersion=2022-11-28#create-a-gpg-key-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        payload = self._payload(name=name, armored_public_key=armored_public_key)
        resp = self._post("/user/gpg_keys", json=payload)
        return self._returner(resp, return_format, GPGKey.from_json)

    def get_gpg_key(
        self, gpg_key, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get a GPG key of the authenticated user.
        GitHub Docs:
        https://docs.github.com/en/rest/users/gpg-keys?apiVersion=2022-11-28#get-a-gpg-key-for-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        resp = self._get(f"/user/gpg_keys/{self._identifier(gpg_key)}")
        return self._returner(resp, return_format, GPGKey.from_json)

    def delete_gpg_key(self, gpg_key) -> bool:
        """
        Remove a GPG key from the authenticated user's account.
        GitHub Docs:
        https://docs.github.com/en/rest/users/gpg-keys?apiVersion=2022-11-28#delete-a-gpg-key-for-the-authenticated-user
        """
        return self._boolean("DELETE", f"/user/gpg_keys/{self._identifier(gpg_key)}")

    def get_user_gpg_keys(
        self,
        username,
        per_page: int | None = None,
        page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the verified public GPG keys of a user.
        GitHub Docs:
        https://docs.github.com/en/rest/users/gpg-keys?apiVersion=2022-11-28#list-gpg-keys-for-a-user
        """
        return_format = self._return_format(return_format)
        params = self._params(per_page=per_page, page=page)
        resp = self._get(f"/users/{self._login(username)}/gpg_keys", params=params)
        return self._returner(resp, return_format, GPGKey.from_json_list)
