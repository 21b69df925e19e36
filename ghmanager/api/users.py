#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11

"""
Users, public profiles and the authenticated user
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.users import ContextualInformation, SubjectType, User

logger = logging.getLogger(__name__)


class GitHubUsersManager(GitHubCore):
    """Read users and update the authenticated user's profile"""

    def get_authenticated_user(
        self, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get the currently authenticated user's profile.
        GitHub Docs:
        https://docs.github.com/en/rest/users/users?apiVersion=2022-11-28#get-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        resp = self._get("/user")
        return self._returner(resp, return_format, User.from_json)

    def update_authenticated_user(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        blog: str | None = None,
        twitter_username: str | None = None,
        company: str | None = None,
        location: str | None = None,
        hireable: bool | None = None,
        bio: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Update the authenticated user's profile, only the given fields change.
        Note: the changed `email` will not be displayed on the public profile if your privacy settings are still enforced.
        GitHub Docs:
        https://docs.github.com/en/rest/users/users?apiVersion=2022-11-28#update-the-authenticated-user
        """
        return_format = self._return_format(return_format)
        payload = self._payload(
            name=name,
            email=email,
            blog=blog,
            twitter_username=twitter_username,
            company=company,
            location=location,
            hireable=hireable,
            bio=bio,
        )
        resp = self._patch("/user", json=payload)
        return self._returner(resp, return_format, User.from_json)

    def get_user_by_id(
        self, account_id: int, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get someone's public information with their account id.
        GitHub Docs:
        https://docs.github.com/en/rest/users/users?apiVersion=2022-11-28#get-a-user-using-their-id
        """
        return_format = self._return_format(return_format)
        resp = self._get(f"/user/{account_id}")
        return self._returner(resp, return_format, User.from_json)

    def get_users(
        self,
        since: int | None = None,
        per_page: int | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List all users in the order they signed up, organizations included.
        `since` is the id of the last user seen.
        GitHub Docs:
        https://docs.github.com/en/rest/users/users?apiVersion=2022-11-28#list-users
        """
        return_format = self._return_format(return_format)
        params = self._params(since=since, per_page=per_page)
        resp = self._get("/users", params=params)
        return self._returner(resp, return_format, User.from_json_list)

    def get_user(
        self, username, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get someone's public information with their username.
        GitHub Docs:
        https://docs.github.com/en/rest/users/users?apiVersion=2022-11-28#get-a-user
        """
        return_format = self._return_format(return_format)
        resp = self._get(f"/users/{self._login(username)}")
        return self._returner(resp, return_format, User.from_json)

    def get_user_contextual_information(
        self,
        username,
        subject_type: SubjectType | None = None,
        subject_id: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the hovercard of a user, optionally about a subject (e.g. a repository).
        `subject_type` and `subject_id` go together.
        GitHub Docs:
        https://docs.github.com/en/rest/users/users?apiVersion=2022-11-28#get-contextual-information-for-a-user
        """
        return_format = self._return_format(return_format)
        if (subject_type is None) != (subject_id is None):
            raise ValueError("subject_type and subject_id must be provided together.")
        url = f"/users/{self._login(username)}/hovercard"
        params = self._params(subject_type=subject_type, subject_id=subject_id)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, ContextualInformation.from_json)
