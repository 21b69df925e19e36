#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11

"""
Meta information about GitHub and its REST API
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.base import convert_json
from ..records.meta import GitHubAPIRoot, GitHubMetaInformation

logger = logging.getLogger(__name__)


def _versions(data) -> list[str]:
    return convert_json(data or [], list[str])


class GitHubMetaManager(GitHubCore):
    """Endpoints that describe GitHub itself, most work unauthenticated"""

    def get_github_api_root(
        self, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get GitHub API root hypermedia links to top-level API resources.
        GitHub Docs:
        https://docs.github.com/en/rest/meta/meta?apiVersion=2022-11-28#github-api-root
        """
        return_format = self._return_format(return_format)
        resp = self._get("/")
        return self._returner(resp, return_format, GitHubAPIRoot.from_json)

    def get_github_meta_information(
        self, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get meta information about GitHub, e.g. the IP addresses of its services
        GitHub Docs:
        https://docs.github.com/en/rest/meta/meta?apiVersion=2022-11-28#get-github-meta-information
        """
        return_format = self._return_format(return_format)
        resp = self._get("/meta")
        return self._returner(resp, return_format, GitHubMetaInformation.from_json)

    def get_octocat(self, speech: str | None = None) -> str:
        """
        Get the octocat as ASCII art, saying `speech` when given
        GitHub Docs:
        https://docs.github.com/en/rest/meta/meta?apiVersion=2022-11-28#get-octocat
        """
        params = self._params(s=speech)
        resp = self._get("/octocat", params=params)
        return resp.text

    def get_all_api_versions(
        self, *, return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Get all supported GitHub API versions
        GitHub Docs:
        https://docs.github.com/en/rest/meta/meta?apiVersion=2022-11-28#get-all-api-versions
        """
        return_format = self._return_format(return_format)
        resp = self._get("/versions")
        return self._returner(resp, return_format, _versions)

    def get_github_zen(self) -> str:
        """
        Get a random sentence from the Zen of GitHub.
        GitHub Docs:
        https://docs.github.com/en/rest/meta/meta?apiVersion=2022-11-28#get-the-zen-of-github
        """
        resp = self._get("/zen")
        return resp.text.strip()
