"""
Forks of a repository
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.repositories import ForkSort, Repository

logger = logging.getLogger(__name__)


class GitHubForksManager(GitHubCore):
    def get_forks(
        self,
        owner,
        repo: str | None = None,
        *,
        sort: ForkSort | None = None,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the forks of a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/repos/forks?apiVersion=2022-11-28#list-forks
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/forks"
        params = self._params(sort=sort, per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, Repository.from_json_list)

    def create_fork(
        self,
        owner,
        repo: str | None = None,
        *,
        organization=None,
        name: str | None = None,
        default_branch_only: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Fork a repository for the authenticated user, or into `organization`.
        Forking happens asynchronously (202), the returned repository may not be ready yet.
        GitHub Docs:
        https://docs.github.com/en/rest/repos/forks?apiVersion=2022-11-28#create-a-fork
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/forks"
        payload = self._payload(
            organization=self._login(organization) if organization is not None else None,
            name=name,
            default_branch_only=default_branch_only,
        )
        resp = self._post(url, json=payload)
        logger.info("Fork of %s requested (status %s).", url, resp.status_code)
        return self._returner(resp, return_format, Repository.from_json)
