"""
Git references of a repository
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.git import GitReference

logger = logging.getLogger(__name__)


class GitHubReferencesManager(GitHubCore):
    """Manage the git references (branches and tags) of a repository"""

    @classmethod
    def _ref(cls, ref) -> str:
        """
        Return the ref in the form the git endpoints expect, e.g. `heads/main`.
        Accept a GitReference record or a fully qualified `refs/heads/main`.
        """
        ref = getattr(ref, "ref", ref)
        if not ref:
            raise ValueError("A reference (or a GitReference record) is required.")
        return cls._segment(ref.removeprefix("refs/"))

    def get_matching_references(
        self,
        owner,
        repo: str | None = None,
        *,
        ref: str,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the references starting with `ref`, e.g. `heads/feature` or `tags/v1`.
        GitHub Docs:
        https://docs.github.com/en/rest/git/refs?apiVersion=2022-11-28#list-matching-references
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/git/matching-refs/{self._ref(ref)}"
        resp = self._get(url)
        return self._returner(resp, return_format, GitReference.from_json_list)

    def get_reference(
        self,
        owner,
        repo: str | None = None,
        *,
        ref: str,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get a single reference, e.g. `heads/main`.
        GitHub Docs:
        https://docs.github.com/en/rest/git/refs?apiVersion=2022-11-28#get-a-reference
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/git/ref/{self._ref(ref)}"
        resp = self._get(url)
        return self._returner(resp, return_format, GitReference.from_json)

    def create_reference(
        self,
        owner,
        repo: str | None = None,
        *,
        ref: str,
        sha: str,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Create a reference. `ref` must be fully qualified, e.g. `refs/heads/main`.
        GitHub Docs:
        https://docs.github.com/en/rest/git/refs?apiVersion=2022-11-28#create-a-reference
        """
        return_format = self._return_format(return_format)
        if not ref.startswith("refs/") or ref.count("/") < 2:
            raise ValueError(
                "The ref should be fully qualified e.g. 'refs/heads/main'"
            )
        url = f"{self._repo_path(owner, repo)}/git/refs"
        resp = self._post(url, json={"ref": ref, "sha": sha})
        return self._returner(resp, return_format, GitReference.from_json)

    def update_reference(
        self,
        owner,
        repo: str | None = None,
        *,
        ref,
        sha: str,
        force: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Point a reference to another SHA. `force=True` allows non fast-forward updates.
        GitHub Docs:
        https://docs.github.com/en/rest/git/refs?apiVersion=2022-11-28#update-a-reference
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/git/refs/{self._ref(ref)}"
        payload = self._payload(sha=sha, force=force)
        resp = self._patch(url, json=payload)
        return self._returner(resp, return_format, GitReference.from_json)

    def delete_reference(self, owner, repo: str | None = None, *, ref) -> bool:
        """
        Delete a reference.
        GitHub Docs:
        https://docs.github.com/en/rest/git/refs?apiVersion=2022-11-28#delete-a-reference
        """
        url = f"{self._repo_path(owner, repo)}/git/refs/{self._ref(ref)}"
        return self._boolean("DELETE", url)
