#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11

"""
Commits, commit statuses and commit comments of a repository
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.commits import (
    BranchHead,
    CombinedStatus,
    Commit,
    CommitComment,
    CommitStatus,
    CommitStatusState,
    CommitsComparison,
    PullRequest,
)

logger = logging.getLogger(__name__)


class GitHubCommitsManager(GitHubCore):
    """Read the commits of a repository"""

    def get_commits(
        self,
        owner,
        repo: str | None = None,
        *,
        sha: str | None = None,
        path: str | None = None,
        author: str | None = None,
        committer: str | None = None,
        since: str | None = None,
        until: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the commits of a repository, newest first.
        `since` and `until` are ISO 8601 timestamps.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/commits?apiVersion=2022-11-28#list-commits
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/commits"
        params = self._params(
            sha=sha,
            path=path,
            author=self._login(author) if author is not None else None,
            committer=self._login(committer) if committer is not None else None,
            since=since,
            until=until,
            per_page=per_page,
            page=page,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, Commit.from_json_list)

    def get_head_commit_branches(
        self,
        owner,
        repo: str | None = None,
        *,
        commit,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the branches whose HEAD commit is `commit`.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/commits?apiVersion=2022-11-28#list-branches-for-head-commit
        """
        return_format = self._return_format(return_format)
        commit_sha = self._segment(self._identifier(commit, "sha"))
        url = f"{self._repo_path(owner, repo)}/commits/{commit_sha}/branches-where-head"
        resp = self._get(url)
        return self._returner(resp, return_format, BranchHead.from_json_list)

    def get_commit_pull_requests(
        self,
        owner,
        repo: str | None = None,
        *,
        commit,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the pull requests associated with a commit.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/commits?apiVersion=2022-11-28#list-pull-requests-associated-with-a-commit
        """
        return_format = self._return_format(return_format)
        commit_sha = self._segment(self._identifier(commit, "sha"))
        url = f"{self._repo_path(owner, repo)}/commits/{commit_sha}/pulls"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, PullRequest.from_json_list)

    def get_commit(
        self,
        owner,
        repo: str | None = None,
        *,
        ref: str,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get a commit with its stats and files. `ref` is a SHA, a branch or a tag name.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/commits?apiVersion=2022-11-28#get-a-commit
        """
        return_format = self._return_format(return_format)
        ref = self._segment(self._identifier(ref, "sha"))
        url = f"{self._repo_path(owner, repo)}/commits/{ref}"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, Commit.from_json)

    def compare_two_commits(
        self,
        owner,
        repo: str | None = None,
        *,
        basehead: str | None = None,
        base: str | None = None,
        head: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Compare two commits against one another.
        Give either `basehead` (`BASE...HEAD`) or both `base` and `head`.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/commits?apiVersion=2022-11-28#compare-two-commits
        """
        return_format = self._return_format(return_format)
        match (basehead, base, head):
            case (str(), None, None):
                pass
            case (None, str(), str()):
                basehead = f"{base}...{head}"
            case _:
                raise ValueError("You must provide basehead, or both base and head.")
        basehead = self._segment(basehead, safe=":/")
        url = f"{self._repo_path(owner, repo)}/compare/{basehead}"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, CommitsComparison.from_json)


class GitHubCommitStatusesManager(GitHubCore):
    """Create and read the statuses of a commit"""

    def create_commit_status(
        self,
        owner,
        repo: str | None = None,
        *,
        sha: str,
        state: CommitStatusState,
        target_url: str | None = None,
        description: str | None = None,
        context: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Create a commit status for a given SHA.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/statuses?apiVersion=2022-11-28#create-a-commit-status
        """
        return_format = self._return_format(return_format)
        sha = self._segment(self._identifier(sha, "sha"))
        url = f"{self._repo_path(owner, repo)}/statuses/{sha}"
        payload = self._payload(
            state=state,
            target_url=target_url,
            description=description,
            context=context,
        )
        resp = self._post(url, json=payload)
        return self._returner(resp, return_format, CommitStatus.from_json)

    def get_commit_statuses(
        self,
        owner,
        repo: str | None = None,
        *,
        ref: str,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the commit statuses of a reference, newest first.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/statuses?apiVersion=2022-11-28#list-commit-statuses-for-a-reference
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/commits/{self._segment(ref)}/statuses"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, CommitStatus.from_json_list)

    def get_reference_combined_status(
        self,
        owner,
        repo: str | None = None,
        *,
        ref: str,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the combined status of a reference, the latest status of each context.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/statuses?apiVersion=2022-11-28#get-the-combined-status-for-a-specific-reference
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/commits/{self._segment(ref)}/status"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, CombinedStatus.from_json)


class GitHubCommitCommentsManager(GitHubCore):
    """Comment on the commits of a repository"""

    def get_repository_commit_comments(
        self,
        owner,
        repo: str | None = None,
        *,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the commit comments of a repository, oldest first.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/comments?apiVersion=2022-11-28#list-commit-comments-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/comments"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, CommitComment.from_json_list)

    def get_commit_comment(
        self,
        owner,
        repo: str | None = None,
        *,
        comment,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get a commit comment by id.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/comments?apiVersion=2022-11-28#get-a-commit-comment
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/comments/{self._identifier(comment)}"
        resp = self._get(url)
        return self._returner(resp, return_format, CommitComment.from_json)

    def update_commit_comment(
        self,
        owner,
        repo: str | None = None,
        *,
        comment,
        body: str,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Replace the body of a commit comment.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/comments?apiVersion=2022-11-28#update-a-commit-comment
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/comments/{self._identifier(comment)}"
        resp = self._patch(url, json={"body": body})
        return self._returner(resp, return_format, CommitComment.from_json)

    def delete_commit_comment(self, owner, repo: str | None = None, *, comment) -> bool:
        """
        Delete a commit comment.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/comments?apiVersion=2022-11-28#delete-a-commit-comment
        """
        url = f"{self._repo_path(owner, repo)}/comments/{self._identifier(comment)}"
        return self._boolean("DELETE", url)

    def get_commit_comments(
        self,
        owner,
        repo: str | None = None,
        *,
        commit,
        per_page: int | None = None,
        page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the comments of a single commit.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/comments?apiVersion=2022-11-28#list-commit-comments
        """
        return_format = self._return_format(return_format)
        commit_sha = self._segment(self._identifier(commit, "sha"))
        url = f"{self._repo_path(owner, repo)}/commits/{commit_sha}/comments"
        params = self._params(per_page=per_page, page=page)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, CommitComment.from_json_list)

    def create_commit_comment(
        self,
        owner,
        repo: str | None = None,
        *,
        commit,
        body: str,
        path: str | None = None,
        position: int | None = None,
        line: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Comment on a commit. With `path` and `position` the comment sits on a line of the diff.
        GitHub Docs:
        https://docs.github.com/en/rest/commits/comments?apiVersion=2022-11-28#create-a-commit-comment
        """
        return_format = self._return_format(return_format)
        commit_sha = self._segment(self._identifier(commit, "sha"))
        url = f"{self._repo_path(owner, repo)}/commits/{commit_sha}/comments"
        payload = self._payload(body=body, path=path, position=position, line=line)
        resp = self._post(url, json=payload)
        return self._returner(resp, return_format, CommitComment.from_json)
