#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from ghmanager.api.commits import (
    GitHubCommitCommentsManager,
    GitHubCommitStatusesManager,
    GitHubCommitsManager,
)
from ghmanager.config import ReturnFormat
from ghmanager.records.commits import (
    BranchHead,
    CombinedStatus,
    Commit,
    CommitComment,
    CommitStatus,
    CommitStatusState,
    ComparisonStatus,
    PullRequestState,
)
from ghmanager.records.repositories import Repository
from ghmanager.records.users import User

REPO = "/repos/octocat/Hello-World"


@pytest.fixture
def commits(make_manager) -> GitHubCommitsManager:
    return make_manager(GitHubCommitsManager)


@pytest.fixture
def statuses(make_manager) -> GitHubCommitStatusesManager:
    return make_manager(GitHubCommitStatusesManager)


@pytest.fixture
def comments(make_manager) -> GitHubCommitCommentsManager:
    return make_manager(GitHubCommitCommentsManager)

def test_get_commits_filters(commits: GitHubCommitsManager, session):
    session.queue([{"sha": "6dcb09b"}, {"sha": "7638417"}])
    result = commits.get_commits(
        "octocat",
        "Hello-World",
        sha="main",
        author=User(login="monalisa"),
        since="2024-01-01T00:00:00Z",
        per_page=2,
    )
    assert session.last["path"] == f"{REPO}/commits"
    assert session.last["params"] == {
        "sha": "main",
        "author": "monalisa",
        "since": "2024-01-01T00:00:00Z",
        "per_page": 2,
    }
    assert [c.sha for c in result] == ["6dcb09b", "7638417"]


def test_branches_and_pulls_of_a_commit(commits: GitHubCommitsManager, session):
    session.queue([{"name": "main", "commit": {"sha": "c5b97d5"}, "protected": True}])
    branches = commits.get_head_commit_branches("octocat", "Hello-World", commit="c5b97d5")
    assert session.last["path"] == f"{REPO}/commits/c5b97d5/branches-where-head"
    assert isinstance(branches[0], BranchHead)
    assert branches[0].commit.sha == "c5b97d5"

    session.queue(
        [
            {
                "number": 1347,
                "state": "open",
                "title": "Amazing new feature",
                "head": {"ref": "new-topic", "repo": {"full_name": "octocat/Hello-World"}},
                "base": {"ref": "master"},
            }
        ]
    )
    pulls = commits.get_commit_pull_requests(
        "octocat", "Hello-World", commit=Commit(sha="c5b97d5"), per_page=1
    )
    assert session.last["path"] == f"{REPO}/commits/c5b97d5/pulls"
    assert pulls[0].state == PullRequestState.OPEN
    assert pulls[0].head.repo.full_name == "octocat/Hello-World"
    assert pulls[0].base.ref == "master"


def test_get_commit(commits: GitHubCommitsManager, session):
    repository = Repository(full_name="octocat/Hello-World")
    session.queue({"sha": "6dcb09b", "stats": {"total": 108}})
    commit = commits.get_commit(repository, ref="main")
    assert session.last["path"] == f"{REPO}/commits/main"
    assert commit.stats.total == 108

    session.queue({"sha": "6dcb09b"})
    text = commits.get_commit(repository, ref="6dcb09b", return_format=ReturnFormat.STRING)
    assert text == '{"sha": "6dcb09b"}'


def test_compare_two_commits(commits: GitHubCommitsManager, session):
    session.queue(
        {
            "status": "ahead",
            "ahead_by": 1,
            "behind_by": 0,
            "total_commits": 1,
            "base_commit": {"sha": "aaa"},
            "merge_base_commit": {"sha": "aaa"},
            "commits": [{"sha": "bbb"}],
            "files": [{"filename": "README", "status": "modified"}],
        }
    )
    comparison = commits.compare_two_commits("octocat", "Hello-World", basehead="main...topic")
    assert session.last["path"] == f"{REPO}/compare/main...topic"
    assert comparison.status == ComparisonStatus.AHEAD
    assert comparison.base_commit.sha == "aaa"
    assert comparison.commits[0].sha == "bbb"

    commits.compare_two_commits("octocat", "Hello-World", base="v1", head="v2")
    assert session.last["path"] == f"{REPO}/compare/v1...v2"

    with pytest.raises(ValueError):
        commits.compare_two_commits("octocat", "Hello-World", base="v1")


def test_commit_statuses(statuses: GitHubCommitStatusesManager, session):
    session.queue(
        {"id": 1, "state": "success", "context": "continuous-integration/jenkins"},
        status_code=201,
    )
    status = statuses.create_commit_status(
        "octocat",
        "Hello-World",
        sha="6dcb09b",
        state=CommitStatusState.SUCCESS,
        target_url="https://ci.example.com/build/1",
        context="continuous-integration/jenkins",
    )
    assert session.last["method"] == "POST"
    assert session.last["path"] == f"{REPO}/statuses/6dcb09b"
    assert session.last["json"] == {
        "state": "success",
        "target_url": "https://ci.example.com/build/1",
        "context": "continuous-integration/jenkins",
    }
    assert isinstance(status, CommitStatus)
    assert status.state == CommitStatusState.SUCCESS

    session.queue([{"id": 1, "state": "pending"}])
    listed = statuses.get_commit_statuses("octocat", "Hello-World", ref="main")
    assert session.last["path"] == f"{REPO}/commits/main/statuses"
    assert listed[0].state == CommitStatusState.PENDING

    session.queue({"state": "failure", "total_count": 2, "statuses": [{"state": "failure"}, {"state": "success"}]})
    combined = statuses.get_reference_combined_status("octocat", "Hello-World", ref="main")
    assert session.last["path"] == f"{REPO}/commits/main/status"
    assert isinstance(combined, CombinedStatus)
    assert combined.state == CommitStatusState.FAILURE
    assert len(combined.statuses) == 2


def test_refs_and_shas_are_escaped(commits: GitHubCommitsManager, statuses, session):
    commits.get_commit("octocat", "Hello-World", ref="fix#12")
    assert session.last["path"] == f"{REPO}/commits/fix%2312"

    commits.compare_two_commits("octocat", "Hello-World", base="main", head="octocat:fix?x")
    assert session.last["path"] == f"{REPO}/compare/main...octocat:fix%3Fx"

    statuses.get_commit_statuses("octocat", "Hello-World", ref="feature/a#b")
    assert session.last["path"] == f"{REPO}/commits/feature/a%23b/statuses"

    statuses.get_reference_combined_status("octocat", "Hello-World", ref="50%")
    assert session.last["path"] == f"{REPO}/commits/50%25/status"


def test_repository_commit_comments(comments: GitHubCommitCommentsManager, session):
    session.queue([{"id": 1, "body": "Great stuff", "commit_id": "6dcb09b"}])
    listed = comments.get_repository_commit_comments("octocat/Hello-World", per_page=10)
    assert session.last["method"] == "GET"
    assert session.last["path"] == f"{REPO}/comments"
    assert session.last["params"] == {"per_page": 10}
    assert isinstance(listed[0], CommitComment)

    session.queue({"id": 1, "body": "Great stuff"})
    comment = comments.get_commit_comment("octocat", "Hello-World", comment=1)
    assert session.last["path"] == f"{REPO}/comments/1"

    session.queue({"id": 1, "body": "Nice change"})
    updated = comments.update_commit_comment(
        "octocat", "Hello-World", comment=comment, body="Nice change"
    )
    assert session.last["method"] == "PATCH"
    assert session.last["path"] == f"{REPO}/comments/1"
    assert session.last["json"] == {"body": "Nice change"}
    assert updated.body == "Nice change"

    session.queue(status_code=204)
    assert comments.delete_commit_comment("octocat", "Hello-World", comment=comment) is True
    assert session.last["method"] == "DELETE"
    assert session.last["path"] == f"{REPO}/comments/1"


def test_comments_of_a_commit(comments: GitHubCommitCommentsManager, session):
    session.queue([{"id": 1, "path": "file1.txt", "position": 4}])
    listed = comments.get_commit_comments(
        "octocat", "Hello-World", commit=Commit(sha="6dcb09b"), page=2
    )
    assert session.last["path"] == f"{REPO}/commits/6dcb09b/comments"
    assert session.last["params"] == {"page": 2}
    assert listed[0].position == 4

    session.queue({"id": 2, "body": "Great stuff", "line": 1}, status_code=201)
    created = comments.create_commit_comment(
        "octocat",
        "Hello-World",
        commit="6dcb09b",
        body="Great stuff",
        path="file1.txt",
        line=1,
    )
    assert session.last["method"] == "POST"
    assert session.last["json"] == {"body": "Great stuff", "path": "file1.txt", "line": 1}
    assert created.id == 2

    raw = comments.get_commit_comments(
        "octocat", "Hello-World", commit="6dcb09b", return_format=ReturnFormat.STRING
    )
    assert isinstance(raw, str)


def test_bad_return_format_is_refused_before_posting(comments: GitHubCommitCommentsManager, session):
    with pytest.raises(ValueError):
        comments.create_commit_comment(
            "octocat", "Hello-World", commit="6dcb09b", body="x", return_format="xml"
        )
    assert session.calls == []
