"""Commit, comparison, commit status and commit comment records"""

from __future__ import annotations

from enum import StrEnum

import msgspec

from .base import GitHubResponse, Record
from .repositories import Repository
from .users import User


class FileStatus(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


class ComparisonStatus(StrEnum):
    DIVERGED = "diverged"
    AHEAD = "ahead"
    BEHIND = "behind"
    IDENTICAL = "identical"


class CommitStatusState(StrEnum):
    ERROR = "error"
    FAILURE = "failure"
    PENDING = "pending"
    SUCCESS = "success"


class PullRequestState(StrEnum):
    OPEN = "open"
    CLOSED = "closed"


class ShaItem(Record):
    """A `{sha, url}` pointer to a git object"""

    sha: str | None = None
    url: str | None = None
    html_url: str | None = None


class CommitProfile(Record):
    """Git identity of an author or committer"""

    name: str | None = None
    email: str | None = None
    date: str | None = None


class Verification(Record):
    verified: bool | None = None
    reason: str | None = None
    signature: str | None = None
    payload: str | None = None


class CommitDetails(Record):
    url: str | None = None
    author: CommitProfile | None = None
    committer: CommitProfile | None = None
    message: str | None = None
    tree: ShaItem | None = None
    comment_count: int | None = None
    verification: Verification | None = None


class CommitStats(Record):
    additions: int | None = None
    deletions: int | None = None
    total: int | None = None


class CommitFile(Record):
    sha: str | None = None
    filename: str | None = None
    status: FileStatus | None = None
    additions: int | None = None
    deletions: int | None = None
    changes: int | None = None
    blob_url: str | None = None
    raw_url: str | None = None
    contents_url: str | None = None
    patch: str | None = None
    previous_filename: str | None = None


class Commit(GitHubResponse):
    sha: str | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    comments_url: str | None = None
    commit: CommitDetails | None = None
    author: User | None = None
    committer: User | None = None
    parents: list[ShaItem] = msgspec.field(default_factory=list)
    stats: CommitStats | None = None
    files: list[CommitFile] = msgspec.field(default_factory=list)


class CommitsComparison(GitHubResponse):
    url: str | None = None
    html_url: str | None = None
    permalink_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    base_commit: Commit | None = None
    merge_base_commit: Commit | None = None
    status: ComparisonStatus | None = None
    ahead_by: int | None = None
    behind_by: int | None = None
    total_commits: int | None = None
    commits: list[Commit] = msgspec.field(default_factory=list)
    files: list[CommitFile] = msgspec.field(default_factory=list)


class BranchHead(GitHubResponse):
    """A branch whose HEAD is a given commit"""

    name: str | None = None
    commit: ShaItem | None = None
    protected: bool | None = None


class PullRequestPart(Record):
    """The head or base side of a pull request"""

    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    user: User | None = None
    repo: Repository | None = None


class PullRequest(GitHubResponse):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    issue_url: str | None = None
    state: PullRequestState | None = None
    locked: bool | None = None
    title: str | None = None
    user: User | None = None
    body: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    merged_at: str | None = None
    merge_commit_sha: str | None = None
    head: PullRequestPart | None = None
    base: PullRequestPart | None = None
    draft: bool | None = None
    author_association: str | None = None


class CommitStatus(GitHubResponse):
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    avatar_url: str | None = None
    state: CommitStatusState | None = None
    description: str | None = None
    target_url: str | None = None
    context: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    creator: User | None = None


class CombinedStatus(GitHubResponse):
    """The statuses of a reference rolled up in one state"""

    state: CommitStatusState | None = None
    statuses: list[CommitStatus] = msgspec.field(default_factory=list)
    sha: str | None = None
    total_count: int | None = None
    repository: Repository | None = None
    commit_url: str | None = None
    url: str | None = None


class Reactions(Record):
    """Reaction counters of a comment"""

    url: str | None = None
    total_count: int | None = None
    plus_one: int | None = msgspec.field(default=None, name="+1")
    minus_one: int | None = msgspec.field(default=None, name="-1")
    laugh: int | None = None
    confused: int | None = None
    heart: int | None = None
    hooray: int | None = None
    eyes: int | None = None
    rocket: int | None = None


class CommitComment(GitHubResponse):
    """A comment left on a commit, optionally on one line of a file"""

    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    body: str | None = None
    path: str | None = None
    position: int | None = None
    line: int | None = None
    commit_id: str | None = None
    user: User | None = None
    created_at: str | None = None
    updated_at: str | None = None
    author_association: str | None = None
    reactions: Reactions | None = None
