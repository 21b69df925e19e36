from __future__ import annotations

from enum import StrEnum

from .base import GitHubResponse, Record


class ObjectType(StrEnum):
    COMMIT = "commit"
    TREE = "tree"
    BLOB = "blob"
    TAG = "tag"


class RefObject(Record):
    type: ObjectType | None = None
    sha: str | None = None
    url: str | None = None


class GitReference(GitHubResponse):
    """A git reference such as `refs/heads/main`"""

    ref: str | None = None
    node_id: str | None = None
    url: str | None = None
    object: RefObject | None = None
