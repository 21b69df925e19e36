"""GitHub meta records"""

from __future__ import annotations

import msgspec

from .base import GitHubResponse, Record


class GitHubAPIRoot(GitHubResponse):
    """Hypermedia links to the top-level resources"""

    current_user_url: str | None = None
    current_user_authorizations_html_url: str | None = None
    authorizations_url: str | None = None
    code_search_url: str | None = None
    commit_search_url: str | None = None
    emails_url: str | None = None
    emojis_url: str | None = None
    events_url: str | None = None
    feeds_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    hub_url: str | None = None
    issue_search_url: str | None = None
    issues_url: str | None = None
    keys_url: str | None = None
    label_search_url: str | None = None
    notifications_url: str | None = None
    organization_url: str | None = None
    organization_repositories_url: str | None = None
    organization_teams_url: str | None = None
    public_gists_url: str | None = None
    rate_limit_url: str | None = None
    repository_url: str | None = None
    repository_search_url: str | None = None
    current_user_repositories_url: str | None = None
    starred_url: str | None = None
    starred_gists_url: str | None = None
    topic_search_url: str | None = None
    user_url: str | None = None
    user_organizations_url: str | None = None
    user_repositories_url: str | None = None
    user_search_url: str | None = None


class SSHKeyFingerprints(Record):
    sha256_rsa: str | None = msgspec.field(default=None, name="SHA256_RSA")
    sha256_dsa: str | None = msgspec.field(default=None, name="SHA256_DSA")
    sha256_ecdsa: str | None = msgspec.field(default=None, name="SHA256_ECDSA")
    sha256_ed25519: str | None = msgspec.field(default=None, name="SHA256_ED25519")


class GitHubMetaInformation(GitHubResponse):
    """Addresses and keys published by GitHub"""

    verifiable_password_authentication: bool | None = None
    ssh_key_fingerprints: SSHKeyFingerprints | None = None
    ssh_keys: list[str] = msgspec.field(default_factory=list)
    hooks: list[str] = msgspec.field(default_factory=list)
    web: list[str] = msgspec.field(default_factory=list)
    api: list[str] = msgspec.field(default_factory=list)
    git: list[str] = msgspec.field(default_factory=list)
    packages: list[str] = msgspec.field(default_factory=list)
    pages: list[str] = msgspec.field(default_factory=list)
    importer: list[str] = msgspec.field(default_factory=list)
    actions: list[str] = msgspec.field(default_factory=list)
    dependabot: list[str] = msgspec.field(default_factory=list)
