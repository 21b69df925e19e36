"""GPG key records"""

from __future__ import annotations

import msgspec

from .base import GitHubResponse, Record


class GPGKeyEmail(Record):
    email: str | None = None
    verified: bool | None = None


class GPGKey(GitHubResponse):
    id: int | None = None
    name: str | None = None
    primary_key_id: int | None = None
    key_id: str | None = None
    public_key: str | None = None
    emails: list[GPGKeyEmail] = msgspec.field(default_factory=list)
    subkeys: list[GPGKey] = msgspec.field(default_factory=list)
    can_sign: bool | None = None
    can_encrypt_comms: bool | None = None
    can_encrypt_storage: bool | None = None
    can_certify: bool | None = None
    created_at: str | None = None
    expires_at: str | None = None
    revoked: bool | None = None
    raw_key: str | None = None
