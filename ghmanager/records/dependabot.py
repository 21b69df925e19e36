"""Dependabot alert records"""

from __future__ import annotations

from enum import StrEnum

import msgspec

from .base import GitHubResponse, Record
from .repositories import Repository
from .users import User


class DependabotAlertState(StrEnum):
    DISMISSED = "dismissed"
    FIXED = "fixed"
    OPEN = "open"
    AUTO_DISMISSED = "auto_dismissed"


class DependabotDismissedReason(StrEnum):
    FIX_STARTED = "fix_started"
    INACCURATE = "inaccurate"
    NO_BANDWIDTH = "no_bandwidth"
    NOT_USED = "not_used"
    TOLERABLE_RISK = "tolerable_risk"


class DependencyScope(StrEnum):
    UNKNOWN = "unknown"
    DEVELOPMENT = "development"
    RUNTIME = "runtime"


class SeverityLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IdentifierType(StrEnum):
    CVE = "CVE"
    GHSA = "GHSA"


class Ecosystem(StrEnum):
    COMPOSER = "composer"
    GO = "go"
    MAVEN = "maven"
    NPM = "npm"
    NUGET = "nuget"
    PIP = "pip"
    PUB = "pub"
    RUBYGEMS = "rubygems"
    RUST = "rust"


class DependabotSort(StrEnum):
    CREATED = "created"
    UPDATED = "updated"


class Package(Record):
    ecosystem: str | None = None
    name: str | None = None


class Dependency(Record):
    package: Package | None = None
    manifest_path: str | None = None
    scope: DependencyScope | None = None


class PatchedVersion(Record):
    identifier: str | None = None


class Vulnerability(Record):
    package: Package | None = None
    severity: SeverityLevel | None = None
    vulnerable_version_range: str | None = None
    first_patched_version: PatchedVersion | None = None

    @property
    def patched_version(self) -> str | None:
        """Identifier of the first fixed version, e.g. `2.0.2`"""
        if self.first_patched_version is None:
            return None
        return self.first_patched_version.identifier


class CVSS(Record):
    score: float | None = None
    vector_string: str | None = None


class CWE(Record):
    cwe_id: str | None = None
    name: str | None = None


class Identifier(Record):
    type: IdentifierType | None = None
    value: str | None = None


class AdvisoryReference(Record):
    url: str | None = None


class SecurityAdvisory(Record):
    ghsa_id: str | None = None
    cve_id: str | None = None
    summary: str | None = None
    description: str | None = None
    vulnerabilities: list[Vulnerability] = msgspec.field(default_factory=list)
    severity: SeverityLevel | None = None
    cvss: CVSS | None = None
    cwes: list[CWE] = msgspec.field(default_factory=list)
    identifiers: list[Identifier] = msgspec.field(default_factory=list)
    references: list[AdvisoryReference] = msgspec.field(default_factory=list)
    published_at: str | None = None
    updated_at: str | None = None
    withdrawn_at: str | None = None

    @property
    def reference_urls(self) -> list[str]:
        return [reference.url for reference in self.references if reference.url]


class DependabotAlert(GitHubResponse):
    number: int | None = None
    state: DependabotAlertState | None = None
    dependency: Dependency | None = None
    security_advisory: SecurityAdvisory | None = None
    security_vulnerability: Vulnerability | None = None
    url: str | None = None
    html_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    dismissed_at: str | None = None
    dismissed_by: User | None = None
    dismissed_reason: DependabotDismissedReason | None = None
    dismissed_comment: str | None = None
    fixed_at: str | None = None
    auto_dismissed_at: str | None = None
    repository: Repository | None = None
