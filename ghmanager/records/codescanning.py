"""Code scanning records"""

from __future__ import annotations

from enum import StrEnum

import msgspec

from .base import GitHubResponse, Record
from .repositories import Repository
from .users import User


class AlertState(StrEnum):
    OPEN = "open"
    CLOSED = "closed"
    DISMISSED = "dismissed"
    FIXED = "fixed"


class DismissedReason(StrEnum):
    FALSE_POSITIVE = "false positive"
    WONT_FIX = "won't fix"
    USED_IN_TESTS = "used in tests"


class Severity(StrEnum):
    NONE = "none"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


class SecuritySeverityLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Classification(StrEnum):
    SOURCE = "source"
    GENERATED = "generated"
    TEST = "test"
    LIBRARY = "library"


class ProcessingStatus(StrEnum):
    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


class ScanningSort(StrEnum):
    CREATED = "created"
    UPDATED = "updated"


class Rule(Record):
    id: str | None = None
    name: str | None = None
    severity: Severity | None = Severity.NONE
    security_severity_level: SecuritySeverityLevel | None = SecuritySeverityLevel.LOW
    description: str | None = None
    full_description: str | None = None
    tags: list[str] = msgspec.field(default_factory=list)
    help: str | None = None
    help_uri: str | None = None


class Tool(Record):
    name: str | None = None
    guid: str | None = None
    version: str | None = None


class Location(Record):
    path: str | None = None
    start_line: int | None = None
    end_line: int | None = None
    start_column: int | None = None
    end_column: int | None = None


class AlertMessage(Record):
    text: str | None = None


class AlertInstance(Record):
    ref: str | None = None
    analysis_key: str | None = None
    environment: str | None = None
    category: str | None = None
    state: AlertState | None = None
    commit_sha: str | None = None
    message: AlertMessage | None = None
    location: Location | None = None
    html_url: str | None = None
    classifications: list[Classification] = msgspec.field(default_factory=list)

    @property
    def message_text(self) -> str | None:
        return self.message.text if self.message is not None else None


class ScanningAlert(GitHubResponse):
    number: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    url: str | None = None
    html_url: str | None = None
    instances_url: str | None = None
    state: AlertState | None = None
    fixed_at: str | None = None
    dismissed_by: User | None = None
    dismissed_at: str | None = None
    dismissed_reason: DismissedReason | None = None
    dismissed_comment: str | None = None
    rule: Rule | None = None
    tool: Tool | None = None
    most_recent_instance: AlertInstance | None = None
    repository: Repository | None = None


class ScanningAnalysis(GitHubResponse):
    ref: str | None = None
    commit_sha: str | None = None
    analysis_key: str | None = None
    environment: str | None = None
    category: str | None = None
    error: str | None = None
    created_at: str | None = None
    results_count: int | None = None
    rules_count: int | None = None
    id: int | None = None
    url: str | None = None
    sarif_id: str | None = None
    tool: Tool | None = None
    deletable: bool | None = None
    warning: str | None = None


class ScanningAnalysisDeletion(GitHubResponse):
    next_analysis_url: str | None = None
    confirm_delete_url: str | None = None


class CodeQLDatabase(GitHubResponse):
    id: int | None = None
    name: str | None = None
    language: str | None = None
    uploader: User | None = None
    content_type: str | None = None
    size: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    url: str | None = None
    commit_oid: str | None = None


class SARIFData(GitHubResponse):
    """Receipt of an uploaded SARIF file"""

    id: str | None = None
    url: str | None = None


class SARIFUpload(GitHubResponse):
    """Processing state of an uploaded SARIF file"""

    processing_status: ProcessingStatus | None = None
    analyses_url: str | None = None
    errors: list[str] = msgspec.field(default_factory=list)
