#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest
import requests

from ghmanager.api.codescanning import GitHubCodeScanningManager
from ghmanager.config import Directions, ReturnFormat
from ghmanager.exceptions import NotFoundError
from ghmanager.records.codescanning import (
    AlertState,
    CodeQLDatabase,
    DismissedReason,
    ProcessingStatus,
    SARIFData,
    ScanningAlert,
    ScanningAnalysis,
    ScanningAnalysisDeletion,
    ScanningSort,
)

REPO = "/repos/octocat/hello-world/code-scanning"


@pytest.fixture
def manager(make_manager) -> GitHubCodeScanningManager:
    return make_manager(GitHubCodeScanningManager)


def test_list_alerts_for_each_level(manager: GitHubCodeScanningManager, session):
    session.queue([{"number": 4, "state": "open"}])
    alerts = manager.get_enterprise_scanning_alerts(
        "acme", state=AlertState.OPEN, per_page=5
    )
    assert session.last["path"] == "/enterprises/acme/code-scanning/alerts"
    assert session.last["params"] == {"state": "open", "per_page": 5}
    assert alerts[0].number == 4

    session.queue([])
    manager.get_organization_scanning_alerts(
        "octo-org", tool_name="CodeQL", direction=Directions.ASC, sort=ScanningSort.UPDATED
    )
    assert session.last["path"] == "/orgs/octo-org/code-scanning/alerts"
    assert session.last["params"] == {
        "tool_name": "CodeQL",
        "direction": "asc",
        "sort": "updated",
    }

    session.queue([])
    manager.get_repository_scanning_alerts("octocat", "hello-world", ref="refs/heads/main")
    assert session.last["path"] == f"{REPO}/alerts"
    assert session.last["params"] == {"ref": "refs/heads/main"}


def test_query_string_is_encoded(manager: GitHubCodeScanningManager, session):
    session.queue([])
    manager.get_repository_scanning_alerts("octocat/hello-world", state=AlertState.FIXED, page=2)
    call = session.last
    prepared = requests.Request("GET", call["url"], params=call["params"]).prepare()
    assert prepared.url == (
        "https://api.github.com/repos/octocat/hello-world/code-scanning/alerts?page=2&state=fixed"
    )


def test_get_and_update_alert(manager: GitHubCodeScanningManager, session):
    session.queue({"number": 42, "state": "open"})
    alert = manager.get_scanning_alert("octocat", "hello-world", alert=42)
    assert session.last["path"] == f"{REPO}/alerts/42"
    assert isinstance(alert, ScanningAlert)

    session.queue({"number": 42, "state": "dismissed", "dismissed_reason": "won't fix"})
    updated = manager.update_scanning_alert(
        "octocat",
        "hello-world",
        alert=alert,
        state=AlertState.DISMISSED,
        dismissed_reason=DismissedReason.WONT_FIX,
        dismissed_comment="legacy code",
    )
    assert session.last["method"] == "PATCH"
    assert session.last["path"] == f"{REPO}/alerts/42"
    assert session.last["json"] == {
        "state": "dismissed",
        "dismissed_reason": "won't fix",
        "dismissed_comment": "legacy code",
    }
    assert updated.dismissed_reason == DismissedReason.WONT_FIX


def test_dismiss_without_reason_is_refused(manager: GitHubCodeScanningManager, session):
    with pytest.raises(ValueError, match=r"^A dismissed_reason is required"):
        manager.update_scanning_alert(
            "octocat", "hello-world", alert=42, state=AlertState.DISMISSED
        )
    assert session.calls == []


def test_unknown_return_format_sends_nothing(manager: GitHubCodeScanningManager, session):
    with pytest.raises(ValueError):
        manager.update_scanning_alert(
            "octocat", "hello-world", alert=42, state=AlertState.OPEN, return_format="yaml"
        )
    assert session.calls == []


def test_alert_instances(manager: GitHubCodeScanningManager, session):
    session.queue([{"ref": "refs/heads/main", "state": "open", "message": {"text": "x"}}])
    instances = manager.get_scanning_alert_instances(
        "octocat", "hello-world", alert=42, ref="refs/heads/main"
    )
    assert session.last["path"] == f"{REPO}/alerts/42/instances"
    assert instances[0].message_text == "x"


def test_analyses(manager: GitHubCodeScanningManager, session):
    session.queue([{"id": 201, "deletable": True, "tool": {"name": "CodeQL"}}])
    analyses = manager.get_code_scanning_analyses("octocat", "hello-world", sarif_id="6c81")
    assert session.last["path"] == f"{REPO}/analyses"
    assert session.last["params"] == {"sarif_id": "6c81"}
    assert analyses[0].tool.name == "CodeQL"

    session.queue({"id": 201})
    analysis = manager.get_code_scanning_analysis("octocat", "hello-world", analysis=201)
    assert session.last["path"] == f"{REPO}/analyses/201"
    assert isinstance(analysis, ScanningAnalysis)

    session.queue(
        {
            "next_analysis_url": "https://api.github.com/repos/octocat/hello-world/code-scanning/analyses/41",
            "confirm_delete_url": None,
        }
    )
    deletion = manager.delete_code_scanning_analysis(
        "octocat", "hello-world", analysis=analysis, confirm_delete=True
    )
    assert session.last["method"] == "DELETE"
    assert session.last["path"] == f"{REPO}/analyses/201"
    assert session.last["params"] == {"confirm_delete": "true"}
    assert isinstance(deletion, ScanningAnalysisDeletion)
    assert deletion.next_analysis_url.endswith("/41")
    assert deletion.confirm_delete_url is None


def test_codeql_databases(manager: GitHubCodeScanningManager, session):
    session.queue([{"id": 1, "language": "java", "uploader": {"login": "octocat"}, "size": 1024}])
    databases = manager.get_codeql_databases("octocat", "hello-world")
    assert session.last["path"] == f"{REPO}/codeql/databases"
    assert databases[0].uploader.login == "octocat"

    session.queue({"id": 1, "language": "java"})
    database = manager.get_codeql_database("octocat", "hello-world", language="java")
    assert session.last["path"] == f"{REPO}/codeql/databases/java"
    assert isinstance(database, CodeQLDatabase)


def test_sarif_upload_and_status(manager: GitHubCodeScanningManager, session):
    session.queue({"id": "47177e22", "url": "https://api.github.com/x"}, status_code=202)
    receipt = manager.upload_sarif(
        "octocat",
        "hello-world",
        commit_sha="4b6472266afd7b471e86085a6659e8c7f2b119da",
        ref="refs/heads/master",
        sarif="H4sICMLLs2MAA2Zvby5zYXJpZgCrVspILC4uLcpJTUkFAHbEuBIPAAAA",
    )
    assert session.last["method"] == "POST"
    assert session.last["path"] == f"{REPO}/sarifs"
    assert set(session.last["json"]) == {"commit_sha", "ref", "sarif"}
    assert isinstance(receipt, SARIFData)

    session.queue({"processing_status": "complete", "analyses_url": "https://api.github.com/y"})
    status = manager.get_sarif_upload_information("octocat", "hello-world", sarif=receipt)
    assert session.last["path"] == f"{REPO}/sarifs/47177e22"
    assert status.processing_status == ProcessingStatus.COMPLETE
    assert status.errors == []


def test_missing_alert_raises(manager: GitHubCodeScanningManager, session):
    session.queue({"message": "Not Found"}, status_code=404)
    with pytest.raises(NotFoundError):
        manager.get_scanning_alert("octocat", "hello-world", alert=9999)


def test_json_format(manager: GitHubCodeScanningManager, session):
    session.queue([{"number": 1}])
    raw = manager.get_repository_scanning_alerts(
        "octocat", "hello-world", return_format=ReturnFormat.JSON
    )
    assert raw == [{"number": 1}]
