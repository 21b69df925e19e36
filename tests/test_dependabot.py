#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from ghmanager.api.dependabot import GitHubDependabotAlertsManager
from ghmanager.config import Directions
from ghmanager.records.dependabot import (
    DependabotAlert,
    DependabotAlertState,
    DependabotDismissedReason,
    DependencyScope,
    Ecosystem,
    SeverityLevel,
)


@pytest.fixture
def manager(make_manager) -> GitHubDependabotAlertsManager:
    return make_manager(GitHubDependabotAlertsManager)


def test_list_alerts(manager: GitHubDependabotAlertsManager, session):
    session.queue([{"number": 2, "state": "dismissed", "dismissed_reason": "tolerable_risk"}])
    alerts = manager.get_enterprise_dependabot_alerts(
        "acme",
        state=[DependabotAlertState.OPEN, DependabotAlertState.DISMISSED],
        severity=SeverityLevel.CRITICAL,
        first=10,
    )
    assert session.last["path"] == "/enterprises/acme/dependabot/alerts"
    assert session.last["params"] == {
        "state": "open,dismissed",
        "severity": "critical",
        "first": 10,
    }
    assert alerts[0].dismissed_reason == DependabotDismissedReason.TOLERABLE_RISK

    session.queue([])
    manager.get_organization_dependabot_alerts(
        "octo-org", ecosystem=[Ecosystem.PIP, Ecosystem.NPM], direction=Directions.DESC
    )
    assert session.last["path"] == "/orgs/octo-org/dependabot/alerts"
    assert session.last["params"] == {"ecosystem": "pip,npm", "direction": "desc"}

    session.queue([])
    manager.get_repository_dependabot_alerts(
        "octocat",
        "hello-world",
        manifest="requirements.txt",
        scope=DependencyScope.RUNTIME,
        page=3,
    )
    assert session.last["path"] == "/repos/octocat/hello-world/dependabot/alerts"
    assert session.last["params"] == {
        "manifest": "requirements.txt",
        "scope": "runtime",
        "page": 3,
    }


def test_get_alert(manager: GitHubDependabotAlertsManager, session):
    session.queue({"number": 1, "state": "open"})
    alert = manager.get_dependabot_alert("octocat", "hello-world", alert=1)
    assert session.last["path"] == "/repos/octocat/hello-world/dependabot/alerts/1"
    assert isinstance(alert, DependabotAlert)


def test_update_alert_returns_single_alert(manager: GitHubDependabotAlertsManager, session):
    session.queue({"number": 1, "state": "dismissed", "dismissed_reason": "not_used"})
    alert = manager.update_dependabot_alert(
        "octocat",
        "hello-world",
        alert=DependabotAlert(number=1),
        state=DependabotAlertState.DISMISSED,
        dismissed_reason=DependabotDismissedReason.NOT_USED,
    )
    assert session.last["method"] == "PATCH"
    assert session.last["path"] == "/repos/octocat/hello-world/dependabot/alerts/1"
    assert session.last["json"] == {"state": "dismissed", "dismissed_reason": "not_used"}
    assert isinstance(alert, DependabotAlert)
    assert alert.state == DependabotAlertState.DISMISSED


def test_update_alert_validation(manager: GitHubDependabotAlertsManager, session):
    with pytest.raises(ValueError):
        manager.update_dependabot_alert(
            "octocat", "hello-world", alert=1, state=DependabotAlertState.DISMISSED
        )
    with pytest.raises(ValueError):
        manager.update_dependabot_alert(
            "octocat", "hello-world", alert=1, state=DependabotAlertState.FIXED
        )
    assert session.calls == []

    manager.update_dependabot_alert("octocat", "hello-world", alert=1, state="open")
    assert session.last["json"] == {"state": "open"}
