"""
Dependabot alerts of enterprises, organizations and repositories
"""

import logging

from ..config import Directions, ReturnFormat
from ..model import GitHubCore
from ..records.dependabot import (
    DependabotAlert,
    DependabotAlertState,
    DependabotDismissedReason,
    DependabotSort,
    DependencyScope,
    Ecosystem,
    SeverityLevel,
)

logger = logging.getLogger(__name__)


class GitHubDependabotAlertsManager(GitHubCore):
    """Read and triage Dependabot alerts

    The list filters `state`, `severity`, `ecosystem` and `package` accept
    a single value or a list, sent comma separated.
    """

    def _alerts_params(
        self,
        state=None,
        severity=None,
        ecosystem=None,
        package=None,
        manifest=None,
        scope: DependencyScope | None = None,
        sort: DependabotSort | None = None,
        direction: Directions | None = None,
        before: str | None = None,
        after: str | None = None,
        first: int | None = None,
        last: int | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ):
        return self._params(
            state=state,
            severity=severity,
            ecosystem=ecosystem,
            package=package,
            manifest=manifest,
            scope=scope,
            sort=sort,
            direction=direction,
            before=before,
            after=after,
            first=first,
            last=last,
            per_page=per_page,
            page=page,
        )

    def get_enterprise_dependabot_alerts(
        self,
        enterprise: str,
        *,
        state: DependabotAlertState | list[DependabotAlertState] | None = None,
        severity: SeverityLevel | list[SeverityLevel] | None = None,
        ecosystem: Ecosystem | list[Ecosystem] | None = None,
        package: str | list[str] | None = None,
        scope: DependencyScope | None = None,
        sort: DependabotSort | None = None,
        direction: Directions | None = None,
        before: str | None = None,
        after: str | None = None,
        first: int | None = None,
        last: int | None = None,
        per_page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List Dependabot alerts for the repositories owned by an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/dependabot/alerts?apiVersion=2022-11-28#list-dependabot-alerts-for-an-enterprise
        """
        return_format = self._return_format(return_format)
        url = f"/enterprises/{enterprise}/dependabot/alerts"
        params = self._alerts_params(
            state=state,
            severity=severity,
            ecosystem=ecosystem,
            package=package,
            scope=scope,
            sort=sort,
            direction=direction,
            before=before,
            after=after,
            first=first,
            last=last,
            per_page=per_page,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, DependabotAlert.from_json_list)

    def get_organization_dependabot_alerts(
        self,
        org,
        *,
        state: DependabotAlertState | list[DependabotAlertState] | None = None,
        severity: SeverityLevel | list[SeverityLevel] | None = None,
        ecosystem: Ecosystem | list[Ecosystem] | None = None,
        package: str | list[str] | None = None,
        scope: DependencyScope | None = None,
        sort: DependabotSort | None = None,
        direction: Directions | None = None,
        before: str | None = None,
        after: str | None = None,
        first: int | None = None,
        last: int | None = None,
        per_page: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List Dependabot alerts for an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/dependabot/alerts?apiVersion=2022-11-28#list-dependabot-alerts-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/dependabot/alerts"
        params = self._alerts_params(
            state=state,
            severity=severity,
            ecosystem=ecosystem,
            package=package,
            scope=scope,
            sort=sort,
            direction=direction,
            before=before,
            after=after,
            first=first,
            last=last,
            per_page=per_page,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, DependabotAlert.from_json_list)

    def get_repository_dependabot_alerts(
        self,
        owner,
        repo: str | None = None,
        *,
        state: DependabotAlertState | list[DependabotAlertState] | None = None,
        severity: SeverityLevel | list[SeverityLevel] | None = None,
        ecosystem: Ecosystem | list[Ecosystem] | None = None,
        package: str | list[str] | None = None,
        manifest: str | list[str] | None = None,
        scope: DependencyScope | None = None,
        sort: DependabotSort | None = None,
        direction: Directions | None = None,
        page: int | None = None,
        per_page: int | None = None,
        before: str | None = None,
        after: str | None = None,
        first: int | None = None,
        last: int | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List Dependabot alerts for a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/dependabot/alerts?apiVersion=2022-11-28#list-dependabot-alerts-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/dependabot/alerts"
        params = self._alerts_params(
            state=state,
            severity=severity,
            ecosystem=ecosystem,
            package=package,
            manifest=manifest,
            scope=scope,
            sort=sort,
            direction=direction,
            before=before,
            after=after,
            first=first,
            last=last,
            per_page=per_page,
            page=page,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, DependabotAlert.from_json_list)

    def get_dependabot_alert(
        self,
        owner,
        repo: str | None = None,
        *,
        alert,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get a single Dependabot alert by number.
        GitHub Docs:
        https://docs.github.com/en/rest/dependabot/alerts?apiVersion=2022-11-28#get-a-dependabot-alert
        """
        return_format = self._return_format(return_format)
        alert_number = self._identifier(alert, "number")
        url = f"{self._repo_path(owner, repo)}/dependabot/alerts/{alert_number}"
        resp = self._get(url)
        return self._returner(resp, return_format, DependabotAlert.from_json)

    def update_dependabot_alert(
        self,
        owner,
        repo: str | None = None,
        *,
        alert,
        state: DependabotAlertState,
        dismissed_reason: DependabotDismissedReason | None = None,
        dismissed_comment: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Dismiss or reopen a Dependabot alert.
        `dismissed_reason` is required when `state` is `dismissed`.
        GitHub Docs:
        https://docs.github.com/en/rest/dependabot/alerts?apiVersion=2022-11-28#update-a-dependabot-alert
        """
        return_format = self._return_format(return_format)
        match DependabotAlertState(state):
            case DependabotAlertState.DISMISSED if dismissed_reason is None:
                raise ValueError(
                    "A dismissed_reason is required to dismiss a Dependabot alert."
                )
            case DependabotAlertState.DISMISSED | DependabotAlertState.OPEN:
                pass
            case _:
                raise ValueError("The state should be one of these: 'dismissed', 'open'")
        alert_number = self._identifier(alert, "number")
        url = f"{self._repo_path(owner, repo)}/dependabot/alerts/{alert_number}"
        payload = self._payload(
            state=state,
            dismissed_reason=dismissed_reason,
            dismissed_comment=dismissed_comment,
        )
        resp = self._patch(url, json=payload)
        return self._returner(resp, return_format, DependabotAlert.from_json)
