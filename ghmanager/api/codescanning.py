#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11

"""
Code scanning alerts, analyses, CodeQL databases and SARIF uploads
"""

import logging

from ..config import Directions, ReturnFormat
from ..model import GitHubCore
from ..records.codescanning import (
    AlertInstance,
    AlertState,
    CodeQLDatabase,
    DismissedReason,
    SARIFData,
    SARIFUpload,
    ScanningAlert,
    ScanningAnalysis,
    ScanningAnalysisDeletion,
    ScanningSort,
    SecuritySeverityLevel,
    Severity,
)

logger = logging.getLogger(__name__)


class GitHubCodeScanningManager(GitHubCore):
    """Manage the code scanning of repositories, organizations and enterprises"""

    # Alerts
    def get_enterprise_scanning_alerts(
        self,
        enterprise: str,
        *,
        tool_name: str | None = None,
        tool_guid: str | None = None,
        before: str | None = None,
        after: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        direction: Directions | None = None,
        state: AlertState | None = None,
        sort: ScanningSort | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List code scanning alerts for the default branch of every repository in an enterprise.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#list-code-scanning-alerts-for-an-enterprise
        """
        return_format = self._return_format(return_format)
        url = f"/enterprises/{enterprise}/code-scanning/alerts"
        params = self._params(
            tool_name=tool_name,
            tool_guid=tool_guid,
            before=before,
            after=after,
            page=page,
            per_page=per_page,
            direction=direction,
            state=state,
            sort=sort,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, ScanningAlert.from_json_list)

    def get_organization_scanning_alerts(
        self,
        org,
        *,
        tool_name: str | None = None,
        tool_guid: str | None = None,
        before: str | None = None,
        after: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        direction: Directions | None = None,
        state: AlertState | None = None,
        sort: ScanningSort | None = None,
        severity: Severity | SecuritySeverityLevel | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List code scanning alerts for the default branch of every repository in an organization.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#list-code-scanning-alerts-for-an-organization
        """
        return_format = self._return_format(return_format)
        url = f"/orgs/{self._login(org)}/code-scanning/alerts"
        params = self._params(
            tool_name=tool_name,
            tool_guid=tool_guid,
            before=before,
            after=after,
            page=page,
            per_page=per_page,
            direction=direction,
            state=state,
            sort=sort,
            severity=severity,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, ScanningAlert.from_json_list)

    def get_repository_scanning_alerts(
        self,
        owner,
        repo: str | None = None,
        *,
        tool_name: str | None = None,
        tool_guid: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        ref: str | None = None,
        direction: Directions | None = None,
        sort: ScanningSort | None = None,
        state: AlertState | None = None,
        severity: Severity | SecuritySeverityLevel | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List code scanning alerts for a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#list-code-scanning-alerts-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/code-scanning/alerts"
        params = self._params(
            tool_name=tool_name,
            tool_guid=tool_guid,
            page=page,
            per_page=per_page,
            ref=ref,
            direction=direction,
            sort=sort,
            state=state,
            severity=severity,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, ScanningAlert.from_json_list)

    def get_scanning_alert(
        self,
        owner,
        repo: str | None = None,
        *,
        alert,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get a single code scanning alert by number.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#get-a-code-scanning-alert
        """
        return_format = self._return_format(return_format)
        alert_number = self._identifier(alert, "number")
        url = f"{self._repo_path(owner, repo)}/code-scanning/alerts/{alert_number}"
        resp = self._get(url)
        return self._returner(resp, return_format, ScanningAlert.from_json)

    def update_scanning_alert(
        self,
        owner,
        repo: str | None = None,
        *,
        alert,
        state: AlertState,
        dismissed_reason: DismissedReason | None = None,
        dismissed_comment: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Update the status of a single code scanning alert.
        `dismissed_reason` is required when `state` is `dismissed`.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#update-a-code-scanning-alert
        """
        return_format = self._return_format(return_format)
        if state == AlertState.DISMISSED and dismissed_reason is None:
            raise ValueError(
                "A dismissed_reason is required to dismiss a code scanning alert."
            )
        alert_number = self._identifier(alert, "number")
        url = f"{self._repo_path(owner, repo)}/code-scanning/alerts/{alert_number}"
        payload = self._payload(
            state=state,
            dismissed_reason=dismissed_reason,
            dismissed_comment=dismissed_comment,
        )
        resp = self._patch(url, json=payload)
        return self._returner(resp, return_format, ScanningAlert.from_json)

    def get_scanning_alert_instances(
        self,
        owner,
        repo: str | None = None,
        *,
        alert,
        page: int | None = None,
        per_page: int | None = None,
        ref: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List all instances of a code scanning alert.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#list-instances-of-a-code-scanning-alert
        """
        return_format = self._return_format(return_format)
        alert_number = self._identifier(alert, "number")
        url = f"{self._repo_path(owner, repo)}/code-scanning/alerts/{alert_number}/instances"
        params = self._params(page=page, per_page=per_page, ref=ref)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, AlertInstance.from_json_list)

    # Analyses
    def get_code_scanning_analyses(
        self,
        owner,
        repo: str | None = None,
        *,
        tool_name: str | None = None,
        tool_guid: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        ref: str | None = None,
        sarif_id: str | None = None,
        direction: Directions | None = None,
        sort: str | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the code scanning analyses of a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#list-code-scanning-analyses-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/code-scanning/analyses"
        params = self._params(
            tool_name=tool_name,
            tool_guid=tool_guid,
            page=page,
            per_page=per_page,
            ref=ref,
            sarif_id=sarif_id,
            direction=direction,
            sort=sort,
        )
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, ScanningAnalysis.from_json_list)

    def get_code_scanning_analysis(
        self,
        owner,
        repo: str | None = None,
        *,
        analysis,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get a single code scanning analysis.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#get-a-code-scanning-analysis-for-a-repository
        """
        return_format = self._return_format(return_format)
        analysis_id = self._identifier(analysis)
        url = f"{self._repo_path(owner, repo)}/code-scanning/analyses/{analysis_id}"
        resp = self._get(url)
        return self._returner(resp, return_format, ScanningAnalysis.from_json)

    def delete_code_scanning_analysis(
        self,
        owner,
        repo: str | None = None,
        *,
        analysis,
        confirm_delete: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Delete a code scanning analysis.
        Deleting the last analysis of a set needs `confirm_delete=True`.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#delete-a-code-scanning-analysis-from-a-repository
        """
        return_format = self._return_format(return_format)
        analysis_id = self._identifier(analysis)
        url = f"{self._repo_path(owner, repo)}/code-scanning/analyses/{analysis_id}"
        params = self._params(confirm_delete=confirm_delete)
        resp = self._delete(url, params=params)
        return self._returner(resp, return_format, ScanningAnalysisDeletion.from_json)

    # CodeQL databases
    def get_codeql_databases(
        self,
        owner,
        repo: str | None = None,
        *,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the CodeQL databases available in a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#list-codeql-databases-for-a-repository
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/code-scanning/codeql/databases"
        resp = self._get(url)
        return self._returner(resp, return_format, CodeQLDatabase.from_json_list)

    def get_codeql_database(
        self,
        owner,
        repo: str | None = None,
        *,
        language: str,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the CodeQL database of a language in a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#get-a-codeql-database-for-a-repository
        """
        return_format = self._return_format(return_format)
        language = self._identifier(language, "language")
        url = f"{self._repo_path(owner, repo)}/code-scanning/codeql/databases/{language}"
        resp = self._get(url)
        return self._returner(resp, return_format, CodeQLDatabase.from_json)

    # SARIF
    def upload_sarif(
        self,
        owner,
        repo: str | None = None,
        *,
        commit_sha: str,
        ref: str,
        sarif: str,
        checkout_uri: str | None = None,
        started_at: str | None = None,
        tool_name: str | None = None,
        validate: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Upload a SARIF file (gzip compressed then base64 encoded) with code scanning results.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#upload-an-analysis-as-sarif-data
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/code-scanning/sarifs"
        payload = self._payload(
            commit_sha=commit_sha,
            ref=ref,
            sarif=sarif,
            checkout_uri=checkout_uri,
            started_at=started_at,
            tool_name=tool_name,
            validate=validate,
        )
        resp = self._post(url, json=payload)
        return self._returner(resp, return_format, SARIFData.from_json)

    def get_sarif_upload_information(
        self,
        owner,
        repo: str | None = None,
        *,
        sarif,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get the processing status of a SARIF upload.
        GitHub Docs:
        https://docs.github.com/en/rest/code-scanning/code-scanning?apiVersion=2022-11-28#get-information-about-a-sarif-upload
        """
        return_format = self._return_format(return_format)
        sarif_id = self._identifier(sarif)
        url = f"{self._repo_path(owner, repo)}/code-scanning/sarifs/{sarif_id}"
        resp = self._get(url)
        return self._returner(resp, return_format, SARIFUpload.from_json)
