#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from ghmanager.api.billing import GitHubBillingManager
from ghmanager.api.meta import GitHubMetaManager
from ghmanager.config import ReturnFormat
from ghmanager.records.billing import (
    ActionsBilling,
    AdvancedSecurityCommitters,
    PackagesBilling,
    SharedStorageBilling,
)
from ghmanager.records.meta import GitHubAPIRoot, GitHubMetaInformation


@pytest.mark.parametrize(
    "method, path, record_cls",
    [
        ("get_organization_actions_billing", "/orgs/github/settings/billing/actions", ActionsBilling),
        ("get_organization_packages_billing", "/orgs/github/settings/billing/packages", PackagesBilling),
        (
            "get_organization_shared_storage_billing",
            "/orgs/github/settings/billing/shared-storage",
            SharedStorageBilling,
        ),
        (
            "get_advanced_security_active_committers",
            "/orgs/github/settings/billing/advanced-security",
            AdvancedSecurityCommitters,
        ),
        ("get_user_actions_billing", "/users/github/settings/billing/actions", ActionsBilling),
        ("get_user_packages_billing", "/users/github/settings/billing/packages", PackagesBilling),
        (
            "get_user_shared_storage_billing",
            "/users/github/settings/billing/shared-storage",
            SharedStorageBilling,
        ),
    ],
)
def test_billing_paths(make_manager, session, method, path, record_cls):
    manager = make_manager(GitHubBillingManager)
    record = getattr(manager, method)("github")
    assert session.last["method"] == "GET"
    assert session.last["path"] == path
    assert isinstance(record, record_cls)


def test_shared_storage_fields(make_manager, session):
    manager = make_manager(GitHubBillingManager)
    session.queue(
        {
            "days_left_in_billing_cycle": 20,
            "estimated_paid_storage_for_month": 15,
            "estimated_storage_for_month": 40,
        }
    )
    storage = manager.get_organization_shared_storage_billing("github")
    assert storage.days_left_in_billing_cycle == 20
    assert storage.estimated_paid_storage_for_month == 15
    assert storage.estimated_storage_for_month == 40


def test_meta(make_manager, session):
    manager = make_manager(GitHubMetaManager)

    session.queue({"current_user_url": "https://api.github.com/user"})
    root = manager.get_github_api_root()
    assert session.last["path"] == "/"
    assert isinstance(root, GitHubAPIRoot)
    assert root.current_user_url == "https://api.github.com/user"

    session.queue({"api": ["192.30.252.0/22"], "verifiable_password_authentication": True})
    meta = manager.get_github_meta_information()
    assert session.last["path"] == "/meta"
    assert isinstance(meta, GitHubMetaInformation)
    assert meta.api == ["192.30.252.0/22"]

    session.queue(text="  MMM.  Hello  .MMM\n")
    assert manager.get_octocat("Hello") == "  MMM.  Hello  .MMM\n"
    assert session.last["path"] == "/octocat"
    assert session.last["params"] == {"s": "Hello"}

    session.queue(["2022-11-28"])
    assert manager.get_all_api_versions() == ["2022-11-28"]
    session.queue(["2022-11-28"])
    assert manager.get_all_api_versions(return_format=ReturnFormat.STRING) == '["2022-11-28"]'

    session.queue(text="Keep it logically awesome.\n")
    assert manager.get_github_zen() == "Keep it logically awesome."
    assert session.last["path"] == "/zen"
