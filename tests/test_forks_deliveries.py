#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

from ghmanager.api.deliveries import GitHubRepoDeliveriesManager
from ghmanager.api.forks import GitHubForksManager
from ghmanager.records.deliveries import Delivery
from ghmanager.records.organizations import Organization
from ghmanager.records.repositories import ForkSort, Repository


def test_forks(make_manager, session):
    manager = make_manager(GitHubForksManager)

    session.queue([{"id": 1296269, "full_name": "octocat/Hello-World", "owner": {"login": "octocat"}}])
    forks = manager.get_forks("octocat", "Hello-World", sort=ForkSort.STARGAZERS, per_page=10)
    assert session.last["path"] == "/repos/octocat/Hello-World/forks"
    assert session.last["params"] == {"sort": "stargazers", "per_page": 10}
    assert forks[0].owner.login == "octocat"

    session.queue({"full_name": "octo-org/Hello-World", "fork": True}, status_code=202)
    fork = manager.create_fork(
        forks[0],
        organization=Organization(login="octo-org"),
        default_branch_only=True,
    )
    assert session.last["method"] == "POST"
    assert session.last["path"] == "/repos/octocat/Hello-World/forks"
    assert session.last["json"] == {"organization": "octo-org", "default_branch_only": True}
    assert isinstance(fork, Repository)
    assert fork.fork is True


def test_deliveries(make_manager, session):
    manager = make_manager(GitHubRepoDeliveriesManager)

    session.queue([{"id": 12345678, "guid": "0b989ba4", "status_code": 502, "redelivery": False}])
    deliveries = manager.get_repository_webhook_deliveries(
        "octocat", "Hello-World", hook_id=12, per_page=5, redelivery=False
    )
    assert session.last["path"] == "/repos/octocat/Hello-World/hooks/12/deliveries"
    assert session.last["params"] == {"per_page": 5, "redelivery": "false"}
    assert deliveries[0].status_code == 502

    session.queue({"id": 12345678, "request": {"headers": {}, "payload": {}}})
    delivery = manager.get_repository_webhook_delivery(
        "octocat", "Hello-World", hook_id=12, delivery=deliveries[0]
    )
    assert session.last["path"] == "/repos/octocat/Hello-World/hooks/12/deliveries/12345678"
    assert isinstance(delivery, Delivery)
    assert delivery.response is None

    session.queue(status_code=202)
    assert manager.redeliver_repository_webhook_delivery(
        "octocat", "Hello-World", hook_id=12, delivery=12345678
    )
    assert session.last["method"] == "POST"
    assert session.last["path"] == "/repos/octocat/Hello-World/hooks/12/deliveries/12345678/attempts"

    session.queue(status_code=200)
    assert (
        manager.redeliver_repository_webhook_delivery(
            "octocat", "Hello-World", hook_id=12, delivery=12345678
        )
        is False
    )
