#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from ghmanager.api.gpgkeys import GitHubGPGKeysManager
from ghmanager.api.socialaccounts import GitHubSocialAccountsManager
from ghmanager.api.users import GitHubUsersManager
from ghmanager.config import ReturnFormat
from ghmanager.records.gpgkeys import GPGKey
from ghmanager.records.socialaccounts import SocialAccount
from ghmanager.records.users import ContextualInformation, SubjectType, User


def test_users(make_manager, session):
    manager = make_manager(GitHubUsersManager)

    session.queue({"login": "octocat", "id": 1, "plan": {"name": "pro", "space": 976562499}})
    me = manager.get_authenticated_user()
    assert session.last["path"] == "/user"
    assert me.plan.name == "pro"

    session.queue({"login": "octocat", "bio": "hi"})
    updated = manager.update_authenticated_user(bio="hi", hireable=False)
    assert session.last["method"] == "PATCH"
    assert session.last["json"] == {"hireable": False, "bio": "hi"}
    assert updated.bio == "hi"

    session.queue({"login": "ghost", "id": 10137})
    ghost = manager.get_user_by_id(10137)
    assert session.last["path"] == "/user/10137"
    assert ghost.login == "ghost"

    session.queue([{"login": "mojombo", "id": 1}])
    users = manager.get_users(since=0, per_page=1)
    assert session.last["path"] == "/users"
    assert session.last["params"] == {"since": 0, "per_page": 1}
    assert isinstance(users[0], User)

    manager.get_user(User(login="octocat"))
    assert session.last["path"] == "/users/octocat"


def test_user_hovercard(make_manager, session):
    manager = make_manager(GitHubUsersManager)

    session.queue({"contexts": [{"message": "Owns this repository", "octicon": "repo"}]})
    card = manager.get_user_contextual_information(
        "octocat", SubjectType.REPOSITORY, "1300192"
    )
    assert session.last["path"] == "/users/octocat/hovercard"
    assert session.last["params"] == {"subject_type": "repository", "subject_id": "1300192"}
    assert isinstance(card, ContextualInformation)
    assert card.contexts[0].octicon == "repo"

    with pytest.raises(ValueError):
        manager.get_user_contextual_information("octocat", SubjectType.ISSUE)


def test_gpg_keys(make_manager, session):
    manager = make_manager(GitHubGPGKeysManager)

    session.queue([{"id": 3, "name": "Octocat's GPG Key", "can_sign": True}])
    keys = manager.get_gpg_keys(per_page=1)
    assert session.last["path"] == "/user/gpg_keys"
    assert keys[0].can_sign is True

    session.queue({"id": 3}, status_code=201)
    key = manager.create_gpg_key("-----BEGIN PGP PUBLIC KEY BLOCK-----", name="laptop")
    assert session.last["method"] == "POST"
    assert session.last["json"] == {
        "name": "laptop",
        "armored_public_key": "-----BEGIN PGP PUBLIC KEY BLOCK-----",
    }
    assert isinstance(key, GPGKey)

    manager.get_gpg_key(key)
    assert session.last["path"] == "/user/gpg_keys/3"

    session.queue(status_code=204)
    assert manager.delete_gpg_key(3) is True
    assert session.last["method"] == "DELETE"
    assert session.last["path"] == "/user/gpg_keys/3"

    session.queue([])
    assert manager.get_user_gpg_keys("octocat") == []
    assert session.last["path"] == "/users/octocat/gpg_keys"


def test_social_accounts(make_manager, session):
    manager = make_manager(GitHubSocialAccountsManager)

    session.queue([{"provider": "twitter", "url": "https://twitter.com/github"}])
    accounts = manager.get_social_accounts()
    assert session.last["path"] == "/user/social_accounts"
    assert accounts[0] == SocialAccount(provider="twitter", url="https://twitter.com/github")

    session.queue([{"provider": "twitter", "url": "https://twitter.com/github"}], status_code=201)
    added = manager.add_social_accounts(["https://twitter.com/github"])
    assert session.last["method"] == "POST"
    assert session.last["json"] == {"account_urls": ["https://twitter.com/github"]}
    assert added[0].provider == "twitter"

    session.queue(status_code=204)
    assert manager.delete_social_accounts(accounts) is True
    assert session.last["method"] == "DELETE"
    assert session.last["json"] == {"account_urls": ["https://twitter.com/github"]}

    session.queue([{"provider": "linkedin", "url": "https://linkedin.com/in/octocat"}])
    raw = manager.get_user_social_accounts("octocat", return_format=ReturnFormat.JSON)
    assert session.last["path"] == "/users/octocat/social_accounts"
    assert raw[0]["provider"] == "linkedin"
