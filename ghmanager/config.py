#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Configuration and global constants for GitHub Manager
"""

import os
from enum import StrEnum

# Application information
APP_NAME = "gh-manager"
APP_VERSION = "0.1.0"

# GitHub API configuration
# GitHub API base
GITHUB_API_URL = "https://api.github.com"
# API version (as X-GitHub-Api-Version header)
GITHUB_API_VERSION = "2022-11-28"

# User information, only used to build the User-Agent header
GITHUB_USER_NAME = os.getenv("GITHUB_USER_NAME", "gh-manager")

# Default organization and repository to run live UTs against
# Make sure you have required permission sets
GITHUB_ORG_TEST = os.getenv("GITHUB_ORG_TEST", "github")
GITHUB_REPO_OWNER_TEST = os.getenv("GITHUB_REPO_OWNER_TEST", "octocat")
GITHUB_REPO_NAME_TEST = os.getenv("GITHUB_REPO_NAME_TEST", "Hello-World")

# Token from environment variable
GITHUB_TOKEN_DEFAULT = os.getenv("GITHUB_TOKEN") or os.getenv("GITHUB_CLI_API_TOKEN")
GITHUB_TOKEN_TEST = None

# Request timeout in seconds, unset means wait forever (requests default)
_timeout = os.getenv("GITHUB_REQUEST_TIMEOUT")
REQUEST_TIMEOUT_DEFAULT = float(_timeout) if _timeout else None

# Body size kept in error logs
ERROR_TEXT_LOG_LIMIT = 200


# Supported Media Types for GitHub API
class SupportMediaTypes(StrEnum):
    """Supported Media Types for GitHub API"""

    DEFAULT = "application/vnd.github+json"
    RAW = "application/vnd.github.raw+json"
    TEXT = "application/vnd.github.text+json"
    HTML = "application/vnd.github.html"
    # return all
    FULL = "application/vnd.github.full+json"
    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"


class ReturnFormat(StrEnum):
    """Shape of the value handed back by the managers

    - STRING: the raw response body
    - JSON: the decoded JSON body (dict or list)
    - LIBRARY_OBJECT: the parsed record (or list of records)
    """

    STRING = "string"
    JSON = "json"
    LIBRARY_OBJECT = "library_object"


class Directions(StrEnum):
    """Sort direction accepted by list endpoints"""

    ASC = "asc"
    DESC = "desc"


# Util functions
def get_github_token_default() -> str | None:
    """Get GitHub token from environment variables."""
    return GITHUB_TOKEN_DEFAULT


def get_github_token_test() -> str | None:
    """Get GitHub token used for UTs"""
    if GITHUB_TOKEN_TEST is not None:
        return GITHUB_TOKEN_TEST
    else:
        return GITHUB_TOKEN_DEFAULT


def unwrap_or(x, default):
    return x if x is not None else default
