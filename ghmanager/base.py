#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Base class shared by every GitHub manager
"""

import logging
from abc import ABC, abstractmethod

from .config import (
    APP_NAME,
    APP_VERSION,
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_USER_NAME,
    REQUEST_TIMEOUT_DEFAULT,
    SupportMediaTypes,
)

logger = logging.getLogger(__name__)


class GitHubBase(ABC):
    """The abstract base class for all GitHub managers"""

    def __init__(
        self,
        token: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the GitHubBase.

        :param token: Access token for authentication (optional)
        :param timeout: Request timeout in seconds (optional)
        """
        self.app_name = APP_NAME
        self.app_version = APP_VERSION
        self.user_name = GITHUB_USER_NAME
        if token is None:
            logger.info("This manager will operate in unauthenticated mode.")
        else:
            logger.info("Using provided token for authentication.")
        self.token = token
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT_DEFAULT

    def _get_accept_media_default(self) -> str:
        return f"{SupportMediaTypes.DEFAULT.value}"

    def _get_user_agent_default(self) -> str:
        return f"{APP_NAME}/{APP_VERSION} ({self.user_name})"

    def _get_api_version(self) -> str:
        return GITHUB_API_VERSION

    def _build_url(self, endpoint: str) -> str:
        """
        Construct full API URL from endpoint
        :param endpoint: API endpoint e.g. `/repos/{owner}/{repo}/commits`, `/user`, `/orgs/{org}/members`
        """
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint
        return f"{GITHUB_API_URL}{endpoint}"

    @abstractmethod
    def _get(self, url: str, **kwargs):
        """
        Abstract method to perform a GET request
        :param url: Full/endpoint URL to send the GET request to
        """
        pass

    @abstractmethod
    def _patch(self, url: str, **kwargs):
        """
        Abstract method to perform a PATCH request
        :param url: Full/endpoint URL to send the PATCH request to
        """
        pass

    @abstractmethod
    def _put(self, url: str, **kwargs):
        """
        Abstract method to perform a PUT request
        :param url: Full/endpoint URL to send the PUT request to
        """
        pass

    @abstractmethod
    def _post(self, url: str, **kwargs):
        """
        Abstract method to perform a POST request
        :param url: Full/endpoint URL to send the POST request to
        """
        pass

    @abstractmethod
    def _delete(self, url: str, **kwargs):
        """
        Abstract method to perform a DELETE request
        :param url: Full/endpoint URL to send the DELETE request to
        """
        pass
