"""
This module provides the basic models shared by every manager.
"""

import logging
from enum import Enum
from typing import Any, Callable
from urllib.parse import quote

import requests

from .base import GitHubBase
from .config import ERROR_TEXT_LOG_LIMIT, GITHUB_API_URL, ReturnFormat
from .exceptions import (
    GitHubHTTPError,
    IncompleteResponseError,
    TransportError,
    error_from_response,
)

logger = logging.getLogger(__name__)


class GitHubCore(GitHubBase):
    """The base object for all managers, owns the HTTP session.

    Provide the request plumbing, the owner/repo resolution and the
    dispatch on `ReturnFormat`.
    """

    api_root: str = GITHUB_API_URL

    def __init__(
        self,
        token: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(token, timeout)
        self.session = session if session is not None else requests.Session()
        self.headers = {
            "Accept": self._get_accept_media_default(),
            "User-Agent": self._get_user_agent_default(),
            "X-GitHub-Api-Version": self._get_api_version(),
        }
        if self.token:
            self.headers["Authorization"] = f"token {self.token}"

    def _request(self, method: str, url: str, expected: tuple[int, ...] = (), **kwargs):
        """
        Unified low-level HTTP request handler for API calls.
        :param method: HTTP method to use (e.g., 'GET', 'POST', 'PATCH', 'PUT', 'DELETE').
        :param url: Full URL or API endpoint path to send the request to.
        :param expected: Error statuses that answer the request, logged at DEBUG only.

        Other selected arguments in kwargs
        :param headers: Optional dictionary of HTTP headers overriding the default headers.
        :param params: Optional dictionary to send as a list of params in the query string.
        :param json: Optional json payload to send in the request body.
        :param timeout: Optional timeout overriding the manager timeout, in seconds.
        :return: The `requests.Response` object resulting from the HTTP request.
        :raises: Raises `TransportError` or `GitHubHTTPError` from custom exceptions.
        """
        if not url.startswith("http"):
            url = self._build_url(endpoint=url)
        extra_headers: dict[str, str] = kwargs.pop("headers", None) or {}
        kwargs["headers"] = self.headers | extra_headers
        kwargs.setdefault("timeout", self.timeout)
        try:
            resp = self.session.request(method.upper(), url, **kwargs)
        except requests.exceptions.RequestException as exc:
            raise TransportError(exc)
        # For HTTP success code
        if 200 <= resp.status_code < 300:
            return resp
        # For HTTP error code
        err: GitHubHTTPError = error_from_response(resp)
        log = logger.debug if resp.status_code in expected else logger.error
        log(
            "GitHub HTTP error during %s %s: status=%s, text(partial)=%s",
            method.upper(),
            url,
            err.code,
            err.text[:ERROR_TEXT_LOG_LIMIT],
        )
        raise err

    def _delete(self, url: str, **kwargs):
        logger.debug("DELETE %s with %s", url, kwargs)
        return self._request("DELETE", url, **kwargs)

    def _get(self, url: str, **kwargs):
        logger.debug("GET %s with %s", url, kwargs)
        if "json" in kwargs:
            logger.warning(
                "⚠️ A json payload exists in GET request. You may want to use `params` instead"
            )
        kwargs.pop("json", None)
        return self._request("GET", url, **kwargs)

    def _patch(self, url: str, **kwargs):
        logger.debug("PATCH %s with %s", url, kwargs)
        return self._request("PATCH", url, **kwargs)

    def _post(self, url: str, **kwargs):
        logger.debug("POST %s with %s", url, kwargs)
        return self._request("POST", url, **kwargs)

    def _put(self, url: str, **kwargs):
        logger.debug("PUT %s with %s", url, kwargs)
        return self._request("PUT", url, **kwargs)

    def _boolean(
        self,
        method: str,
        url: str,
        true_code: int = 204,
        false_code: int | None = None,
        **kwargs,
    ) -> bool:
        """
        Send a request whose outcome is only signalled by the status code.

        The error body is already logged by `_request`, here it is reported
        as `False`. `false_code` is the status a check endpoint uses for "no",
        it is not logged as an error. Transport failures still propagate.
        """
        expected = () if false_code is None else (false_code,)
        try:
            resp = self._request(method, url, expected=expected, **kwargs)
        except GitHubHTTPError as err:
            if err.code != false_code:
                logger.warning("%s %s was not applied (status=%s)", method.upper(), url, err.code)
            return False
        return resp.status_code == true_code

    @staticmethod
    def _json(resp: requests.Response):
        # Some endpoints answer with an empty body instead of `{}`
        if not resp.text or not resp.text.strip():
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.error("Undecodable body: %s", resp.text[:ERROR_TEXT_LOG_LIMIT])
            raise IncompleteResponseError(resp) from exc

    @staticmethod
    def _return_format(return_format: ReturnFormat | str) -> ReturnFormat:
        """Check the requested format before anything is sent"""
        try:
            return ReturnFormat(return_format)
        except ValueError:
            accepted = ", ".join(f.value for f in ReturnFormat)
            raise ValueError(
                f"Unknown return format {return_format!r}, use one of: {accepted}"
            ) from None

    def _returner(
        self,
        resp: requests.Response,
        return_format: ReturnFormat | str,
        parser: Callable[[Any], Any],
    ):
        """Format the response as requested by the caller"""
        match self._return_format(return_format):
            case ReturnFormat.STRING:
                return resp.text
            case ReturnFormat.JSON:
                return self._json(resp)
            case ReturnFormat.LIBRARY_OBJECT:
                return parser(self._json(resp))

    @staticmethod
    def _value(value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @classmethod
    def _params(cls, **kwargs) -> dict[str, Any]:
        """
        Build query parameters, dropping the unset ones.
        Enums are sent by value, booleans as `true`/`false` and lists comma separated.
        """
        params: dict[str, Any] = {}
        for key, value in kwargs.items():
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, bool):
                value = str(value).lower()
            elif isinstance(value, (list, tuple, set)):
                value = ",".join(str(cls._value(v)) for v in value)
            params[key] = value
        return params

    @classmethod
    def _payload(cls, **kwargs) -> dict[str, Any]:
        """Build a JSON body, dropping the unset fields"""
        payload: dict[str, Any] = {}
        for key, value in kwargs.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple, set)):
                value = [cls._value(v) for v in value]
            payload[key] = cls._value(value)
        return payload

    @staticmethod
    def _segment(value, safe: str = "/") -> str:
        """Percent-encode a path segment, `#`, `?` and `%` included"""
        return quote(str(value), safe=safe)

    @staticmethod
    def _login(value) -> str:
        """Return the login of a User/Organization record, or the given string"""
        login = getattr(value, "login", value)
        if not login:
            raise ValueError("A login (or a record carrying one) is required.")
        return str(login)

    @staticmethod
    def _identifier(value, attr: str = "id"):
        """Return the `attr` of a record, or the value itself"""
        return getattr(value, attr, value)

    @staticmethod
    def _repo_path(owner, repo: str | None = None) -> str:
        """
        Return `/repos/{owner}/{repo}`.
        :param owner: owner login, a Repository record, or a `owner/repo` full name
        :param repo: repository name, omitted when `owner` already identifies it
        """
        match (owner, repo):
            case (str() as o, str() as r):
                return f"/repos/{o}/{r}"
            case (str() as full_name, None) if "/" in full_name:
                return f"/repos/{full_name}"
            case (_, None) if getattr(owner, "full_name", None):
                return f"/repos/{owner.full_name}"
            case (_, None) if getattr(owner, "name", None) and getattr(
                getattr(owner, "owner", None), "login", None
            ):
                return f"/repos/{owner.owner.login}/{owner.name}"
            case _:
                raise ValueError(
                    "You must provide both owner and repo, or a Repository record."
                )
