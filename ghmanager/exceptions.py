"""
Exceptions raised by the GitHub managers

Every error derives from `GitHubException`. A non-2xx answer is turned into
the class registered for its status code by `error_from_response`; a 2xx
answer whose body cannot be decoded raises `IncompleteResponseError`.

GitHubException
├── TransportError              # No response at all (connection, DNS, timeout)
├── InvalidPayload              # JSON does not fit the record it is read into
│   └── UnknownEnumValue        # A string outside the enum of its field
└── GitHubHTTPError             # Carries the response
    ├── IncompleteResponseError    # 2xx with a truncated or undecodable body
    └── CompleteResponseError      # Non-2xx status
        ├── AuthenticationFailed   # 401
        ├── ForbiddenError         # 403
        ├── NotFoundError          # 404
        ├── UnprocessableEntity    # 422
        ├── ClientError            # other 4xx
        └── ServerError            # 5xx
"""

from __future__ import annotations

from typing import Any

from requests import Response


class GitHubException(Exception):
    """Root of every error raised by gh-manager."""

    pass


class TransportError(GitHubException):
    """The request never got an HTTP response back.

    E.g. connection refused, DNS failure or timeout. The `requests`
    exception is kept on `exc`.
    """

    def __init__(self, exception: BaseException) -> None:
        self.exc = exception
        self.msg = f"Error while making a request to GitHub: {exception!r}"
        super().__init__(self.msg)

    def __str__(self) -> str:
        return f"{type(self.exc).__name__}: {self.msg}"


class InvalidPayload(GitHubException, ValueError):
    """A response body could not be read into the expected record."""

    pass


class UnknownEnumValue(InvalidPayload):
    """A response field held a string that is not a member of its enum.

    `location` is the JSON path of the field, e.g. `$.rule.severity`.
    """

    def __init__(self, value: Any, location: str) -> None:
        self.value = value
        self.location = location
        super().__init__(f"Invalid enum value {value!r} at {location}")


class GitHubHTTPError(GitHubException):
    """An answer came back but cannot be used.

    `message` and `documentation_url` are read from GitHub's error body
    when it has one.
    """

    def __init__(self, resp: Response):
        self.resp = resp
        self.code = resp.status_code
        self.text = resp.text
        self.message, self.documentation_url = _error_envelope(resp)
        super().__init__(self.code, self.text)

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.code} {self.message or self.text}"


class IncompleteResponseError(GitHubHTTPError):
    """The status was a success but the body is not valid JSON"""

    pass


class CompleteResponseError(GitHubHTTPError):
    """GitHub answered with a non-2xx status."""

    pass


class AuthenticationFailed(CompleteResponseError):
    """401, bad credentials or no token at all"""

    pass


class ForbiddenError(CompleteResponseError):
    """403 responses.

    Typical reasons:
    - Token lacks required scopes
    - Rate limit exceeded
    - The feature is disabled for the organization or repository
    """

    pass


class NotFoundError(CompleteResponseError):
    """404, also returned instead of 403 for private resources"""

    pass


class UnprocessableEntity(CompleteResponseError):
    """422 responses.

    Typical reasons:
    - Validation failed on the request body
    - Endpoint spammed
    """

    pass


class ClientError(CompleteResponseError):
    """A 4xx without a dedicated class."""

    pass


class ServerError(CompleteResponseError):
    """Any 5xx."""

    pass


_STATUS_ERRORS: dict[int, type[CompleteResponseError]] = {
    401: AuthenticationFailed,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableEntity,
}


def _error_envelope(resp: Response) -> tuple[str | None, str | None]:
    try:
        body = resp.json()
    except ValueError:
        return None, None
    if not isinstance(body, dict):
        return None, None
    return body.get("message"), body.get("documentation_url")


def error_from_response(response: Response) -> CompleteResponseError:
    """Return the exception matching the status of a non-2xx response."""
    status_code = response.status_code
    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code](response)
    if 400 <= status_code < 500:
        return ClientError(response)
    if 500 <= status_code < 600:
        return ServerError(response)
    return CompleteResponseError(response)
