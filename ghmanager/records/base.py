"""
Shared plumbing for the response records.

Every record is a `msgspec.Struct` converted from one JSON object with
`from_json`. GitHub sends `null` for most unset fields, those are dropped
before conversion so that every field falls back to its declared default.
"""

from __future__ import annotations

import re
from typing import Any, TypeVar

import msgspec

from ..exceptions import InvalidPayload, UnknownEnumValue

R = TypeVar("R", bound="Record")
T = TypeVar("T")

_ENUM_ERROR = re.compile(
    r"Invalid enum value '?(?P<value>.*?)'?(?: - at `(?P<path>[^`]*)`)?$"
)


def _drop_nulls(data: Any) -> Any:
    if isinstance(data, dict):
        return {key: _drop_nulls(value) for key, value in data.items() if value is not None}
    if isinstance(data, list):
        return [_drop_nulls(item) for item in data if item is not None]
    return data


def convert_json(data: Any, type_: type[T]) -> T:
    """
    Convert decoded JSON into `type_` (a record, a list of records or an enum).
    :raises UnknownEnumValue: a string is outside the enum of its field
    :raises InvalidPayload: any other mismatch between the JSON and `type_`
    """
    try:
        return msgspec.convert(_drop_nulls(data), type=type_, strict=False)
    except msgspec.ValidationError as exc:
        match = _ENUM_ERROR.match(str(exc))
        if match:
            raise UnknownEnumValue(match["value"], match["path"] or "$") from exc
        raise InvalidPayload(str(exc)) from exc


class Record(msgspec.Struct, kw_only=True):
    """A passive holder for one JSON object returned by GitHub"""

    @classmethod
    def from_json(cls: type[R], data: dict[str, Any] | None) -> R:
        return convert_json(data or {}, cls)

    @classmethod
    def from_json_list(cls: type[R], items: list[dict[str, Any]] | None) -> list[R]:
        return convert_json(items or [], list[cls])


class GitHubResponse(Record, kw_only=True):
    """Top-level record, may carry the error body GitHub sends back"""

    message: str | None = None
    documentation_url: str | None = None

    @property
    def instantiated_with_error(self) -> bool:
        return self.documentation_url is not None
