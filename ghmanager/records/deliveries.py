from __future__ import annotations

from typing import Any

from .base import GitHubResponse, Record


class DeliveryRequest(Record):
    """Headers and payload of a delivery request or of its response"""

    headers: dict[str, Any] | None = None
    payload: Any = None


class Delivery(GitHubResponse):
    """One attempt to deliver a webhook"""

    id: int | None = None
    guid: str | None = None
    delivered_at: str | None = None
    redelivery: bool | None = None
    duration: float | None = None
    status: str | None = None
    status_code: int | None = None
    event: str | None = None
    action: str | None = None
    installation_id: int | None = None
    repository_id: int | None = None
    throttled_at: str | None = None
    url: str | None = None
    request: DeliveryRequest | None = None
    response: DeliveryRequest | None = None
