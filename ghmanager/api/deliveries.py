"""
Deliveries of repository webhooks
"""

import logging

from ..config import ReturnFormat
from ..model import GitHubCore
from ..records.deliveries import Delivery

logger = logging.getLogger(__name__)


class GitHubRepoDeliveriesManager(GitHubCore):
    """Inspect and redeliver the webhook deliveries of a repository"""

    def get_repository_webhook_deliveries(
        self,
        owner,
        repo: str | None = None,
        *,
        hook_id: int,
        per_page: int | None = None,
        cursor: str | None = None,
        redelivery: bool | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        List the deliveries of a repository webhook. `cursor` comes from the `Link` header.
        GitHub Docs:
        https://docs.github.com/en/rest/repos/webhooks?apiVersion=2022-11-28#list-deliveries-for-a-repository-webhook
        """
        return_format = self._return_format(return_format)
        url = f"{self._repo_path(owner, repo)}/hooks/{hook_id}/deliveries"
        params = self._params(per_page=per_page, cursor=cursor, redelivery=redelivery)
        resp = self._get(url, params=params)
        return self._returner(resp, return_format, Delivery.from_json_list)

    def get_repository_webhook_delivery(
        self,
        owner,
        repo: str | None = None,
        *,
        hook_id: int,
        delivery,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ):
        """
        Get a delivery of a repository webhook, with its request and response.
        GitHub Docs:
        https://docs.github.com/en/rest/repos/webhooks?apiVersion=2022-11-28#get-a-delivery-for-a-repository-webhook
        """
        return_format = self._return_format(return_format)
        delivery_id = self._identifier(delivery)
        url = f"{self._repo_path(owner, repo)}/hooks/{hook_id}/deliveries/{delivery_id}"
        resp = self._get(url)
        return self._returner(resp, return_format, Delivery.from_json)

    def redeliver_repository_webhook_delivery(
        self, owner, repo: str | None = None, *, hook_id: int, delivery
    ) -> bool:
        """
        Redeliver a delivery of a repository webhook (202 => accepted).
        GitHub Docs:
        https://docs.github.com/en/rest/repos/webhooks?apiVersion=2022-11-28#redeliver-a-delivery-for-a-repository-webhook
        """
        delivery_id = self._identifier(delivery)
        url = f"{self._repo_path(owner, repo)}/hooks/{hook_id}/deliveries/{delivery_id}/attempts"
        return self._boolean("POST", url, true_code=202)
