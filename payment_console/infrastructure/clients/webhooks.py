"""Payment gateway HTTP client for webhook subscriptions"""

import httpx
from typing import Any, Dict, List
from payment_console.domain.models import Webhook
from payment_console.domain.exceptions import GatewayAPIError
from payment_console.infrastructure.clients.payments import gateway_error
from payment_console.utils.date_utils import parse_timestamp
from payment_console.config import settings


def parse_webhook(data: Dict[str, Any]) -> Webhook:
    return Webhook(
        id=data["id"],
        endpoint_url=data["endpointUrl"],
        active=bool(data["active"]),
        created_at=parse_timestamp(data["createdAt"]),
        updated_at=parse_timestamp(data["updatedAt"]),
    )


class WebhookClient:
    """Client for the remote payment gateway's /webhooks endpoints"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.gateway_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            headers={"Content-Type": "application/json"},
        ) as client:
            try:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()
                return response
            except httpx.HTTPError as e:
                raise gateway_error(e, self.timeout) from e

    async def _webhook(self, method: str, path: str, **kwargs) -> Webhook:
        response = await self._request(method, path, **kwargs)
        try:
            return parse_webhook(response.json())
        except (KeyError, ValueError, TypeError) as e:
            raise GatewayAPIError(f"Invalid webhook data from payment gateway: {e}") from e

    async def register(self, endpoint_url: str) -> Webhook:
        return await self._webhook("POST", "/webhooks", json={"endpointUrl": endpoint_url})

    async def list(self) -> List[Webhook]:
        response = await self._request("GET", "/webhooks")
        try:
            return [parse_webhook(item) for item in response.json()]
        except (KeyError, ValueError, TypeError) as e:
            raise GatewayAPIError(f"Invalid webhook data from payment gateway: {e}") from e

    async def get(self, webhook_id: str) -> Webhook:
        return await self._webhook("GET", f"/webhooks/{webhook_id}")

    async def delete(self, webhook_id: str) -> None:
        await self._request("DELETE", f"/webhooks/{webhook_id}")

    async def activate(self, webhook_id: str) -> Webhook:
        return await self._webhook("PATCH", f"/webhooks/{webhook_id}/activate")

    async def deactivate(self, webhook_id: str) -> Webhook:
        return await self._webhook("PATCH", f"/webhooks/{webhook_id}/deactivate")
