"""Webhook subscription endpoints, proxied to the payment gateway"""

from typing import List
from fastapi import APIRouter, Depends, Request, Response

from payment_console.api.dependencies import get_request_id, get_webhook_client
from payment_console.api.errors import gateway_http_error
from payment_console.api.v1.schemas import RegisterWebhookBody, WebhookSchema
from payment_console.domain.exceptions import GatewayAPIError
from payment_console.infrastructure.clients.webhooks import WebhookClient

router = APIRouter()


@router.get("/webhooks", response_model=List[WebhookSchema])
async def list_webhooks(request: Request, webhook_client: WebhookClient = Depends(get_webhook_client)):
    try:
        webhooks = await webhook_client.list()
    except GatewayAPIError as e:
        raise gateway_http_error(e, "Failed to load webhooks", get_request_id(request))
    return [WebhookSchema.from_domain(w) for w in webhooks]


@router.post("/webhooks", response_model=WebhookSchema, status_code=201)
async def register_webhook(
    body: RegisterWebhookBody,
    request: Request,
    webhook_client: WebhookClient = Depends(get_webhook_client),
):
    try:
        webhook = await webhook_client.register(body.endpoint_url)
    except GatewayAPIError as e:
        raise gateway_http_error(e, "Failed to register webhook", get_request_id(request))
    return WebhookSchema.from_domain(webhook)


@router.delete("/webhooks/{webhook_id}", status_code=204)
async def delete_webhook(
    webhook_id: str,
    request: Request,
    webhook_client: WebhookClient = Depends(get_webhook_client),
):
    try:
        await webhook_client.delete(webhook_id)
    except GatewayAPIError as e:
        raise gateway_http_error(e, "Failed to delete webhook", get_request_id(request))
    return Response(status_code=204)


@router.patch("/webhooks/{webhook_id}/activate", response_model=WebhookSchema)
async def activate_webhook(
    webhook_id: str,
    request: Request,
    webhook_client: WebhookClient = Depends(get_webhook_client),
):
    try:
        webhook = await webhook_client.activate(webhook_id)
    except GatewayAPIError as e:
        raise gateway_http_error(e, "Failed to update webhook", get_request_id(request))
    return WebhookSchema.from_domain(webhook)


@router.patch("/webhooks/{webhook_id}/deactivate", response_model=WebhookSchema)
async def deactivate_webhook(
    webhook_id: str,
    request: Request,
    webhook_client: WebhookClient = Depends(get_webhook_client),
):
    try:
        webhook = await webhook_client.deactivate(webhook_id)
    except GatewayAPIError as e:
        raise gateway_http_error(e, "Failed to update webhook", get_request_id(request))
    return WebhookSchema.from_domain(webhook)
