"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from payment_console.infrastructure.clients.payments import PaymentClient
from payment_console.infrastructure.clients.webhooks import WebhookClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_payment_client() -> PaymentClient:
    """Provide payment gateway client instance"""
    return PaymentClient()


def get_webhook_client() -> WebhookClient:
    """Provide webhook gateway client instance"""
    return WebhookClient()
