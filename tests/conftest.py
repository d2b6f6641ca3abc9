"""Pytest fixtures for testing"""

import httpx
import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, List
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mocks.gateway_server.main import create_app as create_gateway_app
from payment_console.api.dependencies import get_payment_client, get_webhook_client
from payment_console.api.main import create_app
from payment_console.domain.models import Page, Payment, PaymentStatus
from payment_console.infrastructure.clients.payments import PaymentClient
from payment_console.infrastructure.clients.webhooks import WebhookClient

GATEWAY_BASE_URL = "http://gateway.test/api"
BASE_TIME = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_payment() -> Callable[..., Payment]:
    """Factory for payments with sensible defaults"""
    counter = {"n": 0}

    def _make(**overrides) -> Payment:
        counter["n"] += 1
        n = counter["n"]
        fields = dict(
            id=f"pay-{n:04d}",
            first_name="Test",
            last_name=f"User{n}",
            zip_code="12345",
            masked_card_number="**** **** **** 4242",
            amount=Decimal("25.00"),
            status=PaymentStatus.PROCESSED,
            created_at=BASE_TIME + timedelta(minutes=n),
        )
        fields.update(overrides)
        return Payment(**fields)

    return _make


@pytest.fixture
def sample_payments(make_payment) -> List[Payment]:
    """Small page covering every status"""
    return [
        make_payment(id="a1b2c3", first_name="Alice", last_name="Smith", zip_code="90210",
                     masked_card_number="**** **** **** 1111", status=PaymentStatus.PROCESSED,
                     created_at=BASE_TIME),
        make_payment(id="d4e5f6", first_name="Bob", last_name="Jones", zip_code="10001",
                     masked_card_number="**** **** **** 2222", status=PaymentStatus.FAILED,
                     created_at=BASE_TIME + timedelta(hours=2)),
        make_payment(id="g7h8i9", first_name="carol", last_name="Brown", zip_code="60601",
                     masked_card_number="**** **** **** 3333", status=PaymentStatus.PENDING,
                     created_at=BASE_TIME + timedelta(hours=1)),
    ]


def make_page(payments, page: int = 0, size: int = 10, total_elements: int | None = None) -> Page:
    total = len(payments) if total_elements is None else total_elements
    total_pages = -(-total // size)
    return Page(
        content=tuple(payments),
        page=page,
        size=size,
        total_elements=total,
        total_pages=total_pages,
        first=page == 0,
        last=page >= total_pages - 1,
    )


@pytest.fixture
def page_factory() -> Callable[..., Page]:
    """Build a Page around a list of payments"""
    return make_page


@pytest.fixture
def gateway_app() -> FastAPI:
    """In-memory payment gateway seeded with 23 payments"""
    return create_gateway_app()


@pytest.fixture
def gateway_transport(gateway_app: FastAPI) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=gateway_app)


@pytest.fixture
def payment_client(gateway_transport) -> PaymentClient:
    return PaymentClient(base_url=GATEWAY_BASE_URL, transport=gateway_transport)


@pytest.fixture
def webhook_client(gateway_transport) -> WebhookClient:
    return WebhookClient(base_url=GATEWAY_BASE_URL, transport=gateway_transport)


@pytest.fixture
def client(payment_client: PaymentClient, webhook_client: WebhookClient) -> TestClient:
    """Console API wired to the in-memory gateway"""
    app = create_app()
    app.dependency_overrides[get_payment_client] = lambda: payment_client
    app.dependency_overrides[get_webhook_client] = lambda: webhook_client
    return TestClient(app)
