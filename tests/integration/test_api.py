"""Integration tests for API endpoints"""

import httpx
import pytest
from fastapi.testclient import TestClient
from payment_console.api.dependencies import get_payment_client, get_webhook_client
from payment_console.api.main import create_app
from payment_console.infrastructure.clients.payments import PaymentClient
from payment_console.infrastructure.clients.webhooks import WebhookClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.get("/v1/payments")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "payment_console_page_fetch_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"
    assert client.get("/health").headers["X-Request-ID"]


def test_list_first_page(client: TestClient):
    """Default listing: page 1 of 10, newest first"""
    response = client.get("/v1/payments")

    assert response.status_code == 200
    data = response.json()
    assert len(data["payments"]) == 10
    assert data["pagination"]["total_items"] == 23
    assert data["pagination"]["total_pages"] == 3
    assert data["page_numbers"] == [1, 2, 3]
    assert data["range_label"] == "Showing 1-10 of 23"
    assert data["summary"] == "Total: 23 payments"
    assert data["error"] is None
    assert data["empty_state"] is None

    created = [p["created_at"] for p in data["payments"]]
    assert created == sorted(created, reverse=True)


def test_list_last_page(client: TestClient):
    response = client.get("/v1/payments", params={"page": 3, "size": 10})

    data = response.json()
    assert len(data["payments"]) == 3
    assert data["range_label"] == "Showing 21-23 of 23"
    assert data["pagination"]["has_next"] is False
    assert data["pagination"]["has_previous"] is True


def test_list_past_the_end_lands_on_last_page(client: TestClient):
    data = client.get("/v1/payments", params={"page": 9, "size": 5}).json()

    assert data["pagination"]["current_page"] == 5
    assert len(data["payments"]) == 3


def test_status_filter_applies_to_loaded_page_only(client: TestClient):
    """FAILED filter narrows page 1; totals still describe the whole dataset"""
    data = client.get("/v1/payments", params={"status": "FAILED"}).json()

    assert {p["status"] for p in data["payments"]} == {"FAILED"}
    assert len(data["payments"]) == 3
    assert data["summary"] == "Showing 3 of 23 payments"
    assert data["pagination"]["total_items"] == 23


def test_search_without_matches(client: TestClient):
    data = client.get("/v1/payments", params={"search": "nobody-here"}).json()

    assert data["payments"] == []
    assert data["summary"] is None
    assert data["empty_state"] == {
        "title": "No payments found",
        "hint": "Try adjusting your search or filters",
    }


def test_sort_by_name(client: TestClient):
    data = client.get("/v1/payments", params={"sort": "name-asc", "size": 20}).json()

    full_names = [f"{p['first_name']} {p['last_name']}" for p in data["payments"]]
    assert full_names == sorted(full_names, key=str.casefold)
    assert data["filters"]["sort"] == "name-asc"
    assert data["summary"] == "Total: 23 payments"


@pytest.mark.parametrize(
    "params",
    [{"size": 7}, {"status": "REFUNDED"}, {"sort": "amount"}, {"page": 0}],
)
def test_list_rejects_invalid_params(client: TestClient, params):
    response = client.get("/v1/payments", params=params)
    assert response.status_code == 422


def test_list_with_gateway_down():
    """Gateway failure is rendered as an error banner, not an HTTP error"""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    app = create_app()
    app.dependency_overrides[get_payment_client] = lambda: PaymentClient(
        base_url="http://gateway.test/api", transport=httpx.MockTransport(handler)
    )

    response = TestClient(app).get("/v1/payments")

    assert response.status_code == 200
    data = response.json()
    assert data["error"] == "Failed to load payments. Please try again later."
    assert data["payments"] == []
    assert data["empty_state"] is None
    assert data["loading"] is False


def test_list_empty_gateway(gateway_app, client: TestClient):
    gateway_app.state.payments.clear()

    data = client.get("/v1/payments").json()

    assert data["empty_state"]["hint"] == "Try creating your first payment"
    assert data["page_numbers"] == []
    assert data["show_pagination"] is False


def test_create_and_fetch_payment(client: TestClient):
    response = client.post(
        "/v1/payments",
        json={
            "first_name": "Jane",
            "last_name": "Doe",
            "zip_code": "12345",
            "card_number": "4111111111111111",
            "amount": 42.5,
        },
    )

    assert response.status_code == 201
    payment = response.json()
    assert payment["masked_card_number"] == "**** **** **** 1111"
    assert payment["status"] == "PROCESSED"

    fetched = client.get(f"/v1/payments/{payment['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["first_name"] == "Jane"

    # Newest payment shows up first on page 1
    listing = client.get("/v1/payments").json()
    assert listing["payments"][0]["id"] == payment["id"]
    assert listing["pagination"]["total_items"] == 24


def test_create_payment_surfaces_gateway_message(client: TestClient):
    response = client.post(
        "/v1/payments",
        json={
            "first_name": "Jane",
            "last_name": "Doe",
            "zip_code": "12345",
            "card_number": "4111",
            "amount": 10,
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Card number must be 13-19 digits"


def test_get_unknown_payment(client: TestClient):
    response = client.get("/v1/payments/does-not-exist")
    assert response.status_code == 404
    assert response.json()["detail"] == "Payment not found with id: does-not-exist"


def test_webhook_endpoints(client: TestClient):
    """Register, deactivate, activate, list and delete a webhook"""
    response = client.post("/v1/webhooks", json={"endpoint_url": "https://example.com/hook"})
    assert response.status_code == 201
    webhook_id = response.json()["id"]

    response = client.patch(f"/v1/webhooks/{webhook_id}/deactivate")
    assert response.status_code == 200
    assert response.json()["active"] is False

    response = client.patch(f"/v1/webhooks/{webhook_id}/activate")
    assert response.json()["active"] is True

    listing = client.get("/v1/webhooks").json()
    assert [w["id"] for w in listing] == [webhook_id]

    assert client.delete(f"/v1/webhooks/{webhook_id}").status_code == 204
    assert client.get("/v1/webhooks").json() == []


def test_register_webhook_surfaces_gateway_message(client: TestClient):
    response = client.post("/v1/webhooks", json={"endpoint_url": "ftp://example.com"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Endpoint URL must be a valid HTTP(S) URL"


def test_delete_unknown_webhook(client: TestClient):
    response = client.delete("/v1/webhooks/missing")
    assert response.status_code == 404


def test_webhook_gateway_down_uses_fallback_message():
    def handler(request):
        return httpx.Response(503, text="Service Unavailable")

    app = create_app()
    app.dependency_overrides[get_webhook_client] = lambda: WebhookClient(
        base_url="http://gateway.test/api", transport=httpx.MockTransport(handler)
    )

    response = TestClient(app).get("/v1/webhooks")

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to load webhooks"
