import math
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, Response

STATUSES = ("PROCESSED", "PENDING", "FAILED")
FIRST_NAMES = ("Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi")
LAST_NAMES = ("Smith", "Jones", "Brown", "Taylor", "Wilson", "Davies")


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def seed_payments(count: int = 23) -> List[Dict[str, Any]]:
    """Deterministic dataset, one payment per hour going back from 2024-06-01"""
    base = datetime(2024, 6, 1, tzinfo=timezone.utc)
    return [
        {
            "id": f"00000000-0000-0000-0000-{i:012d}",
            "firstName": FIRST_NAMES[i % len(FIRST_NAMES)],
            "lastName": LAST_NAMES[i % len(LAST_NAMES)],
            "zipCode": f"{10000 + i:05d}",
            "maskedCardNumber": f"**** **** **** {4000 + i:04d}",
            "amount": round(10 + i * 2.5, 2),
            "status": STATUSES[i % len(STATUSES)],
            "createdAt": (base - timedelta(hours=i)).isoformat().replace("+00:00", "Z"),
        }
        for i in range(count)
    ]


def error_response(request: Request, status: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={
            "timestamp": now_iso(),
            "status": status,
            "error": error,
            "message": message,
            "path": request.url.path,
        },
    )


def create_app(payments: Optional[List[Dict[str, Any]]] = None) -> FastAPI:
    app = FastAPI(title="Mock Payment Gateway", version="1.0.0")
    app.state.payments = list(seed_payments() if payments is None else payments)
    app.state.webhooks = {}
    router = APIRouter(prefix="/api")

    @app.get("/health")
    def health(): return {"status": "ok"}

    @router.get("/payments")
    def list_payments(request: Request, page: Optional[int] = None, size: Optional[int] = None):
        records = sorted(request.app.state.payments, key=lambda p: p["createdAt"], reverse=True)
        if page is None and size is None:
            return records

        page = page or 0
        size = size or 10
        if page < 0 or size <= 0:
            return error_response(request, 400, "Bad Request", "Page index must not be less than zero and size must be positive")

        total = len(records)
        total_pages = math.ceil(total / size)
        return {
            "content": records[page * size:(page + 1) * size],
            "page": page,
            "size": size,
            "totalElements": total,
            "totalPages": total_pages,
            "first": page == 0,
            "last": page >= total_pages - 1,
        }

    @router.get("/payments/{payment_id}")
    def get_payment(request: Request, payment_id: str):
        for record in request.app.state.payments:
            if record["id"] == payment_id:
                return record
        return error_response(request, 404, "Not Found", f"Payment not found with id: {payment_id}")

    @router.post("/payments", status_code=201)
    async def create_payment(request: Request):
        body = await request.json()
        card = str(body.get("cardNumber", ""))
        if not card.isdigit() or not 13 <= len(card) <= 19:
            return error_response(request, 400, "Bad Request", "Card number must be 13-19 digits")
        if not body.get("amount") or body["amount"] <= 0:
            return error_response(request, 400, "Bad Request", "Amount must be greater than zero")

        record = {
            "id": str(uuid.uuid4()),
            "firstName": body.get("firstName", ""),
            "lastName": body.get("lastName", ""),
            "zipCode": body.get("zipCode", ""),
            "maskedCardNumber": f"**** **** **** {card[-4:]}",
            "amount": body["amount"],
            "status": "PROCESSED",
            "createdAt": now_iso(),
        }
        request.app.state.payments.append(record)
        return JSONResponse(status_code=201, content=record)

    @router.get("/webhooks")
    def list_webhooks(request: Request):
        return list(request.app.state.webhooks.values())

    @router.post("/webhooks", status_code=201)
    async def register_webhook(request: Request):
        body = await request.json()
        url = body.get("endpointUrl") or ""
        if not url.startswith(("http://", "https://")):
            return error_response(request, 400, "Bad Request", "Endpoint URL must be a valid HTTP(S) URL")
        stamp = now_iso()
        webhook = {"id": str(uuid.uuid4()), "endpointUrl": url, "active": True, "createdAt": stamp, "updatedAt": stamp}
        request.app.state.webhooks[webhook["id"]] = webhook
        return JSONResponse(status_code=201, content=webhook)

    @router.get("/webhooks/{webhook_id}")
    def get_webhook(request: Request, webhook_id: str):
        webhook = request.app.state.webhooks.get(webhook_id)
        if webhook is None:
            return error_response(request, 404, "Not Found", f"Webhook not found with id: {webhook_id}")
        return webhook

    @router.delete("/webhooks/{webhook_id}")
    def delete_webhook(request: Request, webhook_id: str):
        if request.app.state.webhooks.pop(webhook_id, None) is None:
            return error_response(request, 404, "Not Found", f"Webhook not found with id: {webhook_id}")
        return Response(status_code=204)

    def set_active(request: Request, webhook_id: str, active: bool):
        webhook = request.app.state.webhooks.get(webhook_id)
        if webhook is None:
            return error_response(request, 404, "Not Found", f"Webhook not found with id: {webhook_id}")
        webhook.update(active=active, updatedAt=now_iso())
        return webhook

    @router.patch("/webhooks/{webhook_id}/activate")
    def activate_webhook(request: Request, webhook_id: str):
        return set_active(request, webhook_id, True)

    @router.patch("/webhooks/{webhook_id}/deactivate")
    def deactivate_webhook(request: Request, webhook_id: str):
        return set_active(request, webhook_id, False)

    app.include_router(router)
    return app


app = create_app()
