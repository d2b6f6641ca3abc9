"""Payment gateway HTTP client for paginated payment listings"""

import httpx
from decimal import Decimal
from typing import Any, Dict, List
from payment_console.domain.models import CreatePaymentRequest, Page, Payment, PaymentStatus
from payment_console.domain.exceptions import GatewayAPIError
from payment_console.utils.date_utils import parse_timestamp
from payment_console.config import settings


def _text(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _amount(value: Any) -> Decimal:
    """Non-negative, finite amount; bools and nulls are not numbers here"""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"amount must be a number, got {type(value).__name__}")
    amount = Decimal(str(value))
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"amount must be a non-negative number, got {value!r}")
    return amount


def parse_payment(data: Dict[str, Any]) -> Payment:
    """
    Map the gateway's payment JSON onto a Payment.

    Raises:
        KeyError, TypeError, ValueError, ArithmeticError: On a malformed record
    """
    return Payment(
        id=_text(data, "id"),
        first_name=_text(data, "firstName"),
        last_name=_text(data, "lastName"),
        zip_code=_text(data, "zipCode"),
        masked_card_number=_text(data, "maskedCardNumber"),
        amount=_amount(data["amount"]),
        status=PaymentStatus(data["status"]),
        created_at=parse_timestamp(data["createdAt"]),
    )


def error_message(response: httpx.Response) -> str | None:
    """Extract `message` from the gateway's JSON error body, if any"""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


def gateway_error(e: httpx.HTTPError, timeout: float) -> GatewayAPIError:
    """Translate an httpx failure into GatewayAPIError"""
    if isinstance(e, httpx.TimeoutException):
        return GatewayAPIError(f"Payment gateway timeout after {timeout}s")
    if isinstance(e, httpx.HTTPStatusError):
        return GatewayAPIError(
            f"Payment gateway error: {e.response.status_code}",
            status_code=e.response.status_code,
            server_message=error_message(e.response),
        )
    return GatewayAPIError(f"Payment gateway unreachable: {e}")


class PaymentClient:
    """Client for the remote payment gateway's /payments endpoints"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.gateway_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            headers={"Content-Type": "application/json"},
        )

    async def get_page(self, page: int, size: int) -> Page:
        """
        Fetch one page of payments.

        Args:
            page: Zero-based page index
            size: Page size

        Raises:
            GatewayAPIError: On timeout, transport or HTTP errors, or invalid response
        """
        async with self._client() as client:
            try:
                response = await client.get("/payments", params={"page": page, "size": size})
                response.raise_for_status()
                data = response.json()

                return Page(
                    content=tuple(parse_payment(item) for item in data["content"]),
                    page=data["page"],
                    size=data["size"],
                    total_elements=data["totalElements"],
                    total_pages=data["totalPages"],
                    first=data["first"],
                    last=data["last"],
                )

            except httpx.HTTPError as e:
                raise gateway_error(e, self.timeout) from e
            except (KeyError, ValueError, TypeError, ArithmeticError) as e:
                raise GatewayAPIError(f"Invalid page data from payment gateway: {e}") from e

    async def get_all(self) -> List[Payment]:
        """Fetch every payment without pagination"""
        async with self._client() as client:
            try:
                response = await client.get("/payments")
                response.raise_for_status()
                return [parse_payment(item) for item in response.json()]

            except httpx.HTTPError as e:
                raise gateway_error(e, self.timeout) from e
            except (KeyError, ValueError, TypeError, ArithmeticError) as e:
                raise GatewayAPIError(f"Invalid payment data from payment gateway: {e}") from e

    async def get_by_id(self, payment_id: str) -> Payment:
        async with self._client() as client:
            try:
                response = await client.get(f"/payments/{payment_id}")
                response.raise_for_status()
                return parse_payment(response.json())

            except httpx.HTTPError as e:
                raise gateway_error(e, self.timeout) from e
            except (KeyError, ValueError, TypeError, ArithmeticError) as e:
                raise GatewayAPIError(f"Invalid payment data from payment gateway: {e}") from e

    async def create(self, request: CreatePaymentRequest) -> Payment:
        """
        Submit a new payment.

        Raises:
            GatewayAPIError: With server_message set when the gateway rejects the payload
        """
        async with self._client() as client:
            try:
                response = await client.post("/payments", json=request.to_payload())
                response.raise_for_status()
                return parse_payment(response.json())

            except httpx.HTTPError as e:
                raise gateway_error(e, self.timeout) from e
            except (KeyError, ValueError, TypeError, ArithmeticError) as e:
                raise GatewayAPIError(f"Invalid payment data from payment gateway: {e}") from e
