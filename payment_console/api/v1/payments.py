"""Payments listing and creation endpoints"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from payment_console.api.dependencies import get_payment_client, get_request_id
from payment_console.api.errors import gateway_http_error
from payment_console.api.v1.schemas import CreatePaymentBody, PaymentSchema, PaymentsListResponse
from payment_console.application.controller import PaymentsListController
from payment_console.application.page_fetcher import PageFetcher
from payment_console.config import settings
from payment_console.domain.exceptions import GatewayAPIError
from payment_console.domain.models import CreatePaymentRequest, FilterSpec, PaginationState
from payment_console.domain.pagination import ITEMS_PER_PAGE_OPTIONS
from payment_console.infrastructure.clients.payments import PaymentClient

router = APIRouter()


@router.get("/payments", response_model=PaymentsListResponse)
async def list_payments(
    page: int = Query(1, ge=1, description="1-based page number"),
    size: int = Query(settings.default_items_per_page, description="Items per page"),
    search: str = Query("", description="Case-insensitive search on name, ID, card or ZIP"),
    status: str = Query("", description="PENDING, PROCESSED, FAILED, or empty for all"),
    sort: str = Query("date-desc", description="date-desc, date-asc, name-asc or name-desc"),
    payment_client: PaymentClient = Depends(get_payment_client),
):
    """
    Render the payments listing for one page.

    Search, status and sort apply to the fetched page only. A gateway failure
    is reported through the `error` field rather than an HTTP error so the
    view can show its banner.
    """
    if size not in ITEMS_PER_PAGE_OPTIONS:
        raise HTTPException(status_code=422, detail=f"size must be one of {list(ITEMS_PER_PAGE_OPTIONS)}")

    try:
        filters = FilterSpec.from_params(search=search, status=status, sort=sort)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    controller = PaymentsListController(
        PageFetcher(payment_client),
        state=PaginationState(current_page=page, items_per_page=size),
        filters=filters,
    )
    await controller.load()

    # Deep link past the end: land on the last page instead of an empty one
    if controller.state.total_pages and page > controller.state.total_pages:
        await controller.change_page(controller.state.total_pages)

    return PaymentsListResponse.from_view(controller.view())


@router.get("/payments/{payment_id}", response_model=PaymentSchema)
async def get_payment(
    payment_id: str,
    request: Request,
    payment_client: PaymentClient = Depends(get_payment_client),
):
    try:
        payment = await payment_client.get_by_id(payment_id)
    except GatewayAPIError as e:
        raise gateway_http_error(e, "Failed to load payment", get_request_id(request))
    return PaymentSchema.from_domain(payment)


@router.post("/payments", response_model=PaymentSchema, status_code=201)
async def create_payment(
    body: CreatePaymentBody,
    request: Request,
    payment_client: PaymentClient = Depends(get_payment_client),
):
    """Create a payment; gateway validation messages are returned as-is"""
    try:
        payment = await payment_client.create(
            CreatePaymentRequest(
                first_name=body.first_name,
                last_name=body.last_name,
                zip_code=body.zip_code,
                card_number=body.card_number,
                amount=body.amount,
            )
        )
    except GatewayAPIError as e:
        raise gateway_http_error(e, "Failed to create payment", get_request_id(request))
    return PaymentSchema.from_domain(payment)
