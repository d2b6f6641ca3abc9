"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union
from pydantic import BaseModel, Field

from payment_console.domain.models import Payment, PaymentsListView, PaymentStatus, SortKey, Webhook


class PaymentSchema(BaseModel):
    """Single payment in a listing"""

    id: str
    first_name: str
    last_name: str
    zip_code: str
    masked_card_number: str
    amount: Decimal
    status: PaymentStatus
    created_at: datetime

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentSchema":
        return cls(
            id=payment.id,
            first_name=payment.first_name,
            last_name=payment.last_name,
            zip_code=payment.zip_code,
            masked_card_number=payment.masked_card_number,
            amount=payment.amount,
            status=payment.status,
            created_at=payment.created_at,
        )


class PaginationSchema(BaseModel):
    current_page: int
    items_per_page: int
    total_pages: int
    total_items: int
    start_item: int
    end_item: int
    has_previous: bool
    has_next: bool


class FiltersSchema(BaseModel):
    search: str
    status: Optional[PaymentStatus] = None
    sort: SortKey


class EmptyStateSchema(BaseModel):
    title: str
    hint: str


class PaymentsListResponse(BaseModel):
    """Response for GET /v1/payments - the composed listing view"""

    payments: List[PaymentSchema]
    loading: bool
    error: Optional[str] = None
    pagination: PaginationSchema
    filters: FiltersSchema
    page_numbers: List[Union[int, str]]
    show_pagination: bool
    range_label: str
    summary: Optional[str] = None
    empty_state: Optional[EmptyStateSchema] = None
    items_per_page_options: List[int]

    @classmethod
    def from_view(cls, view: PaymentsListView) -> "PaymentsListResponse":
        state = view.pagination
        return cls(
            payments=[PaymentSchema.from_domain(p) for p in view.payments],
            loading=view.loading,
            error=view.error,
            pagination=PaginationSchema(
                current_page=state.current_page,
                items_per_page=state.items_per_page,
                total_pages=state.total_pages,
                total_items=state.total_items,
                start_item=state.start_item,
                end_item=state.end_item,
                has_previous=state.has_previous,
                has_next=state.has_next,
            ),
            filters=FiltersSchema(
                search=view.filters.search,
                status=view.filters.status,
                sort=view.filters.sort,
            ),
            page_numbers=view.page_numbers,
            show_pagination=view.show_pagination,
            range_label=view.range_label,
            summary=view.summary,
            empty_state=(
                EmptyStateSchema(title=view.empty_state.title, hint=view.empty_state.hint)
                if view.empty_state
                else None
            ),
            items_per_page_options=list(view.items_per_page_options),
        )


class CreatePaymentBody(BaseModel):
    """Request body for POST /v1/payments"""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    card_number: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, description="Payment amount in USD")


class RegisterWebhookBody(BaseModel):
    """Request body for POST /v1/webhooks"""

    endpoint_url: str = Field(..., min_length=1)


class WebhookSchema(BaseModel):
    id: str
    endpoint_url: str
    active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, webhook: Webhook) -> "WebhookSchema":
        return cls(
            id=webhook.id,
            endpoint_url=webhook.endpoint_url,
            active=webhook.active,
            created_at=webhook.created_at,
            updated_at=webhook.updated_at,
        )
