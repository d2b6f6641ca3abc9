"""Domain models - pure Python dataclasses representing payments, pages and listing state"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Tuple


class PaymentStatus(str, Enum):
    """Lifecycle status reported by the gateway"""

    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    FAILED = "FAILED"


class SortKey(str, Enum):
    """Display order for the loaded page"""

    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"


# Short forms used by older links ("sortBy=date" / "sortBy=name")
SORT_ALIASES = {
    "date": SortKey.DATE_DESC,
    "name": SortKey.NAME_ASC,
}

# Status filter values that mean "no filter"
ALL_STATUSES = ("", "All")


@dataclass(frozen=True)
class Payment:
    """Payment transaction as returned by the gateway"""

    id: str
    first_name: str
    last_name: str
    zip_code: str
    masked_card_number: str  # e.g. "**** **** **** 4242"
    amount: Decimal
    status: PaymentStatus
    created_at: datetime  # always timezone-aware

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Page:
    """One page of payments plus pagination metadata (page index is zero-based)"""

    content: Tuple[Payment, ...]
    page: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool


@dataclass(frozen=True)
class FilterSpec:
    """User-controlled search, status filter and sort order for the loaded page"""

    search: str = ""
    status: PaymentStatus | None = None  # None means "All"
    sort: SortKey = SortKey.DATE_DESC

    @property
    def is_active(self) -> bool:
        """True when the displayed list may be a subset of the loaded page"""
        return bool(self.search) or self.status is not None

    @classmethod
    def from_params(cls, search: str | None = None, status: str | None = None, sort: str | None = None) -> "FilterSpec":
        """
        Build a FilterSpec from raw query/form values.

        Raises:
            ValueError: On an unknown status or sort value
        """
        parsed_status = None
        if status is not None and status not in ALL_STATUSES:
            parsed_status = PaymentStatus(status)

        parsed_sort = SortKey.DATE_DESC
        if sort:
            parsed_sort = SORT_ALIASES.get(sort) or SortKey(sort)

        return cls(search=search or "", status=parsed_status, sort=parsed_sort)


@dataclass(frozen=True)
class PaginationState:
    """
    Controller-facing pagination state.

    current_page is 1-based; the gateway contract is zero-based, see
    zero_based_index. start_item/end_item are derived on every access.
    """

    current_page: int = 1
    items_per_page: int = 10
    total_pages: int = 0
    total_items: int = 0

    @property
    def zero_based_index(self) -> int:
        return self.current_page - 1

    @property
    def start_item(self) -> int:
        return (self.current_page - 1) * self.items_per_page + 1

    @property
    def end_item(self) -> int:
        return min(self.current_page * self.items_per_page, self.total_items)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class Webhook:
    """Webhook subscription registered with the gateway"""

    id: str
    endpoint_url: str
    active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CreatePaymentRequest:
    """Payload for creating a payment through the gateway"""

    first_name: str
    last_name: str
    zip_code: str
    card_number: str
    amount: Decimal

    def to_payload(self) -> dict:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "zipCode": self.zip_code,
            "cardNumber": self.card_number,
            "amount": float(self.amount),
        }


@dataclass
class EmptyState:
    """Message shown when the display list is empty"""

    title: str
    hint: str


@dataclass
class PaymentsListView:
    """Everything a view needs to render the payments listing"""

    payments: list[Payment]
    loading: bool
    error: str | None
    pagination: PaginationState
    filters: FilterSpec
    page_numbers: list[int | str]
    show_pagination: bool
    range_label: str
    summary: str | None
    empty_state: EmptyState | None
    items_per_page_options: Tuple[int, ...] = field(default_factory=tuple)
