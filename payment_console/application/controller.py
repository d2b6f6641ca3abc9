"""Payments list controller - owns pagination and filter state for one listing"""

from typing import Callable, List
from payment_console.application.page_fetcher import PageFetcher
from payment_console.config import settings
from payment_console.domain import filtering, pagination
from payment_console.domain.models import (
    EmptyState,
    FilterSpec,
    PaginationState,
    Payment,
    PaymentsListView,
)

NO_PAYMENTS_TITLE = "No payments found"
NO_PAYMENTS_AT_ALL_HINT = "Try creating your first payment"
NO_PAYMENTS_MATCHING_HINT = "Try adjusting your search or filters"


class PaymentsListController:
    """
    Single owner of the listing's PaginationState and FilterSpec.

    Navigation goes through the pure reducers in domain.pagination; a request
    the reducer rejects never reaches the fetcher. Filters only narrow and
    reorder the page already loaded.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        state: PaginationState | None = None,
        filters: FilterSpec | None = None,
        on_page_change: Callable[[int], None] | None = None,
    ):
        self.fetcher = fetcher
        self.state = state or PaginationState(items_per_page=settings.default_items_per_page)
        self.filters = filters or FilterSpec()
        # View hook, e.g. scroll back to the top of the list
        self.on_page_change = on_page_change

    async def load(self) -> None:
        """Fetch the page for the current state"""
        page = await self.fetcher.fetch(self.state.zero_based_index, self.state.items_per_page)
        if page is not None:
            self.state = pagination.apply_page(self.state, page)

    async def change_page(self, target: int) -> bool:
        """Navigate to 1-based page `target`; returns False if it was out of range"""
        new_state = pagination.change_page(self.state, target)
        if new_state is self.state:
            return False

        self.state = new_state
        if self.on_page_change is not None:
            self.on_page_change(target)
        await self.load()
        return True

    async def change_items_per_page(self, new_size: int) -> bool:
        new_state = pagination.change_items_per_page(self.state, new_size)
        if new_state is self.state:
            return False

        self.state = new_state
        await self.load()
        return True

    async def change_filters(self, filters: FilterSpec) -> None:
        """
        Replace the filters and go back to page 1.

        Filtering is local, so the only fetch is the one needed when the
        reset moved us off another page.
        """
        self.filters = filters
        await self._back_to_first_page()

    async def reset_filters(self) -> None:
        await self.change_filters(FilterSpec())

    async def _back_to_first_page(self) -> None:
        if self.state.current_page == 1:
            return
        self.state = pagination.reset_to_first_page(self.state)
        await self.load()

    @property
    def payments(self) -> List[Payment]:
        """Filtered and sorted payments of the loaded page"""
        page = self.fetcher.page
        if page is None:
            return []
        return filtering.apply(page.content, self.filters)

    def view(self) -> PaymentsListView:
        payments = self.payments
        loading = self.fetcher.loading
        error = self.fetcher.error

        empty_state = None
        if not loading and error is None and not payments:
            hint = NO_PAYMENTS_AT_ALL_HINT if self.state.total_items == 0 else NO_PAYMENTS_MATCHING_HINT
            empty_state = EmptyState(title=NO_PAYMENTS_TITLE, hint=hint)

        summary = None
        if payments:
            summary = filtering.summary_text(len(payments), self.state.total_items, self.filters)

        return PaymentsListView(
            payments=payments,
            loading=loading,
            error=error,
            pagination=self.state,
            filters=self.filters,
            page_numbers=pagination.page_numbers(self.state.current_page, self.state.total_pages),
            show_pagination=self.state.total_pages > 1,
            range_label=pagination.range_label(self.state),
            summary=summary,
            empty_state=empty_state,
            items_per_page_options=pagination.ITEMS_PER_PAGE_OPTIONS,
        )
