"""Page fetcher - one gateway request per call, with loading and error state"""

import logging
import time
from payment_console.config import settings
from payment_console.domain.exceptions import GatewayAPIError, InvalidPageRequestError
from payment_console.domain.models import Page
from payment_console.infrastructure.clients.payments import PaymentClient
from payment_console.infrastructure.observability.logging import log_page_fetch
from payment_console.infrastructure.observability.metrics import gateway_failures_counter, record_page_fetch

LOAD_FAILED_MESSAGE = "Failed to load payments. Please try again later."

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Loads pages from the gateway and keeps the last good one.

    Every fetch gets a sequence number. With discard_stale enabled, a response
    whose number is not the latest issued is dropped without touching page or
    error, so a slow older request can never overwrite a newer one. Nothing is
    cancelled: superseded requests still run to completion.
    """

    def __init__(self, client: PaymentClient, discard_stale: bool | None = None):
        self.client = client
        self.discard_stale = settings.discard_stale_responses if discard_stale is None else discard_stale
        self.page: Page | None = None
        self.error: str | None = None
        self._sequence = 0
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    async def fetch(self, page_index: int, page_size: int) -> Page | None:
        """
        Request page `page_index` (zero-based) of `page_size` payments.

        Returns:
            The fetched Page, or None when the fetch failed or was superseded

        Raises:
            InvalidPageRequestError: If page_index < 0 or page_size <= 0
        """
        if page_index < 0:
            raise InvalidPageRequestError(f"Page index must be >= 0, got {page_index}")
        if page_size <= 0:
            raise InvalidPageRequestError(f"Page size must be > 0, got {page_size}")

        self._sequence += 1
        sequence = self._sequence
        self._in_flight += 1
        start_time = time.perf_counter()

        try:
            page = await self.client.get_page(page_index, page_size)
        except GatewayAPIError as e:
            gateway_failures_counter.labels(operation="get_page").inc()
            if self._is_stale(sequence):
                self._record(sequence, page_index, page_size, "stale", start_time)
                return None
            logger.error(f"Failed to fetch payments: {e}", extra={"sequence": sequence})
            self.error = LOAD_FAILED_MESSAGE
            self._record(sequence, page_index, page_size, "failed", start_time)
            return None
        finally:
            self._in_flight -= 1

        if self._is_stale(sequence):
            self._record(sequence, page_index, page_size, "stale", start_time)
            return None

        self.page = page
        self.error = None
        self._record(sequence, page_index, page_size, "ok", start_time)
        return page

    def _is_stale(self, sequence: int) -> bool:
        return self.discard_stale and sequence != self._sequence

    def _record(self, sequence: int, page_index: int, page_size: int, outcome: str, start_time: float) -> None:
        duration = time.perf_counter() - start_time
        record_page_fetch(outcome, duration)
        log_page_fetch(sequence, page_index, page_size, outcome, duration * 1000)
