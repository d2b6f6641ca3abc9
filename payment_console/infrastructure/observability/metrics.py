"""Prometheus metrics for page fetch outcomes, gateway latency and HTTP traffic"""

from prometheus_client import Counter, Histogram

# Page fetch metrics
page_fetch_counter = Counter(
    "payment_console_page_fetch_total",
    "Payment page fetches by outcome",
    ["outcome"],  # ok | failed | stale
)

page_fetch_latency_histogram = Histogram(
    "payment_console_page_fetch_seconds",
    "Payment gateway page fetch latency",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

# Gateway metrics
gateway_failures_counter = Counter(
    "payment_gateway_failures_total",
    "Failed payment gateway calls",
    ["operation"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_page_fetch(outcome: str, duration_seconds: float) -> None:
    """Record one page fetch; stale responses are counted but not timed"""
    page_fetch_counter.labels(outcome=outcome).inc()
    if outcome != "stale":
        page_fetch_latency_histogram.observe(duration_seconds)
