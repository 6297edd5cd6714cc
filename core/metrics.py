"""
Prometheus metrics for payment provider calls.

Counters and histograms live in the default prometheus_client registry so a
host application can expose them with its own /metrics endpoint.
"""

from prometheus_client import Counter, Histogram

from core.dependencies import get_settings

payment_operations = Counter(
    "payment_operations_total",
    "Total number of payment provider calls",
    ["provider", "operation", "outcome"],  # outcome: success / failure
)

payment_latency = Histogram(
    "payment_operation_latency_seconds",
    "Time spent waiting on the payment provider SDK",
    ["provider", "operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)


def record_operation(provider: str, operation: str, outcome: str, duration: float):
    """Record one finished provider call unless METRICS_ENABLED is off."""
    if not get_settings().METRICS_ENABLED:
        return
    payment_operations.labels(
        provider=provider, operation=operation, outcome=outcome
    ).inc()
    payment_latency.labels(provider=provider, operation=operation).observe(duration)
