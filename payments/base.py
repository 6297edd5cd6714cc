"""
Shared payment adapter building blocks.

- PaymentGateway: the operation catalog every provider adapter implements
- deep_merge: default payload + caller override merging
- call_provider: runs one blocking vendor SDK call off the event loop
"""

import copy
import time
from collections.abc import Mapping
from typing import Any, Callable, Protocol, runtime_checkable

import structlog
from starlette.concurrency import run_in_threadpool

from core.logging import BusinessEvents
from core.metrics import record_operation
from core.tracing import get_tracer

log = structlog.get_logger(__name__)


@runtime_checkable
class PaymentGateway(Protocol):
    """
    Operations common to all provider adapters.

    Every method returns the vendor's raw result. Vendor exceptions are
    raised unchanged.
    """

    name: str

    async def checkout(self, card: Any, override: Mapping | None = None) -> Any: ...

    async def charge(
        self, source: str, amount: Any, override: Mapping | None = None
    ) -> Any: ...

    async def retrieve(self, transaction_id: str) -> Any: ...

    async def refund(self, transaction_id: str) -> Any: ...

    async def create_customer(
        self, customer: Mapping, source: str, override: Mapping | None = None
    ) -> Any: ...

    async def subscribe(
        self, customer_id: str, plan_id: str, override: Mapping | None = None
    ) -> Any: ...

    async def unsubscribe(self, subscription_id: str) -> Any: ...

    async def get_subscription(self, subscription_id: str) -> Any: ...

    async def update_subscription(
        self, subscription_id: str, override: Mapping
    ) -> Any: ...


def deep_merge(defaults: Mapping, override: Mapping | None = None) -> dict:
    """
    Merge override on top of defaults and return a new dict.

    Nested mappings are merged key by key; any other override value replaces
    the default. Neither argument is modified.
    """
    merged = copy.deepcopy(dict(defaults))
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


async def call_provider(
    provider: str, operation: str, func: Callable[..., Any], *args, **kwargs
) -> Any:
    """
    Await a blocking vendor SDK call.

    Returns whatever the SDK returns. Whatever the SDK raises is logged and
    re-raised as is.
    """
    log.info(BusinessEvents.PAYMENT_ATTEMPT, provider=provider, operation=operation)
    started = time.perf_counter()

    with get_tracer().start_as_current_span(f"payments.{provider}.{operation}"):
        try:
            result = await run_in_threadpool(func, *args, **kwargs)
        except Exception as e:
            record_operation(
                provider, operation, "failure", time.perf_counter() - started
            )
            log.error(
                BusinessEvents.PAYMENT_FAILURE,
                provider=provider,
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    record_operation(provider, operation, "success", time.perf_counter() - started)
    log.info(BusinessEvents.PAYMENT_SUCCESS, provider=provider, operation=operation)
    return result
