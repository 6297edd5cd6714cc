"""
Payment provider factory.

Provider Selection:
    Providers are selected by name ("stripe", "braintree"), case-insensitive.
    Use create_payment() for runtime strings and PaymentProvider members for
    names known up front.

Usage:
    from payments import create_payment

    payment = create_payment("stripe", {"apiKey": "sk_test_..."})
    charge = await payment.charge("tok_visa", 1000)

Adding New Providers:
    1. Create an adapter module implementing PaymentGateway
    2. Add a PaymentProvider member
    3. Register it in PROVIDERS below
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

import structlog

from core.dependencies import get_settings
from core.settings import Settings
from payments.base import PaymentGateway
from payments.braintree_payment import BraintreePayment
from payments.stripe_payment import StripePayment

log = structlog.get_logger(__name__)


class PaymentProvider(str, Enum):
    STRIPE = "stripe"
    BRAINTREE = "braintree"


# Maps provider to adapter class
PROVIDERS: dict[PaymentProvider, type] = {
    PaymentProvider.STRIPE: StripePayment,
    PaymentProvider.BRAINTREE: BraintreePayment,
}


class UnknownProviderError(ValueError):
    """Raised when a provider name matches no registered adapter."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unknown payment provider: {provider!r}")


def resolve_provider(provider: str | PaymentProvider) -> PaymentProvider:
    """
    Map a provider name to its PaymentProvider member.

    Raises:
        UnknownProviderError: If the name is not registered
    """
    if isinstance(provider, PaymentProvider):
        return provider
    try:
        return PaymentProvider(str(provider).strip().lower())
    except ValueError:
        raise UnknownProviderError(provider) from None


def create_payment(
    provider: str | PaymentProvider, config: Mapping[str, Any] | None = None
) -> PaymentGateway:
    """
    Get a provider adapter instance by name.

    Args:
        provider: Provider name or PaymentProvider member
        config: Adapter configuration mapping

    Returns:
        Configured adapter instance

    Raises:
        UnknownProviderError: If provider is unknown
    """
    key = resolve_provider(provider)
    log.debug("payment.provider_selected", provider=key.value)
    return PROVIDERS[key](config)


def create_payment_from_settings(
    settings: Settings | None = None, provider: str | PaymentProvider | None = None
) -> PaymentGateway:
    """Build an adapter from environment settings."""
    settings = settings or get_settings()
    key = resolve_provider(provider or settings.PAYMENT_PROVIDER)
    return create_payment(key, settings.provider_config(key.value))


def list_providers() -> list[str]:
    """Get list of available provider names."""
    return [provider.value for provider in PROVIDERS]
