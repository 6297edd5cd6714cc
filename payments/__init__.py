"""
Payment provider adapters.

One interface over several payment processor SDKs:
- config.py: PaymentConfig container shared by every adapter
- base.py: PaymentGateway protocol and vendor call helpers
- stripe_payment.py: Stripe implementation
- braintree_payment.py: Braintree implementation
- factory.py: provider lookup by name
"""

from payments.base import PaymentGateway, deep_merge
from payments.braintree_payment import BraintreePayment
from payments.config import PaymentConfig
from payments.factory import (
    PROVIDERS,
    PaymentProvider,
    UnknownProviderError,
    create_payment,
    create_payment_from_settings,
    list_providers,
)
from payments.stripe_payment import StripePayment

__all__ = [
    "PROVIDERS",
    "BraintreePayment",
    "PaymentConfig",
    "PaymentGateway",
    "PaymentProvider",
    "StripePayment",
    "UnknownProviderError",
    "create_payment",
    "create_payment_from_settings",
    "deep_merge",
    "list_providers",
]
