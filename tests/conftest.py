"""Test configuration and fixtures."""

import os
from unittest.mock import MagicMock

import pytest

from core.dependencies import clear_settings
from core.logging import configure_logging
from core.settings import Settings
from payments.braintree_payment import BraintreePayment
from payments.stripe_payment import StripePayment

STRIPE_CONFIG = {"apiKey": "sk_test_dummy"}

BRAINTREE_CONFIG = {
    "sandbox": True,
    "merchantId": "test_merchant_id",
    "publicKey": "test_public_key",
    "privateKey": "test_private_key",
}


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging():
    """Install the JSON logging setup once, the way a host application would."""
    configure_logging(Settings(ENVIRONMENT="test"), instrument=False)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    original_env = dict(os.environ)

    os.environ.update(
        {
            "ENVIRONMENT": "test",
            "DISABLE_TRACING": "true",
            "PAYMENT_PROVIDER": "stripe",
            "STRIPE_API_KEY": "sk_test_env",
            "BRAINTREE_MERCHANT_ID": "env_merchant_id",
            "BRAINTREE_PUBLIC_KEY": "env_public_key",
            "BRAINTREE_PRIVATE_KEY": "env_private_key",
        }
    )
    clear_settings()

    yield

    clear_settings()
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def stripe_handle():
    return MagicMock(name="StripeClient")


@pytest.fixture
def stripe_payment(stripe_handle):
    """Stripe adapter whose SDK client is a mock."""
    payment = StripePayment(STRIPE_CONFIG)
    payment.config.set_provider_handle(stripe_handle)
    return payment


@pytest.fixture
def braintree_handle():
    return MagicMock(name="BraintreeGateway")


@pytest.fixture
def braintree_payment(braintree_handle):
    """Braintree adapter whose SDK gateway is a mock."""
    payment = BraintreePayment(BRAINTREE_CONFIG)
    payment.config.set_provider_handle(braintree_handle)
    return payment
