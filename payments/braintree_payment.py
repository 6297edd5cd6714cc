"""
Braintree Payment Adapter

This module exposes Braintree behind the common payment operations:
- Transaction sales from raw card data or a payment method nonce
- Customers and subscriptions
- Transaction lookup and refunds

Braintree reports most failures through result objects (is_success /
errors) rather than exceptions. Those results are returned as is.
"""

from collections.abc import Mapping
from typing import Any

import braintree
import structlog

from core.logging import BusinessEvents
from payments.base import call_provider, deep_merge
from payments.config import PaymentConfig
from payments.schemas import BraintreeConfig, card_fields

log = structlog.get_logger(__name__)


class BraintreePayment:
    """Adapter for processing payments via Braintree."""

    name = "braintree"

    def __init__(self, config: Mapping[str, Any] | None = None):
        """
        Initialize the Braintree gateway from configuration.

        Args:
            config: Mapping with "merchantId", "publicKey", "privateKey" and
                an optional "sandbox" flag. Only sandbox=False selects the
                production environment.
        """
        self.config = PaymentConfig(config)
        self.options = BraintreeConfig.model_validate(self.config.get())
        environment = (
            braintree.Environment.Production
            if self.options.sandbox is False
            else braintree.Environment.Sandbox
        )
        self.config.set_provider_handle(
            braintree.BraintreeGateway(
                braintree.Configuration(
                    environment=environment,
                    merchant_id=self.options.merchant_id,
                    public_key=self.options.public_key,
                    private_key=self.options.private_key,
                )
            )
        )
        log.info(
            BusinessEvents.PROVIDER_CREATED,
            provider=self.name,
            sandbox=self.options.sandbox,
        )

    @property
    def provider(self) -> Any:
        return self.config.get_provider_handle()

    async def _call(self, operation: str, func, *args) -> Any:
        return await call_provider(self.name, operation, func, *args)

    async def checkout(
        self, card: Mapping[str, Any], override: Mapping | None = None
    ) -> Any:
        """Create a sale from raw credit card data."""
        card = card_fields(card)
        params = deep_merge(
            {
                "amount": card["amount"],
                "credit_card": {
                    "number": card["card_number"],
                    "cardholder_name": card["card_holder_name"],
                    "expiration_month": card["exp_month"],
                    "expiration_year": card["exp_year"],
                    "cvv": card["cvv"],
                },
                "options": {"submit_for_settlement": True},
            },
            override,
        )
        return await self._call("checkout", self.provider.transaction.sale, params)

    async def charge(
        self, source: str, amount: Any, override: Mapping | None = None
    ) -> Any:
        """Create a sale from a payment method nonce."""
        params = deep_merge(
            {
                "amount": amount,
                "payment_method_nonce": source,
                "options": {"submit_for_settlement": True},
            },
            override,
        )
        return await self._call("charge", self.provider.transaction.sale, params)

    async def create_customer(
        self,
        customer: Mapping[str, Any],
        source: str,
        override: Mapping | None = None,
    ) -> Any:
        params = deep_merge(
            {
                "email": customer.get("email"),
                "phone": customer.get("phone"),
                "payment_method_nonce": source,
            },
            override,
        )
        return await self._call(
            "create_customer", self.provider.customer.create, params
        )

    async def subscribe(
        self, customer_id: str, plan_id: str, override: Mapping | None = None
    ) -> Any:
        """
        Subscribe a vaulted payment method to a plan.

        Braintree subscriptions hang off a payment method token, so
        customer_id is the customer's payment method token here.
        """
        params = deep_merge(
            {"payment_method_token": customer_id, "plan_id": plan_id}, override
        )
        return await self._call("subscribe", self.provider.subscription.create, params)

    async def unsubscribe(self, subscription_id: str) -> Any:
        return await self._call(
            "unsubscribe", self.provider.subscription.cancel, subscription_id
        )

    async def get_subscription(self, subscription_id: str) -> Any:
        return await self._call(
            "get_subscription", self.provider.subscription.find, subscription_id
        )

    async def update_subscription(self, subscription_id: str, override: Mapping) -> Any:
        return await self._call(
            "update_subscription",
            self.provider.subscription.update,
            subscription_id,
            deep_merge({}, override),
        )

    async def retrieve(self, transaction_id: str) -> Any:
        return await self._call(
            "retrieve", self.provider.transaction.find, transaction_id
        )

    async def refund(self, transaction_id: str) -> Any:
        return await self._call(
            "refund", self.provider.transaction.refund, transaction_id
        )
