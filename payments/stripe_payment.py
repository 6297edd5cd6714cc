"""
Stripe Payment Adapter

This module exposes Stripe behind the common payment operations:
- Charges (raw card checkout, token charge, tokenize-then-charge)
- Card and bank account tokens
- Customers and subscriptions
- Charge lookup and refunds
"""

from collections.abc import Mapping
from typing import Any

import stripe
import structlog

from core.logging import BusinessEvents
from payments.base import call_provider, deep_merge
from payments.config import PaymentConfig
from payments.schemas import StripeConfig, card_fields

log = structlog.get_logger(__name__)


class StripePayment:
    """Adapter for processing payments via Stripe."""

    name = "stripe"

    def __init__(self, config: Mapping[str, Any] | None = None):
        """
        Initialize the Stripe client from configuration.

        Args:
            config: Mapping with an "apiKey" (or "api_key") entry and an
                optional default "currency"
        """
        self.config = PaymentConfig(config)
        self.options = StripeConfig.model_validate(self.config.get())
        self.config.set_provider_handle(stripe.StripeClient(self.options.api_key))
        log.info(BusinessEvents.PROVIDER_CREATED, provider=self.name)

    @property
    def provider(self) -> Any:
        return self.config.get_provider_handle()

    async def _call(self, operation: str, func, *args, **kwargs) -> Any:
        return await call_provider(self.name, operation, func, *args, **kwargs)

    async def checkout(
        self, card: Mapping[str, Any], override: Mapping | None = None
    ) -> Any:
        """
        Charge raw credit card data.

        Example:
            await payment.checkout({
                "amount": 1000,
                "card_number": "4242424242424242",
                "card_holder_name": "Jane Doe",
                "exp_month": "01",
                "exp_year": "2030",
                "cvv": "123",
            })
        """
        card = card_fields(card)
        params = deep_merge(
            {
                "amount": card["amount"],
                "currency": self.options.currency,
                "capture": True,
                "source": {
                    "object": "card",
                    "number": card["card_number"],
                    "exp_month": card["exp_month"],
                    "exp_year": card["exp_year"],
                    "cvc": card["cvv"],
                    "name": card["card_holder_name"],
                },
            },
            override,
        )
        return await self._call(
            "checkout", self.provider.v1.charges.create, params=params
        )

    async def charge(
        self, source: str, amount: Any, override: Mapping | None = None
    ) -> Any:
        """Charge a token (or any other Stripe payment source id)."""
        params = deep_merge(
            {
                "amount": amount,
                "currency": self.options.currency,
                "capture": True,
                "source": source,
            },
            override,
        )
        return await self._call(
            "charge", self.provider.v1.charges.create, params=params
        )

    async def charge_card(
        self, card: Mapping[str, Any], amount: Any, override: Mapping | None = None
    ) -> Any:
        """
        Tokenize card data, then charge the resulting token.

        The charge is never attempted when tokenizing fails.
        """
        token = await self.create_card_token(card)
        return await self.charge(token["id"], amount, override)

    async def create_token(self, kind: str, data: Mapping[str, Any]) -> Any:
        """Create a token from payment method data of the given kind."""
        return await self._call(
            "create_token", self.provider.v1.tokens.create, params={kind: data}
        )

    async def create_card_token(self, card: Mapping[str, Any]) -> Any:
        return await self.create_token("card", card)

    async def create_bank_account_token(self, bank_account: Mapping[str, Any]) -> Any:
        return await self.create_token("bank_account", bank_account)

    async def get_token(self, token_id: str) -> Any:
        return await self._call(
            "get_token", self.provider.v1.tokens.retrieve, token_id
        )

    async def create_customer(
        self,
        customer: Mapping[str, Any],
        source: str,
        override: Mapping | None = None,
    ) -> Any:
        """Create a customer with an attached payment source."""
        params = deep_merge(
            {
                "email": customer.get("email"),
                "phone": customer.get("phone"),
                "source": source,
            },
            override,
        )
        return await self._call(
            "create_customer", self.provider.v1.customers.create, params=params
        )

    async def subscribe(
        self, customer_id: str, plan_id: str, override: Mapping | None = None
    ) -> Any:
        params = deep_merge({"customer": customer_id, "plan": plan_id}, override)
        return await self._call(
            "subscribe", self.provider.v1.subscriptions.create, params=params
        )

    async def unsubscribe(
        self, subscription_id: str, at_period_end: bool = False
    ) -> Any:
        return await self._call(
            "unsubscribe",
            self.provider.v1.subscriptions.cancel,
            subscription_id,
            params={"at_period_end": at_period_end},
        )

    async def get_subscriptions(
        self, customer_id: str, override: Mapping | None = None
    ) -> Any:
        params = deep_merge({"customer": customer_id}, override)
        return await self._call(
            "get_subscriptions", self.provider.v1.subscriptions.list, params=params
        )

    async def get_subscription(self, subscription_id: str) -> Any:
        return await self._call(
            "get_subscription", self.provider.v1.subscriptions.retrieve, subscription_id
        )

    async def update_subscription(self, subscription_id: str, override: Mapping) -> Any:
        return await self._call(
            "update_subscription",
            self.provider.v1.subscriptions.update,
            subscription_id,
            params=deep_merge({}, override),
        )

    async def retrieve(self, transaction_id: str) -> Any:
        """Retrieve a charge by id."""
        return await self._call(
            "retrieve", self.provider.v1.charges.retrieve, transaction_id
        )

    async def refund(self, transaction_id: str) -> Any:
        """Refund a settled charge in full."""
        return await self._call(
            "refund", self.provider.v1.refunds.create, params={"charge": transaction_id}
        )
