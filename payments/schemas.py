"""Typed views over adapter configuration and payment inputs."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StripeConfig(BaseModel):
    """Recognized Stripe options. Unknown keys are kept as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_key: str = Field(alias="apiKey")
    currency: str = "usd"


class BraintreeConfig(BaseModel):
    """Recognized Braintree options. Unknown keys are kept as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Left uncoerced: only a literal False selects production
    sandbox: Any = True
    merchant_id: str = Field(alias="merchantId")
    public_key: str = Field(alias="publicKey")
    private_key: str = Field(alias="privateKey")


# snake_case name -> camelCase alternative accepted from callers
CARD_FIELDS = {
    "amount": "amount",
    "card_number": "cardNumber",
    "card_holder_name": "cardHolderName",
    "exp_month": "expMonth",
    "exp_year": "expYear",
    "cvv": "cvv",
}


def card_fields(card: Mapping[str, Any]) -> dict[str, Any]:
    """
    Read raw card fields under either naming style.

    Values are passed along untouched and missing fields come back as None;
    checking card data is left to the vendor.
    """
    return {
        name: card.get(name, card.get(alias)) for name, alias in CARD_FIELDS.items()
    }
