from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load .env file automatically
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider used when none is requested explicitly
    PAYMENT_PROVIDER: str = "stripe"

    # Stripe
    STRIPE_API_KEY: str = ""
    STRIPE_CURRENCY: str = "usd"

    # Braintree
    BRAINTREE_SANDBOX: bool = True
    BRAINTREE_MERCHANT_ID: str = ""
    BRAINTREE_PUBLIC_KEY: str = ""
    BRAINTREE_PRIVATE_KEY: str = ""

    # App settings
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Observability (Optional)
    OTEL_SERVICE_NAME: str = "payment-adapters"
    OTEL_EXPORTER_OTLP_ENDPOINT: str = "http://localhost:4317"
    DISABLE_TRACING: bool = False
    METRICS_ENABLED: bool = True

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    def provider_config(self, provider: str) -> dict[str, Any]:
        """
        Build the adapter configuration mapping for a provider.

        Args:
            provider: Provider name, e.g. "stripe" or "braintree"

        Returns:
            Dict in the shape the provider adapter expects
        """
        name = provider.strip().lower()
        if name == "stripe":
            return {"apiKey": self.STRIPE_API_KEY, "currency": self.STRIPE_CURRENCY}
        if name == "braintree":
            return {
                "sandbox": self.BRAINTREE_SANDBOX,
                "merchantId": self.BRAINTREE_MERCHANT_ID,
                "publicKey": self.BRAINTREE_PUBLIC_KEY,
                "privateKey": self.BRAINTREE_PRIVATE_KEY,
            }
        return {}
