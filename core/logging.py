"""
Structured logging for the payment adapters.

Nothing is configured on import: the adapters only emit events through
structlog. A host application calls configure_logging() once at startup
if it wants these defaults (JSON in test/production, console otherwise).
"""

import logging
import sys

import structlog
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from core.dependencies import get_settings
from core.settings import Settings


def get_log_level(settings: Settings | None = None) -> str:
    """Log level name from settings, INFO by default."""
    settings = settings or get_settings()
    return settings.LOG_LEVEL.upper()


def get_log_renderer(settings: Settings | None = None):
    """JSON lines for test and production, coloured console for development."""
    settings = settings or get_settings()
    if settings.ENVIRONMENT in ("test", "production"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True, sort_keys=False)


def configure_logging(
    settings: Settings | None = None, instrument: bool = True
) -> logging.Handler:
    """
    Route structlog through stdlib logging with a single stream handler.

    Args:
        settings: Settings to read LOG_LEVEL and ENVIRONMENT from
        instrument: Inject OpenTelemetry trace context into log records

    Returns:
        The handler installed on the root logger
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.ExceptionPrettyPrinter(),
            get_log_renderer(settings),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Tests read stdout; everything else goes to stderr
    stream = sys.stdout if settings.ENVIRONMENT == "test" else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(get_log_level(settings))

    # Vendor SDKs log every HTTP request at INFO
    logging.getLogger("stripe").setLevel(logging.WARNING)
    logging.getLogger("braintree").setLevel(logging.WARNING)

    if instrument:
        LoggingInstrumentor().instrument(set_logging_format=False)
    return handler


class BusinessEvents:
    """Event names logged around every provider call"""

    PROVIDER_CREATED = "payment.provider_created"
    PAYMENT_ATTEMPT = "payment.attempt"
    PAYMENT_SUCCESS = "payment.success"
    PAYMENT_FAILURE = "payment.failure"
