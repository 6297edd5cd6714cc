"""
Payment Configuration Container

Holds the free-form configuration of one payment adapter together with the
vendor SDK client ("provider handle") built from it.

Usage:
    config = PaymentConfig({"apiKey": "sk_test_...", "stripe": {"retries": 2}})
    config.get("stripe.retries")            # 2
    config.set("stripe.timeout", 30).get()  # whole mapping
"""

from collections.abc import Mapping
from typing import Any


class PaymentConfig:
    """Nested key/value configuration with dotted-path access."""

    SEPARATOR = "."

    def __init__(self, config: Mapping[str, Any] | None = None):
        # Shallow copy; set() copies nested levels before writing into them
        self._config: dict[str, Any] = dict(config or {})
        self._provider: Any = None

    def get(self, path: str | None = None, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            path: Dotted path such as "obj.foo". None returns the whole mapping.
            default: Returned when the path does not resolve.
        """
        if path is None:
            return self._config

        node: Any = self._config
        for key in path.split(self.SEPARATOR):
            if not isinstance(node, Mapping) or key not in node:
                return default
            node = node[key]
        return node

    def set(self, path: str, value: Any) -> "PaymentConfig":
        """Write value at the dotted path, creating intermediate mappings."""
        *parents, leaf = path.split(self.SEPARATOR)
        node = self._config
        for key in parents:
            child = node.get(key)
            # Nested mappings may still be shared with the caller's original
            node[key] = dict(child) if isinstance(child, Mapping) else {}
            node = node[key]
        node[leaf] = value
        return self

    def get_provider_handle(self) -> Any:
        return self._provider

    def set_provider_handle(self, handle: Any) -> "PaymentConfig":
        self._provider = handle
        return self

    def __repr__(self) -> str:
        # Values may hold credentials
        return f"PaymentConfig(keys={sorted(self._config)})"
