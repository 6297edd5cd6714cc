"""
PaymentConfig container tests.
"""

from types import MappingProxyType

import pytest

from payments.config import PaymentConfig


def test_empty_config():
    config = PaymentConfig()

    assert config.get() == {}
    assert config.get("foo") is None
    assert config.get_provider_handle() is None


def test_set_returns_container_for_chaining():
    config = PaymentConfig()

    assert config.set("foo", "bar") is config
    assert config.set("obj", {"foo": "bar"}) is config

    assert config.get("foo") == "bar"
    assert config.get("obj") == {"foo": "bar"}
    assert config.get("obj.foo") == "bar"


def test_predefined_config():
    config = PaymentConfig({"foo": "bar", "obj": {"foo": "bar"}})

    assert config.get() == {"foo": "bar", "obj": {"foo": "bar"}}
    assert config.get("foo") == "bar"
    assert config.get("obj.foo") == "bar"
    assert config.get("obj") == {"foo": "bar"}
    assert config.get("NOT_EXISTS") is None


@pytest.mark.parametrize(
    "path,value",
    [
        ("key", "value"),
        ("a.b", 10),
        ("a.b.c.d", True),
        ("nested.mapping", {"x": 1}),
    ],
)
def test_set_then_get(path, value):
    config = PaymentConfig({"a": {"other": 1}})

    config.set(path, value)

    assert config.get(path) == value


def test_set_creates_intermediates_and_keeps_siblings():
    config = PaymentConfig({"a": {"keep": 1}})

    config.set("a.b.c", 2)

    assert config.get() == {"a": {"keep": 1, "b": {"c": 2}}}


def test_set_replaces_scalar_intermediate():
    config = PaymentConfig({"a": "scalar"})

    config.set("a.b", 1)

    assert config.get("a") == {"b": 1}


def test_get_through_scalar_returns_default():
    config = PaymentConfig({"a": "scalar"})

    assert config.get("a.b") is None
    assert config.get("a.b", default="fallback") == "fallback"


def test_falsy_values_resolve():
    config = PaymentConfig({"sandbox": False, "count": 0})

    assert config.get("sandbox") is False
    assert config.get("count") == 0


def test_caller_mapping_is_copied():
    original = {"foo": "bar", "obj": {"foo": "bar"}}
    config = PaymentConfig(original)

    original["foo"] = "changed"
    original["new"] = 1

    assert config.get() == {"foo": "bar", "obj": {"foo": "bar"}}


def test_nested_set_leaves_caller_mapping_untouched():
    original = {"obj": {"foo": "bar", "deep": {"x": 1}}}
    config = PaymentConfig(original)

    config.set("obj.foo", "changed").set("obj.deep.x", 2)

    assert original == {"obj": {"foo": "bar", "deep": {"x": 1}}}
    assert config.get("obj.foo") == "changed"
    assert config.get("obj.deep.x") == 2


def test_read_only_mapping_values():
    frozen = MappingProxyType({"account": "acct_1"})
    config = PaymentConfig({"stripe": frozen})

    assert config.get("stripe.account") == "acct_1"

    config.set("stripe.timeout", 30)

    assert config.get("stripe") == {"account": "acct_1", "timeout": 30}
    assert dict(frozen) == {"account": "acct_1"}


def test_provider_handle_accessors():
    config = PaymentConfig()

    assert config.set_provider_handle("PROVIDER") is config
    assert config.get_provider_handle() == "PROVIDER"


def test_repr_hides_values():
    config = PaymentConfig({"apiKey": "sk_live_secret"})

    assert "sk_live_secret" not in repr(config)
    assert "apiKey" in repr(config)
