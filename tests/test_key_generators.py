from __future__ import annotations

from timed_metrics import CallContext, DefaultKeyGenerator, Timed


class OrderService:
    pass


def test_override_key_is_returned_verbatim() -> None:
    gen = DefaultKeyGenerator()
    ctx = CallContext(OrderService(), "placeOrder")
    assert gen.get_key(ctx, Timed("custom.key")) == "custom.key"


def test_empty_override_derives_type_and_operation() -> None:
    gen = DefaultKeyGenerator()
    ctx = CallContext(OrderService(), "placeOrder")
    assert gen.get_key(ctx, Timed()) == "OrderService.placeOrder"


def test_class_receiver_uses_class_name() -> None:
    ctx = CallContext(OrderService, "create")
    assert DefaultKeyGenerator().get_key(ctx, Timed("")) == "OrderService.create"


def test_free_function_falls_back_to_owner() -> None:
    ctx = CallContext(None, "load", owner="repository")
    assert DefaultKeyGenerator().get_key(ctx, Timed()) == "repository.load"


def test_no_receiver_and_no_owner_is_still_non_empty() -> None:
    ctx = CallContext(None, "load")
    assert DefaultKeyGenerator().get_key(ctx, Timed()) == "function.load"
