"""
Timed order service demo.

Run: python examples/order_service.py
Samples are logged and observed on the default Prometheus registry.
"""
from __future__ import annotations

import time

from prometheus_client import REGISTRY

from timed_metrics import FanoutSink, LoggingSink, PrometheusSink, TimingInterceptor, timed
from timed_metrics.core.observability.logging_config import setup_logging

interceptor = TimingInterceptor(FanoutSink(LoggingSink(), PrometheusSink()))


@interceptor.instrument
class OrderService:
    @timed()
    def placeOrder(self, sku: str) -> str:
        time.sleep(0.02)
        return f"order-{sku}"

    @timed("orders.cancel")
    def cancel(self, order_id: str) -> None:
        raise LookupError(order_id)


def main() -> None:
    setup_logging()
    svc = OrderService()
    svc.placeOrder("A1")
    try:
        svc.cancel("missing")
    except LookupError:
        pass
    count = REGISTRY.get_sample_value(
        "timed_operation_duration_seconds_count",
        {"key": "timer.OrderService.placeOrder"},
    )
    print(f"placeOrder observations: {count}")


if __name__ == "__main__":
    main()
