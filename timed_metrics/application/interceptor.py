"""Timing interceptor.

Brackets each call of a timed operation with a monotonic stopwatch and hands
``(prefix + key, elapsed_ms)`` to a :class:`MetricSink`. Results and errors of
the operation reach the caller unchanged.

The interceptor keeps no per-call state, so one instance can serve any number
of threads or tasks as long as its sink and key generator are thread safe.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from timed_metrics.application.instrumentation import (
    context_factory,
    get_marker,
    is_method,
)
from timed_metrics.application.key_generators import DefaultKeyGenerator
from timed_metrics.application.ports.metrics import KeyGenerator, MetricSink
from timed_metrics.config import KEY_PREFIX
from timed_metrics.core.errors import ConfigurationError
from timed_metrics.core.observability.timing import time_block
from timed_metrics.models import CallContext, Timed, TimingSample

logger = logging.getLogger(__name__)

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_KEY_GENERATOR = DefaultKeyGenerator()

# Set on wrappers so a class is never instrumented twice
WRAPPED_ATTR = "__timed_wrapped__"


class TimingInterceptor:
    """Records execution time of timed operations, successful or not."""

    def __init__(
        self,
        sink: MetricSink,
        key_generator: KeyGenerator = DEFAULT_KEY_GENERATOR,
        *,
        prefix: str = KEY_PREFIX,
    ) -> None:
        if sink is None:
            raise ConfigurationError("sink may not be None")
        if key_generator is None:
            raise ConfigurationError("key_generator may not be None")
        if not callable(getattr(sink, "record", None)):
            raise ConfigurationError(f"sink {sink!r} has no callable record()")
        if not callable(getattr(key_generator, "get_key", None)):
            raise ConfigurationError(f"key_generator {key_generator!r} has no callable get_key()")
        if not isinstance(prefix, str) or not prefix.endswith(".") or prefix == ".":
            raise ConfigurationError(
                f"prefix must be a non-empty namespace ending in '.', got {prefix!r}"
            )

        self._sink = sink
        self._key_generator = key_generator
        self._prefix = prefix
        logger.debug(
            "Timing interceptor configured: sink=%r key_generator=%r prefix=%s",
            sink,
            key_generator,
            prefix,
        )

    @property
    def prefix(self) -> str:
        return self._prefix

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sink={self._sink!r}, "
            f"key_generator={self._key_generator!r}, prefix={self._prefix!r})"
        )

    def _submit(self, context: CallContext, marker: Timed, duration_ms: int) -> None:
        key = self._key_generator.get_key(context, marker)
        if not key:
            key = DEFAULT_KEY_GENERATOR.get_key(context, marker)
            logger.warning("%r returned an empty key, recording as %s", self._key_generator, key)
        sample = TimingSample(self._prefix + key, duration_ms)
        self._sink.record(sample.key, sample.duration_ms)

    def invoke(self, proceed: Callable[[], T], context: CallContext, marker: Timed) -> T:
        """Run ``proceed`` once and record its elapsed time."""
        with time_block(functools.partial(self._submit, context, marker)):
            return proceed()

    async def invoke_async(
        self, proceed: Callable[[], Awaitable[T]], context: CallContext, marker: Timed
    ) -> T:
        """Await ``proceed()`` once and record the elapsed time, cancellation included."""
        with time_block(functools.partial(self._submit, context, marker)):
            return await proceed()

    def wrap(self, fn: Any, marker: Timed | None = None, *, method: bool | None = None) -> Any:
        """Return a timed wrapper around ``fn``.

        - marker: defaults to the one attached by ``timed()``, else ``Timed()``.
        - method: whether the first positional argument may be the receiver.
          Guessed from ``__qualname__`` when None; the argument is still only
          used as receiver if it is an instance (or subclass) of the defining
          class. Bound methods always report their own ``__self__``.
          staticmethod and classmethod objects are unwrapped and re-wrapped
          as such.
        """
        if isinstance(fn, staticmethod):
            return staticmethod(self.wrap(fn.__func__, marker or get_marker(fn), method=False))
        if isinstance(fn, classmethod):
            return classmethod(self.wrap(fn.__func__, marker or get_marker(fn), method=True))
        if not callable(fn):
            raise ConfigurationError(f"cannot time non-callable {fn!r}")

        if marker is None:
            marker = get_marker(fn) or Timed()
        if method is None:
            method = is_method(fn)
        build_context = context_factory(fn, method=method)

        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def _async_wrapped(*args: Any, **kwargs: Any) -> Any:
                context = build_context(args, kwargs)
                return await self.invoke_async(lambda: fn(*args, **kwargs), context, marker)

            wrapper: Any = _async_wrapped
        else:

            @functools.wraps(fn)
            def _sync_wrapped(*args: Any, **kwargs: Any) -> Any:
                context = build_context(args, kwargs)
                return self.invoke(lambda: fn(*args, **kwargs), context, marker)

            wrapper = _sync_wrapped

        setattr(wrapper, WRAPPED_ATTR, True)
        return wrapper

    def timed(self, key: str = "", *, method: bool | None = None) -> Callable[[F], F]:
        """Decorator form of :meth:`wrap`."""

        def _decorator(fn: F) -> F:
            return self.wrap(fn, Timed(key), method=method)

        return _decorator

    def instrument(self, cls: type[T]) -> type[T]:
        """Wrap every attribute of ``cls`` marked with ``timed()``.

        Usable as a class decorator. Inherited attributes are left alone;
        instrument the base class for those.
        """
        for name, attr in list(vars(cls).items()):
            marker = get_marker(attr)
            if marker is None:
                continue
            target = getattr(attr, "__func__", attr)
            if getattr(target, WRAPPED_ATTR, False):
                continue
            if isinstance(attr, (staticmethod, classmethod)):
                setattr(cls, name, self.wrap(attr, marker))
            elif inspect.isfunction(attr):
                setattr(cls, name, self.wrap(attr, marker, method=True))
            else:
                logger.warning(
                    "Skipping timed marker on unsupported attribute %s.%s", cls.__name__, name
                )
        return cls
