"""Declarative marking of timed operations.

``timed()`` only attaches a :class:`Timed` marker; nothing is wrapped until an
interceptor instruments the function or its class.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from types import MappingProxyType
from typing import Any, TypeVar

from timed_metrics.models import CallContext, Timed

F = TypeVar("F", bound=Callable[..., Any])

MARKER_ATTR = "__timed__"


def timed(key: str = "") -> Callable[[F], F]:
    """Mark a function or method as timed, optionally with an explicit key."""

    def _decorator(fn: F) -> F:
        setattr(fn, MARKER_ATTR, Timed(key))
        return fn

    return _decorator


def get_marker(fn: object) -> Timed | None:
    marker = getattr(fn, MARKER_ATTR, None)
    if marker is None:
        # staticmethod/classmethod applied on top of timed()
        marker = getattr(getattr(fn, "__func__", None), MARKER_ATTR, None)
    return marker if isinstance(marker, Timed) else None


def is_method(fn: Callable[..., Any]) -> bool:
    """Guess whether ``fn`` was defined in a class body."""
    parts = getattr(fn, "__qualname__", "").split(".")
    return len(parts) > 1 and parts[-2] != "<locals>"


def owner_name(fn: Callable[..., Any]) -> str | None:
    """Defining class name from ``__qualname__``, else the module's short name."""
    if is_method(fn):
        return fn.__qualname__.split(".")[-2]
    module = getattr(fn, "__module__", None)
    if not module:
        return None
    return module.rsplit(".", 1)[-1]


def _derives_from(candidate: object, owner: str | None) -> bool:
    if owner is None:
        return False
    cls = candidate if isinstance(candidate, type) else type(candidate)
    return any(base.__name__ == owner for base in cls.__mro__)


def context_factory(
    fn: Callable[..., Any], *, method: bool
) -> Callable[[tuple[Any, ...], dict[str, Any]], CallContext]:
    """Build per-call contexts for ``fn``.

    Bound methods carry their own receiver. For methods the first positional
    argument is the receiver, and is left out of ``args``, only when its type
    (or the class itself, for classmethods) derives from the defining class;
    otherwise the call is treated as a plain function call.
    """
    operation = getattr(fn, "__name__", type(fn).__name__)
    owner = owner_name(fn)

    if inspect.ismethod(fn):
        bound = fn.__self__

        def _bound_context(args: tuple[Any, ...], kwargs: dict[str, Any]) -> CallContext:
            return CallContext(bound, operation, args, MappingProxyType(kwargs), owner)

        return _bound_context

    if method:

        def _method_context(args: tuple[Any, ...], kwargs: dict[str, Any]) -> CallContext:
            if args and _derives_from(args[0], owner):
                return CallContext(args[0], operation, args[1:], MappingProxyType(kwargs), owner)
            return CallContext(None, operation, args, MappingProxyType(kwargs), owner)

        return _method_context

    def _function_context(args: tuple[Any, ...], kwargs: dict[str, Any]) -> CallContext:
        return CallContext(None, operation, args, MappingProxyType(kwargs), owner)

    return _function_context
