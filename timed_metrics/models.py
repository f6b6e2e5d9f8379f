"""Value objects passed between the interceptor, key generators and sinks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class Timed:
    """Marks an operation as timed.

    ``key`` overrides the generated metric key when non-empty.
    """

    key: str = ""

    @property
    def has_override(self) -> bool:
        return bool(self.key)


@dataclass(frozen=True, slots=True)
class CallContext:
    """What is known about one in-flight call."""

    receiver: object | None
    operation: str
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    # Used when there is no receiver (free functions)
    owner: str | None = None

    @property
    def type_name(self) -> str:
        """Short name of the receiver's type.

        For classmethods the receiver is the class itself, so its own name is
        used rather than the metaclass name.
        """
        if self.receiver is not None:
            if isinstance(self.receiver, type):
                return self.receiver.__name__
            return type(self.receiver).__name__
        return self.owner or "function"


@dataclass(frozen=True, slots=True)
class TimingSample:
    key: str
    duration_ms: int
