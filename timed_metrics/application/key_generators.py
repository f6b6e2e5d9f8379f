from __future__ import annotations

from timed_metrics.models import CallContext, Timed


class DefaultKeyGenerator:
    """Uses the marker's key if set, else "<TypeName>.<operation>"."""

    def get_key(self, context: CallContext, marker: Timed) -> str:
        if marker.has_override:
            return marker.key
        return f"{context.type_name}.{context.operation}"
