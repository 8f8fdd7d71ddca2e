from __future__ import annotations

from ticktime.core.duration import Duration
from ticktime.core.stopwatch import Stopwatch
from ticktime.reflect.registry import TypeRegistry, type_registry


def register_core_types(registry: TypeRegistry = type_registry) -> TypeRegistry:
    """
    Register core value types with the reflection registry.
    Called once on `import ticktime`; safe to call again.
    """
    registry.register(Duration, "default", "clone", "partial_eq")
    registry.register(Stopwatch, "default", "clone", "partial_eq")
    return registry
