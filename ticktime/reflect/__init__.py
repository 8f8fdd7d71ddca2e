from .registry import (
    CAPABILITIES,
    TypeRegistration,
    TypeRegistry,
    register_type,
    type_registry,
)

__all__ = [
    "CAPABILITIES",
    "TypeRegistration",
    "TypeRegistry",
    "register_type",
    "type_registry",
]
