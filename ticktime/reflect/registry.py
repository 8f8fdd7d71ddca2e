#!filepath: ticktime/reflect/registry.py
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Literal, Optional, Type, Union

from ticktime.utils.errors import MissingCapabilityError, UnregisteredTypeError
from ticktime.utils.logger import logs

Capability = Literal["default", "clone", "partial_eq"]

CAPABILITIES: FrozenSet[str] = frozenset({"default", "clone", "partial_eq"})


@dataclass(frozen=True)
class TypeRegistration:
    """
    Reflection metadata for one type.
    Metadata only: registering a type never changes how it behaves.
    """
    name: str
    cls: type
    capabilities: FrozenSet[str]

    def supports(self, capability: str) -> bool:
        return capability in self.capabilities


def _type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeRegistry:
    def __init__(self):
        self._by_name: Dict[str, TypeRegistration] = {}

    # ------------------------------------------------------------------
    # registration
    # ------------------------------------------------------------------
    def register(
        self, cls: type, *capabilities: Capability, name: Optional[str] = None
    ) -> TypeRegistration:
        unknown = set(capabilities) - CAPABILITIES
        if unknown:
            raise ValueError(f"Unknown capabilities for {cls.__name__}: {sorted(unknown)}")

        reg = TypeRegistration(
            name=name or _type_name(cls),
            cls=cls,
            capabilities=frozenset(capabilities),
        )
        # re-registering replaces (by name and by class)
        for existing in [r for r in self._by_name.values() if r.cls is cls]:
            del self._by_name[existing.name]
        self._by_name[reg.name] = reg

        logs.debug(f"[reflect] registered {reg.name} {sorted(reg.capabilities)}")
        return reg

    def get(self, key: Union[str, type]) -> TypeRegistration:
        if isinstance(key, str):
            if key in self._by_name:
                return self._by_name[key]
        else:
            for reg in self._by_name.values():
                if reg.cls is key:
                    return reg
        raise UnregisteredTypeError(key)

    def __contains__(self, key: Union[str, type]) -> bool:
        try:
            self.get(key)
        except UnregisteredTypeError:
            return False
        return True

    def list(self) -> list[TypeRegistration]:
        """
        Return all registrations (read-only view).
        """
        return list(self._by_name.values())

    def clear(self) -> None:
        self._by_name.clear()

    # ------------------------------------------------------------------
    # capabilities
    # ------------------------------------------------------------------
    def _require(self, cls: type, capability: str) -> TypeRegistration:
        reg = self.get(cls)
        if not reg.supports(capability):
            raise MissingCapabilityError(
                f"{reg.name} is not registered with capability '{capability}'"
            )
        return reg

    def default(self, cls: Type[Any]) -> Any:
        self._require(cls, "default")
        return cls()

    def clone(self, obj: Any) -> Any:
        self._require(type(obj), "clone")
        return copy.deepcopy(obj)

    def partial_eq(self, a: Any, b: Any) -> bool:
        self._require(type(a), "partial_eq")
        return a == b


# ------------------------------------------------------------------
# Global registry
# ------------------------------------------------------------------
type_registry = TypeRegistry()


def register_type(
    *capabilities: Capability,
    name: Optional[str] = None,
    registry: Optional[TypeRegistry] = None,
):
    def _wrap(cls):
        (registry or type_registry).register(cls, *capabilities, name=name)
        return cls
    return _wrap
