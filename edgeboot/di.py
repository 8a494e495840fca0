"""A small, thread-safe dependency injection container."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

Get = Callable[[str], Any]
"""Looks up a service by name and returns its instance, or None."""

ServiceConstructor = Callable[[Get], Any]
"""Builds a service; receives a ``Get`` so it can resolve its own dependencies."""

ServiceConstructorMap = Mapping[str, ServiceConstructor]

__all__ = [
    "Container",
    "Get",
    "ServiceConstructor",
    "ServiceConstructorMap",
    "type_instance_to_name",
]


@dataclass
class _Service:
    constructor: ServiceConstructor
    instance: Any = None


class Container:
    """Holds named service constructors and lazily builds singleton instances.

    A service is constructed on its first ``get`` and the instance is reused
    for every later lookup. A constructor that returns None is called again
    on the next lookup.
    """

    def __init__(self, constructors: Optional[ServiceConstructorMap] = None) -> None:
        self._services: dict[str, _Service] = {}
        self._lock = threading.RLock()
        if constructors is not None:
            self.update(constructors)

    def update(self, constructors: ServiceConstructorMap) -> None:
        """Add or replace constructors; replaced services are rebuilt on next use."""
        with self._lock:
            for name, constructor in constructors.items():
                self._services[name] = _Service(constructor)

    def _get(self, name: str) -> Any:
        service = self._services.get(name)
        if service is None:
            return None
        if service.instance is None:
            service.instance = service.constructor(self._get)
        return service.instance

    def get(self, name: str) -> Any:
        """Return the instance for ``name``, constructing it if needed, or None if unknown."""
        with self._lock:
            return self._get(name)


def type_instance_to_name(value: Any) -> str:
    """Return a unique ``module.QualifiedName`` for a value's type.

    When ``value`` is itself a class, that class is named instead of its
    metaclass.
    """
    cls = value if isinstance(value, type) else type(value)
    return f"{cls.__module__}.{cls.__qualname__}"