"""Per-capability registries of construction functions.

Every capability class (usually an abstract base) owns exactly one
``Registry`` that maps a type id to the ``create_object`` function of a
production class. Registries are created lazily by ``registry_for`` the
first time a capability is touched and live for the rest of the process.

Example
    class Greeter(ABC):
        ...

    @add_production(Greeter)
    @production_type_id("en")
    class English(Producible, Greeter):
        ...

    assert registry_for(Greeter) is Factory[Greeter]
    greeter = Factory[Greeter].create_object("en")   # English instance
    missing = Factory[Greeter].create_object("fr")   # None

Entries are only written by ``AddProduction`` (see ``production.py``);
there is no public API to add, remove or rename entries.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, Optional, Type, TypeVar

from ..api.exceptions import VariadicConstructionError
from .config import get_config
from .providers import Provider, get_provider

C = TypeVar("C")

logger = logging.getLogger(__name__)


def type_name(cls: Any) -> str:
    """Qualified name used for capabilities and productions in messages."""
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", None) or repr(cls)
    return f"{module}.{qualname}" if module else qualname


class Registry(Generic[C]):
    """Mapping of type id to construction function for one capability.

    - Exact, case-sensitive string keys
    - ``create_object`` returns ``None`` for unknown ids instead of raising
    - Read-only for callers; productions add themselves via ``AddProduction``
    """

    def __init__(self, capability: Type[C], provider: Optional[Provider] = None) -> None:
        self._capability = capability
        self._name = type_name(capability)
        self._provider = provider or get_provider()
        self._variadic = get_config().variadic
        self._produce_functions = self._provider.new_mapping()

    @property
    def capability(self) -> Type[C]:
        return self._capability

    @property
    def name(self) -> str:
        return self._name

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def variadic(self) -> bool:
        return self._variadic

    # ---- Production ----
    def create_object(self, type_id: str, /, *args: Any, **kwargs: Any) -> Optional[C]:
        """Create an object of the production registered under ``type_id``.

        Args:
            type_id: Unique identifier of the production
            *args, **kwargs: Construction arguments, only accepted when
                variadic construction is enabled

        Returns:
            Whatever the production's ``create_object`` returns, or ``None``
            if ``type_id`` is unknown

        Raises:
            VariadicConstructionError: If arguments are passed while
                variadic construction is disabled
        """
        if (args or kwargs) and not self._variadic:
            raise VariadicConstructionError(
                f"{self._name}: construction arguments given for '{type_id}' "
                f"but variadic construction is disabled"
            )
        produce = self._produce_functions.get(type_id)
        if produce is None:
            return None
        return produce(*args, **kwargs)

    def _add(self, type_id: str, produce: Callable[..., C]) -> None:
        self._produce_functions[type_id] = produce

    # ---- Lookup ----
    def get(self, type_id: str, default: Any = None) -> Any:
        """Return the construction function for ``type_id`` or ``default``."""
        return self._produce_functions.get(type_id, default)

    def __contains__(self, type_id: object) -> bool:
        return bool(isinstance(type_id, str) and type_id in self._produce_functions)

    def keys(self) -> Iterable[str]:
        return self._produce_functions.keys()

    def items(self) -> Iterable[tuple[str, Callable[..., C]]]:
        return self._produce_functions.items()

    # ---- Introspection ----
    def __len__(self) -> int:
        return len(self._produce_functions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._produce_functions)

    def __repr__(self) -> str:
        return f"Registry(capability={self._name!r}, items={len(self._produce_functions)})"


_registries: Dict[type, Registry] = {}
_registries_lock = threading.Lock()


def registry_for(capability: Type[C]) -> Registry[C]:
    """Return the registry of ``capability``, creating it on first access.

    Raises:
        TypeError: If ``capability`` is not a class
    """
    if not isinstance(capability, type):
        raise TypeError(f"capability must be a class, got {capability!r}")
    registry = _registries.get(capability)
    if registry is None:
        with _registries_lock:
            registry = _registries.get(capability)
            if registry is None:
                registry = Registry(capability)
                _registries[capability] = registry
                logger.debug(f"Created registry for {registry.name} ({registry.provider.name} provider)")
    return registry


def create(capability: Type[C], type_id: str, /, *args: Any, **kwargs: Any) -> Optional[C]:
    """Create an object implementing ``capability`` by type id; ``None`` if unknown."""
    return registry_for(capability).create_object(type_id, *args, **kwargs)


class Factory:
    """Class-style access to per-capability registries.

    ``Factory[Greeter]`` is the registry of ``Greeter``, so
    ``Factory[Greeter].create_object("en")`` reads like the generic factory
    it stands for. The class itself holds no state and is never instantiated.
    """

    def __init__(self) -> None:
        raise TypeError("Factory is not instantiable; use Factory[Capability]")

    def __class_getitem__(cls, capability: Type[C]) -> Registry[C]:
        return registry_for(capability)
