"""Registration of production classes in per-capability registries.

Productions register themselves where they are defined, so no central
"register everything" function has to be edited when a class is added.
Either keep an ``AddProduction`` at module level:

    _add_english = AddProduction(Greeter, English)

or decorate the class:

    @add_production(Greeter)
    class English(Producible, Greeter):
        ...

Both run when the module is imported.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, List, Type, TypeVar

from ..api.exceptions import DuplicateRegistrationError, ProductionContractError
from .config import get_config
from .producible import is_producible
from .registry import Registry, registry_for, type_name

C = TypeVar("C")
P = TypeVar("P", bound=type)

logger = logging.getLogger(__name__)

SAME_CLASS_NOTE = "Repeated registration of the same class"
ANOTHER_CLASS_NOTE = "Registration of another class with duplicate id"


class AddProduction(Generic[C]):
    """Registers ``production`` in the registry of ``capability`` upon creation.

    After construction the registry of ``capability`` maps
    ``production.type_id()`` to ``production.create_object``. If that id is
    already taken a diagnostic goes to the active provider's warning sink
    and the new registration replaces the old one (last writer wins), unless
    ``strict_duplicates`` is enabled, in which case
    ``DuplicateRegistrationError`` is raised and the registry is unchanged.

    Raises:
        ProductionContractError: If ``production`` lacks ``create_object``
            or ``type_id``, is not a subclass of ``capability``, or
            ``type_id()`` does not return a str
        DuplicateRegistrationError: On a duplicate id with strict_duplicates
    """

    def __init__(self, capability: Type[C], production: type) -> None:
        self.capability = capability
        self.production = production

        registry = registry_for(capability)
        if not is_producible(production):
            raise ProductionContractError(
                f"{type_name(production)} cannot be registered in factory {registry.name}: "
                f"it must define create_object() and type_id()"
            )
        # Protocol capabilities are structural and cannot be checked with issubclass
        if not getattr(capability, "_is_protocol", False) and not issubclass(production, capability):
            raise ProductionContractError(
                f"{type_name(production)} cannot be registered in factory {registry.name}: "
                f"it is not a subclass of {registry.name}"
            )

        try:
            type_id = production.type_id()
        except TypeError as e:
            raise ProductionContractError(
                f"{type_name(production)}.type_id() must be callable without arguments"
            ) from e
        if not isinstance(type_id, str):
            raise ProductionContractError(
                f"{type_name(production)}.type_id() returned {type(type_id).__name__}, expected str"
            )
        self.type_id = type_id

        produce = production.create_object
        if type_id in registry:
            self._report_duplicate(registry, produce)

        registry._add(type_id, produce)
        logger.debug(f"Registered {type_name(production)} as '{type_id}' in factory {registry.name}")

    def _report_duplicate(self, registry: Registry, produce: Callable) -> None:
        same = registry.get(self.type_id) == produce
        message = (
            f"Second registration of class with id '{self.type_id}' "
            f"in factory {registry.name} "
            f"while registering class {type_name(self.production)}. "
            f"{SAME_CLASS_NOTE if same else ANOTHER_CLASS_NOTE}"
        )
        registry.provider.warn(message)
        if get_config().strict_duplicates:
            raise DuplicateRegistrationError(message)

    def __repr__(self) -> str:
        return (
            f"AddProduction(capability={type_name(self.capability)!r}, "
            f"production={type_name(self.production)!r}, type_id={self.type_id!r})"
        )


def add_production(capability: Type[C]) -> Callable[[P], P]:
    """Class decorator registering the decorated class under ``capability``.

    The ``AddProduction`` record is kept on the class in ``__productions__``
    so a class registered under several capabilities lists all of them.
    """

    def _decorator(production: P) -> P:
        record = AddProduction(capability, production)
        records: List[AddProduction] = list(production.__dict__.get("__productions__", ()))
        records.append(record)
        production.__productions__ = tuple(records)
        return production

    return _decorator


__all__ = ["AddProduction", "add_production", "SAME_CLASS_NOTE", "ANOTHER_CLASS_NOTE"]
