"""Unified factory API

One entry point for producing objects of any capability, so call sites do
not have to reach for the per-capability registry themselves.
"""

from typing import Any, List, Optional, Type, TypeVar

from ..core.registry import Registry, registry_for

C = TypeVar("C")

__all__ = [
    "AbstractFactory",
    "create_object",
    "get_factory",
    "list_types",
    "is_registered",
]


class AbstractFactory:
    """Factory able to produce objects of any registered capability."""

    @staticmethod
    def create_object(capability: Type[C], type_id: str, /, *args: Any, **kwargs: Any) -> Optional[C]:
        """Create an object implementing ``capability``.

        Args:
            capability: The capability class, e.g. ``Greeter``
            type_id: Type id the production registered under
            *args, **kwargs: Construction arguments (variadic construction only)

        Returns:
            New object, or None if nothing is registered under ``type_id``
        """
        return registry_for(capability).create_object(type_id, *args, **kwargs)


def create_object(capability: Type[C], type_id: str, /, *args: Any, **kwargs: Any) -> Optional[C]:
    """Function form of ``AbstractFactory.create_object``."""
    return AbstractFactory.create_object(capability, type_id, *args, **kwargs)


def get_factory(capability: Type[C]) -> Registry[C]:
    """Get the registry of a capability."""
    return registry_for(capability)


def list_types(capability: Type[C]) -> List[str]:
    """List the type ids registered for a capability.

    Returns:
        List of type ids in registration order
    """
    return list(registry_for(capability).keys())


def is_registered(capability: Type[C], type_id: str) -> bool:
    return type_id in registry_for(capability)
