"""Contract for classes produced by a factory, plus shorthands to implement it.

A production class must expose two class-level callables:

- ``create_object(*args, **kwargs)``: build a fresh instance and return it.
  Arguments are only passed when variadic construction is enabled.
- ``type_id()``: return the class's identifier, the same string on every call.

Neither needs to be written by hand:

    @add_production(Greeter)
    @production_type_id("en")
    class English(Producible, Greeter):
        def greet(self) -> str:
            return "hello"
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, TypeVar, runtime_checkable

from ..api.exceptions import ConfigurationError
from .providers import get_provider
from .registry import type_name

T = TypeVar("T", bound=type)


@runtime_checkable
class IProducible(Protocol):
    """Interface of a producible class.

    None of the members are meant to be overridden per instance; this is a
    declaration of what the factory calls on the class, checked structurally.
    """

    @classmethod
    def create_object(cls, /, *args: Any, **kwargs: Any) -> Any:
        ...

    @staticmethod
    def type_id() -> str:
        ...


class Producible:
    """Mixin providing the canonical ``create_object``: ``cls(*args, **kwargs)``."""

    @classmethod
    def create_object(cls, /, *args: Any, **kwargs: Any) -> Any:
        return cls(*args, **kwargs)


def is_producible(obj: Any) -> bool:
    """True if ``obj`` is a class exposing ``create_object`` and ``type_id``."""
    return (
        isinstance(obj, type)
        and isinstance(obj, IProducible)
        and callable(getattr(obj, "create_object", None))
        and callable(getattr(obj, "type_id", None))
    )


def production_create_object(cls: T) -> T:
    """Class decorator defining ``create_object`` as ``cls(*args, **kwargs)``."""

    def create_object(klass, /, *args: Any, **kwargs: Any) -> Any:
        return klass(*args, **kwargs)

    create_object.__qualname__ = f"{cls.__qualname__}.create_object"
    cls.create_object = classmethod(create_object)
    return cls


def production_type_id(type_id: str) -> Callable[[T], T]:
    """Class decorator defining ``type_id()`` to return the literal ``type_id``."""
    if not isinstance(type_id, str):
        raise TypeError(f"type_id must be a str, got {type(type_id).__name__}")

    def _decorator(cls: T) -> T:
        _install_type_id(cls, type_id)
        return cls

    return _decorator


def production_type_id_from_metatype(metatype: Optional[type] = None) -> Callable[[T], T]:
    """Class decorator deriving ``type_id()`` from a type's qualified name.

    The id is ``"<module>.<qualname>"`` of ``metatype``, or of the decorated
    class when ``metatype`` is omitted. Only available with the ``host``
    provider.

    Raises:
        ConfigurationError: If the active provider does not support it
    """
    provider = get_provider()
    if not provider.supports_metatype_ids:
        raise ConfigurationError(
            f"metatype type ids require the 'host' provider, active provider is '{provider.name}'"
        )

    def _decorator(cls: T) -> T:
        _install_type_id(cls, type_name(metatype if metatype is not None else cls))
        return cls

    return _decorator


def _install_type_id(cls: type, value: str) -> None:
    def type_id() -> str:
        return value

    type_id.__qualname__ = f"{cls.__qualname__}.type_id"
    cls.type_id = staticmethod(type_id)


__all__ = [
    "IProducible",
    "Producible",
    "is_producible",
    "production_create_object",
    "production_type_id",
    "production_type_id_from_metatype",
]
