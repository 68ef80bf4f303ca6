"""Identifier/mapping providers and their diagnostic sinks.

A provider decides which mapping type backs a registry and where
duplicate-registration diagnostics go. Exactly one provider is active,
selected by ``FactoryConfig.provider``:

- ``standard``: plain ``dict``; diagnostics go to the ``typefactory``
  logger at WARNING level.
- ``host``: plain ``dict``; diagnostics go through ``warnings.warn`` with
  ``DuplicateRegistrationWarning`` so the hosting application (or pytest)
  decides how to surface them. Also enables the metatype type id shorthand.
"""

from __future__ import annotations

import logging
import sys
import warnings
from typing import Callable, Dict, MutableMapping, Optional

from ..api.exceptions import ConfigurationError, DuplicateRegistrationWarning
from .config import get_config

logger = logging.getLogger("typefactory")

_PACKAGE = __name__.split(".")[0]


def _caller_stacklevel() -> int:
    """``stacklevel`` for the caller of this function that skips package frames.

    Warnings are attributed to the module that triggered registration, however
    many package frames (decorators, AddProduction) sit in between.
    """
    level = 1
    frame = sys._getframe(1)
    while frame is not None and frame.f_globals.get("__name__", "").startswith(_PACKAGE + "."):
        frame = frame.f_back
        level += 1
    return level


class Provider:
    """Base provider: ``dict`` mapping, logger warning sink."""

    name = "base"
    supports_metatype_ids = False

    def new_mapping(self) -> MutableMapping[str, Callable]:
        return {}

    def warn(self, message: str) -> None:
        logger.warning(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class StandardProvider(Provider):
    name = "standard"


class HostProvider(Provider):
    name = "host"
    supports_metatype_ids = True

    def warn(self, message: str) -> None:
        warnings.warn(message, DuplicateRegistrationWarning, stacklevel=_caller_stacklevel())


_PROVIDERS: Dict[str, Provider] = {
    StandardProvider.name: StandardProvider(),
    HostProvider.name: HostProvider(),
}


def get_provider(name: Optional[str] = None) -> Provider:
    """Return the provider named ``name`` or the one selected by the active config.

    Raises:
        ConfigurationError: If no provider has that name
    """
    name = name or get_config().provider
    if name not in _PROVIDERS:
        raise ConfigurationError(
            f"Unknown provider '{name}'. Available: {sorted(_PROVIDERS)}"
        )
    return _PROVIDERS[name]
