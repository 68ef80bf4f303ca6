"""Process-wide active configuration.

The active ``FactoryConfig`` is resolved once, on first use: from the file
named by the ``TYPEFACTORY_CONFIG`` environment variable when it is set,
otherwise from schema defaults.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional

from pydantic import ValidationError

from ...api.exceptions import ConfigurationError
from .config_manager import ConfigManager
from .schemas import FactoryConfig

CONFIG_ENV_VAR = "TYPEFACTORY_CONFIG"

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_active: Optional[FactoryConfig] = None


def _load_default() -> FactoryConfig:
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return FactoryConfig()
    manager = ConfigManager(config_file_path=path)
    manager.load_config()
    return manager.to_model()


def get_config() -> FactoryConfig:
    """Return the active configuration, loading it on first call."""
    global _active
    if _active is None:
        with _lock:
            if _active is None:
                _active = _load_default()
    return _active


def configure(config: Optional[FactoryConfig] = None, **overrides) -> FactoryConfig:
    """Replace the active configuration.

    Call before production modules are imported; registries already created
    keep the provider they were created with.

    Args:
        config: New configuration. Defaults to the current one.
        **overrides: Field values applied on top of ``config``.

    Returns:
        The configuration now in effect
    """
    global _active
    base = config if config is not None else get_config()
    new = base.model_copy(update=overrides) if overrides else base
    try:
        new = FactoryConfig.model_validate(new.model_dump())
    except ValidationError as e:
        raise ConfigurationError(f"Invalid typefactory configuration: {e}") from e
    with _lock:
        _active = new
    logger.debug(f"Active configuration: {new.model_dump()}")
    return new


def reset_config() -> None:
    """Forget the active configuration so the next access reloads it."""
    global _active
    with _lock:
        _active = None
