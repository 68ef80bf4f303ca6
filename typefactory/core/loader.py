"""Registration pass: import production modules before the first create.

Registration happens as a side effect of importing the module that defines
a production. Applications that never import those modules directly call
one of these functions at startup instead.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import List, Union

logger = logging.getLogger(__name__)


def load_productions(*module_names: str) -> List[ModuleType]:
    """Import the named modules so their productions register.

    Modules that are already imported are not executed again, so calling
    this more than once does not produce duplicate registrations.

    Args:
        *module_names: Absolute dotted module names

    Returns:
        The imported modules, in the given order
    """
    modules = []
    for name in module_names:
        modules.append(importlib.import_module(name))
    logger.info(f"Loaded {len(modules)} production module(s)")
    return modules


def load_package_productions(package: Union[str, ModuleType]) -> List[ModuleType]:
    """Import a package and every module below it.

    Args:
        package: Package object or its dotted name

    Returns:
        The package followed by all of its submodules

    Raises:
        ValueError: If ``package`` is a plain module rather than a package
    """
    if isinstance(package, str):
        package = importlib.import_module(package)
    if not hasattr(package, "__path__"):
        raise ValueError(f"{package.__name__} is not a package")

    modules = [package]
    for info in pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}."):
        modules.append(importlib.import_module(info.name))
    logger.info(f"Loaded {len(modules)} production module(s) from {package.__name__}")
    return modules
