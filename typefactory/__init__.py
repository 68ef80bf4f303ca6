"""
typefactory - type-keyed object factories

Classes implementing a capability register themselves under a string type
id when their module is imported; call sites then create instances by id
without importing the concrete class.
"""

from .api.exceptions import (
    ConfigurationError,
    DuplicateRegistrationError,
    DuplicateRegistrationWarning,
    ProductionContractError,
    RegistrationError,
    TypeFactoryError,
    VariadicConstructionError,
)
from .api.factory import (
    AbstractFactory,
    create_object,
    get_factory,
    is_registered,
    list_types,
)
from .core.config import FactoryConfig, LoggingConfig, configure, get_config
from .core.loader import load_package_productions, load_productions
from .core.logger_setup import setup_logging
from .core.producible import (
    IProducible,
    Producible,
    production_create_object,
    production_type_id,
    production_type_id_from_metatype,
)
from .core.production import AddProduction, add_production
from .core.registry import Factory, Registry, registry_for

__version__ = "0.1.0"
__all__ = [
    "AbstractFactory",
    "AddProduction",
    "Factory",
    "FactoryConfig",
    "IProducible",
    "LoggingConfig",
    "Producible",
    "Registry",
    "add_production",
    "configure",
    "create_object",
    "get_config",
    "get_factory",
    "is_registered",
    "list_types",
    "load_package_productions",
    "load_productions",
    "production_create_object",
    "production_type_id",
    "production_type_id_from_metatype",
    "registry_for",
    "setup_logging",
    "ConfigurationError",
    "DuplicateRegistrationError",
    "DuplicateRegistrationWarning",
    "ProductionContractError",
    "RegistrationError",
    "TypeFactoryError",
    "VariadicConstructionError",
]
