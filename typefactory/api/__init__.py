"""API module for typefactory"""

from .exceptions import (
    ConfigurationError,
    DuplicateRegistrationError,
    DuplicateRegistrationWarning,
    ProductionContractError,
    RegistrationError,
    TypeFactoryError,
    VariadicConstructionError,
)
from .factory import (
    AbstractFactory,
    create_object,
    get_factory,
    is_registered,
    list_types,
)

__all__ = [
    "AbstractFactory",
    "create_object",
    "get_factory",
    "is_registered",
    "list_types",
    "ConfigurationError",
    "DuplicateRegistrationError",
    "DuplicateRegistrationWarning",
    "ProductionContractError",
    "RegistrationError",
    "TypeFactoryError",
    "VariadicConstructionError",
]
