"""typefactory exceptions"""


class TypeFactoryError(Exception):
    """Base exception for typefactory"""
    pass


class ConfigurationError(TypeFactoryError):
    """Configuration error"""
    pass


class RegistrationError(TypeFactoryError):
    """Failed to register a production"""
    pass


class ProductionContractError(RegistrationError, TypeError):
    """Production class does not provide create_object/type_id"""
    pass


class DuplicateRegistrationError(RegistrationError):
    """Type id registered twice while strict_duplicates is enabled"""
    pass


class VariadicConstructionError(TypeFactoryError, TypeError):
    """Construction arguments passed while variadic construction is disabled"""
    pass


class DuplicateRegistrationWarning(UserWarning):
    """Type id registered twice; the later registration wins"""
    pass
