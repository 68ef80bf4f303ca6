from .loader import load_package_productions, load_productions
from .producible import (
    IProducible,
    Producible,
    is_producible,
    production_create_object,
    production_type_id,
    production_type_id_from_metatype,
)
from .production import AddProduction, add_production
from .registry import Factory, Registry, create, registry_for

__all__ = [
    "AddProduction",
    "Factory",
    "IProducible",
    "Producible",
    "Registry",
    "add_production",
    "create",
    "is_producible",
    "load_package_productions",
    "load_productions",
    "production_create_object",
    "production_type_id",
    "production_type_id_from_metatype",
    "registry_for",
]
