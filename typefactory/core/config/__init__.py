from .config_manager import ConfigManager
from .schemas import FactoryConfig, LoggingConfig
from .settings import CONFIG_ENV_VAR, configure, get_config, reset_config

__all__ = [
    "ConfigManager",
    "FactoryConfig",
    "LoggingConfig",
    "CONFIG_ENV_VAR",
    "configure",
    "get_config",
    "reset_config",
]
