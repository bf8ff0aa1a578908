"""核心模块"""
from simplecheck.core.config import (
    CheckConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from simplecheck.core.errors import (
    ConfigError,
    RegistryError,
    SimpleCheckError,
    TypeConstraintError,
)
from simplecheck.core.log import logger

__all__ = [
    # config
    "CheckConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # errors
    "SimpleCheckError",
    "TypeConstraintError",
    "ConfigError",
    "RegistryError",
    # log
    "logger",
]
