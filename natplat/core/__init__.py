"""Core types shared by the platform layer and the CLI."""

from .config import Config, ConfigError, HostConfig, load_config, load_config_or_default
from .errors import ErrorCode
from .once import Once, once
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "HostConfig",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # once
    "Once",
    "once",
    # result
    "Err",
    "Ok",
    "Result",
]
