"""Core types: results, exit codes, settings and the history config."""

from .result import Err, Ok, Result
from .errors import ErrorCode
from .config import Config, ConfigError, load_config, merge, update_config
from .settings import RuntimeEnv, parse_bool

__all__ = [
    # result
    "Err",
    "Ok",
    "Result",
    # errors
    "ErrorCode",
    # config
    "Config",
    "ConfigError",
    "load_config",
    "merge",
    "update_config",
    # settings
    "RuntimeEnv",
    "parse_bool",
]
