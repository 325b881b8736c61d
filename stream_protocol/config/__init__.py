"""
Protocol configuration: frozen defaults, YAML loading and validation.
"""
from .defaults import CodecOptions, DefaultConfig, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "CodecOptions",
    "LoggingParams",
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
