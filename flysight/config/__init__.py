"""
FlySight Configuration
======================

- settings: ReaderConfig and YAML loading
- validator: ConfigurationError and checks
"""

from .settings import ReaderConfig, load_config, CONFIG_ENV_VAR
from .validator import ConfigurationError, validate_config

__all__ = [
    'ReaderConfig',
    'load_config',
    'CONFIG_ENV_VAR',
    'ConfigurationError',
    'validate_config',
]
