"""
Reader Settings
===============

ReaderConfig carries the few knobs the parser has. Defaults match the
FlySight format; a YAML file can override them.

    # flysight.yaml
    min_header_matches: 3
    encoding: utf-8-sig

Lookup order for load_config():
    1. explicit path argument
    2. FLYSIGHT_CONFIG environment variable
    3. built-in defaults
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from flysight.config.validator import ConfigurationError, validate_config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'FLYSIGHT_CONFIG'


@dataclass(frozen=True)
class ReaderConfig:
    """
    Parser settings.

    Attributes:
        min_header_matches: Positional canonical-name matches needed for the
            first content line to count as a header
        encoding: Text encoding for read_file / read_file_async. The default
            utf-8-sig drops a leading byte-order mark.
    """
    min_header_matches: int = 3
    encoding: str = 'utf-8-sig'

    @classmethod
    def from_dict(cls, data: Dict[str, Any], config_path: Optional[Path] = None) -> 'ReaderConfig':
        """Build from a raw mapping; missing keys keep their defaults."""
        validate_config(data, config_path)
        return replace(cls(), **data)


def load_config(path: Optional[Union[str, Path]] = None) -> ReaderConfig:
    """
    Load reader settings from YAML.

    Args:
        path: Config file. Falls back to $FLYSIGHT_CONFIG, then defaults.

    Returns:
        ReaderConfig

    Raises:
        FileNotFoundError: If an explicitly named file does not exist
        ConfigurationError: If the file content is invalid
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return ReaderConfig()
        path = env_path

    config_path = Path(path)
    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {config_path}: {e}") from e

    if data is None:
        data = {}

    config = ReaderConfig.from_dict(data, config_path)
    logger.debug(f"Loaded reader config from {config_path}: {config}")
    return config
