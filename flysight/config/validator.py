"""
FlySight Configuration Validator

Checks a raw config mapping (usually from YAML) before it becomes a
ReaderConfig. Every problem is reported at once.

Usage:
    from flysight.config.validator import ConfigurationError, validate_config

    validate_config(raw, config_path)
"""

import codecs
from pathlib import Path
from typing import Any, Dict, List, Optional


class ConfigurationError(Exception):
    """
    Raised when the reader configuration is invalid.

    The message lists every offending key and what was expected.
    """
    pass


# key -> (expected type, description)
KNOWN_FIELDS = {
    'min_header_matches': (int, 'integer between 1 and 12'),
    'encoding': (str, 'name of a Python text codec, e.g. utf-8-sig'),
}


def _check_value(key: str, value: Any) -> Optional[str]:
    """Return a problem description for one key, or None if it is fine."""
    expected, description = KNOWN_FIELDS[key]

    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, expected):
        return f"{key}: expected {description}, got {value!r}"

    if key == 'min_header_matches' and not 1 <= value <= 12:
        return f"{key}: expected {description}, got {value}"

    if key == 'encoding':
        try:
            codecs.lookup(value)
        except LookupError:
            return f"{key}: unknown encoding {value!r}"

    return None


def validate_config(
    config: Dict[str, Any],
    config_path: Optional[Path] = None,
) -> None:
    """
    Validate a raw configuration mapping.

    Args:
        config: Configuration dictionary
        config_path: Path to config file (for error message)

    Raises:
        ConfigurationError: If the mapping has unknown keys or bad values
    """
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(config).__name__}"
            + (f" (file: {config_path})" if config_path else "")
        )

    problems: List[str] = []

    for key in config:
        if key not in KNOWN_FIELDS:
            problems.append(f"{key}: unknown setting")

    for key in KNOWN_FIELDS:
        if key in config:
            problem = _check_value(key, config[key])
            if problem:
                problems.append(problem)

    if problems:
        location = f"File: {config_path}\n" if config_path else ""
        raise ConfigurationError(
            f"\n{'='*60}\n"
            f"CONFIGURATION ERROR: Invalid reader settings\n"
            f"{'='*60}\n"
            f"{location}\n"
            f"Problems:\n"
            f"{''.join(f'  - {p}' + chr(10) for p in problems)}\n"
            f"Known settings:\n"
            f"{''.join(f'  {k}: <{d}>' + chr(10) for k, (_, d) in KNOWN_FIELDS.items())}"
            f"{'='*60}"
        )
