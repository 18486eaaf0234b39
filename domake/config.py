"""YAML configuration for domake.

Example domake.yaml:
    input: tasks.do
    output: Makefile
    helpers: tools/helpers.mk

Every key is optional. Command line options override the file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError


DEFAULT_CONFIG_FILE = 'domake.yaml'
DEFAULT_INPUT = 'Dofile'
DEFAULT_OUTPUT = 'Makefile'


@dataclass
class DomakeConfig:
    """Resolved configuration.

    :ivar input: (str) Dofile path
    :ivar output: (str) Makefile path
    :ivar helpers: (str) replacement helpers fragment, None for the packaged one
    """
    input: str = DEFAULT_INPUT
    output: str = DEFAULT_OUTPUT
    helpers: Optional[str] = None


def load_config(path: Optional[Union[str, Path]] = None) -> DomakeConfig:
    """Load the configuration file.

    Args:
        path: Explicit configuration file. When None, domake.yaml in the
            current directory is used if present, defaults otherwise.

    Returns:
        DomakeConfig

    Raises:
        ConfigError: If the file is missing (explicit path only), unreadable
            or invalid
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_FILE)
        if not path.exists():
            return DomakeConfig()
    path = Path(path)

    try:
        content = path.read_text(encoding='utf-8')
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}")

    return parse_config_string(content)


def parse_config_string(content: str) -> DomakeConfig:
    """Parse configuration from a YAML string.

    Args:
        content: YAML content

    Returns:
        DomakeConfig
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping")

    return _validate_config_data(data)


def _validate_config_data(data: Dict[str, Any]) -> DomakeConfig:
    """Check keys and value types.

    Raises:
        ConfigError: On unknown keys or non-string values
    """
    known = {'input', 'output', 'helpers'}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(
            f"Unknown config key(s): {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(known))}"
        )

    for key in ('input', 'output'):
        if key in data and not isinstance(data[key], str):
            raise ConfigError(f"'{key}' must be a string")
        if key in data and not data[key]:
            raise ConfigError(f"'{key}' must not be empty")

    helpers = data.get('helpers')
    if helpers is not None and not isinstance(helpers, str):
        raise ConfigError("'helpers' must be a string")

    return DomakeConfig(
        input=data.get('input', DEFAULT_INPUT),
        output=data.get('output', DEFAULT_OUTPUT),
        helpers=helpers,
    )
