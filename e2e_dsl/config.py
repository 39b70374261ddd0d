"""Configuration for the E2E DSL tool.

Defaults can be overridden from a YAML file and the environment.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .scenario.actions import (
    DEFAULT_SCREENSHOT_NAME,
    DEFAULT_SCROLL_AMOUNT,
    DEFAULT_WAIT_TIMEOUT_MS,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "E2E_DSL_CONFIG"
LOG_LEVEL_ENV_VAR = "E2E_DSL_LOG_LEVEL"


@dataclass(frozen=True)
class DslConfig:
    """Parser defaults and tool settings."""
    default_wait_timeout_ms: int = DEFAULT_WAIT_TIMEOUT_MS
    default_scroll_amount: int = DEFAULT_SCROLL_AMOUNT
    default_screenshot_name: str = DEFAULT_SCREENSHOT_NAME
    log_level: str = "WARNING"


def default_config_path() -> Path:
    return Path.home() / ".e2e-dsl" / "config.yaml"


def load_config(path: Optional[Union[str, Path]] = None) -> DslConfig:
    """Load configuration.

    Resolution order: explicit ``path``, the ``E2E_DSL_CONFIG`` environment
    variable, ``~/.e2e-dsl/config.yaml`` if it exists, then built-in
    defaults. ``E2E_DSL_LOG_LEVEL`` overrides the log level from any source.

    Raises:
        FileNotFoundError: If an explicitly requested file doesn't exist.
        ValueError: If the file is not a YAML mapping or a value has the
            wrong type.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    data: dict = {}

    if explicit:
        config_path = Path(explicit)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        data = _read_yaml(config_path)
    elif default_config_path().exists():
        data = _read_yaml(default_config_path())

    known = {f.name: f.type for f in fields(DslConfig)}
    values = {k: _check_type(k, v, known[k]) for k, v in data.items() if k in known}
    ignored = sorted(set(data) - set(known), key=str)
    if ignored:
        logger.debug("Ignoring unknown config keys: %s", ", ".join(map(str, ignored)))

    log_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if log_level:
        values["log_level"] = log_level.strip().upper()

    return DslConfig(**values)


def _read_yaml(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__} in {path}")

    logger.debug("Loaded config from %s", path)
    return data


def _check_type(key: str, value, expected: type):
    # bool is an int subclass but never a valid count or duration
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ValueError(
            f"Config key {key!r} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value
