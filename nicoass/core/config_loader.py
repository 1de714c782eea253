"""Configuration loader for rendering constants.

This module loads a `RenderConfig` from a YAML file. Every key is optional;
missing sections fall back to the built-in defaults.

Example YAML:

    canvas:
      width: 1920
      height: 1080
    danmaku:
      duration: 6
      lane_capacity: 15
      burst_limit: 15
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from nicoass.config import RenderConfig
from nicoass.core.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError
from nicoass.core.logging import get_logger

logger = get_logger(__name__)


def load_render_config(path: Path | str | None = None) -> RenderConfig:
    """Load rendering configuration.

    Args:
        path: YAML file to read; None returns the defaults

    Returns:
        Validated RenderConfig

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigValidationError: If the content doesn't match the schema
        ConfigError: If the file can't be read or isn't valid YAML
    """
    if path is None:
        return RenderConfig()

    config_path = Path(path)
    if not config_path.exists():
        logger.error("Render config not found", path=str(config_path))
        raise ConfigNotFoundError(config_path.name, config_path=str(config_path))

    raw_config = _load_yaml_file(config_path)
    config = _validate_config(raw_config, config_path)
    logger.debug("Render config loaded", path=str(config_path))
    return config


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file from disk.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML content as dictionary. An empty file yields an empty dict.

    Raises:
        ConfigError: If reading or parsing fails.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("YAML parsing failed", path=str(path), error=str(e))
        raise ConfigError(f"Invalid YAML in {path}: {e}", config_path=str(path)) from e
    except OSError as e:
        logger.error("Failed to read config file", path=str(path), error=str(e))
        raise ConfigError(f"Cannot read {path}: {e}", config_path=str(path)) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(f"Config file must contain a YAML object: {path}", config_path=str(path))
    return content


def _validate_config(raw_config: dict[str, Any], path: Path) -> RenderConfig:
    """Validate raw config dict against schema.

    Args:
        raw_config: Raw configuration dictionary
        path: Source file for error messages

    Returns:
        Validated RenderConfig object

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        return RenderConfig(**raw_config)
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(loc_part) for loc_part in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.error("Render config validation failed", path=str(path), errors=error_messages)
        full_error = "\n".join(error_messages)
        raise ConfigValidationError(
            f"Invalid render configuration in {path}:\n{full_error}",
            config_path=str(path),
        ) from e
