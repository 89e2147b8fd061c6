"""
Configuration Loader
Load and validate YAML configuration files
"""

import copy

import yaml
from pathlib import Path
from typing import Dict, Any
import logging

from ..core.errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULT_CONFIG: Dict[str, Any] = {
    'rect': {'width': 1.0, 'height': 1.0},
    'geometry': {'max_condition': None},
    'logging': {'level': 'WARNING', 'colored': True, 'log_dir': None},
}


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to config file

    Returns:
        Configuration dictionary merged over the defaults
    """
    config_file = Path(config_path)

    if not config_file.exists():
        logger.error(f"Config file not found: {config_path}")
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML format: {e}")
        raise

    if not isinstance(config, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    logger.debug(f"Config loaded from: {config_path}")
    return merge_configs(copy.deepcopy(DEFAULT_CONFIG), config)


def save_config(config: Dict[str, Any], config_path: str):
    """
    Save configuration to YAML file

    Args:
        config: Configuration dictionary
        config_path: Path to save config
    """
    config_file = Path(config_path)
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, 'w', encoding='utf-8') as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)

    logger.debug(f"Config saved to: {config_path}")


def _positive(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"'{name}' must be a positive number, got {value!r}")
    return float(value)


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure

    Args:
        config: Configuration dictionary

    Returns:
        True if valid, raises ConfigError if invalid
    """
    if 'rect' not in config or not isinstance(config['rect'], dict):
        raise ConfigError("Missing required config section: rect")

    rect_config = config['rect']
    for key in ('width', 'height'):
        if key not in rect_config:
            raise ConfigError(f"Missing '{key}' in rect config")
        _positive(rect_config[key], f"rect.{key}")

    quad = config.get('quad')
    if quad is not None:
        if not isinstance(quad, (list, tuple)) or len(quad) != 4:
            raise ConfigError("'quad' must be a list of 4 [x, y] points")
        for point in quad:
            if not isinstance(point, (list, tuple)) or len(point) != 2:
                raise ConfigError(f"Invalid quad point: {point!r}")

    max_condition = get_config_value(config, 'geometry.max_condition')
    if max_condition is not None:
        _positive(max_condition, 'geometry.max_condition')

    logging_config = config.get('logging') or {}
    if not isinstance(logging_config, dict):
        raise ConfigError("'logging' must be a mapping")

    level = logging_config.get('level', 'WARNING')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(f"'logging.level' must be one of {list(LOG_LEVELS)}, got {level!r}")

    if not isinstance(logging_config.get('colored', True), bool):
        raise ConfigError("'logging.colored' must be true or false")

    log_dir = logging_config.get('log_dir')
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigError(f"'logging.log_dir' must be a path or null, got {log_dir!r}")

    logger.debug("Config validation passed")
    return True


def get_config_value(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """
    Get nested configuration value using dot notation

    Example:
        >>> get_config_value(config, 'rect.width', 1.0)
        1.0
    """
    keys = key_path.split('.')
    value = config

    try:
        for key in keys:
            value = value[key]
        return value
    except (KeyError, TypeError):
        return default


def merge_configs(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configurations, with override taking precedence"""
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged
