"""
Configuration for the cron-parser command line.
Simple YAML-based configuration with sensible defaults.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from colored_logger import LEVEL_NAMES, get_colored_logger

logger = get_colored_logger(__name__)

DEFAULT_CONFIG = {
    "logging": {
        "level": "INFO",
        "color": True,
    },
    "output": {
        "format": "text",
        "indent": 2,
        "summary": True,
    },
}

OUTPUT_FORMATS = ("text", "json")

CONFIG_FILE_NAMES = ("cron-parser.yml", ".cron-parser.yml")

ENV_PREFIX = "CRON_PARSER_"


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file with fallback to defaults.

    Args:
        config_path: Optional path to config file. When omitted the current
            directory is searched for cron-parser.yml or .cron-parser.yml.

    Returns:
        Configuration dictionary
    """
    if config_path:
        config_file = Path(config_path)
    else:
        config_file = None
        for name in CONFIG_FILE_NAMES:
            path = Path.cwd() / name
            if path.exists():
                config_file = path
                break

    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_file is not None:
        if not config_file.exists():
            logger.warning("Config file %s not found, using defaults", config_file)
        else:
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    user_config = yaml.safe_load(f) or {}

                if isinstance(user_config, dict):
                    config = _deep_merge(config, user_config)
                    logger.debug("Loaded configuration from %s", config_file)
                else:
                    logger.warning(
                        "Ignoring config %s: top level must be a mapping", config_file
                    )

            except (OSError, yaml.YAMLError) as e:
                logger.warning("Failed to load config from %s: %s", config_file, e)
                logger.warning("Using default configuration")

    return _apply_env_overrides(config, os.environ)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary to merge into base

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _apply_env_overrides(
    config: Dict[str, Any], environ: Dict[str, str]
) -> Dict[str, Any]:
    """
    Apply environment variable overrides to config.

    Environment variables follow pattern: CRON_PARSER_<SECTION>_<KEY>=value
    Example: CRON_PARSER_OUTPUT_FORMAT=json

    Only existing sections are matched, so keys may themselves contain
    underscores.
    """
    for env_key, env_value in environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue

        remainder = env_key[len(ENV_PREFIX) :].lower()
        for section, values in config.items():
            if not isinstance(values, dict) or not remainder.startswith(section + "_"):
                continue
            key = remainder[len(section) + 1 :]
            if key:
                values[key] = _convert_env_value(env_value)
            break

    return config


def _convert_env_value(value: str) -> Any:
    """Convert an environment variable string to a bool, int, float or str."""
    if value.lower() in ("true", "yes", "on"):
        return True
    elif value.lower() in ("false", "no", "off"):
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Check a loaded configuration for values the CLI cannot use.

    Returns:
        List of human-readable problems, empty when the config is usable
    """
    problems = []

    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            problems.append(f"{section} must be a mapping")

    logging_config = config.get("logging")
    if isinstance(logging_config, dict):
        level = str(logging_config.get("level", "")).upper()
        if level not in LEVEL_NAMES:
            problems.append(f"logging.level must be one of {', '.join(LEVEL_NAMES)}")

        if not isinstance(logging_config.get("color"), bool):
            problems.append("logging.color must be true or false")

    output = config.get("output")
    if isinstance(output, dict):
        if output.get("format") not in OUTPUT_FORMATS:
            problems.append(
                f"output.format must be one of {', '.join(OUTPUT_FORMATS)}"
            )

        indent = output.get("indent")
        if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
            problems.append("output.indent must be a non-negative integer")

        if not isinstance(output.get("summary"), bool):
            problems.append("output.summary must be true or false")

    return problems
