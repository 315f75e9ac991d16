import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import collections.abc

from pydantic import ValidationError

from sonarbreak.utils.logging import get_logger
from .defaults import DEFAULT_CONFIG
from .gate import GateConfig
from .logs import LoggingConfig

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = ".sonarbreak.yaml"


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges two dictionaries.
    'override' values take precedence over 'base' values.
    Lists are overridden, not merged.
    """
    result = base.copy()
    for key, value in override.items():
        if (
            isinstance(value, collections.abc.Mapping)
            and key in result
            and isinstance(result[key], collections.abc.Mapping)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(project_path: str = ".", config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations from default, global, and project-specific files.

    An explicit config_file replaces the project file lookup.
    """
    # 1. Start with the default config
    config = DEFAULT_CONFIG.copy()

    # 2. Load and merge global config
    global_config_path = Path.home() / ".sonarbreak" / "config.yaml"
    if global_config_path.is_file():
        try:
            with open(global_config_path, "r") as f:
                global_config = yaml.safe_load(f)
            if global_config and not isinstance(global_config, collections.abc.Mapping):
                logger.warning("Ignoring global config that is not a mapping", path=str(global_config_path))
            elif global_config:
                config = deep_merge(config, global_config)
        except yaml.YAMLError as e:
            logger.warning("Ignoring unparsable global config", path=str(global_config_path), error=str(e))

    # 3. Load and merge project-specific config
    if config_file:
        project_config_path = Path(config_file)
        if not project_config_path.is_file():
            raise ValueError(f"Config file not found at {project_config_path}")
    else:
        project_config_path = Path(project_path) / PROJECT_CONFIG_NAME
    if project_config_path.is_file():
        try:
            with open(project_config_path, "r") as f:
                project_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(
                f"Error parsing project config file at {project_config_path}: {e}"
            ) from e
        if project_config and not isinstance(project_config, collections.abc.Mapping):
            raise ValueError(
                f"Project config file at {project_config_path} must contain a mapping."
            )
        if project_config:
            config = deep_merge(config, project_config)

    # 4. Validate final config
    validate_config(config)

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """Raises ValueError if a known section does not match its model."""
    if not isinstance(config, collections.abc.Mapping):
        raise ValueError("Configuration must be a mapping.")
    try:
        GateConfig(**(config.get("gate") or {}))
        LoggingConfig(**(config.get("logging") or {}))
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid configuration: {e}") from e
