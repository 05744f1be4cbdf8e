"""
Configuration - Load .progress-dialog.yml and manifest files

Configuration is optional: without a config file every notifier setting falls
back to its platform default. Manifests describe the packages a run processes.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PROGRESS_DIALOG_CONFIG"
DEFAULT_CONFIG_FILE = ".progress-dialog.yml"


class ConfigError(Exception):
    """Raised for unreadable or malformed configuration/manifest files"""
    pass


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Explicit path, else $PROGRESS_DIALOG_CONFIG, else .progress-dialog.yml in the cwd"""
    config_path = Path(path or os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))
    if not config_path.is_absolute():
        config_path = Path.cwd() / config_path
    return config_path


def _load_yaml_mapping(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load progress-dialog configuration.

    Args:
        path: Config file path (defaults to $PROGRESS_DIALOG_CONFIG or .progress-dialog.yml)

    Returns:
        Configuration dictionary, empty if the file does not exist

    Raises:
        ConfigError: If the file exists but is not a valid YAML mapping
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return {}

    config = _load_yaml_mapping(config_path)
    logger.debug(f"Configuration loaded from: {config_path}")
    return config


def load_manifest(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a package manifest; unlike config, a missing manifest is an error."""
    manifest_path = Path(path)
    if not manifest_path.exists():
        raise ConfigError(f"Manifest not found: {manifest_path}")
    return _load_yaml_mapping(manifest_path)
