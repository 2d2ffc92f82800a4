from __future__ import annotations

"""
Configuration Domain Management.

Defines the default run configuration and handles its persistence as a
JSON document in the user data directory. Persisted values sit between the
built-in defaults and the command-line overrides.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from dirshortcuts.domain.errors import ConfigError
from dirshortcuts.infra.fs import get_default_config_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_ALIAS = "~"
DEFAULT_DEPTH = 1


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "root": None,
        "dest": None,

        # Traversal
        "depth": DEFAULT_DEPTH,
        "excludes": [],
        "apply_excludes": False,

        # Home handling
        "alias": DEFAULT_ALIAS,
        "home": None,

        # Output
        "atomic_write": False,
        "warn_collisions": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    A missing default config file is normal and yields the defaults. A
    corrupted default file is logged and ignored. A path given explicitly
    must exist and be readable.

    Args:
        path: Explicit config file. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: Merged configuration.

    Raises:
        ConfigError: If an explicitly given config file cannot be used.
    """
    explicit = path is not None
    config_path = path or get_default_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        if explicit:
            raise ConfigError(f"Failed to load config '{config_path}': {e}") from e
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        if explicit:
            raise ConfigError(f"Config file '{config_path}' must contain a JSON object.")
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    settings = data.get("settings", data)
    if not isinstance(settings, dict):
        if explicit:
            raise ConfigError(f"Config file '{config_path}' has a malformed 'settings' section.")
        logger.warning("Corrupted config settings. Resetting to defaults.")
        return defaults

    for key in defaults:
        if key in settings:
            defaults[key] = settings[key]

    logger.debug(f"Configuration loaded from {config_path}")
    return defaults


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> str:
    """
    Persist the configuration to disk.

    Only known keys are written, under a versioned envelope.

    Args:
        config: The configuration to save.
        path: Target file. Defaults to the user data directory.

    Returns:
        str: The path written to.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_default_config_path()
    known = get_default_config()
    settings = {k: config.get(k, v) for k, v in known.items()}

    try:
        parent = os.path.dirname(os.path.abspath(config_path))
        os.makedirs(parent, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(
                {"version": CURRENT_CONFIG_VERSION, "settings": settings},
                f, ensure_ascii=False, indent=4
            )
    except OSError as e:
        raise ConfigError(f"Failed to save configuration to '{config_path}': {e}") from e

    logger.debug(f"Configuration saved to {config_path}")
    return config_path
