from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (persisted JSON, CLI)
and the engine. Coerces types, fills missing keys with domain defaults and
reports every correction as a warning. In strict mode the first problem
raises ConfigError instead.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from dirshortcuts.core.home import HOME_ALIASES
from dirshortcuts.domain.config import get_default_config
from dirshortcuts.domain.errors import ConfigError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ConfigError on the first invalid value.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          list of warnings produced.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Schema Definition
    optional_string_fields = ["root", "dest", "home"]
    bool_fields = ["apply_excludes", "atomic_write", "warn_collisions"]

    # 3. Field Processing & Normalization
    for field in optional_string_fields:
        merged[field] = _as_optional_str(merged.get(field), field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["depth"] = _as_depth(merged.get("depth"), defaults["depth"], warnings, strict)
    merged["excludes"] = _as_list_str(merged.get("excludes"), [], "excludes", warnings, strict)
    merged["alias"] = _as_alias(merged.get("alias"), defaults["alias"], warnings, strict)

    # Unknown keys are dropped to keep the schema closed
    for key in list(merged):
        if key not in defaults:
            warnings.append(f"Unknown config key '{key}' ignored.")
            del merged[key]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Validate optional string inputs, mapping blanks to None."""
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, int) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_depth(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    """Ensure depth is a non-negative integer."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        try:
            value = int(value.strip())
        except ValueError:
            pass

    if isinstance(value, bool) or not isinstance(value, int):
        _reject(f"Invalid field 'depth': expected int, received {type(value).__name__}.", warnings, strict)
        return fallback

    if value < 0:
        _reject(f"Invalid field 'depth': must be non-negative, received {value}.", warnings, strict)
        return fallback

    return value


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise ConfigError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    _reject(f"Invalid field '{field}': expected list[str], received {type(value).__name__}.", warnings, strict)
    return list(fallback)


def _as_alias(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Restrict the compaction alias to the recognised home aliases."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip() in HOME_ALIASES:
        return value.strip()

    _reject(f"Invalid field 'alias': expected one of {', '.join(HOME_ALIASES)}, received {value!r}.", warnings, strict)
    return fallback
