"""Admin service layer for configuration and stats management."""

from __future__ import annotations

import logging
import os
from typing import Any

from supply_list_mcp.metrics import get_metrics
from supply_list_mcp.providers.requests_provider import DEFAULT_ACCEPT_LANGUAGE

logger = logging.getLogger(__name__)

# Default concurrency limit for batch operations
DEFAULT_CONCURRENCY = 8

# Fetch timeouts in seconds; Drive pages are slower to render
DEFAULT_FETCH_TIMEOUT = 20
DEFAULT_CLOUD_FETCH_TIMEOUT = 25

_DEFAULTS: dict[str, Any] = {
    "concurrency": DEFAULT_CONCURRENCY,
    "fetch_timeout": DEFAULT_FETCH_TIMEOUT,
    "cloud_fetch_timeout": DEFAULT_CLOUD_FETCH_TIMEOUT,
    "accept_language": DEFAULT_ACCEPT_LANGUAGE,
    "verify_ssl": True,
}

# Runtime configuration overrides (not persisted)
_runtime_config: dict[str, Any] = dict(_DEFAULTS)


def _int_from_env(name: str, key: str) -> None:
    value = os.getenv(name)
    if not value:
        return
    try:
        _runtime_config[key] = int(value)
        logger.info(f"{key} set to {value} from {name}")
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={value!r}")


# Initialize settings from environment variables if present
_int_from_env("BATCH_CONCURRENCY", "concurrency")
_int_from_env("FETCH_TIMEOUT", "fetch_timeout")
_int_from_env("CLOUD_FETCH_TIMEOUT", "cloud_fetch_timeout")
if os.getenv("ACCEPT_LANGUAGE"):
    _runtime_config["accept_language"] = os.getenv("ACCEPT_LANGUAGE")
if os.getenv("VERIFY_SSL"):
    _runtime_config["verify_ssl"] = os.getenv("VERIFY_SSL", "true").lower() in ("true", "1", "yes")


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value with runtime override support.

    Args:
        key: Configuration key
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    return _runtime_config.get(key, default)


def get_stats() -> dict[str, Any]:
    """Get server statistics and metrics.

    Returns:
        Dictionary with request and discovery metrics
    """
    return get_metrics().to_dict()


def get_current_config() -> dict[str, Any]:
    """Get current runtime configuration.

    Returns:
        Dictionary with current config, defaults, and note
    """
    return {
        "config": dict(_runtime_config),
        "defaults": dict(_DEFAULTS),
        "note": "Changes are not persisted and will reset on server restart",
    }


def update_config(config_updates: dict[str, Any]) -> dict[str, Any]:
    """Update runtime configuration.

    Unknown keys and values of the wrong type or range are ignored.

    Args:
        config_updates: Dictionary of config key-value pairs to update

    Returns:
        Dictionary with status, message, updated keys, and current config
    """
    updated = []
    for key, value in config_updates.items():
        if key not in _DEFAULTS:
            continue
        # bool is a subclass of int
        is_int = isinstance(value, int) and not isinstance(value, bool)
        if key == "concurrency" and is_int and 1 <= value <= 50:
            _runtime_config[key] = value
            updated.append(key)
        elif key in ("fetch_timeout", "cloud_fetch_timeout") and is_int and 1 <= value <= 120:
            _runtime_config[key] = value
            updated.append(key)
        elif key == "accept_language" and isinstance(value, str) and value.strip():
            _runtime_config[key] = value.strip()
            updated.append(key)
        elif key == "verify_ssl" and isinstance(value, bool):
            _runtime_config[key] = value
            updated.append(key)

    if updated:
        logger.info(f"Runtime config updated: {', '.join(updated)}")

    return {
        "status": "success",
        "message": f"Updated {len(updated)} config value(s)",
        "updated": updated,
        "current_config": dict(_runtime_config),
    }


def reset_config() -> None:
    """Restore every runtime setting to its default."""
    _runtime_config.clear()
    _runtime_config.update(_DEFAULTS)
