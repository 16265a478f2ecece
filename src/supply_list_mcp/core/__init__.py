"""Core infrastructure and shared utilities.

This module provides the single source of truth for the page provider
instance used by the discovery tools and HTTP endpoints.
"""

from supply_list_mcp.core.providers import (
    default_provider,
    get_provider,
)

__all__ = [
    "default_provider",
    "get_provider",
]
