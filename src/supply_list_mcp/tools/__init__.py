"""MCP supply-list discovery tools and business logic.

This module exposes the discovery engine as MCP tools:
- scrape_supply_lists: Labeled, grade-ordered documents of one source URL
- scrape_supply_lists_batch: The same for several URLs
- describe_course_label: Course level and grade of a label

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions, HTTP route and registration
- service.py: Fetching, extraction tiers, label normalization and ordering
"""

from supply_list_mcp.tools.router import (
    api_scrape_url,
    describe_course_label,
    register_discovery_tools,
    scrape_supply_lists,
    scrape_supply_lists_batch,
)
from supply_list_mcp.tools.service import (
    InvalidSourceUrlError,
    batch_discover_supply_lists,
    discover_supply_lists,
    discover_supply_lists_safe,
    extract_supply_list_links,
)

__all__ = [
    # MCP tool functions
    "scrape_supply_lists",
    "scrape_supply_lists_batch",
    "describe_course_label",
    # HTTP routes
    "api_scrape_url",
    # Registration functions
    "register_discovery_tools",
    # Service functions
    "discover_supply_lists",
    "discover_supply_lists_safe",
    "batch_discover_supply_lists",
    "extract_supply_list_links",
    "InvalidSourceUrlError",
]
