"""Pydantic data models for supply-list discovery and responses.

This module defines the data structures used throughout the server:
- Discovered documents (ScrapedLink)
- Single discovery responses (SupplyListResponse)
- Batch discovery (BatchSupplyListResponse, SupplyListResultItem)
- Course descriptors parsed from labels (CourseLevel)

All models use Pydantic v2 for validation and serialization.
"""

from supply_list_mcp.models.links import (
    BatchSupplyListResponse,
    CourseLevel,
    ScrapedLink,
    SupplyListResponse,
    SupplyListResultItem,
)

__all__ = [
    "ScrapedLink",
    "SupplyListResponse",
    "SupplyListResultItem",
    "BatchSupplyListResponse",
    "CourseLevel",
]
