"""MCP tool and HTTP route definitions for supply-list discovery."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from supply_list_mcp.discovery.courses import parse_course_label
from supply_list_mcp.models.links import (
    BatchSupplyListResponse,
    CourseLevel,
    SupplyListResponse,
)
from supply_list_mcp.tools.service import (
    batch_discover_supply_lists,
    discover_supply_lists_safe,
)


async def scrape_supply_lists(url: str) -> SupplyListResponse:
    """Find the supply-list documents linked from a school page or Drive folder.

    Args:
        url: School web page or Google Drive share URL (must be http:// or https://)

    Returns:
        SupplyListResponse with labeled document links in grade order
        (Prekinder, Kinder, 1°-8° Básico, I°-IV° Medio, then the rest)
    """
    return await discover_supply_lists_safe(url)


async def scrape_supply_lists_batch(urls: list[str]) -> BatchSupplyListResponse:
    """Find supply-list documents for several source URLs.

    Args:
        urls: List of school page or Drive share URLs

    Returns:
        BatchSupplyListResponse with one result per URL
    """
    return await batch_discover_supply_lists(urls)


async def describe_course_label(label: str, year: int | None = None) -> CourseLevel:
    """Parse a supply-list label into a course name, level and grade.

    Args:
        label: Document label (e.g. "1º Básicos", "II° Medio", "Kinder")
        year: Optional school year appended to the course name

    Returns:
        CourseLevel with the normalized course name, level and grade
    """
    return parse_course_label(label, year)


async def api_scrape_url(request: Request) -> JSONResponse:
    """Discover supply lists for the ``url`` query parameter.

    Returns:
        JSONResponse with ``{success, data, count}`` or ``{success, error}``
        and status 400, 502 or 500 on failure
    """
    url = request.query_params.get("url")
    response = await discover_supply_lists_safe(url)
    return JSONResponse(response.to_payload(), status_code=response.status_code)


def register_discovery_tools(mcp: FastMCP) -> None:
    """Register supply-list discovery tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool()(scrape_supply_lists)
    mcp.tool()(scrape_supply_lists_batch)
    mcp.tool()(describe_course_label)
