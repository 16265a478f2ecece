"""Page providers for fetching source pages."""

from supply_list_mcp.providers.base import FetchedPage, PageProvider
from supply_list_mcp.providers.requests_provider import RequestsProvider

__all__ = ["PageProvider", "FetchedPage", "RequestsProvider"]
