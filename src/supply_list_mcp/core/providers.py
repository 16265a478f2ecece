"""Provider initialization for the supply-list server."""

from supply_list_mcp.admin.service import get_config
from supply_list_mcp.providers import PageProvider, RequestsProvider

# Initialize default provider
# This is used by both the server and tools modules
default_provider: PageProvider = RequestsProvider(
    timeout=get_config("fetch_timeout"),
    accept_language=get_config("accept_language"),
    verify_ssl=get_config("verify_ssl"),
)


def get_provider(url: str) -> PageProvider:
    """Get the appropriate provider for a URL.

    Args:
        url: The URL to fetch

    Returns:
        A page provider that supports the URL

    Raises:
        ValueError: If no provider supports the URL
    """
    if default_provider.supports_url(url):
        return default_provider

    raise ValueError(f"No provider supports URL: {url}")
