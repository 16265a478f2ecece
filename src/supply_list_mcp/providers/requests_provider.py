"""Page provider using the Python requests library."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse

import requests

from supply_list_mcp.providers.base import FetchedPage, PageProvider

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "es-ES,es;q=0.9,en;q=0.8"


class RequestsProvider(PageProvider):
    """Page fetcher using requests, posing as a desktop browser.

    Fetches are one-shot: a non-2xx status, a timeout or a connection error
    is raised to the caller and never retried.
    """

    def __init__(
        self,
        timeout: float = 20,
        user_agent: str = DEFAULT_USER_AGENT,
        accept_language: str = DEFAULT_ACCEPT_LANGUAGE,
        verify_ssl: bool = True,
    ) -> None:
        """Initialize the requests provider.

        Args:
            timeout: Request timeout in seconds (default: 20)
            user_agent: User agent string (default: Chrome 120 on Windows)
            accept_language: Accept-Language header value
            verify_ssl: Verify TLS certificates (default: True)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.accept_language = accept_language
        self.verify_ssl = verify_ssl

        self.session = requests.Session()
        logger.info(f"RequestsProvider initialized (timeout={timeout}s, verify_ssl={verify_ssl})")

    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if the URL uses http or https scheme and has a host
        """
        try:
            parsed = urlparse(url)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except Exception:
            return False

    def build_headers(self, headers: dict[str, str] | None = None) -> dict[str, str]:
        """Browser-like request headers, overridable per call."""
        merged = {
            "User-Agent": self.user_agent,
            "Accept": DEFAULT_ACCEPT,
            "Accept-Language": self.accept_language,
        }
        if headers:
            merged.update(headers)
        return merged

    async def fetch(self, url: str, **kwargs: Any) -> FetchedPage:
        """Fetch a page, following redirects.

        Args:
            url: The URL to fetch
            **kwargs: Additional options
                - timeout: Request timeout in seconds
                - headers: Custom HTTP headers
                - verify: Verify TLS certificates (default: provider setting)

        Returns:
            FetchedPage containing the page markup and metadata

        Raises:
            requests.HTTPError: If the server answers with a non-2xx status
            requests.RequestException: On timeouts and connection failures
        """
        timeout = kwargs.get("timeout", self.timeout)
        headers = self.build_headers(kwargs.get("headers"))
        verify = kwargs.get("verify", self.verify_ssl)

        # Run requests in thread pool to avoid blocking
        loop = asyncio.get_event_loop()
        try:
            response = await loop.run_in_executor(
                None,
                lambda: self.session.get(
                    url,
                    headers=headers,
                    timeout=timeout,
                    allow_redirects=True,
                    verify=verify,
                ),
            )
            # Raise for bad status codes
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Fetch failed for {url}: {type(e).__name__}: {e}")
            raise

        metadata = {
            "encoding": response.encoding,
            "elapsed_ms": response.elapsed.total_seconds() * 1000,
            "timeout": timeout,
        }

        return FetchedPage(
            url=url,
            content=response.text,
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
            final_url=response.url or url,
            metadata=metadata,
        )
