"""Base provider interface for fetching source pages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FetchedPage:
    """Result from fetching a source page."""

    url: str
    content: str
    status_code: int
    content_type: str | None
    final_url: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def base_url(self) -> str:
        """URL relative links on the page resolve against (after redirects)."""
        return self.final_url or self.url


class PageProvider(ABC):
    """Abstract base class for page providers."""

    @abstractmethod
    async def fetch(self, url: str, **kwargs: Any) -> FetchedPage:
        """Fetch the content of a URL.

        Args:
            url: The URL to fetch
            **kwargs: Additional provider-specific options

        Returns:
            FetchedPage containing the page markup and metadata
        """
        pass

    @abstractmethod
    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if this provider can handle the URL
        """
        pass
