"""Utility functions for HTML and URL processing."""

from __future__ import annotations

import re
from urllib.parse import unquote, urljoin, urlparse

from bs4 import BeautifulSoup

_WHITESPACE_RE = re.compile(r"\s+")


def html_to_text(html: str) -> str:
    """Extract the visible text of an HTML fragment as a single line.

    Tags are removed, entities decoded and whitespace runs collapsed.

    Args:
        html: The HTML fragment to process

    Returns:
        Plain text content (possibly empty)
    """
    if not html:
        return ""

    # Parse HTML
    soup = BeautifulSoup(html, "lxml")
    text = soup.get_text(separator=" ")

    # Non-breaking spaces count as whitespace
    text = text.replace("\xa0", " ")
    return _WHITESPACE_RE.sub(" ", text).strip()


def resolve_url(base_url: str, href: str) -> str:
    """Resolve a possibly relative href against a base URL.

    Args:
        base_url: URL of the page the href was found on
        href: The raw href value

    Returns:
        Absolute URL, or the href unchanged if it cannot be resolved
    """
    if href.startswith(("http://", "https://")):
        return href
    try:
        return urljoin(base_url, href)
    except ValueError:
        return href


def filename_from_url(url: str) -> str:
    """Return the last path segment of a URL without its query string.

    Percent-escapes are decoded so that ``Lista%201%C2%B0.pdf`` reads
    ``Lista 1°.pdf``.

    Args:
        url: Absolute or relative URL

    Returns:
        The filename portion, or an empty string
    """
    segment = url.split("?", 1)[0].split("#", 1)[0].split("/")[-1]
    return unquote(segment)


def is_absolute_http_url(url: str) -> bool:
    """Check whether a string is an absolute http(s) URL with a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
