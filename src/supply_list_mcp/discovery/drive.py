"""Document extraction from Google Drive share and folder pages."""

from __future__ import annotations

import logging
import re

from supply_list_mcp.discovery.classifier import is_generic_caption, placeholder_label
from supply_list_mcp.discovery.cloud import download_url_for
from supply_list_mcp.discovery.extractor import anchor_caption, scan_pdf_hrefs
from supply_list_mcp.models.links import ScrapedLink

logger = logging.getLogger(__name__)

_DRIVE_ANCHOR_RE = re.compile(
    r"""<a\s[^>]*?href\s*=\s*["'](https?://drive\.google\.com/file/d/([a-zA-Z0-9_-]+)/[^"']*)["'][^>]*>""",
    re.IGNORECASE,
)
_DRIVE_FILE_ID_RE = re.compile(
    r"(?:drive\.google\.com/file/d/|drive\.google\.com/open\?id=)([a-zA-Z0-9_-]+)",
    re.IGNORECASE,
)


def _links_from_anchors(html: str) -> list[ScrapedLink]:
    results: list[ScrapedLink] = []
    seen: set[str] = set()

    for match in _DRIVE_ANCHOR_RE.finditer(html):
        direct_url = download_url_for(match.group(2))
        if direct_url in seen:
            continue
        seen.add(direct_url)

        caption = anchor_caption(html, match.end())
        label = placeholder_label(len(results) + 1) if is_generic_caption(caption) else caption
        results.append(ScrapedLink.labeled(label, direct_url))

    return results


def _links_from_file_ids(html: str) -> list[ScrapedLink]:
    results: list[ScrapedLink] = []
    seen: set[str] = set()

    for match in _DRIVE_FILE_ID_RE.finditer(html):
        direct_url = download_url_for(match.group(1))
        if direct_url in seen:
            continue
        seen.add(direct_url)
        results.append(ScrapedLink.labeled(placeholder_label(len(results) + 1), direct_url))

    return results


def scrape_drive_page(html: str, page_url: str) -> list[ScrapedLink]:
    """Extract documents from the markup of a Drive page.

    Drive links are labeled from their anchor text, never from the URL.
    Three tiers are tried in order and the first non-empty one wins:

    1. ``<a>`` tags targeting ``drive.google.com/file/d/<id>/...``
    2. Bare file identifiers anywhere in the markup (e.g. inside scripts)
    3. Any ``.pdf`` href in the markup

    Args:
        html: Markup of the Drive page
        page_url: URL the markup was fetched from

    Returns:
        Links with direct-download hrefs, unique by href
    """
    results = _links_from_anchors(html)
    if results:
        logger.debug(f"Found {len(results)} Drive anchors on {page_url}")
        return results

    results = _links_from_file_ids(html)
    if results:
        logger.debug(f"Found {len(results)} bare Drive file ids on {page_url}")
        return results

    results = scan_pdf_hrefs(html, page_url, context_window=0)
    logger.debug(f"Found {len(results)} PDF hrefs on Drive page {page_url}")
    return results
