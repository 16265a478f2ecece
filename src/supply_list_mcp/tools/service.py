"""Business logic for supply-list discovery tools."""

from __future__ import annotations

import asyncio
import logging
import time

import requests

from supply_list_mcp.admin.service import get_config
from supply_list_mcp.core.providers import get_provider
from supply_list_mcp.discovery.classifier import is_cloud_storage_source, placeholder_label
from supply_list_mcp.discovery.cloud import download_url_for, extract_drive_file_id
from supply_list_mcp.discovery.drive import scrape_drive_page
from supply_list_mcp.discovery.extractor import (
    FALLBACK_LABEL,
    extract_document_links,
    scan_pdf_hrefs,
)
from supply_list_mcp.discovery.grades import label_from_filename, sort_by_grade
from supply_list_mcp.metrics import record_request
from supply_list_mcp.models.links import (
    BatchSupplyListResponse,
    ScrapedLink,
    SupplyListResponse,
    SupplyListResultItem,
)
from supply_list_mcp.providers import PageProvider
from supply_list_mcp.utils import filename_from_url, is_absolute_http_url

logger = logging.getLogger(__name__)


class InvalidSourceUrlError(ValueError):
    """The source URL is missing or not an absolute http(s) URL."""


def validate_source_url(url: str | None) -> str:
    """Check a source URL before anything is fetched.

    Args:
        url: URL supplied by the caller

    Returns:
        The URL without surrounding whitespace

    Raises:
        InvalidSourceUrlError: If the URL is missing or malformed
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidSourceUrlError("Invalid or missing URL")
    url = url.strip()
    if not url.startswith("http") or not is_absolute_http_url(url):
        raise InvalidSourceUrlError("Invalid or missing URL")
    return url


def normalize_labels(links: list[ScrapedLink]) -> None:
    """Give placeholder-labeled links one more chance from their filename."""
    for link in links:
        if link.label == FALLBACK_LABEL or len(link.label) < 2:
            from_url = label_from_filename(filename_from_url(link.href))
            if from_url:
                link.relabel(from_url)


def extract_supply_list_links(
    html: str,
    url: str,
    base_url: str | None = None,
) -> list[ScrapedLink]:
    """Find, label and order the supply-list documents of a fetched page.

    Drive/Docs sources go through the Drive page tiers (whose last tier is
    the ``.pdf`` href scan), then the file id of the source URL. Anything
    else goes through the generic anchor extractor, then the ``.pdf`` href
    scan.

    Args:
        html: Markup of the fetched page
        url: Source URL requested by the caller
        base_url: URL relative links resolve against (defaults to ``url``)

    Returns:
        Labeled links in canonical grade order
    """
    base_url = base_url or url
    results: list[ScrapedLink] = []

    if is_cloud_storage_source(url):
        results = scrape_drive_page(html, base_url)
        if not results:
            file_id = extract_drive_file_id(url)
            if file_id:
                logger.debug(f"Falling back to the file id embedded in {url}")
                results = [ScrapedLink.labeled(placeholder_label(1), download_url_for(file_id))]
    else:
        results = extract_document_links(html, base_url)
        if not results:
            results = scan_pdf_hrefs(html, base_url)
            logger.debug(f"Global PDF href scan found {len(results)} documents on {url}")

    normalize_labels(results)
    return sort_by_grade(results)


async def discover_supply_lists(
    url: str | None,
    provider: PageProvider | None = None,
    timeout: float | None = None,
) -> SupplyListResponse:
    """Fetch a source URL and return its supply-list documents.

    Args:
        url: School page or Drive share URL
        provider: Page provider (default: provider registered for the URL)
        timeout: Fetch timeout in seconds (default: from runtime config,
                 longer for Drive/Docs URLs)

    Returns:
        Successful SupplyListResponse, possibly with zero documents

    Raises:
        InvalidSourceUrlError: If the URL is missing or malformed
        requests.RequestException: If the fetch fails or returns non-2xx
    """
    url = validate_source_url(url)
    cloud = is_cloud_storage_source(url)

    if timeout is None:
        timeout = get_config("cloud_fetch_timeout" if cloud else "fetch_timeout")
    if provider is None:
        provider = get_provider(url)

    page = await provider.fetch(
        url,
        timeout=timeout,
        headers={"Accept-Language": get_config("accept_language")},
        verify=get_config("verify_ssl"),
    )

    links = extract_supply_list_links(page.content, url, page.base_url)
    logger.info(f"Discovered {len(links)} documents at {url} (cloud={cloud})")

    return SupplyListResponse(success=True, data=links, count=len(links))


def _failure(error: str, status_code: int) -> SupplyListResponse:
    return SupplyListResponse(success=False, error=error, status_code=status_code)


async def discover_supply_lists_safe(
    url: str | None,
    provider: PageProvider | None = None,
    timeout: float | None = None,
) -> SupplyListResponse:
    """Discover supply lists, converting every failure into a response.

    Args:
        url: School page or Drive share URL
        provider: Page provider (default: provider registered for the URL)
        timeout: Fetch timeout in seconds

    Returns:
        SupplyListResponse; failures carry an error message and a status
        code of 400 (invalid URL), 502 (upstream failure) or 500
    """
    started = time.perf_counter()
    try:
        response = await discover_supply_lists(url, provider, timeout)
    except InvalidSourceUrlError as e:
        response = _failure(str(e), 400)
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "unknown"
        response = _failure(f"Could not load page ({status})", 502)
    except requests.RequestException as e:
        response = _failure(f"Could not load page: {type(e).__name__}: {e}", 502)
    except Exception as e:
        logger.exception(f"Unexpected error discovering supply lists at {url}")
        response = _failure(str(e) or "Error scraping URL", 500)

    record_request(
        url=url or "",
        success=response.success,
        status_code=response.status_code,
        elapsed_ms=(time.perf_counter() - started) * 1000,
        documents=response.count,
        error=response.error,
        cloud=is_cloud_storage_source(url or ""),
    )
    return response


async def _discover_with_semaphore(
    url: str,
    semaphore: asyncio.Semaphore,
    timeout: float | None = None,
) -> SupplyListResultItem:
    async with semaphore:
        response = await discover_supply_lists_safe(url, timeout=timeout)

    return SupplyListResultItem(
        url=url,
        success=response.success,
        data=response if response.success else None,
        error=response.error,
    )


async def batch_discover_supply_lists(
    urls: list[str],
    concurrency: int | None = None,
    timeout: float | None = None,
) -> BatchSupplyListResponse:
    """Discover supply lists for several source URLs concurrently.

    Each URL is handled independently; documents are not deduplicated
    across URLs.

    Args:
        urls: List of source URLs
        concurrency: Maximum number of concurrent fetches
        timeout: Fetch timeout in seconds applied to every URL

    Returns:
        BatchSupplyListResponse with results for all URLs
    """
    if concurrency is None:
        concurrency = get_config("concurrency")
    semaphore = asyncio.Semaphore(concurrency)

    tasks = [_discover_with_semaphore(url, semaphore, timeout) for url in urls]
    results = await asyncio.gather(*tasks)

    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    return BatchSupplyListResponse(
        total=len(results),
        successful=successful,
        failed=failed,
        results=results,
    )
