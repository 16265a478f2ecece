"""Document link extraction from arbitrary school web pages.

Third-party school sites rarely share any structure, so links are found
with tolerant scans over the raw markup rather than a parse tree. This
keeps character offsets available for the context search that labels a
link from the text preceding it (usually the closest heading).
"""

from __future__ import annotations

import logging
import re
from html import unescape

from supply_list_mcp.discovery.classifier import (
    is_cloud_hosted_link,
    is_document_link,
    is_generic_caption,
    placeholder_label,
)
from supply_list_mcp.discovery.cloud import is_drive_url, resolve_drive_url
from supply_list_mcp.discovery.grades import label_from_filename
from supply_list_mcp.models.links import ScrapedLink
from supply_list_mcp.utils import filename_from_url, html_to_text, resolve_url

logger = logging.getLogger(__name__)

# Characters of preceding markup searched for a label
CONTEXT_WINDOW = 800
FALLBACK_CONTEXT_WINDOW = 500

FALLBACK_LABEL = "PDF"

ANCHOR_RE = re.compile(r"""<a\s[^>]*?href\s*=\s*["']([^"']+)["'][^>]*>""", re.IGNORECASE)
ANCHOR_CLOSE_RE = re.compile(r"</a\s*>", re.IGNORECASE)
PDF_HREF_RE = re.compile(r"""href\s*=\s*["']([^"']*\.pdf[^"']*)["']""", re.IGNORECASE)

_COURSE_LIKE_RE = re.compile(
    r"(?:Pre-?kinder\s*[-–]?\s*Kinder|Pre-?kinder|Kinder|Playgroup"
    r"|\d+[º°]?\s*b[aá]sicos?|\d+[º°]?\s*medios?"
    r"|Enseñanza\s+Media|I{1,3}V?\s*[º°]?\s*medio)",
    re.IGNORECASE,
)
_COURSE_BLOCK_RE = re.compile(r">([^<]{2,120})<")
_GENERIC_BLOCK_RE = re.compile(r">([^<]{3,70})<")
_NUMERIC_BLOCK_RE = re.compile(r"^[\d\s\-./]+$")
_WHITESPACE_RE = re.compile(r"\s+")


def _clean_block(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", unescape(text).replace("\xa0", " ")).strip()


def anchor_caption(html: str, tag_end: int) -> str:
    """Visible text between an anchor open tag and the next ``</a>``.

    Args:
        html: Full page markup
        tag_end: Offset just past the anchor's open tag

    Returns:
        Normalized anchor text, empty if the anchor is never closed
    """
    close = ANCHOR_CLOSE_RE.search(html, tag_end)
    if close is None:
        return ""
    return html_to_text(html[tag_end : close.start()])


def canonical_document_url(url: str) -> str:
    """Direct-download form for Drive shares, anything else unchanged."""
    if is_drive_url(url):
        return resolve_drive_url(url)
    return url


def find_label_in_context(html_fragment: str) -> str | None:
    """Find a label for a link in the markup that precedes it.

    Text blocks that look like a grade (``3° Básico``, ``Kinder``,
    ``II° Medio``...) win; otherwise the closest short generic text block is
    used.

    Args:
        html_fragment: Markup preceding the link

    Returns:
        The closest matching text block, or None
    """
    fragment = html_fragment[-CONTEXT_WINDOW:]

    course_blocks = []
    for block in _COURSE_BLOCK_RE.finditer(fragment):
        text = _clean_block(block.group(1))
        if 2 <= len(text) <= 80 and _COURSE_LIKE_RE.search(text):
            course_blocks.append(text)
    if course_blocks:
        return course_blocks[-1]

    generic_blocks = []
    for block in _GENERIC_BLOCK_RE.finditer(fragment):
        text = _clean_block(block.group(1))
        if len(text) < 3 or _NUMERIC_BLOCK_RE.match(text):
            continue
        if text.lower().startswith("http"):
            continue
        generic_blocks.append(text)
    if generic_blocks:
        return generic_blocks[-1]

    return None


def extract_document_links(html: str, base_url: str) -> list[ScrapedLink]:
    """Extract labeled document links from a generic web page.

    Args:
        html: Page markup
        base_url: URL used to resolve relative hrefs

    Returns:
        Links in document order, unique by resolved href
    """
    results: list[ScrapedLink] = []
    seen: set[str] = set()

    for match in ANCHOR_RE.finditer(html):
        href = unescape(match.group(1)).strip()
        if not is_document_link(href):
            continue

        full_href = canonical_document_url(resolve_url(base_url, href))
        if not full_href.startswith("http") or full_href in seen:
            continue
        seen.add(full_href)

        if is_cloud_hosted_link(full_href):
            # Cloud URLs say nothing about the file, the anchor text does
            caption = anchor_caption(html, match.end())
            if is_generic_caption(caption):
                label = placeholder_label(len(results) + 1)
            else:
                label = caption
        else:
            preceding = html[max(0, match.start() - CONTEXT_WINDOW) : match.start()]
            filename = filename_from_url(full_href)
            label = (
                label_from_filename(filename)
                or find_label_in_context(preceding)
                or filename
                or FALLBACK_LABEL
            )

        results.append(ScrapedLink.labeled(label, full_href))

    logger.debug(f"Extracted {len(results)} document links from {base_url}")
    return results


def scan_pdf_hrefs(
    html: str,
    base_url: str,
    context_window: int = FALLBACK_CONTEXT_WINDOW,
) -> list[ScrapedLink]:
    """Scan raw markup for any href mentioning ``.pdf``.

    Looser than :func:`extract_document_links`: any element's href counts,
    not just anchors accepted by the classifier.

    Args:
        html: Page markup
        base_url: URL used to resolve relative hrefs
        context_window: Characters of preceding markup searched for a label
                        (0 disables the context search)

    Returns:
        Links in document order, unique by resolved href
    """
    results: list[ScrapedLink] = []
    seen: set[str] = set()

    for match in PDF_HREF_RE.finditer(html):
        full_href = canonical_document_url(resolve_url(base_url, unescape(match.group(1)).strip()))
        if not full_href.startswith("http") or full_href in seen:
            continue
        seen.add(full_href)

        if is_cloud_hosted_link(full_href):
            label = placeholder_label(len(results) + 1)
        else:
            filename = filename_from_url(full_href)
            label = label_from_filename(filename)
            if not label and context_window > 0:
                preceding = html[max(0, match.start() - context_window) : match.start()]
                label = find_label_in_context(preceding)
            label = label or filename or FALLBACK_LABEL

        results.append(ScrapedLink.labeled(label, full_href))

    return results
