"""Link classification for supply-list discovery."""

from __future__ import annotations

import re
from urllib.parse import urlparse

PLACEHOLDER_PREFIX = "Archivo"

_PDF_RE = re.compile(r"\.pdf(?:[?#]|$)")
_PDF_SEGMENT_RE = re.compile(r"/[^/]*pdf[^/]*$")

# Download signatures of Google Drive and Google Docs share links
_CLOUD_DOCUMENT_SIGNATURES = (
    "drive.google.com/file",
    "drive.google.com/open",
    "docs.google.com/document",
    "docs.google.com/spreadsheets",
    "export=download",
    "/file/d/",
    "/open?id=",
)

_CLOUD_HOSTED_RE = re.compile(
    r"drive\.google\.com|docs\.google\.com|dropbox\.com|onedrive\.|sharepoint\.|icloud\.com",
    re.IGNORECASE,
)

_CLOUD_SOURCE_HOSTS = ("drive.google.com", "docs.google.com")

GENERIC_CAPTIONS = frozenset({"view", "ver", "ver documento", "see", "abrir", "open"})


def is_document_link(href: str) -> bool:
    """Check whether an href points at a downloadable document.

    Args:
        href: Raw href value, relative or absolute

    Returns:
        True for PDF files, cloud-storage file shares and cloud documents
    """
    h = href.lower().strip()
    if not h:
        return False
    if _PDF_RE.search(h):
        return True
    if any(signature in h for signature in _CLOUD_DOCUMENT_SIGNATURES):
        return True
    return "/pdf/" in h or bool(_PDF_SEGMENT_RE.search(h))


def is_cloud_hosted_link(href: str) -> bool:
    """Check whether a link lives on a cloud file-hosting service.

    The URL of such links says nothing about the document, so their label
    comes from the anchor text instead.
    """
    return bool(_CLOUD_HOSTED_RE.search(href))


def is_cloud_storage_source(url: str) -> bool:
    """Check whether a source URL is a Google Drive or Docs page."""
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return False
    return any(host == name or host.endswith("." + name) for name in _CLOUD_SOURCE_HOSTS)


def is_generic_caption(text: str | None) -> bool:
    """Check whether anchor text carries no information about the document."""
    t = (text or "").strip().lower()
    return len(t) < 2 or t in GENERIC_CAPTIONS


def placeholder_label(position: int) -> str:
    """Positional label for documents without meaningful text."""
    return f"{PLACEHOLDER_PREFIX} {position}"
