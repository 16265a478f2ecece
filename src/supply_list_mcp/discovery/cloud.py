"""Google Drive share-link resolution."""

from __future__ import annotations

import re
from urllib.parse import urlparse

DRIVE_DOWNLOAD_URL = "https://drive.google.com/uc?export=download&id={file_id}"

_FILE_PATH_ID_RE = re.compile(r"/file/d/([a-zA-Z0-9_-]+)")
_QUERY_ID_RE = re.compile(r"[?&]id=([a-zA-Z0-9_-]+)")


def extract_drive_file_id(url: str) -> str | None:
    """Extract the file identifier embedded in a Drive share URL.

    Args:
        url: Share URL such as ``https://drive.google.com/file/d/<id>/view``
             or ``https://drive.google.com/open?id=<id>``

    Returns:
        The file identifier, or None if the URL embeds none
    """
    match = _FILE_PATH_ID_RE.search(url) or _QUERY_ID_RE.search(url)
    return match.group(1) if match else None


def download_url_for(file_id: str) -> str:
    """Build the direct-download URL of a Drive file."""
    return DRIVE_DOWNLOAD_URL.format(file_id=file_id)


def resolve_drive_url(shared_url: str) -> str:
    """Convert a Drive share URL into its direct-download form.

    Args:
        shared_url: Drive share URL

    Returns:
        Direct-download URL, or the input unchanged if no identifier is found
    """
    file_id = extract_drive_file_id(shared_url)
    if file_id:
        return download_url_for(file_id)
    return shared_url


def is_drive_url(url: str) -> bool:
    """Check whether a URL is hosted on drive.google.com."""
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return False
    return host == "drive.google.com"
