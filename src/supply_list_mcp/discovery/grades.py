"""Grade label inference and canonical grade ordering.

The canonical sequence is Prekinder, Kinder, 1° to 8° Básico and
I° to IV° Medio. Labels are inferred from filenames such as
``lista-1-basico.pdf`` and every discovered document gets a sort key
placing it in that sequence.
"""

from __future__ import annotations

import re

from supply_list_mcp.models.links import ScrapedLink
from supply_list_mcp.utils import filename_from_url

PREKINDER_KINDER_LABEL = "Prekinder - Kinder"
PREKINDER_LABEL = "Prekinder"
KINDER_LABEL = "Kinder"

# Sort keys
PRESCHOOL_KEY = 0
LAST_BASICO_GRADE = 8
LAST_MEDIO_GRADE = 4
UNRANKED_OFFSET = 100

_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)
_QUERY_RE = re.compile(r"\?.*$", re.DOTALL)
_SEPARATORS_RE = re.compile(r"[_-]+")

_PREKINDER_KINDER_RE = re.compile(r"pre-?kinder[\s_]*-?[\s_]*kinder", re.IGNORECASE)
_PREKINDER_RE = re.compile(r"pre-?kinder", re.IGNORECASE)
_KINDER_RE = re.compile(r"\bkinder\b", re.IGNORECASE)
_BASICO_RE = re.compile(r"(\d+)[°º_\-\s]*b[aá]sicos?", re.IGNORECASE)
_MEDIO_RE = re.compile(r"(\d+)[°º_\-\s]*medio", re.IGNORECASE)
_ROMAN_MEDIO_RE = re.compile(r"(?<![a-z])(iv|iii|ii|i)[°º_\-\s]*medio", re.IGNORECASE)

_PRESCHOOL_RE = re.compile(r"kinder", re.IGNORECASE)
_NUMBERED_MEDIO_RE = re.compile(r"\d+.*medio", re.IGNORECASE)


def label_from_filename(filename: str) -> str | None:
    """Infer a grade label from a filename-like string.

    Args:
        filename: Filename, possibly with a ``.pdf`` extension and query noise

    Returns:
        Canonical label such as ``"1° Básico"`` or ``"IV° Medio"``, the
        cleaned filename when no grade pattern matches, or None when
        nothing usable remains

    Examples:
        >>> label_from_filename("lista-1-basico.pdf")
        '1° Básico'
        >>> label_from_filename("anexo-varios.pdf")
        'anexo varios'
    """
    if not filename:
        return None

    text = _PDF_SUFFIX_RE.sub("", _QUERY_RE.sub("", filename))

    if _PREKINDER_KINDER_RE.search(text):
        return PREKINDER_KINDER_LABEL
    if _PREKINDER_RE.search(text):
        return PREKINDER_LABEL
    if _KINDER_RE.search(text):
        return KINDER_LABEL

    basico = _BASICO_RE.search(text)
    if basico:
        return f"{basico.group(1)}° Básico"

    medio = _MEDIO_RE.search(text)
    if medio:
        return f"{medio.group(1)}° Medio"

    roman = _ROMAN_MEDIO_RE.search(text)
    if roman:
        return f"{roman.group(1).upper()}° Medio"

    cleaned = _SEPARATORS_RE.sub(" ", text).strip()
    return cleaned or None


def grade_sort_key(href: str, index: int) -> int:
    """Compute the ordering key of a discovered document.

    Only the filename of ``href`` is ranked; labels do not take part, so
    Drive downloads (filename ``uc``) and context-labeled links trail the
    ranked documents.

    Args:
        href: Absolute document URL
        index: Position of the item in discovery order

    Returns:
        0 for Prekinder/Kinder, 1-8 for Básico, 9-12 for Medio, otherwise
        ``100 + index``
    """
    filename = _PDF_SUFFIX_RE.sub("", filename_from_url(href)).lower()

    if _PRESCHOOL_RE.search(filename) and not _NUMBERED_MEDIO_RE.search(filename):
        return PRESCHOOL_KEY

    basico = _BASICO_RE.search(filename)
    if basico:
        grade = int(basico.group(1))
        if 1 <= grade <= LAST_BASICO_GRADE:
            return grade

    medio = _MEDIO_RE.search(filename)
    if medio:
        grade = int(medio.group(1))
        if 1 <= grade <= LAST_MEDIO_GRADE:
            return LAST_BASICO_GRADE + grade

    return UNRANKED_OFFSET + index


def sort_by_grade(links: list[ScrapedLink]) -> list[ScrapedLink]:
    """Stable-sort links into the canonical grade sequence.

    Unrecognized links keep their discovery order after all ranked ones.
    """
    keyed = [(grade_sort_key(link.href, index), link) for index, link in enumerate(links)]
    keyed.sort(key=lambda item: item[0])
    return [link for _, link in keyed]
