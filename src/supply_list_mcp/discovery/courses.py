"""Course descriptors derived from supply-list labels."""

from __future__ import annotations

import re

from supply_list_mcp.models.links import CourseLevel

LEVEL_BASICA = "Basica"
LEVEL_MEDIA = "Media"
DEFAULT_COURSE_NAME = "Curso"

_ROMAN_NUMERALS = {
    "i": 1, "ii": 2, "iii": 3, "iv": 4, "v": 5,
    "vi": 6, "vii": 7, "viii": 8, "ix": 9, "x": 10,
}

_WHITESPACE_RE = re.compile(r"\s+")
_TRAILING_YEAR_RE = re.compile(r"\s*\d{4}\s*$")
_PRESCHOOL_RE = re.compile(r"\b(?:playgroup|prekinder|kinder)\b", re.IGNORECASE)
_ROMAN_MEDIO_RE = re.compile(r"\b([ivxlcdm]+)\s*[º°]?\s*medios?\b", re.IGNORECASE)
_BASICO_RE = re.compile(r"(\d+)\s*[º°]?\s*b[aá]sico", re.IGNORECASE)
_MEDIO_RE = re.compile(r"(\d+)\s*[º°]?\s*medio", re.IGNORECASE)
_NUMBER_RE = re.compile(r"(\d+)")


def build_course_name(label: str, year: int | None = None) -> str:
    """Normalize a label into a course name.

    A trailing year already present in the label is dropped, ``º`` becomes
    ``°`` and plural level names are singularized.

    Examples:
        >>> build_course_name("1º Básicos", 2026)
        '1° Básico - 2026'
        >>> build_course_name("Playgroup 2026", 2026)
        'Playgroup - 2026'
    """
    name = _WHITESPACE_RE.sub(" ", label).strip()
    name = _TRAILING_YEAR_RE.sub("", name).strip()
    name = name.replace("º", "°")
    name = re.sub(r"\bBásicos\b", "Básico", name, flags=re.IGNORECASE)
    name = re.sub(r"\bMedios\b", "Medio", name, flags=re.IGNORECASE)
    if not name:
        name = DEFAULT_COURSE_NAME
    if year is not None:
        return f"{name} - {year}"
    return name


def parse_course_label(label: str, year: int | None = None) -> CourseLevel:
    """Derive the level and grade a supply-list label refers to.

    Args:
        label: Label of a discovered document (e.g. ``"II° Medio"``)
        year: Optional school year appended to the course name

    Returns:
        CourseLevel; preschool labels map to grade 0 of Básica and
        unrecognized labels to 1° Básica
    """
    text = _WHITESPACE_RE.sub(" ", label).strip()
    course_name = build_course_name(label, year)

    if _PRESCHOOL_RE.search(text):
        return CourseLevel(course_name=course_name, level=LEVEL_BASICA, grade=0)

    roman = _ROMAN_MEDIO_RE.search(text)
    if roman and roman.group(1).lower() in _ROMAN_NUMERALS:
        grade = _ROMAN_NUMERALS[roman.group(1).lower()]
        return CourseLevel(course_name=course_name, level=LEVEL_MEDIA, grade=grade)

    basico = _BASICO_RE.search(text)
    if basico:
        return CourseLevel(course_name=course_name, level=LEVEL_BASICA, grade=int(basico.group(1)))

    medio = _MEDIO_RE.search(text)
    if medio:
        return CourseLevel(course_name=course_name, level=LEVEL_MEDIA, grade=int(medio.group(1)))

    number = _NUMBER_RE.search(text)
    if number:
        grade = int(number.group(1))
        if 1 <= grade <= 12:
            level = LEVEL_BASICA if grade <= 8 else LEVEL_MEDIA
            return CourseLevel(course_name=course_name, level=level, grade=grade)

    return CourseLevel(course_name=course_name, level=LEVEL_BASICA, grade=1)
