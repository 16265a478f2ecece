"""Supply-list document discovery and classification.

Given the markup of a school web page or a Google Drive page, this package
finds downloadable supply-list documents, labels each one with the grade it
belongs to and orders them in the canonical grade sequence:
- classifier.py: which hrefs are documents, which captions are generic
- grades.py: grade labels from filenames and grade sort keys
- cloud.py: Drive share URL to direct-download URL resolution
- extractor.py: labeled links from generic pages
- drive.py: labeled links from Drive pages
- courses.py: course level and grade parsed from a label
"""

from supply_list_mcp.discovery.classifier import (
    is_cloud_hosted_link,
    is_cloud_storage_source,
    is_document_link,
    is_generic_caption,
    placeholder_label,
)
from supply_list_mcp.discovery.cloud import extract_drive_file_id, resolve_drive_url
from supply_list_mcp.discovery.courses import build_course_name, parse_course_label
from supply_list_mcp.discovery.drive import scrape_drive_page
from supply_list_mcp.discovery.extractor import (
    extract_document_links,
    find_label_in_context,
    scan_pdf_hrefs,
)
from supply_list_mcp.discovery.grades import (
    grade_sort_key,
    label_from_filename,
    sort_by_grade,
)

__all__ = [
    # Classification
    "is_document_link",
    "is_cloud_hosted_link",
    "is_cloud_storage_source",
    "is_generic_caption",
    "placeholder_label",
    # Labels and ordering
    "label_from_filename",
    "grade_sort_key",
    "sort_by_grade",
    # Extraction
    "extract_drive_file_id",
    "resolve_drive_url",
    "scrape_drive_page",
    "extract_document_links",
    "find_label_in_context",
    "scan_pdf_hrefs",
    # Courses
    "build_course_name",
    "parse_course_label",
]
