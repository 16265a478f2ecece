"""Tests for document link extraction from generic pages."""

from __future__ import annotations

from supply_list_mcp.discovery.extractor import (
    anchor_caption,
    canonical_document_url,
    extract_document_links,
    find_label_in_context,
    scan_pdf_hrefs,
)

SCHOOL_URL = "https://colegio.cl/utiles/index.html"


class TestFindLabelInContext:
    """Tests for find_label_in_context function."""

    def test_course_block_preferred(self) -> None:
        """Test that grade-like text wins over closer generic text."""
        fragment = "<h3>3° Básico</h3><p>Texto de ayuda</p><p>"
        assert find_label_in_context(fragment) == "3° Básico"

    def test_closest_course_block_wins(self) -> None:
        fragment = "<h3>1° Básico</h3><p>x</p><h3>2° Básico</h3><p>"
        assert find_label_in_context(fragment) == "2° Básico"

    def test_roman_medio_and_preschool(self) -> None:
        assert find_label_in_context("<li>III° Medio</li><li>") == "III° Medio"
        assert find_label_in_context("<h4>Pre-Kinder</h4><div>") == "Pre-Kinder"

    def test_entities_decoded(self) -> None:
        """Test that entities and non-breaking spaces are normalized."""
        fragment = "<h3>3&ordm;&nbsp;B&aacute;sico</h3><p>"
        assert find_label_in_context(fragment) == "3º Básico"

    def test_generic_block_fallback(self) -> None:
        """Test fallback to generic text, skipping numbers and URLs."""
        fragment = "<h2>Materiales</h2><span>2026</span><p>https://colegio.cl</p><p>"
        assert find_label_in_context(fragment) == "Materiales"

    def test_no_text(self) -> None:
        assert find_label_in_context("<div><img src='a.png'></div><p>") is None
        assert find_label_in_context("") is None

    def test_only_recent_markup_searched(self) -> None:
        """Test that text far before the link is out of reach."""
        fragment = "<h3>5° Básico</h3>" + "<br>" * 300
        assert find_label_in_context(fragment) is None


class TestAnchorCaption:
    """Tests for anchor_caption function."""

    def test_nested_markup(self) -> None:
        html = '<a href="x">Lista <b>1°</b> Medio</a>'
        assert anchor_caption(html, len('<a href="x">')) == "Lista 1° Medio"

    def test_unclosed_anchor(self) -> None:
        html = '<a href="x">Lista'
        assert anchor_caption(html, len('<a href="x">')) == ""


class TestCanonicalDocumentUrl:
    """Tests for canonical_document_url function."""

    def test_drive_share_resolved(self) -> None:
        assert canonical_document_url("https://drive.google.com/file/d/ABC/view") == (
            "https://drive.google.com/uc?export=download&id=ABC"
        )

    def test_other_urls_unchanged(self) -> None:
        url = "https://docs.google.com/document/d/ABC/edit"
        assert canonical_document_url(url) == url
        assert canonical_document_url("https://colegio.cl/a.pdf") == "https://colegio.cl/a.pdf"


class TestExtractDocumentLinks:
    """Tests for extract_document_links function."""

    def test_school_page(self, school_page_html: str) -> None:
        """Test labels and hrefs of a typical school page in discovery order."""
        result = extract_document_links(school_page_html, SCHOOL_URL)

        assert [(link.label, link.href) for link in result] == [
            ("Kinder", "https://colegio.cl/docs/lista-kinder.pdf"),
            ("3° Básico", "https://colegio.cl/utiles/docs/lista-3-basico.pdf"),
            ("1° Básico", "https://colegio.cl/docs/lista-1-basico.pdf"),
            ("II° Medio", "https://colegio.cl/descargas/pdf/?id=7"),
            ("Lista 5° Básico", "https://drive.google.com/uc?export=download&id=ABC123"),
            ("Archivo 6", "https://drive.google.com/uc?export=download&id=DEF456"),
        ]

    def test_course_name_mirrors_label(self, school_page_html: str) -> None:
        result = extract_document_links(school_page_html, SCHOOL_URL)

        assert all(link.course_name == link.label for link in result)

    def test_non_http_links_skipped(self) -> None:
        """Test that links which do not resolve to http(s) are dropped."""
        html = '<a href="mailto:info@colegio.cl?subject=lista.pdf">Escríbenos</a>'
        assert extract_document_links(html, SCHOOL_URL) == []

    def test_tag_case_and_quotes(self) -> None:
        html = "<P><A CLASS='x' HREF='lista-6-basico.pdf'>Bajar</A></P>"

        result = extract_document_links(html, SCHOOL_URL)

        assert len(result) == 1
        assert result[0].label == "6° Básico"
        assert result[0].href == "https://colegio.cl/utiles/lista-6-basico.pdf"

    def test_entities_in_href_decoded(self) -> None:
        html = '<a href="/get/lista.pdf?v=1&amp;dl=1">Bajar</a>'

        result = extract_document_links(html, SCHOOL_URL)

        assert result[0].href == "https://colegio.cl/get/lista.pdf?v=1&dl=1"

    def test_fallback_label(self) -> None:
        """Test that a link with no filename or context is labeled PDF."""
        result = extract_document_links('<a href="/pdf/">x</a>', SCHOOL_URL)

        assert len(result) == 1
        assert result[0].label == "PDF"

    def test_no_documents(self, empty_page_html: str) -> None:
        assert extract_document_links(empty_page_html, SCHOOL_URL) == []


class TestScanPdfHrefs:
    """Tests for scan_pdf_hrefs function."""

    def test_any_element_href(self) -> None:
        """Test that hrefs outside anchors are found."""
        html = '<link rel="alternate" href="/docs/lista-7-basico.pdf">'

        result = scan_pdf_hrefs(html, SCHOOL_URL)

        assert len(result) == 1
        assert result[0].label == "7° Básico"
        assert result[0].href == "https://colegio.cl/docs/lista-7-basico.pdf"

    def test_context_label(self) -> None:
        """Test that context labels links without a filename."""
        html = '<h3>IV° Medio</h3><p><a href="/descargar/?archivo=final.pdf">x</a></p>'

        assert scan_pdf_hrefs(html, SCHOOL_URL)[0].label == "IV° Medio"
        assert scan_pdf_hrefs(html, SCHOOL_URL, context_window=0)[0].label == "PDF"

    def test_cloud_links_get_placeholders(self) -> None:
        html = (
            '<a href="https://colegio.cl/lista-1-basico.pdf">a</a>'
            '<a href="https://www.dropbox.com/s/abc/lista.pdf?dl=0">b</a>'
        )

        result = scan_pdf_hrefs(html, SCHOOL_URL)

        assert [link.label for link in result] == ["1° Básico", "Archivo 2"]

    def test_duplicates_removed(self) -> None:
        html = '<a href="/a/lista-2-medio.pdf">a</a><a href="https://colegio.cl/a/lista-2-medio.pdf">b</a>'

        result = scan_pdf_hrefs(html, SCHOOL_URL)

        assert len(result) == 1
        assert result[0].label == "2° Medio"
