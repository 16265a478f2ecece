"""Pytest configuration and fixtures for supply-list-mcp tests."""

from __future__ import annotations

import pytest

from supply_list_mcp.admin.service import reset_config
from supply_list_mcp.metrics import reset_metrics


@pytest.fixture(autouse=True)
def clean_state() -> None:
    """Reset runtime config and metrics between tests."""
    reset_config()
    reset_metrics()


@pytest.fixture
def school_page_html() -> str:
    """School page with grade headings, PDFs and Drive links."""
    return """
    <html>
    <body>
        <h2>Listas de útiles 2026</h2>
        <h3>Educación Parvularia</h3>
        <p><a href="/docs/lista-kinder.pdf">Descargar</a></p>
        <h3>3° Básico</h3>
        <p><a href="docs/lista-3-basico.pdf">Descargar</a></p>
        <h3>1° Básico</h3>
        <p><a href="https://colegio.cl/docs/lista-1-basico.pdf">Descargar</a></p>
        <p><a href="https://colegio.cl/docs/lista-1-basico.pdf">Duplicado</a></p>
        <h3>II° Medio</h3>
        <p><a class="btn" href="/descargas/pdf/?id=7">Descargar</a></p>
        <p><a href="/contacto">Contacto</a></p>
        <p><a href="https://drive.google.com/file/d/ABC123/view?usp=sharing">Lista 5° Básico</a></p>
        <p><a href="https://drive.google.com/file/d/DEF456/view">Ver</a></p>
    </body>
    </html>
    """


@pytest.fixture
def drive_folder_html() -> str:
    """Drive folder page with labeled and generic file anchors."""
    return """
    <html>
    <body>
        <div><a href="https://drive.google.com/file/d/XYZ/view?usp=drive_link">Lista <b>3° Básico</b></a></div>
        <div><a href="https://drive.google.com/file/d/QRS/view">Ver</a></div>
        <div><a href="https://drive.google.com/file/d/XYZ/view">Duplicado</a></div>
    </body>
    </html>
    """


@pytest.fixture
def drive_script_html() -> str:
    """Drive page whose only file reference lives in a script block."""
    return """
    <html>
    <head>
        <script>window.viewerData = {"url": "https://drive.google.com/file/d/SCRIPT99/view"};</script>
    </head>
    <body><div id="root"></div></body>
    </html>
    """


@pytest.fixture
def empty_page_html() -> str:
    """Page without anchors or PDF references."""
    return """
    <html>
    <head><title>Colegio</title></head>
    <body><p>Las listas se publicarán en marzo.</p></body>
    </html>
    """
