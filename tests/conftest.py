import io
from pathlib import Path

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

RESUME_LINES = [
    "Jane Doe - Senior Backend Engineer",
    "Experience: 8 years building Python services and data pipelines",
    "Led migration of billing platform to PostgreSQL, cutting costs by 30%",
    "Skills: Python, FastAPI, PostgreSQL, Docker, Kubernetes, AWS",
    "Education: BSc Computer Science, University of Leeds",
]


def _pdf_bytes(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def resume_pdf_bytes() -> bytes:
    """A single-page PDF with a real text layer of a few hundred characters."""
    return _pdf_bytes([RESUME_LINES])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return _pdf_bytes([["Page one content"], ["Page two content"]])


@pytest.fixture()
def short_pdf_bytes() -> bytes:
    """A PDF whose text layer is far below the usable minimum."""
    return _pdf_bytes([["Jane Doe"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    return _pdf_bytes([[]])


@pytest.fixture()
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (200, 100), color="white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def write_file(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Write bytes under tmp_path and return the resulting path."""

    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write
