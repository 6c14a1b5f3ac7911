import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import fitz  # PyMuPDF
import pytest
from PyQt5.QtWidgets import QApplication


_QAPP = None


def _ensure_qapp():
    global _QAPP
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    _QAPP = app
    return _QAPP


@pytest.fixture(scope="session")
def qapp():
    return _ensure_qapp()


def make_pdf(page_count=3, width=200, height=150):
    """Build a document whose pages differ in content."""
    doc = fitz.open()
    try:
        for i in range(page_count):
            page = doc.new_page(width=width, height=height)
            page.insert_text((20, 40 + 10 * i), f"Page {i + 1}", fontsize=14)
            page.draw_rect(fitz.Rect(10, 60, 10 + 30 * (i + 1), 80), color=(0, 0, 0))
        return doc.tobytes()
    finally:
        doc.close()


@pytest.fixture
def pdf_bytes():
    return make_pdf()


@pytest.fixture
def pdf_file(tmp_path, pdf_bytes):
    path = tmp_path / "input.pdf"
    path.write_bytes(pdf_bytes)
    return str(path)


@pytest.fixture
def encrypted_pdf_bytes():
    doc = fitz.open(stream=make_pdf(page_count=2), filetype="pdf")
    try:
        return doc.tobytes(
            encryption=fitz.PDF_ENCRYPT_AES_256, owner_pw="owner", user_pw="secret"
        )
    finally:
        doc.close()
