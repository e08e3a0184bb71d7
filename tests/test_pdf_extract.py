"""
Unit tests for PDF text extraction: page joining, pages without text, unreadable payloads.
Builds small PDFs in memory with PyMuPDF when available.
"""
import pytest

from quizgen.services import pdf_extract
from quizgen.services.pdf_extract import extract_text_from_pdf, join_page_texts


def _pdf_bytes(*page_lines: str) -> bytes:
    try:
        import pymupdf
    except ImportError:
        pytest.skip("pymupdf not installed")
    doc = pymupdf.open()
    for line in page_lines:
        page = doc.new_page()
        if line:
            page.insert_text((50, 50), line)
    data = doc.tobytes()
    doc.close()
    return data


def test_join_page_texts_skips_none_and_uses_single_space():
    assert join_page_texts(["Page one.", None, "Page two."]) == "Page one. Page two."
    assert join_page_texts([None, None]) == ""
    assert join_page_texts([]) == ""


def test_extract_text_from_pdf_pages_in_order():
    text = extract_text_from_pdf(_pdf_bytes("The Constitution is the supreme law.", "Fundamental Rights are in Part III."))
    assert "Constitution" in text
    assert "Fundamental" in text
    assert text.index("Constitution") < text.index("Fundamental")


def test_extract_text_from_pdf_blank_page():
    text = extract_text_from_pdf(_pdf_bytes(""))
    assert text.strip() == ""


def test_extract_filters_pages_without_text(monkeypatch):
    class FakePage:
        def __init__(self, text):
            self._text = text

        def extract_text(self):
            return self._text

    class FakeReader:
        def __init__(self, stream):
            self.pages = [FakePage("alpha"), FakePage(None), FakePage("beta")]

    monkeypatch.setattr(pdf_extract, "PdfReader", FakeReader)
    assert extract_text_from_pdf(b"%PDF-fake") == "alpha beta"


def test_extract_invalid_pdf_raises():
    with pytest.raises(Exception):
        extract_text_from_pdf(b"this is not a pdf")
