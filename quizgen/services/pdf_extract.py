"""
PDF text extraction (text-based PDFs only).
Pages without extractable text are skipped; the rest are joined with single spaces.
"""
import io
import logging

from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)


def extract_page_texts(payload: bytes) -> list[str | None]:
    """Text of each page in order; None where the page has nothing extractable. Raises on read errors."""
    reader = PdfReader(io.BytesIO(payload))
    return [page.extract_text() for page in reader.pages]


def join_page_texts(pages: list[str | None]) -> str:
    return " ".join(p for p in pages if p is not None)


def extract_text_from_pdf(payload: bytes) -> str:
    """Extract one text blob from an uploaded PDF."""
    pages = extract_page_texts(payload)
    text = join_page_texts(pages)
    logger.info("extract_text_from_pdf: pages=%s text_len=%s", len(pages), len(text))
    return text
