"""
Document text extraction.

Supports:
- PDF files (using PyPDF2)
- DOCX files (using python-docx)
- Plain text
"""

import logging
import mimetypes
from io import BytesIO
from pathlib import Path
from typing import Union

from .exceptions import DocumentExtractionError, UnsupportedFileType

logger = logging.getLogger(__name__)

PDF_MIME = 'application/pdf'
DOCX_MIME = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
TEXT_MIME = 'text/plain'

SUPPORTED_MIME_TYPES = (PDF_MIME, DOCX_MIME, TEXT_MIME)

_EXTENSION_MIME_TYPES = {
    '.pdf': PDF_MIME,
    '.docx': DOCX_MIME,
    '.txt': TEXT_MIME,
    '.md': TEXT_MIME,
}


def extract_text_from_pdf(data: bytes) -> str:
    """
    Extract text content from a PDF file.

    Args:
        data: Raw PDF bytes

    Returns:
        Page texts joined with spaces
    """
    try:
        from PyPDF2 import PdfReader

        reader = PdfReader(BytesIO(data))
        text_parts = []

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

        return " ".join(text_parts).strip()

    except Exception as e:
        logger.error(f"Error extracting text from PDF: {e}")
        raise DocumentExtractionError(f"Could not read PDF file: {e}") from e


def extract_text_from_docx(data: bytes) -> str:
    """
    Extract text content from a DOCX file.

    Args:
        data: Raw DOCX bytes

    Returns:
        Paragraph and table text joined with blank lines
    """
    try:
        from docx import Document

        doc = Document(BytesIO(data))
        text_parts = []

        for paragraph in doc.paragraphs:
            if paragraph.text.strip():
                text_parts.append(paragraph.text)

        # Also extract text from tables
        for table in doc.tables:
            for row in table.rows:
                row_text = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if row_text:
                    text_parts.append(" | ".join(row_text))

        return "\n\n".join(text_parts)

    except Exception as e:
        logger.error(f"Error extracting text from DOCX: {e}")
        raise DocumentExtractionError(f"Could not read DOCX file: {e}") from e


def extract_text_from_plain(data: bytes) -> str:
    """Decode a plain text file, tolerating stray non-UTF-8 bytes."""
    return data.decode('utf-8', errors='replace')


def extract_text(data: bytes, mime_type: str) -> str:
    """
    Extract text from a document based on its declared MIME type.

    Args:
        data: Raw file bytes
        mime_type: Declared MIME type; parameters such as charset are ignored

    Returns:
        Extracted text as string

    Raises:
        UnsupportedFileType: If the MIME type is not PDF, DOCX or plain text
        DocumentExtractionError: If a supported document cannot be parsed
    """
    base_type = (mime_type or '').split(';')[0].strip().lower()

    if base_type == PDF_MIME:
        return extract_text_from_pdf(data)
    if base_type == DOCX_MIME:
        return extract_text_from_docx(data)
    if base_type == TEXT_MIME:
        return extract_text_from_plain(data)

    logger.warning(f"Rejected unsupported file type: {mime_type!r}")
    raise UnsupportedFileType(mime_type)


def guess_mime_type(path: Union[str, Path]) -> str:
    """
    Guess a document's MIME type from its file name.

    Returns an empty string when the type cannot be determined, which
    extract_text() rejects as unsupported.
    """
    suffix = Path(path).suffix.lower()
    if suffix in _EXTENSION_MIME_TYPES:
        return _EXTENSION_MIME_TYPES[suffix]

    guessed, _ = mimetypes.guess_type(str(path))
    return guessed or ''


def extract_file(path: Union[str, Path]) -> str:
    """Read a document from disk and extract its text."""
    path = Path(path)
    return extract_text(path.read_bytes(), guess_mime_type(path))
