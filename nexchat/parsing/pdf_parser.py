"""PDF text extraction for grounding a content chat.

Turns uploaded bytes into plain text the question-answering prompt can use.
"""

import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
METADATA_FIELDS = {
    "/Title": "title",
    "/Author": "author",
    "/Subject": "subject",
}


class PDFContent(BaseModel):
    """Text pulled out of a PDF.

    Attributes:
        text: Page texts joined by blank lines.
        pages: Total number of pages in the document.
        metadata: Title, author and subject when the document declares them.
    """

    text: str
    pages: int = Field(ge=0)
    metadata: dict[str, str] = Field(default_factory=dict)


class PDFParseError(Exception):
    """Raised when uploaded bytes cannot be read as a PDF."""


def _check_bytes(file_content: bytes) -> None:
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise PDFParseError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _read_metadata(reader: PdfReader) -> dict[str, str]:
    if not reader.metadata:
        return {}
    return {
        name: str(reader.metadata[key])
        for key, name in METADATA_FIELDS.items()
        if reader.metadata.get(key)
    }


def parse_pdf(file_content: bytes) -> PDFContent:
    """Extract the text of every page of a PDF.

    Pages without extractable text (scans, images) are skipped.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with extracted text, page count, and metadata.

    Raises:
        PDFParseError: If the file is empty, too large, not a PDF, or corrupt.
    """
    _check_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise PDFParseError("PDF contains no pages")

    page_texts: list[str] = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            page_text = page.extract_text()
        except Exception as e:
            logger.warning(f"Skipping page {number}, text extraction failed: {e}")
            continue
        if page_text and page_text.strip():
            page_texts.append(page_text.strip())

    if not page_texts:
        logger.warning("PDF has no extractable text (may be scanned/image-based)")

    return PDFContent(
        text="\n\n".join(page_texts),
        pages=pages,
        metadata=_read_metadata(reader),
    )
