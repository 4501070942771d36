"""Document text extraction for the content chat.

Responsibilities:
    - PDF text extraction with pypdf
    - Size, header and corruption checks before parsing
    - Basic metadata (title, author, subject)
"""

from nexchat.parsing.pdf_parser import MAX_FILE_SIZE, PDFContent, PDFParseError, parse_pdf

__all__ = ["MAX_FILE_SIZE", "PDFContent", "PDFParseError", "parse_pdf"]
