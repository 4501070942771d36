"""Unit tests for PDF parser module."""

from collections.abc import Callable

import pytest
import pytest_check as check

from nexchat.parsing.pdf_parser import MAX_FILE_SIZE, PDFParseError, parse_pdf


class TestParsePdfValid:
    """Tests for successful PDF parsing."""

    def test_counts_pages(self, make_pdf: Callable[..., bytes]) -> None:
        result = parse_pdf(make_pdf(pages=3))

        check.equal(result.pages, 3)

    def test_blank_pages_give_empty_text(self, make_pdf: Callable[..., bytes]) -> None:
        """Pages without text are skipped rather than failing."""
        result = parse_pdf(make_pdf())

        check.equal(result.text, "")
        check.equal(result.pages, 1)

    def test_reads_title_metadata(self, make_pdf: Callable[..., bytes]) -> None:
        result = parse_pdf(make_pdf(title="Quarterly Report"))

        check.equal(result.metadata.get("title"), "Quarterly Report")


class TestParsePdfRejection:
    """Tests for PDF validation and rejection."""

    def test_rejects_empty_bytes(self) -> None:
        with pytest.raises(PDFParseError, match="Empty file"):
            parse_pdf(b"")

    def test_rejects_non_pdf_file(self) -> None:
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            parse_pdf(b"This is plain text, not a PDF.")

    def test_rejects_oversized_file(self) -> None:
        oversized = b"%PDF-1.4" + b"\x00" * (MAX_FILE_SIZE + 1)

        with pytest.raises(PDFParseError, match="exceeds maximum"):
            parse_pdf(oversized)

    def test_rejects_truncated_pdf(self) -> None:
        with pytest.raises(PDFParseError, match="Corrupt|Failed|no pages"):
            parse_pdf(b"%PDF-1.4\n1 0 obj\n<<")
