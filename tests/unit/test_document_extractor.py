"""
Unit tests for resume text extraction.

Run: pytest tests/unit/test_document_extractor.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import PyPDF2
import pytest
from PyPDF2.errors import PdfStreamError
from utils.document_extractor import DocumentExtractionError, DocumentExtractor


def reader_raising(error: Exception):
    def _reader(*args, **kwargs):
        raise error
    return _reader


class TestDocumentExtractor:
    """Tests for DocumentExtractor."""

    def test_garbage_pdf(self):
        with pytest.raises(DocumentExtractionError, match="Could not read text from PDF"):
            DocumentExtractor.extract_pdf_text(b"this is not a pdf")

    @pytest.mark.parametrize("error", [
        KeyError("/Root"),
        TypeError("'NullObject' object is not subscriptable"),
        IndexError("list index out of range"),
        PdfStreamError("Stream has ended unexpectedly"),
    ])
    def test_malformed_pdf_errors_are_translated(self, monkeypatch, error):
        monkeypatch.setattr(PyPDF2, "PdfReader", reader_raising(error))

        with pytest.raises(DocumentExtractionError, match="Could not read text from PDF"):
            DocumentExtractor.extract_pdf_text(b"%PDF-1.4 broken")
