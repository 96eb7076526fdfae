"""
Utility to extract text content from uploaded PDF resumes.
"""
import io
import logging

import PyPDF2
from PyPDF2.errors import PyPdfError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"

# PyPDF2 reports malformed structure with its own errors and, deeper in the
# object parser, with builtin lookup/type errors.
PDF_PARSE_ERRORS = (PyPdfError, ValueError, KeyError, IndexError, TypeError, AttributeError)


class DocumentExtractionError(ValueError):
    """The uploaded document could not be read."""


class DocumentExtractor:
    """Extract text content from resume documents"""

    @staticmethod
    def extract_pdf_text(file_content: bytes) -> str:
        """
        Extract text from PDF bytes.

        Returns:
            Extracted text content (may be empty for image-only PDFs)

        Raises:
            DocumentExtractionError: If the PDF cannot be parsed
        """
        try:
            pdf_reader = PyPDF2.PdfReader(io.BytesIO(file_content))
            text_parts = [page.extract_text() or "" for page in pdf_reader.pages]
        except PDF_PARSE_ERRORS as e:
            logger.warning("Unreadable PDF upload: %s: %s", type(e).__name__, e)
            raise DocumentExtractionError("Could not read text from PDF") from e

        return '\n'.join(text_parts)
