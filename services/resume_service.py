"""
Resume Service - upload, store and parse a candidate resume.

Returns the resume profile the client then sends with every ai-next call
and with the final submission.
"""

import logging
from typing import Any, Dict, Optional

from agents.resume.profile_extractor import ResumeParseError, ResumeProfileExtractor
from utils.document_extractor import DocumentExtractionError, DocumentExtractor, PDF_CONTENT_TYPE
from utils.storage import LocalResumeStorage, build_resume_key
from services.exceptions import BadRequestError, ServiceError

logger = logging.getLogger(__name__)

NO_FILE = "No file uploaded"
NOT_A_PDF = "Resume must be a PDF"
PUBLIC_PREFIX = "public"


class ResumeService:
    """Stores the uploaded PDF and extracts a structured profile from it."""

    def __init__(self, storage: LocalResumeStorage, extractor: ResumeProfileExtractor):
        self.storage = storage
        self.extractor = extractor

    def process_upload(
        self,
        key_prefix: str,
        form_id: int,
        filename: Optional[str],
        content_type: Optional[str],
        content: Optional[bytes],
    ) -> Dict[str, Any]:
        """
        Args:
            key_prefix: Owner id on the owner surface, "public" otherwise

        Returns:
            {"resume_url", "resume_path", "resume_profile"}

        Raises:
            BadRequestError: Missing file, not a PDF, or no readable text
            ServiceError: Model output could not be parsed (500)
            GenerationError: The model call failed
        """
        if not content:
            raise BadRequestError(NO_FILE)
        if content_type != PDF_CONTENT_TYPE:
            raise BadRequestError(NOT_A_PDF)

        key = build_resume_key(key_prefix, form_id, filename)
        self.storage.upload(key, content, content_type=PDF_CONTENT_TYPE)
        logger.info("Resume stored at %s", key)

        try:
            text = DocumentExtractor.extract_pdf_text(content)
            profile = self.extractor.extract(text)
        except DocumentExtractionError as e:
            raise BadRequestError(str(e)) from e
        except ResumeParseError as e:
            raise ServiceError(str(e), status_code=500) from e

        return {
            "resume_url": self.storage.url_for(key, expires_in=60 * 60),
            "resume_path": key,
            "resume_profile": profile,
        }
