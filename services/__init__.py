"""
Services module - Business Logic Layer.

Application services sit between the API layer (routes) and the data layer
(repositories):
- FormService: owner form CRUD and owner/public access resolution
- ResponseService: submissions and candidate summaries
- ResumeService: resume upload and profile extraction

Usage:
    from services import FormService

    access = FormService(db).resolve_public_access(share_token)
"""

from services.exceptions import BadRequestError, ForbiddenError, NotFoundError, ServiceError
from services.form_service import FormService
from services.response_service import ResponseService
from services.resume_service import ResumeService

__all__ = [
    "BadRequestError",
    "ForbiddenError",
    "NotFoundError",
    "ServiceError",
    "FormService",
    "ResponseService",
    "ResumeService",
]
