"""
Handlers shared by the owner and public surfaces.

Both surfaces resolve an AccessContext first and then run exactly the same
follow-up, upload and submission logic.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, UploadFile

from agents.followup.controller import AccessContext, FollowupController, FollowupRejected
from api.models.followup_schemas import FollowupResponse, QAItem
from api.models.response_schemas import CandidateResponse, ResponseEnvelope, ResumeUploadResponse
from services import ResponseService, ResumeService
from utils.llm_service import GenerationError

logger = logging.getLogger(__name__)

AI_REQUEST_FAILED = "AI request failed"
RESUME_PROCESSING_FAILED = "Resume processing failed"


def request_followup(
    controller: FollowupController,
    access: AccessContext,
    history: List[QAItem],
    resume_profile: Optional[Dict[str, Any]],
    role_summary: Optional[str] = None,
    base_questions: Optional[List[str]] = None,
) -> FollowupResponse:
    try:
        outcome = controller.request_next(
            access,
            [qa.as_pair() for qa in history],
            resume_profile,
            role_summary=role_summary,
            base_questions=base_questions,
        )
    except FollowupRejected as e:
        raise HTTPException(status_code=e.status, detail=e.message)
    except GenerationError as e:
        logger.error("AI error (%s) for form %s: %s", access.surface, access.form.id, e)
        raise HTTPException(status_code=500, detail=AI_REQUEST_FAILED)

    return FollowupResponse(
        next_question=outcome.question,
        done=outcome.done,
        ai_used=outcome.used,
        ai_remaining=outcome.remaining,
    )


def upload_resume(
    service: ResumeService,
    key_prefix: str,
    form_id: int,
    resume: Optional[UploadFile],
) -> ResumeUploadResponse:
    content = resume.file.read() if resume is not None else None
    try:
        result = service.process_upload(
            key_prefix=key_prefix,
            form_id=form_id,
            filename=resume.filename if resume is not None else None,
            content_type=resume.content_type if resume is not None else None,
            content=content,
        )
    except GenerationError as e:
        logger.error("Resume processing failed for form %s: %s", form_id, e)
        raise HTTPException(status_code=500, detail=RESUME_PROCESSING_FAILED)

    return ResumeUploadResponse(**result)


def submit_response(
    service: ResponseService,
    access: AccessContext,
    answers: List[QAItem],
    resume_profile: Optional[Dict[str, Any]],
) -> ResponseEnvelope:
    response = service.submit(
        access,
        [qa.as_pair() for qa in answers],
        resume_profile,
    )
    return ResponseEnvelope(response=CandidateResponse.model_validate(response))
