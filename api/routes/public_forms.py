from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from agents.followup.controller import FollowupController
from api.dependencies import (
    get_followup_controller,
    get_form_service,
    get_response_service,
    get_resume_service,
)
from api.models.error_schemas import ERROR_RESPONSES
from api.models.followup_schemas import FollowupResponse, PublicFollowupRequest
from api.models.form_schemas import PublicFormDetail, PublicFormEnvelope
from api.models.response_schemas import ResponseEnvelope, ResponseSubmit, ResumeUploadResponse
from api.routes.shared import request_followup, submit_response, upload_resume
from services import FormService, ResponseService, ResumeService
from services.resume_service import PUBLIC_PREFIX

router = APIRouter(
    prefix="/public/forms",
    tags=["Public Forms"],
    responses=ERROR_RESPONSES,
)


@router.get("/{share_token}", response_model=PublicFormEnvelope)
def get_public_form(
    share_token: str,
    service: FormService = Depends(get_form_service),
):
    """Form as shown to candidates. No authentication; the form must be public."""
    form = service.get_public_form(share_token)
    return PublicFormEnvelope(form=PublicFormDetail.model_validate(form))


@router.post("/{share_token}/resume", response_model=ResumeUploadResponse)
def upload_public_resume(
    share_token: str,
    resume: Optional[UploadFile] = File(None),
    form_service: FormService = Depends(get_form_service),
    resume_service: ResumeService = Depends(get_resume_service),
):
    """Upload a PDF resume (multipart field `resume`) and extract its profile."""
    form = form_service.get_public_form(share_token)
    return upload_resume(resume_service, PUBLIC_PREFIX, form.id, resume)


@router.post("/{share_token}/ai-next", response_model=FollowupResponse)
def public_ai_next(
    share_token: str,
    request: PublicFollowupRequest,
    form_service: FormService = Depends(get_form_service),
    controller: FollowupController = Depends(get_followup_controller),
):
    """
    Get the next adaptive follow-up question for a candidate.

    The stored role summary and base questions are always used.
    """
    access = form_service.resolve_public_access(share_token)
    return request_followup(controller, access, request.history, request.resume_profile)


@router.post("/{share_token}/responses", response_model=ResponseEnvelope)
def submit_public_response(
    share_token: str,
    request: ResponseSubmit,
    form_service: FormService = Depends(get_form_service),
    response_service: ResponseService = Depends(get_response_service),
):
    """Submit a finished form as a candidate."""
    access = form_service.resolve_public_access(share_token)
    return submit_response(response_service, access, request.answers, request.resume_profile)
