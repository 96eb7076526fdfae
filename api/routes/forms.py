from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from agents.followup.controller import FollowupController
from api.auth import get_current_owner
from api.dependencies import (
    get_followup_controller,
    get_form_service,
    get_response_service,
    get_resume_service,
)
from api.models.error_schemas import ERROR_RESPONSES, ErrorResponse
from api.models.followup_schemas import FollowupResponse, OwnerFollowupRequest
from api.models.form_schemas import (
    FormArchiveRequest,
    FormCreate,
    FormDetail,
    FormEnvelope,
    FormListEnvelope,
    FormUpdate,
)
from api.models.response_schemas import (
    CandidateResponse,
    ResponseEnvelope,
    ResponseSubmit,
    ResultsEnvelope,
    ResumeUploadResponse,
)
from api.routes.shared import request_followup, submit_response, upload_resume
from services import FormService, ResponseService, ResumeService
from utils.identity_provider import OwnerIdentity

router = APIRouter(
    prefix="/forms",
    tags=["Forms"],
    responses={401: {"model": ErrorResponse, "description": "Not logged in"}},
)


# ============ FORM ENDPOINTS ============

@router.post("", response_model=FormEnvelope, responses=ERROR_RESPONSES)
def create_form(
    request: FormCreate,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: FormService = Depends(get_form_service),
):
    """
    Create a new hiring form.

    `maxAiQuestions` must be between 0 and 20 (default 2). A random share
    token is generated; the form is only reachable through it when `public`
    is true.
    """
    form = service.create_form(
        owner_id=owner.owner_id,
        name=request.name,
        summary=request.summary,
        base_questions=request.base_questions,
        ai_enabled=request.ai_enabled,
        max_ai_questions=request.max_ai_questions,
        is_public=request.is_public,
    )
    return FormEnvelope(form=FormDetail.model_validate(form))


@router.get("", response_model=FormListEnvelope)
def list_forms(
    archived: bool = False,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: FormService = Depends(get_form_service),
):
    """
    List your forms, newest first.

    **Filters:**
    - `archived`: false (default) lists active forms, true lists the archive
    """
    forms = service.list_forms(owner.owner_id, archived=archived)
    return FormListEnvelope(forms=[FormDetail.model_validate(f) for f in forms])


@router.get("/{form_id}", response_model=FormEnvelope, responses=ERROR_RESPONSES)
def get_form(
    form_id: int,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: FormService = Depends(get_form_service),
):
    """Get one of your forms. Forms owned by someone else are reported as not found."""
    form = service.get_owned_form(form_id, owner.owner_id)
    return FormEnvelope(form=FormDetail.model_validate(form))


@router.patch("/{form_id}", response_model=FormEnvelope, responses=ERROR_RESPONSES)
def update_form(
    form_id: int,
    request: FormUpdate,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: FormService = Depends(get_form_service),
):
    """
    Partially update a form.

    Only provided fields are updated. Sending no updatable field returns
    400 "No valid fields to update".
    """
    form = service.update_form(form_id, owner.owner_id, request.model_dump(exclude_unset=True))
    return FormEnvelope(form=FormDetail.model_validate(form))


@router.patch("/{form_id}/archive", response_model=FormEnvelope, responses=ERROR_RESPONSES)
def archive_form(
    form_id: int,
    request: FormArchiveRequest,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: FormService = Depends(get_form_service),
):
    """Archive (or restore with `archived: false`) a form. Forms are never hard-deleted."""
    form = service.set_archived(form_id, owner.owner_id, request.archived)
    return FormEnvelope(form=FormDetail.model_validate(form))


@router.get("/{form_id}/results", response_model=ResultsEnvelope, responses=ERROR_RESPONSES)
def get_results(
    form_id: int,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: FormService = Depends(get_form_service),
):
    """All responses for a form, newest first."""
    form, responses = service.get_results(form_id, owner.owner_id)
    return ResultsEnvelope(
        form=FormDetail.model_validate(form),
        responses=[CandidateResponse.model_validate(r) for r in responses],
    )


# ============ CANDIDATE FLOW (OWNER PREVIEW) ============

@router.post("/{form_id}/resume", response_model=ResumeUploadResponse, responses=ERROR_RESPONSES)
def upload_owner_resume(
    form_id: int,
    resume: Optional[UploadFile] = File(None),
    owner: OwnerIdentity = Depends(get_current_owner),
    form_service: FormService = Depends(get_form_service),
    resume_service: ResumeService = Depends(get_resume_service),
):
    """
    Upload a PDF resume (multipart field `resume`) and extract its profile.

    Pass the returned `resumeProfile` to `ai-next` and `responses`.
    """
    form = form_service.require_owner(form_id, owner.owner_id)
    return upload_resume(resume_service, owner.owner_id, form.id, resume)


@router.post("/{form_id}/ai-next", response_model=FollowupResponse, responses=ERROR_RESPONSES)
def owner_ai_next(
    form_id: int,
    request: OwnerFollowupRequest,
    owner: OwnerIdentity = Depends(get_current_owner),
    form_service: FormService = Depends(get_form_service),
    controller: FollowupController = Depends(get_followup_controller),
):
    """
    Get the next adaptive follow-up question.

    `history` holds the base-question answers followed by answered follow-ups.
    When the form's cap is reached the response is `{"nextQuestion": null,
    "done": true}` and the form should be submitted. `summary` and
    `baseQuestions` override the stored values in the prompt only.
    """
    access = form_service.resolve_owner_access(form_id, owner.owner_id)
    return request_followup(
        controller,
        access,
        request.history,
        request.resume_profile,
        role_summary=request.summary,
        base_questions=request.base_questions,
    )


@router.post(
    "/{form_id}/responses",
    response_model=ResponseEnvelope,
    responses=ERROR_RESPONSES,
)
def submit_owner_response(
    form_id: int,
    request: ResponseSubmit,
    owner: OwnerIdentity = Depends(get_current_owner),
    form_service: FormService = Depends(get_form_service),
    response_service: ResponseService = Depends(get_response_service),
):
    """Submit a finished form. The candidate summary is generated right away (best effort)."""
    access = form_service.resolve_owner_access(form_id, owner.owner_id)
    return submit_response(response_service, access, request.answers, request.resume_profile)
