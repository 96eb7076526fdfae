from fastapi import APIRouter, Depends

from api.auth import get_current_owner
from api.dependencies import get_response_service
from api.models.error_schemas import ERROR_RESPONSES
from api.models.response_schemas import CandidateResponse, ResponseDetailEnvelope, SummaryEnvelope
from services import ResponseService
from utils.identity_provider import OwnerIdentity

router = APIRouter(
    prefix="/responses",
    tags=["Responses"],
    responses=ERROR_RESPONSES,
)


@router.get("/{response_id}", response_model=ResponseDetailEnvelope)
def get_response(
    response_id: int,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: ResponseService = Depends(get_response_service),
):
    """Get a single response with its answers, resume profile and summary."""
    response, form = service.get_response(response_id, owner.owner_id)
    return ResponseDetailEnvelope(
        response=CandidateResponse.model_validate(response),
        form_name=form.name,
    )


@router.post("/{response_id}/summarize", response_model=SummaryEnvelope)
def summarize_response(
    response_id: int,
    owner: OwnerIdentity = Depends(get_current_owner),
    service: ResponseService = Depends(get_response_service),
):
    """
    Regenerate the candidate summary and overwrite the stored one.

    **Returns:**
    - summary: The new summary (the deterministic fallback if generation failed)
    - summaryStatus: "generated" or "fallback"
    """
    response = service.regenerate_summary(response_id, owner.owner_id)
    return SummaryEnvelope(summary=response.summary, summary_status=response.summary_status)
