from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime

from api.models.followup_schemas import QAItem
from api.models.form_schemas import FormDetail


class ResponseSubmit(BaseModel):
    """Schema for submitting a finished form"""
    answers: List[QAItem] = Field(default_factory=list, description="Full history: base answers, then follow-ups")
    resume_profile: Optional[Dict[str, Any]] = Field(None, alias="resumeProfile")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "answers": [
                    {"question": "Full name", "answer": "Jane Doe"},
                    {"question": "On Acme, what tradeoff ...?", "answer": "We chose at-least-once delivery ..."}
                ],
                "resumeProfile": {"name": "Jane Doe", "skills": ["Go", "Kubernetes"]}
            }
        }


class CandidateResponse(BaseModel):
    """Schema for a stored candidate response"""
    id: int
    form_id: int
    answers: List[Dict[str, Any]]
    resume_profile: Optional[Dict[str, Any]] = Field(None, alias="resumeProfile")
    summary: Optional[Dict[str, Any]] = None
    summary_status: str = Field(alias="summaryStatus")
    summary_error: Optional[str] = Field(None, alias="summaryError")
    created_at: datetime
    summarized_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class ResponseEnvelope(BaseModel):
    response: CandidateResponse


class ResponseDetailEnvelope(BaseModel):
    response: CandidateResponse
    form_name: str = Field(alias="formName")

    class Config:
        populate_by_name = True


class ResultsEnvelope(BaseModel):
    form: FormDetail
    responses: List[CandidateResponse]


class SummaryEnvelope(BaseModel):
    summary: Optional[Dict[str, Any]] = None
    summary_status: str = Field(alias="summaryStatus")

    class Config:
        populate_by_name = True


class ResumeUploadResponse(BaseModel):
    """Schema for a processed resume upload"""
    resume_url: str = Field(alias="resumeUrl")
    resume_path: str = Field(alias="resumePath")
    resume_profile: Dict[str, Any] = Field(alias="resumeProfile")

    class Config:
        populate_by_name = True
