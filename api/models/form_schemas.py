from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


# ============ Form Schemas ============

class FormCreate(BaseModel):
    """Schema for creating a new form"""
    name: str = Field("", description="Form name shown to candidates")
    summary: Optional[str] = Field(None, description="Role summary used to tailor follow-up questions")
    base_questions: Optional[List[str]] = Field(None, alias="baseQuestions", description="Questions always asked first, in order")
    ai_enabled: bool = Field(False, alias="aiEnabled", description="Allow adaptive AI follow-up questions")
    max_ai_questions: Optional[int] = Field(None, alias="maxAiQuestions", description="Follow-up cap per response (0-20, default 2)")
    is_public: bool = Field(False, alias="public", description="Allow access through the share link")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "Backend Engineer",
                "summary": "Go services on Kubernetes, on-call rotation, small team.",
                "baseQuestions": ["Full name", "Why this role?"],
                "aiEnabled": True,
                "maxAiQuestions": 2,
                "public": True
            }
        }


class FormUpdate(BaseModel):
    """Schema for a partial form update; omitted fields are left unchanged"""
    name: Optional[str] = Field(None, description="Form name")
    summary: Optional[str] = Field(None, description="Role summary")
    base_questions: Optional[List[str]] = Field(None, alias="baseQuestions")
    is_public: Optional[bool] = Field(None, alias="public")
    ai_enabled: Optional[bool] = Field(None, alias="aiEnabled")
    max_ai_questions: Optional[int] = Field(None, alias="maxAiQuestions")
    archived: Optional[bool] = Field(None)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "aiEnabled": True,
                "maxAiQuestions": 3
            }
        }


class FormArchiveRequest(BaseModel):
    """Schema for archiving or restoring a form"""
    archived: bool = Field(True, description="True to archive, false to restore")


class FormDetail(BaseModel):
    """Schema for an owner-visible form"""
    id: int
    name: str
    summary: str
    base_questions: List[str] = Field(alias="baseQuestions")
    ai_enabled: bool = Field(alias="aiEnabled")
    max_ai_questions: int = Field(alias="maxAiQuestions")
    is_public: bool = Field(alias="public")
    share_token: str
    archived: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        populate_by_name = True


class PublicFormDetail(BaseModel):
    """Schema for a form as seen through its share link"""
    id: int
    name: str
    summary: str
    base_questions: List[str] = Field(alias="baseQuestions")
    ai_enabled: bool = Field(alias="aiEnabled")
    max_ai_questions: int = Field(alias="maxAiQuestions")

    class Config:
        from_attributes = True
        populate_by_name = True


class FormEnvelope(BaseModel):
    form: FormDetail


class FormListEnvelope(BaseModel):
    forms: List[FormDetail]


class PublicFormEnvelope(BaseModel):
    form: PublicFormDetail
