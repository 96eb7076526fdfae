from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class QAItem(BaseModel):
    """One question/answer entry of the conversation history"""
    question: Optional[str] = Field("", description="Question text")
    answer: Optional[str] = Field("", description="Candidate answer; blank for the question awaiting an answer")

    def as_pair(self) -> Dict[str, str]:
        return {"question": self.question or "", "answer": self.answer or ""}


class PublicFollowupRequest(BaseModel):
    """Schema for requesting the next follow-up on the public surface"""
    history: List[QAItem] = Field(default_factory=list, description="Base answers first, then answered follow-ups")
    resume_profile: Optional[Dict[str, Any]] = Field(None, alias="resumeProfile", description="Profile from the resume upload")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "history": [
                    {"question": "Full name", "answer": "Jane Doe"}
                ],
                "resumeProfile": {"skills": ["Go", "Kubernetes"]}
            }
        }


class OwnerFollowupRequest(PublicFollowupRequest):
    """Owner variant: may preview a draft role summary or base question list"""
    summary: Optional[str] = Field(None, description="Role summary override (prompt only)")
    base_questions: Optional[List[str]] = Field(None, alias="baseQuestions", description="Base question override (prompt only)")


class FollowupResponse(BaseModel):
    """Either the next question, or done=true meaning the form should be submitted"""
    next_question: Optional[str] = Field(None, alias="nextQuestion")
    done: bool = False
    ai_used: int = Field(0, alias="aiUsed")
    ai_remaining: int = Field(0, alias="aiRemaining")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "nextQuestion": "On Acme, what tradeoff did you make when you moved the queue to Kafka?",
                "done": False,
                "aiUsed": 0,
                "aiRemaining": 2
            }
        }
