"""
Candidate response model.

A row is written exactly once per submission. Only the summary fields are
rewritten afterwards, when an owner regenerates the candidate summary.

answers structure (JSON list, base answers first, then AI follow-ups):
[
    {"question": "Full name", "answer": "Jane Doe"},
    {"question": "On Acme, what tradeoff ...?", "answer": "..."}
]

summary structure (JSON object or null):
{
    "candidate_name": "Jane Doe",
    "one_liner": "...",
    "strengths": ["..."],
    "risks": ["..."],
    "recommended_next_step": "...",
    "strength_chips": ["Go", "Kubernetes"]
}
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON, Text


class SummaryStatus:
    PENDING = "pending"        # not generated yet
    GENERATED = "generated"    # model output parsed and normalized
    FALLBACK = "fallback"      # generation failed, deterministic summary stored


class FormResponse(SQLModel, table=True):
    """Persisted candidate submission for a form."""
    __tablename__ = "responses"

    id: Optional[int] = Field(default=None, primary_key=True)
    form_id: int = Field(foreign_key="forms.id", index=True)

    answers: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    resume_profile: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    summary: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    summary_status: str = Field(default=SummaryStatus.PENDING)
    summary_error: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    summarized_at: Optional[datetime] = None
