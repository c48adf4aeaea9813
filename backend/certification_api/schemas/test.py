from pydantic import BaseModel
from datetime import datetime
from typing import Any, List, Optional


class SubmitTestRequest(BaseModel):
    """Raw submission body. Only presence is checked before grading."""
    email: Optional[Any] = None
    skill: Optional[Any] = None
    questions: Optional[Any] = None
    answers: Optional[Any] = None

    class Config:
        extra = "allow"


class TestResultCreate(BaseModel):
    email: str
    skill: str
    score: int
    questions: List[Any]
    answers: List[Any]
    feedback: str
    date: Optional[datetime] = None

    class Config:
        # Numeric emails/skills from JSON clients are stored as text
        coerce_numbers_to_str = True


class SubmitTestResponse(BaseModel):
    score: int
    evaluation: str
    passed: bool
