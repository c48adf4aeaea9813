from pydantic import BaseModel
from typing import Any, Optional


class GenerateAIRequest(BaseModel):
    prompt: Optional[Any] = None

    class Config:
        extra = "allow"


class GenerateAIResponse(BaseModel):
    result: str
