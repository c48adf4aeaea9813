from pydantic import BaseModel, field_serializer
from datetime import datetime
from typing import Any, Optional
from ..utils.timezone import ensure_utc


class ViolationCreate(BaseModel):
    # Presence is checked by the endpoint so a missing field answers 400, not 422
    type: Optional[Any] = None

    class Config:
        extra = "allow"


class ViolationResponse(BaseModel):
    id: int
    type: str
    timestamp: datetime

    class Config:
        from_attributes = True

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return ensure_utc(value).isoformat()


class ViolationLogged(BaseModel):
    message: str
    violation: ViolationResponse
