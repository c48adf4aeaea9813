from pydantic import BaseModel, Field
from typing import Dict


class HealthStatus(BaseModel):
    status: str
    timestamp: float
    service: str
    services: Dict[str, str] = Field(default_factory=dict)
