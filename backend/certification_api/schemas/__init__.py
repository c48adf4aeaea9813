from .violation import ViolationCreate, ViolationResponse, ViolationLogged
from .ai import GenerateAIRequest, GenerateAIResponse
from .test import SubmitTestRequest, TestResultCreate, SubmitTestResponse
from .health import HealthStatus
__all__ = [
    "ViolationCreate",
    "ViolationResponse",
    "ViolationLogged",
    "GenerateAIRequest",
    "GenerateAIResponse",
    "SubmitTestRequest",
    "TestResultCreate",
    "SubmitTestResponse",
    "HealthStatus",
]
