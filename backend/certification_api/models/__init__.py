from .violation import Violation
from .test_result import TestResult

__all__ = [
    "Violation",
    "TestResult",
]
