from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
from typing import List
import logging

from ..core.exceptions import StorageError, ValidationError
from ..models.violation import Violation
from ..models.test_result import TestResult
from ..schemas.test import TestResultCreate
from ..utils.timezone import get_utc_now

logger = logging.getLogger(__name__)


class PersistenceService:
    """Stores violations and test results. Every SQLAlchemy failure surfaces as StorageError."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def record_violation(self, violation_type: str) -> Violation:
        """Insert a violation stamped with the current time and return the stored row"""
        if not violation_type:
            raise ValidationError("Violation type is required")

        violation = Violation(type=violation_type, timestamp=get_utc_now())
        try:
            self.db.add(violation)
            await self.db.commit()
            await self.db.refresh(violation)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(f"Failed to store violation: {e}") from e

        logger.info(f"Violation logged: {violation.type} (id={violation.id})")
        return violation

    async def list_violations(self) -> List[Violation]:
        """All violations, most recent first"""
        try:
            result = await self.db.execute(
                select(Violation).order_by(Violation.timestamp.desc(), Violation.id.desc())
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to fetch violations: {e}") from e
        return list(result.scalars().all())

    async def record_test_result(self, result: TestResultCreate) -> int:
        """Insert a graded submission and return its id"""
        test_result = TestResult(
            email=result.email,
            skill=result.skill,
            score=result.score,
            date=result.date or get_utc_now(),
            questions=result.questions,
            answers=result.answers,
            feedback=result.feedback,
        )
        try:
            self.db.add(test_result)
            await self.db.commit()
            await self.db.refresh(test_result)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(f"Failed to store test result: {e}") from e

        logger.info(f"Test result stored for {test_result.email} ({test_result.skill}): {test_result.score}/10")
        return test_result.id
