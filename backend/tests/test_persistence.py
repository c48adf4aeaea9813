"""
Tests for PersistenceService against an in-memory database
"""
import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError

from certification_api.core.exceptions import StorageError, ValidationError
from certification_api.models.test_result import TestResult as StoredTestResult
from certification_api.schemas.test import TestResultCreate as ResultRecord
from certification_api.services.persistence_service import PersistenceService


class TestPersistenceService:

    async def test_record_violation_assigns_id_and_timestamp(self, db_session):
        service = PersistenceService(db_session)

        violation = await service.record_violation("tab_switch")

        assert violation.id is not None
        assert violation.timestamp is not None
        assert violation.type == "tab_switch"

    async def test_record_violation_requires_type(self, db_session):
        service = PersistenceService(db_session)

        with pytest.raises(ValidationError):
            await service.record_violation("")

    async def test_list_violations_latest_first(self, db_session):
        service = PersistenceService(db_session)
        first = await service.record_violation("first")
        second = await service.record_violation("second")

        violations = await service.list_violations()

        assert [v.id for v in violations] == [second.id, first.id]

    async def test_record_test_result(self, db_session):
        service = PersistenceService(db_session)

        result_id = await service.record_test_result(ResultRecord(
            email="a@b.c",
            skill="sql",
            score=6,
            questions=["Q1", "Q2"],
            answers=["A1", "A2"],
            feedback="Score: 6/10",
        ))

        stored = await db_session.get(StoredTestResult, result_id)
        assert stored.score == 6
        assert stored.questions == ["Q1", "Q2"]
        assert stored.date is not None

    async def test_storage_failure_is_wrapped(self):
        db = AsyncMock()
        db.add = MagicMock()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
        service = PersistenceService(db)

        with pytest.raises(StorageError):
            await service.record_violation("tab_switch")
        db.rollback.assert_awaited_once()
