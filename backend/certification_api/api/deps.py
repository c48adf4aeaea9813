from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any
import json

from ..core.database import get_async_db
from ..services.persistence_service import PersistenceService
from ..utils.completion_service import CompletionService, completion_service


def get_persistence_service(
    db: AsyncSession = Depends(get_async_db)
) -> PersistenceService:
    return PersistenceService(db)


def get_completion_service() -> CompletionService:
    return completion_service


def is_missing(value: Any) -> bool:
    """Falsy the way a JSON client means it: null, "", false or 0. Empty lists count as present."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def as_label(value: Any) -> str:
    """Text label for a JSON value: strings as-is, anything else in JSON notation."""
    if isinstance(value, str):
        return value
    return json.dumps(value)
