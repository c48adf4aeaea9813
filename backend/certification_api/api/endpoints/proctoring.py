from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import List, Optional
import logging

from ...core.exceptions import ValidationError, CertificationAPIError
from ...schemas.violation import ViolationCreate, ViolationResponse, ViolationLogged
from ...services.persistence_service import PersistenceService
from ..deps import as_label, get_persistence_service, is_missing

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/log-violation", response_model=ViolationLogged)
async def log_violation(
    violation: Optional[ViolationCreate] = None,
    persistence: PersistenceService = Depends(get_persistence_service)
):
    """Log a proctoring violation"""
    if violation is None or is_missing(violation.type):
        raise ValidationError("Violation type is required")

    try:
        stored = await persistence.record_violation(as_label(violation.type))
    except CertificationAPIError as e:
        logger.error(f"Error logging violation: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return ViolationLogged(
        message="Violation logged",
        violation=ViolationResponse.model_validate(stored)
    )


@router.get("/violations", response_model=List[ViolationResponse])
async def get_violations(
    persistence: PersistenceService = Depends(get_persistence_service)
):
    """All violations, latest first"""
    try:
        violations = await persistence.list_violations()
    except CertificationAPIError as e:
        logger.error(f"Error fetching violations: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return [ViolationResponse.model_validate(v) for v in violations]
