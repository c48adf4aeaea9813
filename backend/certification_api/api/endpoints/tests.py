from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from ...core.exceptions import ValidationError
from ...schemas.test import SubmitTestRequest, SubmitTestResponse
from ...services.evaluation_service import evaluate_submission
from ...services.persistence_service import PersistenceService
from ...utils.completion_service import CompletionService
from ..deps import get_completion_service, get_persistence_service, is_missing

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/submit-test", response_model=SubmitTestResponse)
async def submit_test(
    submission: Optional[SubmitTestRequest] = None,
    completion: CompletionService = Depends(get_completion_service),
    persistence: PersistenceService = Depends(get_persistence_service)
):
    """Grade submitted answers with the AI evaluator and store the result"""
    if submission is None or any(
        is_missing(value)
        for value in (submission.email, submission.skill, submission.questions, submission.answers)
    ):
        raise ValidationError("Missing required fields")

    try:
        result = await evaluate_submission(
            email=submission.email,
            skill=submission.skill,
            questions=submission.questions,
            answers=submission.answers,
            completion=completion,
            persistence=persistence,
        )
    except Exception as e:
        # The upstream call may already have been made; nothing is rolled back
        logger.error(f"Error submitting test: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Error submitting test"})

    return SubmitTestResponse(**result)
