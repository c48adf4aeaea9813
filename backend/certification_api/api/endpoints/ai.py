from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from ...core.exceptions import ValidationError
from ...schemas.ai import GenerateAIRequest, GenerateAIResponse
from ...utils.completion_service import CompletionService, DEFAULT_MAX_TOKENS
from ..deps import get_completion_service, is_missing

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-ai-response", response_model=GenerateAIResponse)
async def generate_ai_response(
    request: Optional[GenerateAIRequest] = None,
    completion: CompletionService = Depends(get_completion_service)
):
    """Forward a free-text prompt to the completion provider"""
    if request is None or is_missing(request.prompt):
        raise ValidationError("Prompt is required")

    try:
        result = await completion.complete(request.prompt, max_tokens=DEFAULT_MAX_TOKENS)
    except Exception as e:
        logger.error(f"Error generating AI response: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Error generating AI response"})

    return GenerateAIResponse(result=result)
