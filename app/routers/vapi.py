import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.core.config import Settings, get_settings
from app.core.dependencies import get_question_generator
from app.core.exceptions import GenerationValidationError, InvalidRequestError
from app.models.common import APIResponse, ErrorResponse, GenerationDebug
from app.services.question_generator import GenerationRun, QuestionGenerator
from app.utils.llm_json import truncate

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_body(request: Request) -> Dict[str, Any]:
    """Request JSON body; anything that is not a JSON object counts as empty"""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _validate_body(body: Dict[str, Any]):
    if not isinstance(body.get("messages"), list):
        raise InvalidRequestError("Invalid or missing 'messages' array")
    if not body.get("userId"):
        raise InvalidRequestError("Missing 'userId' in request body")


def _error(status_code: int, error: str, debug: Dict[str, Any] = None) -> JSONResponse:
    content = ErrorResponse(error=error, debug=debug).model_dump()
    if debug is None:
        content.pop("debug")
    return JSONResponse(status_code=status_code, content=content)


@router.options("/generate", status_code=status.HTTP_204_NO_CONTENT)
async def generate_preflight():
    """CORS preflight; headers are added by the application middleware"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/generate")
async def generate_status():
    return APIResponse(success=True, data="Thank you!").model_dump()


@router.post("/generate")
async def generate_interview(
    request: Request,
    generator: QuestionGenerator = Depends(get_question_generator),
    settings: Settings = Depends(get_settings),
):
    """
    Turn a voice-assistant transcript into a stored interview.

    Body: {"messages": [...], "userId": "..."}. The model is asked once for
    role/level/techstack/type/amount and once for the questions; the result
    is written to the interviews collection.
    """
    body = await _read_body(request)
    try:
        _validate_body(body)
    except InvalidRequestError as e:
        logger.warning(f"Rejected generate request: {e.message}")
        return _error(e.status_code, e.message)

    run = GenerationRun(messages=body["messages"], user_id=body["userId"])
    try:
        await run_in_threadpool(generator.run, run)
    except GenerationValidationError as e:
        debug = GenerationDebug(**e.details).model_dump(by_alias=True)
        return _error(e.status_code, e.message, debug)
    except Exception as e:
        logger.error(f"Unhandled error in /api/vapi/generate: {e}", exc_info=True)
        limit = settings.DEBUG_TEXT_LIMIT
        if run.extracted_text:
            logger.error(f"Captured extractedText (truncated): {truncate(run.extracted_text, limit)}")
        if run.questions_text:
            logger.error(f"Captured questionsText (truncated): {truncate(run.questions_text, limit)}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e), run.debug_summary(limit))

    return APIResponse(success=True).model_dump(exclude_none=True)
