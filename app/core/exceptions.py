"""
Exceptions raised while turning a transcript into a stored interview, and the
FastAPI handler for anything that escapes a route.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidRequestError(AppError):
    """Request body has the wrong shape; reported as 400."""
    status_code = 400


class ExtractionParseError(AppError):
    """The extraction call did not return a JSON object."""
    status_code = 500


class GenerationValidationError(AppError):
    """The generation call did not return a non-empty JSON array."""
    status_code = 500


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": str(exc)},
        headers=get_settings().cors_headers,
    )
