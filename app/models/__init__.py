"""Pydantic models package"""

from .interview import ExtractedParameters, InterviewRecord
from .common import APIResponse, ErrorResponse, GenerationDebug

__all__ = [
    "ExtractedParameters", "InterviewRecord",
    "APIResponse", "ErrorResponse", "GenerationDebug"
]
