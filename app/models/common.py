from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class APIResponse(BaseModel):
    """Standard API response model"""
    success: bool
    data: Optional[Any] = None

class ErrorResponse(BaseModel):
    """Standard error response model"""
    success: bool = False
    error: str
    debug: Optional[dict] = None

class GenerationDebug(BaseModel):
    """Diagnostics attached to a failed generation request"""
    model_config = ConfigDict(populate_by_name=True)

    extracted_text: str = Field("", alias="extractedText")
    questions_text: str = Field("", alias="questionsText")
    cleaned_questions: Optional[str] = Field(None, alias="cleanedQuestions")
    parsed_questions_type: str = Field("null", alias="parsedQuestionsType")
    parsed_questions_sample: Optional[Any] = Field(None, alias="parsedQuestionsSample")
