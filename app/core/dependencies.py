from typing import Optional

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.interview_store import InterviewStore
from app.services.llm_client import LanguageModelClient
from app.services.question_generator import QuestionGenerator
from app.utils.utils import get_random_interview_cover

# Global LLM client instance; one OpenAI HTTP connection pool per process
_llm_client: Optional[LanguageModelClient] = None


def get_llm_client(settings: Settings = Depends(get_settings)) -> LanguageModelClient:
    global _llm_client
    if _llm_client is None:
        _llm_client = LanguageModelClient(
            api_key=settings.OPENAI_API_KEY,
            temperature=settings.LLM_TEMPERATURE,
            max_tokens=settings.LLM_MAX_TOKENS,
        )
    return _llm_client


def reset_llm_client() -> None:
    global _llm_client
    _llm_client = None


def get_interview_store(settings: Settings = Depends(get_settings)) -> InterviewStore:
    return InterviewStore(collection=settings.INTERVIEWS_COLLECTION)


def get_question_generator(
    llm: LanguageModelClient = Depends(get_llm_client),
    store: InterviewStore = Depends(get_interview_store),
    settings: Settings = Depends(get_settings),
) -> QuestionGenerator:
    """Generator wired to OpenAI and Firestore; tests override this dependency"""
    return QuestionGenerator(llm, store, get_random_interview_cover, settings)
