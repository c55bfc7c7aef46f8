# app/services/question_generator.py - Transcript -> interview questions -> Firestore

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from app.core.config import Settings
from app.core.exceptions import ExtractionParseError, GenerationValidationError
from app.core.prompts import build_extraction_prompt, build_questions_prompt
from app.models.interview import ExtractedParameters, InterviewRecord
from app.services.interview_store import InterviewStore
from app.services.llm_client import LanguageModelClient
from app.services.parameter_extractor import coerce_text, extract_parameters, split_techstack
from app.utils.llm_json import Parsed, json_type_name, parse_json_lenient, strip_code_fence, truncate
from app.utils.utils import utc_timestamp

logger = logging.getLogger(__name__)


class GenerationState(str, Enum):
    INIT = "init"
    EXTRACTING = "extracting"
    EXTRACTED = "extracted"
    GENERATING = "generating"
    GENERATED = "generated"
    VALIDATING = "validating"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"


class GenerationRun:
    """State of one generate request, kept so failures can report what the model said"""

    def __init__(self, messages: List[Any], user_id: Any):
        self.messages = messages
        self.user_id = user_id
        self.state = GenerationState.INIT
        self.extracted_text: Optional[str] = None
        self.questions_text: Optional[str] = None
        self.cleaned_questions: Optional[str] = None
        self.parsed_questions: Any = None
        self.params: Optional[ExtractedParameters] = None
        self.record: Optional[InterviewRecord] = None
        self.document_id: Optional[str] = None

    def advance(self, state: GenerationState):
        logger.debug(f"Generation {self.state.value} -> {state.value}")
        self.state = state

    def fail(self):
        self.state = GenerationState.FAILED

    def debug_summary(self, limit: int = 2000) -> Dict[str, Any]:
        """Diagnostics for the generic failure response"""
        return {
            "extractedText": truncate(self.extracted_text, limit),
            "questionsText": truncate(self.questions_text, limit),
            "parsedQuestionsType": json_type_name(self.parsed_questions),
        }


class QuestionGenerator:
    def __init__(
        self,
        llm: LanguageModelClient,
        store: InterviewStore,
        cover_picker: Callable[[], str],
        settings: Settings,
    ):
        self.llm = llm
        self.store = store
        self.cover_picker = cover_picker
        self.settings = settings

    def run(self, run: GenerationRun) -> GenerationRun:
        """Drive ``run`` from INIT to DONE; marks it FAILED and re-raises on error"""
        try:
            run.params = self._extract(run)
            questions = self._generate(run)
            run.record = self._build_record(run, questions)
            run.advance(GenerationState.PERSISTING)
            run.document_id = self.store.add(run.record.to_document())
            run.advance(GenerationState.DONE)
            return run
        except Exception:
            run.fail()
            raise

    def _extract(self, run: GenerationRun) -> ExtractedParameters:
        run.advance(GenerationState.EXTRACTING)
        run.extracted_text = self.llm.generate_text(
            self.settings.LLM_MODEL, build_extraction_prompt(run.messages)
        )
        try:
            params = extract_parameters(
                parse_json_lenient(run.extracted_text),
                default_amount=self.settings.DEFAULT_QUESTION_AMOUNT,
                max_amount=self.settings.MAX_QUESTION_AMOUNT,
            )
        except ExtractionParseError:
            logger.error(
                f"Failed to parse extraction output: {truncate(run.extracted_text, self.settings.DEBUG_TEXT_LIMIT)}"
            )
            raise
        run.advance(GenerationState.EXTRACTED)
        return params

    def _generate(self, run: GenerationRun) -> List[str]:
        run.advance(GenerationState.GENERATING)
        run.questions_text = self.llm.generate_text(
            self.settings.LLM_MODEL, build_questions_prompt(run.params)
        )
        run.advance(GenerationState.GENERATED)

        run.advance(GenerationState.VALIDATING)
        run.cleaned_questions = strip_code_fence(run.questions_text)
        result = parse_json_lenient(run.cleaned_questions)
        run.parsed_questions = result.value if isinstance(result, Parsed) else None

        if not isinstance(run.parsed_questions, list) or not run.parsed_questions:
            raise GenerationValidationError(
                "Model did not return a valid questions array",
                details=self._validation_debug(run),
            )

        return [coerce_text(q).strip() if q else "" for q in run.parsed_questions]

    def _validation_debug(self, run: GenerationRun) -> Dict[str, Any]:
        limit = self.settings.DEBUG_TEXT_LIMIT
        parsed = run.parsed_questions
        logger.error(
            "Questions output invalid (%s). extractedText=%r questionsText=%r cleanedQuestions=%r",
            json_type_name(parsed),
            truncate(run.extracted_text, limit),
            truncate(run.questions_text, limit),
            truncate(run.cleaned_questions, limit),
        )
        return {
            "extractedText": truncate(run.extracted_text, limit),
            "questionsText": truncate(run.questions_text, limit),
            "cleanedQuestions": truncate(run.cleaned_questions, limit) if run.cleaned_questions is not None else None,
            "parsedQuestionsType": json_type_name(parsed),
            "parsedQuestionsSample": parsed[: self.settings.DEBUG_SAMPLE_SIZE] if isinstance(parsed, list) else parsed,
        }

    def _build_record(self, run: GenerationRun, questions: List[str]) -> InterviewRecord:
        params = run.params
        return InterviewRecord(
            role=params.role,
            type=params.type,
            level=params.level,
            techstack=split_techstack(params.techstack),
            questions=questions,
            userId=run.user_id,
            finalized=True,
            coverImage=self.cover_picker(),
            createdAt=utc_timestamp(),
        )
