import asyncio
import json
import os
from typing import List

import pytest

# Settings are read from the environment on first use
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.core.dependencies import get_question_generator
from app.main import app
from app.services.question_generator import QuestionGenerator

COVER = "/covers/spotify.png"


def _in_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class FakeLanguageModel:
    """Returns canned completions in order and records every prompt"""

    def __init__(self, responses: List[str] = None):
        self.responses = list(responses or [])
        self.calls = []
        self.ran_on_event_loop = []

    def generate_text(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        self.ran_on_event_loop.append(_in_event_loop())
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeInterviewStore:
    def __init__(self, error: Exception = None):
        self.records = []
        self.error = error

    def add(self, record: dict) -> str:
        if self.error:
            raise self.error
        self.records.append(record)
        return f"interview-{len(self.records)}"


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def llm():
    return FakeLanguageModel()


@pytest.fixture
def store():
    return FakeInterviewStore()


@pytest.fixture
def generator(llm, store, settings):
    return QuestionGenerator(llm, store, lambda: COVER, settings)


@pytest.fixture
def client(generator):
    app.dependency_overrides[get_question_generator] = lambda: generator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def transcript():
    return [
        {"role": "assistant", "content": "What role are you preparing for?"},
        {"role": "user", "content": "A senior backend engineer role, mostly Go and Postgres."},
        {"role": "assistant", "content": "Technical or behavioural questions, and how many?"},
        {"role": "user", "content": "Technical, five questions please."},
    ]


@pytest.fixture
def extraction_response():
    return json.dumps({
        "role": "Backend Engineer",
        "level": "Senior",
        "techstack": "Go,Postgres",
        "type": "technical",
        "amount": 5,
    })


@pytest.fixture
def questions_response():
    return json.dumps([
        "How do goroutines differ from OS threads?",
        "Explain Postgres MVCC.",
        "How would you design a rate limiter in Go?",
        "When would you add a partial index?",
        "How do you handle context cancellation across services?",
    ])
