from __future__ import annotations

import json
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

import config
from main import app
from routes import quiz_generator
from routes.errors import UpstreamFailure
from routes.quiz_store import InMemoryQuizStore, get_quiz_store


class ProviderStub:
    """Stands in for the provider dispatch; replays queued responses in order."""

    def __init__(self) -> None:
        self.prompts: List[str] = []
        self.responses: List[Optional[str]] = []
        self.error: Optional[Exception] = None

    def queue_response(self, content: Optional[str]) -> None:
        self.responses.append(content)

    def queue_json(self, data) -> None:
        self.responses.append(json.dumps(data))

    async def __call__(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else None


@pytest.fixture(autouse=True)
def quiz_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin policy defaults and keep tests off the network unless they opt in."""
    monkeypatch.setattr(config, "AI_PROVIDER", "mock")
    monkeypatch.setattr(config, "QUIZ_QUESTION_COUNT", 5)
    monkeypatch.setattr(config, "DOC_TEXT_LIMIT", 12000)
    monkeypatch.setattr(config, "PROVIDER_TIMEOUT", 5.0)
    monkeypatch.setattr(config, "LEVEL_ADVANCED_THRESHOLD", 80)
    monkeypatch.setattr(config, "LEVEL_INTERMEDIATE_THRESHOLD", 60)


@pytest.fixture
def provider(monkeypatch: pytest.MonkeyPatch) -> ProviderStub:
    stub = ProviderStub()
    monkeypatch.setattr(quiz_generator, "request_completion", stub)
    return stub


@pytest.fixture
def failing_provider(provider: ProviderStub) -> ProviderStub:
    provider.error = UpstreamFailure("provider unreachable")
    return provider


@pytest.fixture
def store() -> InMemoryQuizStore:
    return InMemoryQuizStore()


@pytest.fixture
def client(store: InMemoryQuizStore):
    app.dependency_overrides[get_quiz_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def binary_search_questions():
    return [
        {
            "question": "What is the time complexity of binary search?",
            "options": ["O(n)", "O(log n)", "O(n log n)", "O(1)"],
            "answer": "B",
        },
        {
            "question": "Binary search requires the input to be?",
            "options": ["Sorted", "Hashed", "Linked", "Reversed"],
            "answer": "A",
        },
        {
            "question": "Which index does binary search inspect first?",
            "options": ["The first", "The last", "The middle", "A random one"],
            "answer": 2,
        },
        {
            "question": "What happens when the target is smaller than the middle element?",
            "options": ["Search the right half", "Search the left half", "Stop", "Restart"],
            "answer": "Search the left half",
        },
        {
            "question": "Worst-case comparisons for 1024 sorted elements?",
            "options": ["10", "11", "512", "1024"],
            "answer": "b",
        },
    ]
