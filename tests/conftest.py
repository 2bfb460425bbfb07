"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For the mock LLM provider, see tests/mocks/llm_mocks.py
"""

import pytest

from core.assistant import AssistantOrchestrator, SessionStore
from core.scorer import MatchScorer
from tests.mocks.llm_mocks import MockLLMProvider


@pytest.fixture
def mock_llm():
    """Mock LLM provider with no registered responses."""
    return MockLLMProvider()


@pytest.fixture
def session_store():
    store = SessionStore()
    yield store
    store.close()


@pytest.fixture
def assistant(mock_llm, session_store):
    """Assistant wired to the mock provider and a fresh session store."""
    return AssistantOrchestrator(llm=mock_llm, session_store=session_store)


@pytest.fixture
def match_scorer(mock_llm):
    return MatchScorer(llm=mock_llm)


@pytest.fixture
def sample_jobs():
    """Jobs in the minimum shape the scorer depends on, plus pass-through fields."""
    return [
        {
            "id": "job-1",
            "title": "Frontend Engineer",
            "company": "Acme",
            "description": "React and TypeScript frontend work with REST API integration.",
            "location": "Berlin",
            "contract_type": "permanent",
        },
        {
            "id": "job-2",
            "title": "Platform Engineer",
            "company": "Globex",
            "description": "Kubernetes, Docker and AWS infrastructure for backend services.",
            "location": "Remote",
        },
        {
            "id": "job-3",
            "title": "Data Scientist",
            "company": "Initech",
            "description": "Python, SQL and ML model development.",
            "location": "London",
        },
    ]
