#!/usr/bin/env python3
"""
Test Mock Implementations - Mock LLM provider for testing.

Provides deterministic behavior for unit tests without calling external APIs.
"""
import threading
from typing import Any, Callable, Dict, List, Optional, Union

from core.llm.interfaces import LLMProvider

Response = Union[str, Dict[str, Any], Exception, Callable[[str], Any]]


class MockLLMProvider(LLMProvider):
    """
    Mock AI service for testing.

    Responses are chosen by the first registered substring that appears in
    the prompt. A response may be a value, an exception instance (raised),
    or a callable receiving the prompt. Every call is recorded.
    """

    def __init__(
        self,
        default_completion: str = "Happy to help with your job search!",
        default_structured: Optional[Dict[str, Any]] = None
    ):
        self.default_completion = default_completion
        self.default_structured = default_structured if default_structured is not None else {}
        self._completions: List[tuple] = []
        self._structured: List[tuple] = []
        self.completion_calls: List[str] = []
        self.structured_calls: List[str] = []
        self._lock = threading.Lock()

    def on_complete(self, marker: str, response: Response) -> "MockLLMProvider":
        self._completions.append((marker, response))
        return self

    def on_structured(self, marker: str, response: Response) -> "MockLLMProvider":
        self._structured.append((marker, response))
        return self

    @property
    def call_count(self) -> int:
        return len(self.completion_calls) + len(self.structured_calls)

    def complete(self, prompt: str, temperature: Optional[float] = None) -> str:
        with self._lock:
            self.completion_calls.append(prompt)
        return self._resolve(self._completions, prompt, self.default_completion)

    def extract_structured_data(
        self,
        text: str,
        schema_spec: Dict,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None
    ) -> Dict[str, Any]:
        with self._lock:
            self.structured_calls.append(text)
        return self._resolve(self._structured, text, self.default_structured)

    @staticmethod
    def _resolve(registry: List[tuple], prompt: str, default: Any) -> Any:
        response = default
        for marker, candidate in registry:
            if marker in prompt:
                response = candidate
                break
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(prompt)
        return response


