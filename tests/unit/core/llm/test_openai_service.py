"""
Unit tests for OpenAI service request handling.

Tests verify:
- Schema unwrapping helper works correctly
- extract_structured_data sends proper JSON schema to LLM
- complete sends a single user message and returns the text
- Every request carries the configured timeout and the client never retries
- Guardrails catch invalid schemas and non-JSON responses
"""
import json
from unittest.mock import MagicMock

import pytest

from core.llm.openai_service import OpenAIService, _unwrap_schema_spec
from core.llm.schema_models import FILTER_EXTRACTION_SCHEMA, MATCH_SCORING_SCHEMA


def _mock_response(content):
    mock_message = MagicMock()
    mock_message.content = content
    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


class TestUnwrapSchemaSpec:
    """Tests for the schema unwrapping helper."""

    def test_wrapper_schema_returns_name_strict_and_inner_schema(self):
        """Wrapped schemas should return name, strict flag, and inner schema."""
        name, strict, raw_schema = _unwrap_schema_spec(MATCH_SCORING_SCHEMA)

        assert name == "match_scoring_schema"
        assert strict is True
        assert raw_schema.get("type") == "object"
        assert "score" in raw_schema["properties"]

    def test_raw_schema_passes_through_unchanged(self):
        """Raw JSON schemas should pass through with defaults."""
        raw = {"type": "object", "properties": {"foo": {"type": "string"}}}
        name, strict, result = _unwrap_schema_spec(raw)

        assert name == "extraction_response"
        assert strict is False
        assert result == raw

    def test_filter_schema_requires_every_field(self):
        """Strict structured output needs every property listed as required."""
        _, _, raw_schema = _unwrap_schema_spec(FILTER_EXTRACTION_SCHEMA)

        assert set(raw_schema["required"]) == {"workMode", "jobType", "location", "matchScore", "clear"}
        assert raw_schema.get("additionalProperties") is False


class TestClientConfiguration:

    def test_client_never_retries_and_has_timeout(self):
        svc = OpenAIService(api_key="test", timeout_seconds=12.5)

        assert svc.client.max_retries == 0
        assert svc.client.timeout == 12.5

    def test_model_config_defaults(self):
        svc = OpenAIService(api_key="test")
        assert svc.model == "gpt-4o-mini"

    def test_model_config_override(self):
        svc = OpenAIService(api_key="test", model_config={"model": "local-model", "temperature": 0.1})
        assert svc.model == "local-model"
        assert svc.temperature == 0.1


class TestComplete:

    @pytest.fixture
    def service(self):
        svc = OpenAIService(api_key="test", timeout_seconds=5.0)
        svc.client = MagicMock()
        svc.client.chat.completions.create.return_value = _mock_response("GENERAL_CHAT")
        return svc

    def test_returns_message_content(self, service):
        assert service.complete("classify this") == "GENERAL_CHAT"

    def test_sends_single_user_message_with_timeout(self, service):
        service.complete("hello", temperature=0.2)

        call_kwargs = service.client.chat.completions.create.call_args[1]
        assert call_kwargs["messages"] == [{"role": "user", "content": "hello"}]
        assert call_kwargs["temperature"] == 0.2
        assert call_kwargs["timeout"] == 5.0

    def test_none_content_becomes_empty_string(self, service):
        service.client.chat.completions.create.return_value = _mock_response(None)
        assert service.complete("hello") == ""

    def test_errors_propagate(self, service):
        service.client.chat.completions.create.side_effect = TimeoutError("timed out")
        with pytest.raises(TimeoutError):
            service.complete("hello")
        assert service.client.chat.completions.create.call_count == 1


class TestExtractStructuredData:
    """Tests for extract_structured_data method."""

    @pytest.fixture
    def service(self):
        """Create service with mocked client."""
        svc = OpenAIService(api_key="test")
        svc.client = MagicMock()
        svc.client.chat.completions.create.return_value = _mock_response(json.dumps({"score": 70}))
        return svc

    def test_extract_with_wrapper_schema_sends_unwrapped_json_schema(self, service):
        """Wrapped schema should result in proper JSON schema sent to LLM."""
        service.extract_structured_data("test text", MATCH_SCORING_SCHEMA)

        call_kwargs = service.client.chat.completions.create.call_args[1]
        json_schema = call_kwargs['response_format']['json_schema']

        assert json_schema['schema'].get("type") == "object"
        assert "properties" in json_schema['schema']
        assert "name" not in json_schema['schema']
        assert "strict" not in json_schema['schema']
        assert json_schema['strict'] is True
        assert json_schema['name'] == "match_scoring_schema"

    def test_extract_with_raw_schema_sends_schema_directly(self, service):
        """Raw schema should be sent as-is."""
        raw_schema = {"type": "object", "properties": {"foo": {"type": "string"}}}
        service.extract_structured_data("test text", raw_schema)

        call_kwargs = service.client.chat.completions.create.call_args[1]
        assert call_kwargs['response_format']['json_schema']['schema'] == raw_schema

    def test_system_prompt_and_user_text(self, service):
        service.extract_structured_data("user text", MATCH_SCORING_SCHEMA, system_prompt="be strict")

        messages = service.client.chat.completions.create.call_args[1]['messages']
        assert messages == [
            {"role": "system", "content": "be strict"},
            {"role": "user", "content": "user text"},
        ]

    def test_returns_parsed_json(self, service):
        assert service.extract_structured_data("x", MATCH_SCORING_SCHEMA) == {"score": 70}

    def test_extract_raises_on_invalid_schema(self, service):
        """Invalid schema should raise ValueError with helpful message."""
        invalid = {"not": "a valid json schema"}

        with pytest.raises(ValueError, match="Not a valid JSON Schema object"):
            service.extract_structured_data("test text", invalid)

    def test_non_json_response_raises(self, service):
        service.client.chat.completions.create.return_value = _mock_response("sure! here you go")

        with pytest.raises(json.JSONDecodeError):
            service.extract_structured_data("x", MATCH_SCORING_SCHEMA)

    def test_non_object_json_raises(self, service):
        service.client.chat.completions.create.return_value = _mock_response("[1, 2]")

        with pytest.raises(ValueError, match="Expected a JSON object"):
            service.extract_structured_data("x", MATCH_SCORING_SCHEMA)
