"""
OpenAI Service - LLM implementation using OpenAI API.

Provides free-text completions and structured data extraction.
Every request carries an explicit timeout and the client never retries:
a timeout surfaces as ``openai.APITimeoutError`` and is handled by callers
exactly like any other failure.
"""
from typing import Dict, Any, Optional, Tuple
import json
import logging
import copy

from openai import OpenAI

from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import DEFAULT_EXTRACTION_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


def _unwrap_schema_spec(spec: Dict[str, Any]) -> Tuple[str, bool, Dict[str, Any]]:
    """Unwrap a schema spec to extract name, strict flag, and raw JSON schema.

    Args:
        spec: Either a wrapped spec {'name': str, 'strict': bool, 'schema': {...}}
              or a raw JSON schema dict

    Returns:
        Tuple of (name, strict, raw_schema)
    """
    if isinstance(spec, dict) and "schema" in spec and "name" in spec:
        return spec.get("name", "extraction_response"), bool(spec.get("strict", False)), spec["schema"]
    return "extraction_response", False, spec


class OpenAIService(LLMProvider):
    """
    OpenAI LLM Service.

    Provides plain chat completions and structured data extraction
    using JSON Schema mode.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_config: Optional[Dict[str, Any]] = None,
        timeout_seconds: float = 30.0
    ):
        client_kwargs = {
            'timeout': timeout_seconds,
            'max_retries': 0,
        }
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url

        self.client = OpenAI(**client_kwargs)

        self.model_config = model_config or {}
        self.model = self.model_config.get('model', 'gpt-4o-mini')
        self.temperature = self.model_config.get('temperature', 0.6)
        self.timeout_seconds = timeout_seconds

    def complete(self, prompt: str, temperature: Optional[float] = None) -> str:
        """Run a single-message chat completion and return the text."""
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature if temperature is None else temperature,
            timeout=self.timeout_seconds,
        )
        content = response.choices[0].message.content
        return content or ""

    def extract_structured_data(
        self,
        text: str,
        schema_spec: Dict,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None
    ) -> Dict[str, Any]:
        """Extract structured data using JSON Schema mode.

        Args:
            text: Rendered user message
            schema_spec: Either a wrapped spec {'name', 'strict', 'schema'} or raw JSON schema
            system_prompt: Optional custom system prompt. If None, uses default.
            temperature: Optional temperature override.

        Raises:
            ValueError: If the schema is not a JSON Schema object.
            json.JSONDecodeError: If the model returned non-JSON content.
        """
        name, strict, raw_schema = _unwrap_schema_spec(schema_spec)
        runtime_schema = copy.deepcopy(raw_schema)

        if runtime_schema.get("type") != "object" or "properties" not in runtime_schema:
            raise ValueError(f"Not a valid JSON Schema object. Top-level keys: {list(runtime_schema.keys())}")

        if system_prompt is None:
            system_prompt = DEFAULT_EXTRACTION_SYSTEM_PROMPT

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": text},
        ]

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature if temperature is None else temperature,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": name,
                    "schema": runtime_schema,
                    "strict": strict,
                },
            },
            timeout=self.timeout_seconds,
        )

        try:
            content = response.choices[0].message.content
            data = json.loads(content)
        except (json.JSONDecodeError, IndexError, AttributeError, TypeError) as e:
            logger.error(f"Failed to parse structured data response: {e}")
            raise

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        logger.debug(f"Structured response ({name}): {list(data.keys())}")
        return data
