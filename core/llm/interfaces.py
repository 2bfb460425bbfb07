"""
LLM Provider Interface - Abstract base for AI service providers.

This module defines the interface for LLM services (OpenAI, Ollama, Anthropic, etc.).
Implementations must not retry on their own; callers decide how to degrade.
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class LLMProvider(ABC):
    """
    Abstract Interface for AI Service Providers (OpenAI, Ollama, Anthropic, etc.).
    """

    @abstractmethod
    def complete(self, prompt: str, temperature: Optional[float] = None) -> str:
        """
        Run a single free-text completion for the prompt.

        Args:
            prompt: Fully rendered prompt text
            temperature: Optional sampling temperature override
        """
        pass

    @abstractmethod
    def extract_structured_data(
        self,
        text: str,
        schema_spec: Dict,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        Extract structured JSON data from text adhering to a schema.

        Args:
            text: Rendered user message to send
            schema_spec: Either a wrapped spec {'name', 'strict', 'schema'} or raw JSON schema
            system_prompt: Optional system instructions
            temperature: Optional sampling temperature override
        """
        pass
