"""
Intent classification for chat messages.
"""
import logging
from enum import Enum
from typing import Optional

from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import INTENT_CLASSIFICATION_PROMPT

logger = logging.getLogger(__name__)


class Intent(str, Enum):
    FILTER_CONTROL = "FILTER_CONTROL"
    APPLICATION_QUERY = "APPLICATION_QUERY"
    PRODUCT_HELP = "PRODUCT_HELP"
    JOB_SEARCH = "JOB_SEARCH"
    GENERAL_CHAT = "GENERAL_CHAT"


def parse_intent(label: Optional[str]) -> Intent:
    """Map a raw model label to an Intent; anything unrecognised is GENERAL_CHAT."""
    if not label:
        return Intent.GENERAL_CHAT
    try:
        return Intent(label.strip())
    except ValueError:
        logger.warning(f"Unrecognised intent label {label!r}, defaulting to GENERAL_CHAT")
        return Intent.GENERAL_CHAT


class IntentClassifier:
    """Single-shot classification of a message into one Intent."""

    def __init__(self, llm: LLMProvider, temperature: Optional[float] = None):
        self.llm = llm
        self.temperature = temperature

    def classify(self, message: str) -> Intent:
        """
        Classify the message. Never raises.

        A failed or timed-out call is treated like an unrecognised label.
        """
        prompt = INTENT_CLASSIFICATION_PROMPT.format(message=message)
        try:
            label = self.llm.complete(prompt, temperature=self.temperature)
        except Exception as e:
            logger.warning(f"Intent classification failed, defaulting to GENERAL_CHAT: {e}")
            return Intent.GENERAL_CHAT

        intent = parse_intent(label)
        logger.debug(f"Classified message as {intent.value}")
        return intent
