"""
Reply generators for help questions and open chat.

Failures are not handled here; they propagate to the orchestrator.
"""
from typing import Optional, Sequence

from core.assistant.session_store import ConversationTurn
from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import CHAT_PROMPT, HELP_PROMPT

EMPTY_HISTORY_PLACEHOLDER = "No previous conversation"


def render_history(history: Sequence[ConversationTurn]) -> str:
    """Render turns as ``role: content`` lines."""
    context = "\n".join(f"{turn.role}: {turn.content}" for turn in history)
    return context or EMPTY_HISTORY_PLACEHOLDER


class ReplyGenerator:
    def __init__(self, llm: LLMProvider, temperature: Optional[float] = None):
        self.llm = llm
        self.temperature = temperature

    def help_reply(self, message: str) -> str:
        """Answer a product/usage question from the current message only."""
        return self.llm.complete(HELP_PROMPT.format(message=message), temperature=self.temperature)

    def chat_reply(self, message: str, history: Sequence[ConversationTurn]) -> str:
        prompt = CHAT_PROMPT.format(context=render_history(history), message=message)
        return self.llm.complete(prompt, temperature=self.temperature)
