#!/usr/bin/env python3
"""
Assistant Orchestrator - routes a chat message to exactly one reply strategy.

The flow is a single-pass state machine:

    DETECT_INTENT -> FILTER_ACTION | HELP_ACTION | CHAT_ACTION -> END

``decide`` is the only transition rule; each branch state has one handler.
``process_query`` wraps a run with the user's conversation history and
never raises: any failure yields a fixed fallback reply and leaves the
history untouched.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from core.config_loader import AssistantConfig
from core.llm.interfaces import LLMProvider
from core.assistant.filters import FilterAction, FilterExtractor, build_filter_reply
from core.assistant.intents import Intent, IntentClassifier
from core.assistant.responders import ReplyGenerator
from core.assistant.session_store import (
    ASSISTANT_ROLE,
    USER_ROLE,
    ConversationHistory,
    ConversationTurn,
    SessionStore,
)

logger = logging.getLogger(__name__)

SAFE_FALLBACK_REPLY = (
    "I'm currently facing some issues processing requests. "
    "You can still use manual filters while I recover."
)


class AssistantState(str, Enum):
    DETECT_INTENT = "detect_intent"
    FILTER_ACTION = "filter_action"
    HELP_ACTION = "help_action"
    CHAT_ACTION = "chat_action"
    END = "end"


def decide(intent: Any) -> AssistantState:
    """Pick the branch state for a classified intent."""
    if intent == Intent.FILTER_CONTROL:
        return AssistantState.FILTER_ACTION
    if intent in (Intent.PRODUCT_HELP, Intent.APPLICATION_QUERY):
        return AssistantState.HELP_ACTION
    return AssistantState.CHAT_ACTION


@dataclass
class AssistantRun:
    """Working state of one orchestrator pass."""
    user_id: str
    message: str
    history: ConversationHistory
    state: AssistantState = AssistantState.DETECT_INTENT
    intent: Optional[Intent] = None
    reply: Optional[str] = None
    filter_actions: Optional[FilterAction] = None


@dataclass(frozen=True)
class AssistantReply:
    """Result returned to callers of the assistant."""
    reply: str
    filter_actions: Optional[FilterAction] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "reply": self.reply,
            "filterActions": self.filter_actions.to_payload() if self.filter_actions else None,
        }


class AssistantOrchestrator:
    """Chat entry point: intent routing plus per-user conversation context."""

    def __init__(
        self,
        llm: LLMProvider,
        session_store: SessionStore,
        config: Optional[AssistantConfig] = None,
        classifier: Optional[IntentClassifier] = None,
        extractor: Optional[FilterExtractor] = None,
        responder: Optional[ReplyGenerator] = None
    ):
        self.config = config or AssistantConfig()
        self.session_store = session_store
        temperature = self.config.temperature
        self.classifier = classifier or IntentClassifier(llm, temperature=temperature)
        self.extractor = extractor or FilterExtractor(llm, temperature=temperature)
        self.responder = responder or ReplyGenerator(llm, temperature=temperature)

        self._handlers: Dict[AssistantState, Callable[[AssistantRun], None]] = {
            AssistantState.FILTER_ACTION: self._filter_action,
            AssistantState.HELP_ACTION: self._help_action,
            AssistantState.CHAT_ACTION: self._chat_action,
        }

    def process_query(self, user_id: str, message: str) -> AssistantReply:
        """
        Answer a chat message for a user.

        Holds the user's session lock across read, run and append so
        concurrent requests for the same user cannot lose an exchange.

        Returns:
            AssistantReply with the reply text and, for filter requests,
            the filter changes to apply. Never raises.
        """
        with self.session_store.lock(user_id):
            try:
                history = self.session_store.get(user_id)
                run = self.run(user_id, message, history)
            except Exception:
                logger.exception(f"Assistant run failed for user {user_id}")
                return AssistantReply(reply=SAFE_FALLBACK_REPLY, filter_actions=None)

            self.session_store.append(
                user_id,
                ConversationTurn(role=USER_ROLE, content=message),
                ConversationTurn(role=ASSISTANT_ROLE, content=run.reply),
            )

        return AssistantReply(reply=run.reply, filter_actions=run.filter_actions)

    def clear_history(self, user_id: str) -> None:
        self.session_store.clear(user_id)

    def run(self, user_id: str, message: str, history: ConversationHistory) -> AssistantRun:
        """Execute one pass of the state machine. Generator failures propagate."""
        run = AssistantRun(user_id=user_id, message=message, history=history)

        run.intent = self.classifier.classify(message)
        run.state = decide(run.intent)
        logger.info(f"Routing {run.intent!r} to {run.state.value}")

        self._handlers[run.state](run)
        run.state = AssistantState.END

        if not isinstance(run.reply, str):
            raise TypeError(f"Reply generator returned {type(run.reply).__name__}, expected str")
        return run

    def _filter_action(self, run: AssistantRun) -> None:
        filters = self.extractor.extract(run.message)
        run.filter_actions = filters
        run.reply = build_filter_reply(filters)

    def _help_action(self, run: AssistantRun) -> None:
        run.reply = self.responder.help_reply(run.message)
        run.filter_actions = None

    def _chat_action(self, run: AssistantRun) -> None:
        run.reply = self.responder.chat_reply(run.message, run.history)
        run.filter_actions = None
