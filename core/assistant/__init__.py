#!/usr/bin/env python3
"""
Assistant Module - conversational orchestration for the job dashboard.

Public API:
- AssistantOrchestrator: chat entry point (process_query, clear_history)
- AssistantReply: reply text plus optional filter changes
- SessionStore / ConversationTurn: bounded per-user conversation buffers
- Intent, FilterAction: classification label and filter instruction

Modules:
- session_store.py: in-memory conversation buffers with per-user locks
- intents.py: intent labels and the classifier
- filters.py: filter extraction and the filter acknowledgement reply
- responders.py: help and chat reply generation
- orchestrator.py: state machine tying the above together
"""

from core.assistant.filters import FilterAction, FilterExtractor, build_filter_reply
from core.assistant.intents import Intent, IntentClassifier
from core.assistant.orchestrator import (
    SAFE_FALLBACK_REPLY,
    AssistantOrchestrator,
    AssistantReply,
    AssistantState,
    decide,
)
from core.assistant.responders import ReplyGenerator
from core.assistant.session_store import ConversationTurn, SessionStore

__all__ = [
    'AssistantOrchestrator',
    'AssistantReply',
    'AssistantState',
    'ConversationTurn',
    'FilterAction',
    'FilterExtractor',
    'Intent',
    'IntentClassifier',
    'ReplyGenerator',
    'SAFE_FALLBACK_REPLY',
    'SessionStore',
    'build_filter_reply',
    'decide',
]
