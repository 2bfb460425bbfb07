"""
Tests for help and chat reply generation.
"""
import pytest

from core.assistant.responders import EMPTY_HISTORY_PLACEHOLDER, ReplyGenerator, render_history
from core.assistant.session_store import ConversationTurn
from tests.mocks.llm_mocks import MockLLMProvider


def test_render_empty_history():
    assert render_history(()) == EMPTY_HISTORY_PLACEHOLDER


def test_render_history_lines():
    history = (
        ConversationTurn(role="user", content="hi"),
        ConversationTurn(role="assistant", content="hello!"),
    )
    assert render_history(history) == "user: hi\nassistant: hello!"


class TestReplyGenerator:

    def test_help_reply_uses_only_message(self):
        llm = MockLLMProvider(default_completion="Click Upload on the Resume page.")
        reply = ReplyGenerator(llm).help_reply("how do I upload my resume?")

        assert reply == "Click Upload on the Resume page."
        prompt = llm.completion_calls[0]
        assert "how do I upload my resume?" in prompt
        assert "Conversation:" not in prompt

    def test_chat_reply_includes_history(self):
        llm = MockLLMProvider(default_completion="Sure!")
        history = (ConversationTurn(role="user", content="I like Python"),)
        ReplyGenerator(llm).chat_reply("any tips?", history)

        prompt = llm.completion_calls[0]
        assert "user: I like Python" in prompt
        assert "any tips?" in prompt

    def test_chat_reply_with_empty_history_uses_placeholder(self):
        llm = MockLLMProvider()
        ReplyGenerator(llm).chat_reply("hello", ())
        assert EMPTY_HISTORY_PLACEHOLDER in llm.completion_calls[0]

    def test_failures_propagate(self):
        llm = MockLLMProvider()
        llm.on_complete("friendly job assistant", RuntimeError("backend down"))
        with pytest.raises(RuntimeError):
            ReplyGenerator(llm).chat_reply("hello", ())
