"""Tests for windowed chat memory."""

from __future__ import annotations

import pytest

from genbridge.core.agent import ChatMemoryProvider, MessageWindowMemory
from genbridge.core.interface.models import ChatMessage, ToolInvocationRequest


class TestMessageWindowMemory:
    def test_keeps_most_recent(self) -> None:
        memory = MessageWindowMemory("c", max_messages=3)
        for i in range(5):
            memory.add(ChatMessage.user(str(i)))
        assert [m.text for m in memory.messages] == ["2", "3", "4"]

    def test_system_message_survives_eviction(self) -> None:
        memory = MessageWindowMemory("c", max_messages=3)
        memory.add(ChatMessage.system("rules"))
        for i in range(4):
            memory.add(ChatMessage.user(str(i)))
        assert [m.text for m in memory.messages] == ["rules", "2", "3"]

    def test_system_message_replaced_in_place(self) -> None:
        memory = MessageWindowMemory("c")
        memory.add(ChatMessage.user("hi"))
        memory.add(ChatMessage.system("old"))
        memory.add(ChatMessage.system("new"))
        assert [(m.role, m.text) for m in memory.messages] == [("system", "new"), ("user", "hi")]

    def test_tool_results_evicted_with_their_request(self) -> None:
        memory = MessageWindowMemory("c", max_messages=4)
        memory.add(ChatMessage.user("q"))
        memory.add(ChatMessage.assistant(tool_invocations=[ToolInvocationRequest(name="t")]))
        memory.add(ChatMessage.tool_result("t", "r"))
        memory.add(ChatMessage.assistant("answer"))
        memory.add(ChatMessage.user("next"))
        memory.add(ChatMessage.user("again"))
        assert [m.role for m in memory.messages] == ["assistant", "user", "user"]
        assert memory.messages[0].text == "answer"

    def test_history_and_clear(self) -> None:
        memory = MessageWindowMemory("c")
        memory.add(ChatMessage.user("hi"))
        assert len(memory.history()) == 1
        memory.clear()
        assert len(memory) == 0

    def test_invalid_window(self) -> None:
        with pytest.raises(ValueError):
            MessageWindowMemory("c", max_messages=0)


class TestChatMemoryProvider:
    def test_one_memory_per_id(self) -> None:
        provider = ChatMemoryProvider(max_messages=5)
        first = provider.get("a")
        assert provider.get("a") is first
        assert provider.get("b") is not first
        assert first.max_messages == 5

    def test_delete(self) -> None:
        provider = ChatMemoryProvider()
        provider.get("a")
        assert "a" in provider
        provider.delete("a")
        provider.delete("missing")
        assert "a" not in provider
