"""Per-conversation chat memory with a fixed message window.

:class:`MessageWindowMemory` keeps the most recent ``max_messages`` messages.
The system message is never evicted and is replaced in place when a new one
arrives. Evicting an assistant message that requested tools also evicts the
tool results that answer it, so the window never starts with an orphaned
tool result.
"""

from __future__ import annotations

from genbridge.core.interface.models import ChatMessage, ConversationHistory

DEFAULT_MAX_MESSAGES = 20


class MessageWindowMemory:
    """Sliding window over one conversation's messages."""

    def __init__(self, memory_id: str, max_messages: int = DEFAULT_MAX_MESSAGES) -> None:
        if max_messages < 1:
            raise ValueError("max_messages must be at least 1")
        self.memory_id = memory_id
        self.max_messages = max_messages
        self._messages: list[ChatMessage] = []

    def add(self, message: ChatMessage) -> None:
        if message.role == "system":
            for i, existing in enumerate(self._messages):
                if existing.role == "system":
                    self._messages[i] = message
                    return
            self._messages.insert(0, message)
        else:
            self._messages.append(message)
        self._evict()

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    def history(self) -> ConversationHistory:
        return ConversationHistory(messages=self.messages)

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)

    def _evict(self) -> None:
        while len(self._messages) > self.max_messages:
            index = next((i for i, m in enumerate(self._messages) if m.role != "system"), None)
            if index is None:
                return
            evicted = self._messages.pop(index)
            if evicted.role == "assistant" and evicted.tool_invocations:
                while index < len(self._messages) and self._messages[index].role == "tool":
                    self._messages.pop(index)


class ChatMemoryProvider:
    """Creates one :class:`MessageWindowMemory` per memory id, on first use."""

    def __init__(self, max_messages: int = DEFAULT_MAX_MESSAGES) -> None:
        self.max_messages = max_messages
        self._memories: dict[str, MessageWindowMemory] = {}

    def get(self, memory_id: str) -> MessageWindowMemory:
        memory = self._memories.get(memory_id)
        if memory is None:
            memory = MessageWindowMemory(memory_id, self.max_messages)
            self._memories[memory_id] = memory
        return memory

    def delete(self, memory_id: str) -> None:
        """Forget a conversation (no-op if absent)."""
        self._memories.pop(memory_id, None)

    def __contains__(self, memory_id: object) -> bool:
        return memory_id in self._memories
