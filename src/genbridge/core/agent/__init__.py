"""Tool-using conversational agent with windowed chat memory."""

from genbridge.core.agent.agent import Agent, ContentRetriever, augment_message
from genbridge.core.agent.memory import ChatMemoryProvider, MessageWindowMemory

__all__ = [
    "Agent",
    "ChatMemoryProvider",
    "ContentRetriever",
    "MessageWindowMemory",
    "augment_message",
]
