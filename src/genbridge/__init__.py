"""genbridge — streaming Gemini chat, tool calling, and embeddings behind a provider-neutral model."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from genbridge.core.agent.agent import Agent as Agent
    from genbridge.core.embedding.adapter import EmbeddingAdapter as EmbeddingAdapter
    from genbridge.core.interface.client import StreamingChatClient as StreamingChatClient
    from genbridge.core.interface.config import ModelConfig as ModelConfig
    from genbridge.settings.loader import load_settings as load_settings

_EXPORTS = {
    "Agent": "genbridge.core.agent.agent",
    "EmbeddingAdapter": "genbridge.core.embedding.adapter",
    "StreamingChatClient": "genbridge.core.interface.client",
    "ModelConfig": "genbridge.core.interface.config",
    "load_settings": "genbridge.settings.loader",
}


def __getattr__(name: str) -> object:
    module_path = _EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'genbridge' has no attribute {name!r}")
