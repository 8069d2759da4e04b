"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import genbridge

    assert genbridge.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from genbridge.cli import main

    assert callable(main)


def test_package_imports() -> None:
    from genbridge.core.agent import Agent, ChatMemoryProvider
    from genbridge.core.embedding import EmbeddingAdapter
    from genbridge.core.interface import GeminiTranspiler, StreamingChatClient
    from genbridge.core.streaming import TokenStream, reduce_stream
    from genbridge.protocols import ToolDispatcher
    from genbridge.settings import SettingsLoader
    from genbridge.transports import get_generation_transport

    assert Agent is not None
    assert ChatMemoryProvider is not None
    assert EmbeddingAdapter is not None
    assert GeminiTranspiler is not None
    assert StreamingChatClient is not None
    assert TokenStream is not None
    assert reduce_stream is not None
    assert ToolDispatcher is not None
    assert SettingsLoader is not None
    assert get_generation_transport is not None


def test_lazy_import_from_genbridge() -> None:
    import genbridge

    assert genbridge.StreamingChatClient is not None
    assert genbridge.EmbeddingAdapter is not None
    assert genbridge.load_settings is not None
