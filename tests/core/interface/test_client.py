"""Tests for StreamingChatClient — transport replaced by a scripted stream."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from genbridge.core.errors import ConversionError, StreamCancelledError, TransportError
from genbridge.core.interface.client import StreamingChatClient
from genbridge.core.interface.config import ModelConfig
from genbridge.core.interface.models import ChatMessage, ParameterSchema, ToolSpecification
from genbridge.core.interface.wire import Part, StreamEvent
from genbridge.core.streaming import CancellationToken, CollectingSink, TextResult, ToolInvocationResult


def _text(*texts: str) -> StreamEvent:
    return StreamEvent(parts=[Part.from_text(t) for t in texts])


def _client(transport: Any) -> StreamingChatClient:
    return StreamingChatClient(ModelConfig(chat_model="gemini-test"), transport)


_TOOL = ToolSpecification(
    name="lookup",
    parameters=ParameterSchema.object_schema({"q": ParameterSchema(type="string")}),
)


class TestModelConfig:
    def test_defaults(self) -> None:
        config = ModelConfig()
        assert config.chat_model == "gemini-2.0-flash"
        assert config.embedding_model == "gemini-embedding-001"
        assert config.embedding_backend == "genai"
        assert config.embedding_concurrency == 1

    def test_concurrency_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            ModelConfig(embedding_concurrency=0)


class TestChat:
    async def test_text_result_and_tokens(self, scripted: Any) -> None:
        client = _client(scripted([_text("Hel"), _text("lo")]))
        tokens: list[str] = []
        result = await client.chat([ChatMessage.user("Hi")], on_token=tokens.append)
        assert result == TextResult(text="Hello")
        assert tokens == ["Hel", "lo"]

    async def test_tool_result(self, scripted: Any) -> None:
        transport = scripted(
            [StreamEvent(parts=[Part.from_function_call("lookup", {"q": "x"})])]
        )
        result = await _client(transport).chat([ChatMessage.user("Find x")], [_TOOL])
        assert result == ToolInvocationResult(name="lookup", arguments={"q": "x"})

    async def test_request_carries_model_and_tools(self, scripted: Any) -> None:
        transport = scripted([_text("ok")])
        await _client(transport).chat([ChatMessage.user("Hi")], [_TOOL])
        request = transport.requests[0]
        assert request.tools is not None
        assert request.tools[0].function_declarations[0].name == "lookup"

    async def test_transport_error_raised(self, scripted: Any) -> None:
        transport = scripted([_text("partial"), ConnectionError("reset")])
        with pytest.raises(TransportError, match="reset"):
            await _client(transport).chat([ChatMessage.user("Hi")])

    async def test_cancel_token(self, scripted: Any) -> None:
        cancel = CancellationToken()
        cancel.cancel()
        with pytest.raises(StreamCancelledError):
            await _client(scripted([_text("never")])).chat([ChatMessage.user("Hi")], cancel=cancel)


class TestConversionIsEager:
    def test_prepare_rejects_malformed(self, scripted: Any) -> None:
        with pytest.raises(ConversionError):
            _client(scripted()).prepare([ChatMessage(role="tool", text="no name")])

    async def test_stream_fails_before_network(self, scripted: Any) -> None:
        transport = scripted([_text("x")])
        with pytest.raises(ConversionError):
            _client(transport).stream([ChatMessage(role="tool", text="x")], None, CollectingSink())
        assert transport.requests == []


class TestStream:
    async def test_background_task_completes_sink(self, scripted: Any) -> None:
        sink = CollectingSink()
        task = _client(scripted([_text("a", "b")])).stream([ChatMessage.user("Hi")], None, sink)
        await task
        assert sink.tokens == ["a", "b"]
        assert sink.result == TextResult(text="ab")

    async def test_tokens_iterator(self, scripted: Any) -> None:
        stream = _client(scripted([_text("x"), _text("y")])).tokens([ChatMessage.user("Hi")])
        received = [token async for token in stream]
        assert received == ["x", "y"]
        assert await stream.result() == TextResult(text="xy")

    async def test_task_cancellation_reports_error(self) -> None:
        started = asyncio.Event()

        class _Hanging:
            async def stream(self, model: str, request: Any) -> Any:
                yield _text("first")
                started.set()
                await asyncio.Event().wait()

        sink = CollectingSink()
        task = _client(_Hanging()).stream([ChatMessage.user("Hi")], None, sink)
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert sink.tokens == ["first"]
        assert isinstance(sink.error, StreamCancelledError)
        assert sink.result is None
