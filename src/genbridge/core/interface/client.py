"""StreamingChatClient — async streaming chat over a generation transport.

Conversion happens eagerly, before any network activity, so a malformed
conversation fails with :class:`~genbridge.core.errors.ConversionError` at the
call site. The call itself then runs through
:func:`~genbridge.core.streaming.reducer.run_streaming_chat`.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from genbridge.core.interface.transpilers.gemini import GeminiTranspiler
from genbridge.core.streaming.reducer import run_streaming_chat
from genbridge.core.streaming.sink import CallbackSink, CollectingSink, TeeSink, TokenStream

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from genbridge.core.interface.config import ModelConfig
    from genbridge.core.interface.models import ChatMessage, ConversationHistory, ToolSpecification
    from genbridge.core.interface.wire import GenerateRequest
    from genbridge.core.streaming.cancellation import CancellationToken
    from genbridge.core.streaming.sink import TerminalValue, TokenSink
    from genbridge.transports.base import GenerationTransport


class StreamingChatClient:
    """Streams chat completions and reduces them to a single terminal result.

    Usage::

        client = StreamingChatClient(config, transport)
        result = await client.chat(history, tools, on_token=print)
    """

    def __init__(
        self,
        config: ModelConfig,
        transport: GenerationTransport,
        transpiler: GeminiTranspiler | None = None,
    ) -> None:
        self.config = config
        self.transport = transport
        self.transpiler = transpiler or GeminiTranspiler()
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def model(self) -> str:
        return self.config.chat_model

    def prepare(
        self,
        messages: ConversationHistory | Iterable[ChatMessage],
        tools: Iterable[ToolSpecification] | None = None,
    ) -> GenerateRequest:
        """Convert a conversation and tool set into a wire request."""
        return self.transpiler.to_provider(messages, tools)

    async def generate(
        self,
        messages: ConversationHistory | Iterable[ChatMessage],
        tools: Iterable[ToolSpecification] | None,
        sink: TokenSink,
        *,
        cancel: CancellationToken | None = None,
    ) -> None:
        """Run one streaming call, delivering tokens and the outcome to *sink*.

        Raises:
            ConversionError: Before any network call, if the input is malformed.
        """
        request = self.prepare(messages, tools)
        await run_streaming_chat(request, self.transport, sink, model=self.model, cancel=cancel)

    def stream(
        self,
        messages: ConversationHistory | Iterable[ChatMessage],
        tools: Iterable[ToolSpecification] | None,
        sink: TokenSink,
        *,
        cancel: CancellationToken | None = None,
    ) -> asyncio.Task[None]:
        """Convert now, then run the call in a background task.

        Must be called from within a running event loop.
        """
        request = self.prepare(messages, tools)
        task = asyncio.create_task(
            run_streaming_chat(request, self.transport, sink, model=self.model, cancel=cancel)
        )
        # The loop only keeps weak references to tasks
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def tokens(
        self,
        messages: ConversationHistory | Iterable[ChatMessage],
        tools: Iterable[ToolSpecification] | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> TokenStream:
        """Start a call and return a :class:`TokenStream` to iterate its tokens."""
        token_stream = TokenStream()
        self.stream(messages, tools, token_stream, cancel=cancel)
        return token_stream

    async def chat(
        self,
        messages: ConversationHistory | Iterable[ChatMessage],
        tools: Iterable[ToolSpecification] | None = None,
        *,
        on_token: Callable[[str], None] | None = None,
        cancel: CancellationToken | None = None,
    ) -> TerminalValue:
        """Run one call to completion and return its terminal result.

        Raises:
            ConversionError | TransportError | StreamCancelledError: On failure.
        """
        collector = CollectingSink()
        sink: TokenSink = collector
        if on_token is not None:
            sink = TeeSink(collector, CallbackSink(on_token))
        await self.generate(messages, tools, sink, cancel=cancel)
        return collector.outcome()

