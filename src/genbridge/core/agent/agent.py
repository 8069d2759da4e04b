"""Agent — a tool-using conversational loop over :class:`StreamingChatClient`.

Each call to :meth:`Agent.chat` appends the user message to the conversation's
memory and streams a model turn. A tool terminal is executed through the
:class:`~genbridge.protocols.dispatcher.ToolDispatcher`, and its result is
recorded before the model is called again. A text terminal ends the exchange.
Tokens from every model turn reach the caller's sink as they arrive.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from genbridge.core.agent.memory import ChatMemoryProvider
from genbridge.core.errors import MaxIterationsExceededError, StreamCancelledError
from genbridge.core.interface.models import ChatMessage, ToolInvocationRequest
from genbridge.core.streaming.models import TextResult
from genbridge.core.streaming.sink import CallbackSink, CollectingSink, TeeSink, TokenStream
from genbridge.protocols.errors import ToolError
from genbridge.utils.telemetry import ATTR_ITERATION, ATTR_MEMORY_ID, ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from collections.abc import Callable

    from genbridge.core.interface.client import StreamingChatClient
    from genbridge.core.streaming.cancellation import CancellationToken
    from genbridge.core.streaming.sink import TokenSink
    from genbridge.protocols.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

_RETRIEVED_HEADER = "Answer using the following information:"


@runtime_checkable
class ContentRetriever(Protocol):
    """Supplies passages relevant to a query (e.g. from an embedding store)."""

    async def retrieve(self, query: str) -> list[str]:
        ...


def augment_message(text: str, contents: list[str]) -> str:
    """Append retrieved *contents* to a user message."""
    if not contents:
        return text
    return f"{text}\n\n{_RETRIEVED_HEADER}\n" + "\n\n".join(contents)


class _TurnSink(CollectingSink):
    """Collects one model turn while forwarding its tokens to the caller."""

    def __init__(self, downstream: TokenSink) -> None:
        super().__init__()
        self._downstream = downstream

    def on_next(self, token: str) -> None:
        super().on_next(token)
        self._downstream.on_next(token)


class Agent:
    """Conversational agent with tools, windowed memory, and optional retrieval.

    Usage::

        agent = Agent(client, dispatcher=dispatcher, system_prompt="Be brief.")
        stream = agent.stream("How many rows were cleaned?", memory_id="conv-1")
        async for token in stream:
            print(token, end="")
    """

    def __init__(
        self,
        client: StreamingChatClient,
        *,
        dispatcher: ToolDispatcher | None = None,
        memory_provider: ChatMemoryProvider | None = None,
        retriever: ContentRetriever | None = None,
        system_prompt: str | None = None,
        max_iterations: int = 10,
    ) -> None:
        self.client = client
        self.dispatcher = dispatcher
        self.memory_provider = memory_provider or ChatMemoryProvider()
        self.retriever = retriever
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations
        self._tasks: set[asyncio.Task[None]] = set()

    async def chat(
        self,
        message: str,
        memory_id: str,
        sink: TokenSink,
        *,
        cancel: CancellationToken | None = None,
    ) -> None:
        """Answer *message* in the conversation *memory_id*, streaming to *sink*.

        Exactly one of ``sink.on_complete`` (with the final :class:`TextResult`)
        or ``sink.on_error`` is called.
        """
        with _tracer.start_as_current_span("agent.chat") as span:
            span.set_attribute(ATTR_MEMORY_ID, memory_id)
            try:
                result = await self._run(message, memory_id, sink, cancel)
            except asyncio.CancelledError:
                sink.on_error(StreamCancelledError())
                raise
            except Exception as exc:
                logger.warning("Agent chat in %s failed: %s", memory_id, exc)
                span.record_exception(exc)
                sink.on_error(exc)
                return
        sink.on_complete(result)

    def stream(
        self,
        message: str,
        memory_id: str,
        *,
        cancel: CancellationToken | None = None,
    ) -> TokenStream:
        """Start :meth:`chat` in a task and return its :class:`TokenStream`."""
        token_stream = TokenStream()
        task = asyncio.create_task(self.chat(message, memory_id, token_stream, cancel=cancel))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return token_stream

    async def ask(
        self,
        message: str,
        memory_id: str,
        *,
        on_token: Callable[[str], None] | None = None,
    ) -> TextResult:
        """Run :meth:`chat` to completion and return the final answer."""
        collector = CollectingSink()
        sink: TokenSink = collector
        if on_token is not None:
            sink = TeeSink(collector, CallbackSink(on_token))
        await self.chat(message, memory_id, sink)
        result = collector.outcome()
        assert isinstance(result, TextResult)
        return result

    async def _run(
        self,
        message: str,
        memory_id: str,
        sink: TokenSink,
        cancel: CancellationToken | None,
    ) -> TextResult:
        memory = self.memory_provider.get(memory_id)
        if self.system_prompt:
            memory.add(ChatMessage.system(self.system_prompt))

        text = message
        if self.retriever is not None:
            text = augment_message(message, await self.retriever.retrieve(message))
        memory.add(ChatMessage.user(text))

        tools = self.dispatcher.all_tools() if self.dispatcher is not None else None

        for iteration in range(self.max_iterations):
            with _tracer.start_as_current_span("agent.turn") as span:
                span.set_attribute(ATTR_ITERATION, iteration)
                turn = _TurnSink(sink)
                await self.client.generate(memory.history(), tools, turn, cancel=cancel)
                result = turn.outcome()

                if isinstance(result, TextResult):
                    memory.add(ChatMessage.assistant(result.text))
                    return result

                span.set_attribute(ATTR_TOOL_NAME, result.name)
                request = result.to_request()
                memory.add(ChatMessage.assistant(tool_invocations=[request]))
                output = await self._execute(request)
                memory.add(ChatMessage.tool_result(request.name, output, tool_call_id=request.id))

        raise MaxIterationsExceededError(self.max_iterations)

    async def _execute(self, request: ToolInvocationRequest) -> str:
        """Run a tool; failures are reported back to the model as the result text."""
        if self.dispatcher is None:
            logger.warning("Model requested tool %s but no tools are registered", request.name)
            return f"Error: tool '{request.name}' is not available"
        try:
            return await self.dispatcher.execute(request)
        except ToolError as exc:
            logger.warning("Tool %s failed: %s", request.name, exc)
            return f"Error: {exc}"

