"""Token sinks — the observer side of a streaming chat call.

A sink receives zero or more :meth:`~TokenSink.on_next` calls followed by
exactly one of :meth:`~TokenSink.on_complete` or :meth:`~TokenSink.on_error`.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Protocol, runtime_checkable

from genbridge.core.streaming.models import TextResult, ToolInvocationResult

TerminalValue = TextResult | ToolInvocationResult


@runtime_checkable
class TokenSink(Protocol):
    """Receives incremental tokens and the single terminal outcome of a call."""

    def on_next(self, token: str) -> None:
        """Called once per text increment, in arrival order."""
        ...

    def on_complete(self, result: TerminalValue) -> None:
        """Called once, after the last token, when the call succeeds."""
        ...

    def on_error(self, error: BaseException) -> None:
        """Called once when the call fails; no terminal result follows."""
        ...


class CollectingSink:
    """Records everything it receives. Useful for tests and non-streaming callers."""

    def __init__(self) -> None:
        self.tokens: list[str] = []
        self.result: TerminalValue | None = None
        self.error: BaseException | None = None

    def on_next(self, token: str) -> None:
        self.tokens.append(token)

    def on_complete(self, result: TerminalValue) -> None:
        self.result = result

    def on_error(self, error: BaseException) -> None:
        self.error = error

    @property
    def done(self) -> bool:
        return self.result is not None or self.error is not None

    def outcome(self) -> TerminalValue:
        """Return the terminal result, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        if self.result is None:
            raise RuntimeError("stream has not completed")
        return self.result


class CallbackSink:
    """Adapts three plain callables to the :class:`TokenSink` protocol."""

    def __init__(
        self,
        on_next: Callable[[str], None],
        on_complete: Callable[[TerminalValue], None] | None = None,
        on_error: Callable[[BaseException], None] | None = None,
    ) -> None:
        self._on_next = on_next
        self._on_complete = on_complete
        self._on_error = on_error

    def on_next(self, token: str) -> None:
        self._on_next(token)

    def on_complete(self, result: TerminalValue) -> None:
        if self._on_complete is not None:
            self._on_complete(result)

    def on_error(self, error: BaseException) -> None:
        if self._on_error is not None:
            self._on_error(error)


class TeeSink:
    """Fans one call's events out to several sinks, in order."""

    def __init__(self, *sinks: TokenSink) -> None:
        self._sinks = sinks

    def on_next(self, token: str) -> None:
        for sink in self._sinks:
            sink.on_next(token)

    def on_complete(self, result: TerminalValue) -> None:
        for sink in self._sinks:
            sink.on_complete(result)

    def on_error(self, error: BaseException) -> None:
        for sink in self._sinks:
            sink.on_error(error)


class TokenStream:
    """A sink that can be consumed with ``async for``.

    Usage::

        stream = TokenStream()
        task = client.stream(history, tools, stream)
        async for token in stream:
            print(token, end="")
        result = await stream.result()
    """

    _END = object()

    def __init__(self) -> None:
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._outcome: asyncio.Future[TerminalValue] = asyncio.get_running_loop().create_future()
        # Consumers that only iterate never await result(); mark the error seen.
        self._outcome.add_done_callback(_mark_retrieved)

    def on_next(self, token: str) -> None:
        self._queue.put_nowait(token)

    def on_complete(self, result: TerminalValue) -> None:
        if not self._outcome.done():
            self._outcome.set_result(result)
        self._queue.put_nowait(self._END)

    def on_error(self, error: BaseException) -> None:
        if not self._outcome.done():
            self._outcome.set_exception(error)
        self._queue.put_nowait(self._END)

    def __aiter__(self) -> AsyncIterator[str]:
        return self._tokens()

    async def _tokens(self) -> AsyncIterator[str]:
        while True:
            item = await self._queue.get()
            if item is self._END:
                return
            assert isinstance(item, str)
            yield item

    async def result(self) -> TerminalValue:
        """Wait for and return the terminal result, raising the call's error."""
        return await self._outcome


def _mark_retrieved(future: asyncio.Future[TerminalValue]) -> None:
    if not future.cancelled():
        future.exception()
