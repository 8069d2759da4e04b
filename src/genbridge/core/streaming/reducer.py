"""Streaming response reducer — folds a response stream into one terminal result.

State machine per call::

    Idle -> Streaming -> TextTerminal | ToolTerminal

Text parts are forwarded to the token callback as they arrive and appended to
a call-scoped buffer. A function-call part is captured; if the provider emits
more than one in the same stream, the last one wins. At stream end a captured
call takes precedence over the accumulated text.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from genbridge.core.errors import GenBridgeError, StreamCancelledError, TransportError
from genbridge.core.streaming.models import TextResult, ToolInvocationResult
from genbridge.utils.telemetry import (
    ATTR_EVENT_COUNT,
    ATTR_FINISH_REASON,
    ATTR_MODEL,
    ATTR_TERMINAL_TYPE,
    ATTR_TOKEN_COUNT,
    ATTR_TOOL_COUNT,
    get_tracer,
)

if TYPE_CHECKING:
    from genbridge.core.interface.wire import FunctionCall, GenerateRequest, StreamEvent
    from genbridge.core.streaming.cancellation import CancellationToken
    from genbridge.core.streaming.sink import TerminalValue, TokenSink
    from genbridge.transports.base import GenerationTransport

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


@dataclass
class StreamAccumulator:
    """Mutable state owned by exactly one in-flight call."""

    buffer: list[str] = field(default_factory=list)
    function_call: FunctionCall | None = None
    function_call_count: int = 0
    token_count: int = 0
    event_count: int = 0
    finish_reason: str | None = None

    def apply(self, event: StreamEvent, on_token: Callable[[str], None]) -> None:
        """Fold one stream event into the accumulator."""
        self.event_count += 1
        if event.finish_reason is not None:
            self.finish_reason = event.finish_reason

        for part in event.parts:
            kind = part.kind
            if kind == "text":
                assert part.text is not None
                self.buffer.append(part.text)
                self.token_count += 1
                on_token(part.text)
            elif kind == "function_call":
                assert part.function_call is not None
                if self.function_call is not None:
                    logger.warning(
                        "Stream emitted another function call (%s); replacing %s",
                        part.function_call.name,
                        self.function_call.name,
                    )
                self.function_call = part.function_call
                self.function_call_count += 1
            else:
                logger.debug("Ignoring %s part in stream", kind)

    @property
    def text(self) -> str:
        return "".join(self.buffer)

    def finish(self) -> TerminalValue:
        """Build the terminal result; a captured call wins over the text."""
        if self.function_call is not None:
            return ToolInvocationResult(
                name=self.function_call.name,
                arguments=dict(self.function_call.args),
            )
        return TextResult(text=self.text)


async def reduce_stream(
    events: AsyncIterable[StreamEvent],
    on_token: Callable[[str], None],
    *,
    cancel: CancellationToken | None = None,
    accumulator: StreamAccumulator | None = None,
) -> TerminalValue:
    """Consume *events* to completion and return the terminal result.

    Raises:
        TransportError: If the event source raises (chained to the cause).
        StreamCancelledError: If *cancel* fires before the stream ends.
    """
    acc = accumulator if accumulator is not None else StreamAccumulator()
    iterator = aiter(events)
    try:
        while True:
            if cancel is not None:
                cancel.raise_if_cancelled()
            try:
                event = await anext(iterator)
            except StopAsyncIteration:
                break
            except GenBridgeError:
                raise
            except Exception as exc:
                raise TransportError(f"stream read failed: {exc}") from exc
            acc.apply(event, on_token)
    finally:
        await _close(iterator)

    return acc.finish()


async def run_streaming_chat(
    request: GenerateRequest,
    transport: GenerationTransport,
    sink: TokenSink,
    *,
    model: str,
    cancel: CancellationToken | None = None,
) -> None:
    """Drive one streaming call and deliver its outcome to *sink*.

    Tokens go to ``sink.on_next`` as they arrive; afterwards exactly one of
    ``sink.on_complete`` or ``sink.on_error`` is called. Nothing is retried,
    and no partial result is delivered on failure. Task cancellation is
    reported as :class:`StreamCancelledError` and then propagated.
    """
    acc = StreamAccumulator()
    with _tracer.start_as_current_span("chat.stream") as span:
        span.set_attribute(ATTR_MODEL, model)
        span.set_attribute(ATTR_TOOL_COUNT, _tool_count(request))
        try:
            try:
                events = transport.stream(model, request)
            except GenBridgeError:
                raise
            except Exception as exc:
                raise TransportError(f"failed to open stream: {exc}") from exc
            result = await reduce_stream(events, sink.on_next, cancel=cancel, accumulator=acc)
        except asyncio.CancelledError:
            logger.info("Streaming call to %s cancelled after %d event(s)", model, acc.event_count)
            sink.on_error(StreamCancelledError())
            raise
        except Exception as exc:
            logger.warning("Streaming call to %s failed: %s", model, exc)
            span.record_exception(exc)
            sink.on_error(exc)
            return
        finally:
            span.set_attribute(ATTR_EVENT_COUNT, acc.event_count)
            span.set_attribute(ATTR_TOKEN_COUNT, acc.token_count)
            if acc.finish_reason is not None:
                span.set_attribute(ATTR_FINISH_REASON, acc.finish_reason)

        span.set_attribute(ATTR_TERMINAL_TYPE, result.type)
        sink.on_complete(result)


def _tool_count(request: GenerateRequest) -> int:
    if not request.tools:
        return 0
    return sum(len(tool.function_declarations) for tool in request.tools)


async def _close(iterator: AsyncIterator[StreamEvent]) -> None:
    aclose = getattr(iterator, "aclose", None)
    if aclose is None:
        return
    try:
        await aclose()
    except Exception:
        logger.debug("Error while closing stream", exc_info=True)
