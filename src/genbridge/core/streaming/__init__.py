"""Streaming response reduction — accumulators, terminal results and sinks."""

from genbridge.core.streaming.cancellation import CancellationToken
from genbridge.core.streaming.models import TerminalResult, TextResult, ToolInvocationResult
from genbridge.core.streaming.reducer import StreamAccumulator, reduce_stream, run_streaming_chat
from genbridge.core.streaming.sink import (
    CallbackSink,
    CollectingSink,
    TeeSink,
    TokenSink,
    TokenStream,
)

__all__ = [
    "CallbackSink",
    "CancellationToken",
    "CollectingSink",
    "StreamAccumulator",
    "TeeSink",
    "TerminalResult",
    "TextResult",
    "TokenSink",
    "TokenStream",
    "ToolInvocationResult",
    "reduce_stream",
    "run_streaming_chat",
]
