"""Shared error types for the conversion, streaming, and embedding core."""


class GenBridgeError(Exception):
    """Base error for all core failures."""


class ConversionError(GenBridgeError):
    """A message, argument string, or tool set does not match any recognized shape.

    Raised before any network call is made; indicates caller misuse.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Conversion failed: {detail}")


class TransportError(GenBridgeError):
    """The streaming or embedding call failed at the network/provider level."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Transport error" + (f": {detail}" if detail else ""))


class EmptyResultError(GenBridgeError):
    """The provider response contained no usable embedding or content."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Empty provider result" + (f": {detail}" if detail else ""))


class StreamCancelledError(GenBridgeError):
    """A streaming call was abandoned before reaching a terminal result."""

    def __init__(self) -> None:
        super().__init__("Stream cancelled")


class BatchEmbeddingError(GenBridgeError):
    """One text of an embedding batch failed; the whole batch is aborted."""

    def __init__(self, text: str, index: int) -> None:
        self.text = text
        self.index = index
        super().__init__(f"Failed to embed text #{index}: {text!r}")


class AgentError(GenBridgeError):
    """Base error for agent-loop failures."""


class MaxIterationsExceededError(AgentError):
    """The model kept requesting tools past the iteration limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Agent did not produce an answer within {limit} model call(s)")
