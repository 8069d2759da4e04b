"""Transport protocols — the network boundary of the core.

The reducer and the embedding adapter depend only on these protocols, so any
provider SDK (or a test double) can stand behind them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from genbridge.core.interface.wire import GenerateRequest, StreamEvent


class ContentEmbedding(BaseModel):
    """One candidate embedding returned by the provider."""

    values: list[float] | None = None


class EmbeddingResponse(BaseModel):
    """Provider reply to a single-text embedding call (zero or more candidates)."""

    embeddings: list[ContentEmbedding] = []


@runtime_checkable
class GenerationTransport(Protocol):
    """Opens a streaming generation call."""

    def stream(self, model: str, request: GenerateRequest) -> AsyncIterator[StreamEvent]:
        """Return the response increments of one streaming call.

        Implementations are typically async generators; network errors may
        surface either here or while iterating.
        """
        ...


@runtime_checkable
class EmbeddingTransport(Protocol):
    """Embeds a single text."""

    async def embed(self, model: str, text: str) -> EmbeddingResponse:
        ...
