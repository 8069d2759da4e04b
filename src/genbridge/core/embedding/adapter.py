"""Embedding adapter — batches of texts to float vectors, one provider call per text.

The wire protocol has no batch endpoint, so :meth:`EmbeddingAdapter.embed_batch`
issues one call per text. Calls are sequential by default; with
``max_concurrency > 1`` they overlap, and results are re-joined in input order.
A failure on any text aborts the whole batch: queued texts are not sent and
calls still in flight are cancelled.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel

from genbridge.core.errors import (
    BatchEmbeddingError,
    EmptyResultError,
    GenBridgeError,
    TransportError,
)
from genbridge.utils.telemetry import (
    ATTR_BATCH_SIZE,
    ATTR_EMBEDDING_DIMENSION,
    ATTR_MODEL,
    get_tracer,
)

if TYPE_CHECKING:
    from genbridge.transports.base import EmbeddingResponse, EmbeddingTransport

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


class Embedding(BaseModel):
    """A dense float vector."""

    vector: list[float]

    @property
    def dimension(self) -> int:
        return len(self.vector)


def to_embedding(response: EmbeddingResponse) -> Embedding:
    """Take the first candidate of *response*.

    Raises:
        EmptyResultError: If the response carries no candidates.
    """
    if not response.embeddings:
        raise EmptyResultError("no embedding found in response")
    return Embedding(vector=list(response.embeddings[0].values or []))


class EmbeddingAdapter:
    """Maps texts to :class:`Embedding` vectors through an :class:`EmbeddingTransport`."""

    def __init__(
        self,
        transport: EmbeddingTransport,
        model: str,
        *,
        max_concurrency: int = 1,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.transport = transport
        self.model = model
        self.max_concurrency = max_concurrency

    async def embed(self, text: str) -> Embedding:
        """Embed a single text (a batch of one)."""
        return (await self.embed_batch([text]))[0]

    async def embed_batch(self, texts: Sequence[str]) -> list[Embedding]:
        """Embed *texts* 1:1 in input order.

        Raises:
            BatchEmbeddingError: Naming the first failing text (lowest index),
                chained to its :class:`TransportError` or
                :class:`EmptyResultError`. No partial list is returned.
        """
        with _tracer.start_as_current_span("embedding.batch") as span:
            span.set_attribute(ATTR_MODEL, self.model)
            span.set_attribute(ATTR_BATCH_SIZE, len(texts))
            logger.debug("Embedding %d text(s) with %s", len(texts), self.model)

            if self.max_concurrency == 1 or len(texts) <= 1:
                embeddings = [await self._embed_item(i, text) for i, text in enumerate(texts)]
            else:
                embeddings = await self._embed_concurrently(texts)

            if embeddings:
                span.set_attribute(ATTR_EMBEDDING_DIMENSION, embeddings[0].dimension)
            return embeddings

    async def _embed_concurrently(self, texts: Sequence[str]) -> list[Embedding]:
        semaphore = asyncio.Semaphore(self.max_concurrency)
        failed = asyncio.Event()

        async def bounded(index: int, text: str) -> Embedding | None:
            async with semaphore:
                # Texts still queued when a call fails are never sent.
                if failed.is_set():
                    return None
                try:
                    return await self._embed_item(index, text)
                except Exception:
                    failed.set()
                    raise

        tasks = [asyncio.create_task(bounded(i, text)) for i, text in enumerate(texts)]
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        # Lowest-index failure among the calls that finished.
        for task in tasks:
            if task.cancelled():
                continue
            error = task.exception()
            if error is not None:
                raise error
        results = [task.result() for task in tasks]
        return [r for r in results if r is not None]

    async def _embed_item(self, index: int, text: str) -> Embedding:
        try:
            try:
                response = await self.transport.embed(self.model, text)
            except GenBridgeError:
                raise
            except Exception as exc:
                raise TransportError(f"embedding call failed: {exc}") from exc
            return to_embedding(response)
        except GenBridgeError as exc:
            logger.warning("Embedding failed for text #%d: %s", index, exc)
            raise BatchEmbeddingError(text, index) from exc
