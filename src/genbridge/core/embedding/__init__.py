"""Text embedding over a per-text embedding transport."""

from genbridge.core.embedding.adapter import Embedding, EmbeddingAdapter, to_embedding

__all__ = ["Embedding", "EmbeddingAdapter", "to_embedding"]
