"""Provider transports and their factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from genbridge.transports.base import (
    ContentEmbedding,
    EmbeddingResponse,
    EmbeddingTransport,
    GenerationTransport,
)

if TYPE_CHECKING:
    from genbridge.core.interface.config import ModelConfig


def get_generation_transport(config: ModelConfig) -> GenerationTransport:
    """Return the streaming generation transport for *config*."""
    from genbridge.transports.genai import GenAIGenerationTransport, create_client

    return GenAIGenerationTransport(create_client(config.api_key))


def get_embedding_transport(config: ModelConfig) -> EmbeddingTransport:
    """Return the embedding transport selected by ``config.embedding_backend``."""
    if config.embedding_backend == "litellm":
        from genbridge.transports.litellm_embedding import LiteLLMEmbeddingTransport

        return LiteLLMEmbeddingTransport(api_key=config.api_key)

    from genbridge.transports.genai import GenAIEmbeddingTransport, create_client

    return GenAIEmbeddingTransport(create_client(config.api_key))


__all__ = [
    "ContentEmbedding",
    "EmbeddingResponse",
    "EmbeddingTransport",
    "GenerationTransport",
    "get_embedding_transport",
    "get_generation_transport",
]
