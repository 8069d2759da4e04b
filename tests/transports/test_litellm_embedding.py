"""Tests for the LiteLLM embedding transport — unit tests with mocked LiteLLM."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

from genbridge.core.interface.config import ModelConfig
from genbridge.transports import get_embedding_transport
from genbridge.transports.litellm_embedding import LiteLLMEmbeddingTransport, litellm_model_name


class TestModelName:
    def test_bare_name_gets_gemini_prefix(self) -> None:
        assert litellm_model_name("gemini-embedding-001") == "gemini/gemini-embedding-001"

    def test_qualified_name_unchanged(self) -> None:
        assert litellm_model_name("openai/text-embedding-3-small") == "openai/text-embedding-3-small"


class TestLiteLLMEmbeddingTransport:
    @patch("genbridge.transports.litellm_embedding.litellm")
    async def test_embed(self, mock_litellm: AsyncMock) -> None:
        mock_litellm.aembedding = AsyncMock(
            return_value=SimpleNamespace(data=[{"embedding": [1, 2.5]}])
        )
        transport = LiteLLMEmbeddingTransport(api_key="k")

        response = await transport.embed("gemini-embedding-001", "hello")

        assert response.embeddings[0].values == [1.0, 2.5]
        mock_litellm.aembedding.assert_awaited_once_with(
            model="gemini/gemini-embedding-001", input=["hello"], api_key="k"
        )

    @patch("genbridge.transports.litellm_embedding.litellm")
    async def test_object_items_and_missing_vectors(self, mock_litellm: AsyncMock) -> None:
        mock_litellm.aembedding = AsyncMock(
            return_value=SimpleNamespace(
                data=[SimpleNamespace(embedding=[0.5]), SimpleNamespace(embedding=None)]
            )
        )
        response = await LiteLLMEmbeddingTransport().embed("m", "x")
        assert [e.values for e in response.embeddings] == [[0.5], None]


class TestFactory:
    def test_litellm_backend(self) -> None:
        transport = get_embedding_transport(ModelConfig(embedding_backend="litellm"))
        assert isinstance(transport, LiteLLMEmbeddingTransport)
