"""LiteLLM embedding transport — reaches Gemini (or any LiteLLM backend) by model string.

LiteLLM names models ``provider/model`` (e.g. ``gemini/gemini-embedding-001``);
a bare embedding model name is prefixed with ``gemini/``.
"""

from __future__ import annotations

from typing import Any

import litellm

from genbridge.transports.base import ContentEmbedding, EmbeddingResponse

_DEFAULT_PROVIDER = "gemini"


def litellm_model_name(model: str) -> str:
    """Qualify *model* with the LiteLLM provider prefix when it has none."""
    if "/" in model:
        return model
    return f"{_DEFAULT_PROVIDER}/{model}"


class LiteLLMEmbeddingTransport:
    """Satisfies :class:`~genbridge.transports.base.EmbeddingTransport` via ``litellm.aembedding``."""

    def __init__(self, api_key: str | None = None, api_base: str | None = None) -> None:
        self._api_key = api_key
        self._api_base = api_base

    async def embed(self, model: str, text: str) -> EmbeddingResponse:
        call_kwargs: dict[str, Any] = {
            "model": litellm_model_name(model),
            "input": [text],
        }
        if self._api_key:
            call_kwargs["api_key"] = self._api_key
        if self._api_base:
            call_kwargs["api_base"] = self._api_base

        # LiteLLM type stubs are incomplete
        response = await litellm.aembedding(**call_kwargs)  # pyright: ignore[reportUnknownMemberType]
        return EmbeddingResponse(
            embeddings=[ContentEmbedding(values=_vector(item)) for item in response.data or []]
        )


def _vector(item: Any) -> list[float] | None:
    # LiteLLM returns either dicts or Embedding objects depending on the backend
    values = item.get("embedding") if isinstance(item, dict) else getattr(item, "embedding", None)
    if values is None:
        return None
    return [float(v) for v in values]
