"""Model configuration — chat/embedding model names and provider credentials."""

from typing import Literal

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """Configuration for the chat and embedding models.

    Model names use the Gemini API naming (``gemini-2.0-flash``). When
    ``embedding_backend`` is ``"litellm"`` the embedding model may also be a
    LiteLLM ``provider/model`` string; bare names are routed to ``gemini/``.
    """

    chat_model: str = "gemini-2.0-flash"
    embedding_model: str = "gemini-embedding-001"
    api_key: str | None = None
    embedding_backend: Literal["genai", "litellm"] = "genai"
    embedding_concurrency: int = Field(default=1, ge=1)
