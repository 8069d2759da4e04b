"""google-genai transports for streaming generation and embeddings.

The request payload produced by :meth:`GenerateRequest.to_payload` is plain
REST-shaped JSON, which the SDK accepts in place of its own typed objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from google import genai

from genbridge.core.interface.wire import Part, StreamEvent
from genbridge.transports.base import ContentEmbedding, EmbeddingResponse

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from genbridge.core.interface.wire import GenerateRequest

logger = logging.getLogger(__name__)


def create_client(api_key: str | None = None) -> genai.Client:
    """Create a client; without *api_key* the SDK reads GOOGLE_API_KEY/GEMINI_API_KEY."""
    if api_key:
        return genai.Client(api_key=api_key)
    return genai.Client()


class GenAIGenerationTransport:
    """Streams ``generateContent`` responses through ``client.aio``.

    Satisfies :class:`~genbridge.transports.base.GenerationTransport`.
    """

    def __init__(self, client: genai.Client) -> None:
        self._client = client

    async def stream(self, model: str, request: GenerateRequest) -> AsyncIterator[StreamEvent]:
        payload = request.to_payload()
        config: dict[str, Any] | None = None
        if "tools" in payload:
            # Function calls must come back to the caller, never be run by the SDK.
            config = {
                "tools": payload["tools"],
                "automatic_function_calling": {"disable": True},
            }

        logger.debug("Opening stream to %s with %d content(s)", model, len(payload["contents"]))
        responses = await self._client.aio.models.generate_content_stream(
            model=model,
            contents=payload["contents"],
            config=config,
        )
        async for response in responses:
            yield _to_stream_event(response)


class GenAIEmbeddingTransport:
    """Calls ``embed_content`` once per text.

    Satisfies :class:`~genbridge.transports.base.EmbeddingTransport`.
    """

    def __init__(self, client: genai.Client) -> None:
        self._client = client

    async def embed(self, model: str, text: str) -> EmbeddingResponse:
        response = await self._client.aio.models.embed_content(model=model, contents=text)
        return EmbeddingResponse(
            embeddings=[
                ContentEmbedding(values=list(e.values) if e.values is not None else None)
                for e in response.embeddings or []
            ]
        )


def _to_stream_event(response: Any) -> StreamEvent:
    """Convert one SDK response chunk (first candidate) into a :class:`StreamEvent`."""
    candidates = response.candidates or []
    if not candidates:
        return StreamEvent()

    candidate = candidates[0]
    content = candidate.content
    sdk_parts = (content.parts if content is not None else None) or []

    finish_reason = candidate.finish_reason
    usage: dict[str, int] | None = None
    metadata = getattr(response, "usage_metadata", None)
    if metadata is not None:
        usage = {
            "prompt_tokens": metadata.prompt_token_count or 0,
            "completion_tokens": metadata.candidates_token_count or 0,
            "total_tokens": metadata.total_token_count or 0,
        }

    return StreamEvent(
        parts=[_to_part(p) for p in sdk_parts],
        finish_reason=_enum_value(finish_reason),
        usage=usage,
    )


def _to_part(part: Any) -> Part:
    if part.text is not None:
        return Part.from_text(part.text)
    if part.function_call is not None:
        fc = part.function_call
        return Part.from_function_call(fc.name or "", dict(fc.args or {}))
    if part.function_response is not None:
        fr = part.function_response
        return Part.from_function_response(fr.name or "", dict(fr.response or {}))
    # Media, executable code and other native parts are not interpreted.
    return Part()


def _enum_value(value: Any) -> str | None:
    if value is None:
        return None
    return str(getattr(value, "value", value))
