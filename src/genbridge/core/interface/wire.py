"""Gemini ``generateContent`` wire model.

Field aliases are the camelCase names of the REST API, so
``model_dump(by_alias=True, exclude_none=True)`` yields the request JSON
directly. Models are populated by field name (snake_case) in code.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel

WireRole = Literal["user", "model"]
PartKind = Literal["text", "function_call", "function_response", "other"]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Schemas & tool declarations
# ---------------------------------------------------------------------------


class WireSchema(_WireModel):
    """Provider parameter schema; ``type`` is an upper-case Gemini type name."""

    type: str | None = None
    description: str | None = None
    enum: list[str] | None = None
    properties: dict[str, WireSchema] | None = None
    required: list[str] | None = None
    items: WireSchema | None = None


class FunctionDeclaration(_WireModel):
    name: str
    description: str | None = None
    parameters: WireSchema | None = None


class WireTool(_WireModel):
    """Container grouping every function declaration of one request."""

    function_declarations: list[FunctionDeclaration]


# ---------------------------------------------------------------------------
# Content parts
# ---------------------------------------------------------------------------


class FunctionCall(_WireModel):
    name: str
    args: dict[str, JsonValue] = Field(default_factory=dict)


class FunctionResponse(_WireModel):
    name: str
    response: dict[str, JsonValue] = Field(default_factory=dict)


class Blob(_WireModel):
    """Inline media; carried through but never interpreted by the core."""

    mime_type: str
    data: str


class Part(_WireModel):
    """One typed part of a :class:`Content`.

    Exactly one field is expected to be set. When several are, :attr:`kind`
    resolves them in the order text, function call, function response.
    """

    text: str | None = None
    function_call: FunctionCall | None = None
    function_response: FunctionResponse | None = None
    inline_data: Blob | None = None

    @property
    def kind(self) -> PartKind:
        if self.text is not None:
            return "text"
        if self.function_call is not None:
            return "function_call"
        if self.function_response is not None:
            return "function_response"
        return "other"

    @classmethod
    def from_text(cls, text: str) -> Part:
        return cls(text=text)

    @classmethod
    def from_function_call(cls, name: str, args: dict[str, JsonValue]) -> Part:
        return cls(function_call=FunctionCall(name=name, args=args))

    @classmethod
    def from_function_response(cls, name: str, response: dict[str, JsonValue]) -> Part:
        return cls(function_response=FunctionResponse(name=name, response=response))


class Content(_WireModel):
    role: WireRole
    parts: list[Part]


# ---------------------------------------------------------------------------
# Request / response increments
# ---------------------------------------------------------------------------


class GenerateRequest(_WireModel):
    """A complete streaming generation request.

    ``tools`` is ``None`` when no tools are offered; the field is then left
    out of the payload entirely instead of being sent as an empty list.
    """

    contents: list[Content]
    tools: list[WireTool] | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class StreamEvent(_WireModel):
    """One increment of a streaming response (first candidate only)."""

    parts: list[Part] = Field(default_factory=list)
    finish_reason: str | None = None
    usage: dict[str, int] | None = None
