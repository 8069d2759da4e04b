"""Generic conversation model — the framework-neutral side of the bridge.

Callers build conversations from :class:`ChatMessage` objects and describe
callable tools with :class:`ToolSpecification`. Nothing here knows about the
provider's wire format; the transpilers in
:mod:`genbridge.core.interface.transpilers` do the mapping.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant", "tool"]


# ---------------------------------------------------------------------------
# Tool Specifications — parameter schemas and tool descriptions
# ---------------------------------------------------------------------------


class ParameterSchema(BaseModel):
    """A recursive, JSON-Schema-like description of a tool parameter.

    ``type`` is one of object, array, string, integer, number or boolean.
    Other values are carried through unvalidated; the provider rejects them.
    ``properties`` keeps insertion order. Schemas must form a tree.
    """

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    description: str | None = None
    enum: list[str] | None = None
    properties: dict[str, ParameterSchema] | None = None
    required: list[str] | None = None
    items: ParameterSchema | None = None

    @classmethod
    def from_json_schema(cls, schema: Mapping[str, Any]) -> ParameterSchema:
        """Build a schema tree from a JSON Schema mapping.

        Keys the provider does not understand (``additionalProperties``,
        ``default``, ...) are dropped.
        """
        properties = schema.get("properties")
        items = schema.get("items")
        enum = schema.get("enum")
        required = schema.get("required")
        return cls(
            type=_schema_type(schema.get("type")),
            description=schema.get("description"),
            enum=[str(v) for v in enum] if enum is not None else None,
            properties=(
                {name: cls.from_json_schema(sub) for name, sub in properties.items()}
                if properties is not None
                else None
            ),
            required=list(required) if required is not None else None,
            items=cls.from_json_schema(items) if items is not None else None,
        )

    @classmethod
    def object_schema(
        cls,
        properties: dict[str, ParameterSchema],
        required: list[str] | None = None,
        description: str | None = None,
    ) -> ParameterSchema:
        """Shortcut for an object schema."""
        return cls(type="object", properties=properties, required=required, description=description)


def _schema_type(raw: Any) -> str | None:
    """Reduce a JSON Schema ``type`` to one kind.

    A union such as ``["string", "null"]`` keeps its first non-null member;
    anything else that is not a string is dropped.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        return next((t for t in raw if isinstance(t, str) and t != "null"), None)
    return None


class ToolSpecification(BaseModel):
    """A callable tool as described to the model."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    parameters: ParameterSchema | None = None

    @classmethod
    def from_function_schema(cls, schema: Mapping[str, Any]) -> ToolSpecification:
        """Create a spec from an OpenAI-style function schema.

        Accepts both ``{"type": "function", "function": {...}}`` and the bare
        inner ``{"name", "description", "parameters"}`` mapping.
        """
        func: Mapping[str, Any] = schema.get("function", schema)
        parameters = func.get("parameters")
        return cls(
            name=func["name"],
            description=func.get("description", ""),
            parameters=ParameterSchema.from_json_schema(parameters) if parameters else None,
        )


# ---------------------------------------------------------------------------
# Tool Invocations — requests emitted by the assistant
# ---------------------------------------------------------------------------


class ToolInvocationRequest(BaseModel):
    """A tool call requested by the assistant.

    ``arguments`` holds the call's argument object serialized as JSON text.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex[:12])
    name: str
    arguments: str = "{}"


# ---------------------------------------------------------------------------
# Chat Message — the core message type
# ---------------------------------------------------------------------------


class ChatMessage(BaseModel):
    """A single message in a generic conversation.

    Roles:
    - system: instruction/context messages
    - user: human input
    - assistant: model output (may carry ``tool_invocations``)
    - tool: the result of a tool invocation (carries ``tool_name``)
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str | None = None
    tool_invocations: list[ToolInvocationRequest] | None = None
    tool_name: str | None = None
    tool_call_id: str | None = None

    @property
    def has_tool_invocations(self) -> bool:
        return bool(self.tool_invocations)

    @classmethod
    def system(cls, text: str) -> ChatMessage:
        """Create a system message."""
        return cls(role="system", text=text)

    @classmethod
    def user(cls, text: str) -> ChatMessage:
        """Create a user message."""
        return cls(role="user", text=text)

    @classmethod
    def assistant(
        cls,
        text: str | None = None,
        tool_invocations: list[ToolInvocationRequest] | None = None,
    ) -> ChatMessage:
        """Create an assistant message."""
        return cls(role="assistant", text=text, tool_invocations=tool_invocations)

    @classmethod
    def tool_result(
        cls,
        tool_name: str,
        text: str,
        tool_call_id: str | None = None,
    ) -> ChatMessage:
        """Create a tool-result message for the tool named *tool_name*."""
        return cls(role="tool", text=text, tool_name=tool_name, tool_call_id=tool_call_id)


# ---------------------------------------------------------------------------
# Conversation History — ordered container of messages
# ---------------------------------------------------------------------------


class ConversationHistory(BaseModel):
    """An ordered sequence of chat messages forming a conversation."""

    messages: list[ChatMessage] = []

    def append(self, message: ChatMessage) -> None:
        """Append a message to the history."""
        self.messages.append(message)

    @property
    def system_messages(self) -> list[ChatMessage]:
        return [m for m in self.messages if m.role == "system"]

    @property
    def non_system_messages(self) -> list[ChatMessage]:
        return [m for m in self.messages if m.role != "system"]

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[ChatMessage]:  # type: ignore[override]
        return iter(self.messages)
