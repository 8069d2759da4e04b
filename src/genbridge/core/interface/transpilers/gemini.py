"""Gemini transpiler — generic messages and tools to ``generateContent`` wire form.

Key differences from the generic model:
- Four generic roles collapse onto two wire roles: user and tool results become
  "user"; assistant and system become "model". There is no separate system
  instruction; system text is interleaved as an ordinary model turn.
- Tool invocations become FunctionCall parts whose arguments are parsed from
  their serialized JSON form.
- Tool results become a FunctionResponse part keyed ``"content"``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import JsonValue

from genbridge.core.errors import ConversionError
from genbridge.core.interface.transpilers.schema import to_wire_schema
from genbridge.core.interface.wire import (
    Content,
    FunctionDeclaration,
    GenerateRequest,
    Part,
    WireRole,
    WireTool,
)

if TYPE_CHECKING:
    from genbridge.core.interface.models import (
        ChatMessage,
        ConversationHistory,
        ToolInvocationRequest,
        ToolSpecification,
    )

_WIRE_ROLES: dict[str, WireRole] = {
    "user": "user",
    "tool": "user",
    "assistant": "model",
    "system": "model",
}

FUNCTION_RESPONSE_KEY = "content"


def to_wire_contents(messages: Iterable[ChatMessage]) -> list[Content]:
    """Convert messages one-to-one, preserving order.

    Raises:
        ConversionError: If a message has an unknown role, unparseable tool
            arguments, or is a tool result without a tool name.
    """
    return [_message_to_gemini(msg) for msg in messages]


def to_wire_tools(specs: Iterable[ToolSpecification] | None) -> list[WireTool] | None:
    """Group every spec under a single tool container.

    Returns ``None`` (not an empty list) when there is nothing to declare, so
    callers omit the tools field altogether.

    Raises:
        ConversionError: If two specs share a name.
    """
    declarations: list[FunctionDeclaration] = []
    seen: set[str] = set()
    for spec in specs or ():
        if spec.name in seen:
            raise ConversionError(f"duplicate tool name '{spec.name}'")
        seen.add(spec.name)
        declarations.append(
            FunctionDeclaration(
                name=spec.name,
                description=spec.description,
                parameters=to_wire_schema(spec.parameters),
            )
        )
    if not declarations:
        return None
    return [WireTool(function_declarations=declarations)]


def parse_arguments(raw: str) -> dict[str, JsonValue]:
    """Parse a serialized argument object into a generic key/value map."""
    if not raw or not raw.strip():
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConversionError(f"tool arguments are not valid JSON: {raw!r}") from exc
    if not isinstance(parsed, dict):
        raise ConversionError(f"tool arguments must be a JSON object, got {type(parsed).__name__}")
    return parsed


class GeminiTranspiler:
    """Builds :class:`GenerateRequest` objects from generic conversations."""

    def to_provider(
        self,
        history: ConversationHistory | Iterable[ChatMessage],
        tools: Iterable[ToolSpecification] | None = None,
    ) -> GenerateRequest:
        return GenerateRequest(
            contents=to_wire_contents(history),
            tools=to_wire_tools(tools),
        )


def _message_to_gemini(msg: ChatMessage) -> Content:
    role = _WIRE_ROLES.get(msg.role)
    if role is None:
        raise ConversionError(f"unknown message role '{msg.role}'")

    if msg.role == "tool":
        if not msg.tool_name:
            raise ConversionError("tool result message has no tool_name")
        part = Part.from_function_response(msg.tool_name, {FUNCTION_RESPONSE_KEY: msg.text or ""})
        return Content(role=role, parts=[part])

    if msg.role == "assistant" and msg.tool_invocations:
        parts = [_invocation_to_part(inv) for inv in msg.tool_invocations]
        if msg.text:
            parts.insert(0, Part.from_text(msg.text))
        return Content(role=role, parts=parts)

    return Content(role=role, parts=[Part.from_text(msg.text or "")])


def _invocation_to_part(invocation: ToolInvocationRequest) -> Part:
    return Part.from_function_call(invocation.name, parse_arguments(invocation.arguments))
