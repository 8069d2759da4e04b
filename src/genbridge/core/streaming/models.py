"""Terminal results of a streaming chat call."""

from __future__ import annotations

import json
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from genbridge.core.interface.models import ToolInvocationRequest


class TextResult(BaseModel):
    """The full accumulated assistant text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolInvocationResult(BaseModel):
    """A structured tool invocation requested by the model."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_invocation"] = "tool_invocation"
    name: str
    arguments: dict[str, JsonValue] = {}

    def to_request(self) -> ToolInvocationRequest:
        """Re-express the call as a generic request with serialized arguments."""
        return ToolInvocationRequest(name=self.name, arguments=json.dumps(self.arguments))


TerminalResult = Annotated[TextResult | ToolInvocationResult, Field(discriminator="type")]
