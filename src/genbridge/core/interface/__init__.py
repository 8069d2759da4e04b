"""Generic conversation model, wire model, and transpilation to Gemini."""

from genbridge.core.interface.client import StreamingChatClient
from genbridge.core.interface.config import ModelConfig
from genbridge.core.interface.models import (
    ChatMessage,
    ConversationHistory,
    ParameterSchema,
    ToolInvocationRequest,
    ToolSpecification,
)
from genbridge.core.interface.transpilers import (
    GeminiTranspiler,
    to_wire_contents,
    to_wire_schema,
    to_wire_tools,
)
from genbridge.core.interface.wire import (
    Content,
    FunctionCall,
    FunctionDeclaration,
    FunctionResponse,
    GenerateRequest,
    Part,
    StreamEvent,
    WireSchema,
    WireTool,
)

__all__ = [
    "ChatMessage",
    "Content",
    "ConversationHistory",
    "FunctionCall",
    "FunctionDeclaration",
    "FunctionResponse",
    "GeminiTranspiler",
    "GenerateRequest",
    "ModelConfig",
    "ParameterSchema",
    "Part",
    "StreamEvent",
    "StreamingChatClient",
    "ToolInvocationRequest",
    "ToolSpecification",
    "WireSchema",
    "WireTool",
    "to_wire_contents",
    "to_wire_schema",
    "to_wire_tools",
]
