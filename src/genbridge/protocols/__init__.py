"""Tool registry: providers, routing, and local function tools."""

from genbridge.protocols.dispatcher import ToolDispatcher
from genbridge.protocols.errors import (
    DuplicateToolError,
    ToolError,
    ToolExecutionError,
    ToolNotFoundError,
)
from genbridge.protocols.functions import FunctionToolProvider
from genbridge.protocols.provider import ToolProvider

__all__ = [
    "DuplicateToolError",
    "FunctionToolProvider",
    "ToolDispatcher",
    "ToolError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "ToolProvider",
]
