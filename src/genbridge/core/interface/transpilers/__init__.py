"""Provider-specific transpiler implementations."""

from genbridge.core.interface.transpilers.gemini import (
    GeminiTranspiler,
    parse_arguments,
    to_wire_contents,
    to_wire_tools,
)
from genbridge.core.interface.transpilers.schema import to_wire_schema

__all__ = [
    "GeminiTranspiler",
    "parse_arguments",
    "to_wire_contents",
    "to_wire_schema",
    "to_wire_tools",
]
