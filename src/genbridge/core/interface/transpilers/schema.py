"""Generic parameter schema -> Gemini wire schema (one-way)."""

from __future__ import annotations

from genbridge.core.interface.models import ParameterSchema
from genbridge.core.interface.wire import WireSchema

_WIRE_TYPES: dict[str, str] = {
    "object": "OBJECT",
    "array": "ARRAY",
    "string": "STRING",
    "integer": "INTEGER",
    "number": "NUMBER",
    "boolean": "BOOLEAN",
}


def to_wire_type(kind: str | None) -> str | None:
    """Map a generic kind to the upper-case wire type, or ``None`` if unknown."""
    if kind is None:
        return None
    return _WIRE_TYPES.get(kind.lower())


def to_wire_schema(schema: ParameterSchema | None) -> WireSchema | None:
    """Recursively convert *schema*; structure, names and required lists are kept.

    No validation happens here. An unrecognized kind yields a node without a
    type, left for the provider to reject.
    """
    if schema is None:
        return None
    return _convert(schema)


def _convert(schema: ParameterSchema) -> WireSchema:
    properties = None
    if schema.properties is not None:
        properties = {name: _convert(sub) for name, sub in schema.properties.items()}

    return WireSchema(
        type=to_wire_type(schema.type),
        description=schema.description,
        enum=list(schema.enum) if schema.enum is not None else None,
        properties=properties,
        required=list(schema.required) if schema.required is not None else None,
        items=to_wire_schema(schema.items),
    )
