"""ToolProvider protocol — the common interface of every tool source.

The :class:`~genbridge.protocols.dispatcher.ToolDispatcher` routes tool
invocations to providers without knowing how they run their tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pydantic import JsonValue

    from genbridge.core.interface.models import ToolSpecification


@runtime_checkable
class ToolProvider(Protocol):
    """Discovers and executes tools."""

    async def discover_tools(self) -> list[ToolSpecification]:
        """Return the specifications of every tool this provider serves."""
        ...

    async def execute_tool(self, name: str, arguments: dict[str, JsonValue]) -> str:
        """Execute a tool by name and return its result text."""
        ...
