"""ToolDispatcher — the tool registry consulted for every chat call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from genbridge.core.interface.transpilers.gemini import parse_arguments
from genbridge.core.streaming.models import ToolInvocationResult
from genbridge.protocols.errors import DuplicateToolError, ToolNotFoundError

if TYPE_CHECKING:
    from genbridge.core.interface.models import ToolInvocationRequest, ToolSpecification
    from genbridge.protocols.provider import ToolProvider

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Maintains a name-to-provider map and dispatches tool invocations.

    Usage::

        dispatcher = ToolDispatcher()
        await dispatcher.register(functions)

        specs = dispatcher.all_tools()               # passed to the model
        text = await dispatcher.execute(invocation)  # routed to its provider
    """

    def __init__(self) -> None:
        self._providers: list[ToolProvider] = []
        self._tool_map: dict[str, ToolProvider] = {}
        self._specs: list[ToolSpecification] = []

    async def register(self, provider: ToolProvider) -> None:
        """Discover tools from *provider* and add them to the routing table.

        Raises:
            DuplicateToolError: If a discovered name is already routed.
        """
        specs = await provider.discover_tools()
        for spec in specs:
            if spec.name in self._tool_map:
                raise DuplicateToolError(spec.name)
        self._providers.append(provider)
        for spec in specs:
            self._tool_map[spec.name] = provider
            self._specs.append(spec)
        logger.debug("Registered %d tool(s) from %s", len(specs), type(provider).__name__)

    def all_tools(self) -> list[ToolSpecification]:
        """Return every registered tool specification, in registration order."""
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._tool_map

    async def execute(self, invocation: ToolInvocationResult | ToolInvocationRequest) -> str:
        """Route a single invocation to its owning provider.

        Raises:
            ToolNotFoundError: If no provider serves the requested tool.
            ConversionError: If a request's serialized arguments do not parse.
        """
        provider = self._tool_map.get(invocation.name)
        if provider is None:
            raise ToolNotFoundError(invocation.name)

        if isinstance(invocation, ToolInvocationResult):
            arguments = dict(invocation.arguments)
        else:
            arguments = parse_arguments(invocation.arguments)

        logger.info("Executing tool %s", invocation.name)
        return await provider.execute_tool(invocation.name, arguments)
