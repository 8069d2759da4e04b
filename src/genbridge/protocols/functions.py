"""FunctionToolProvider — exposes plain Python callables as tools.

Usage::

    tools = FunctionToolProvider()

    @tools.tool(
        description="Look up company information by name.",
        parameters=ParameterSchema.object_schema(
            {"company": ParameterSchema(type="string")}, required=["company"]
        ),
    )
    async def company_info(company: str) -> dict[str, str]:
        ...

Arguments are passed to the callable as keyword arguments. Non-string return
values are JSON-encoded.
"""

from __future__ import annotations

import inspect
import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import JsonValue

from genbridge.core.interface.models import ParameterSchema, ToolSpecification
from genbridge.protocols.errors import DuplicateToolError, ToolExecutionError, ToolNotFoundError

ToolFunction = Callable[..., Any] | Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class _RegisteredTool:
    spec: ToolSpecification
    func: ToolFunction


class FunctionToolProvider:
    """Satisfies :class:`~genbridge.protocols.provider.ToolProvider` for local callables."""

    def __init__(self) -> None:
        self._tools: dict[str, _RegisteredTool] = {}

    def add(
        self,
        func: ToolFunction,
        *,
        name: str | None = None,
        description: str | None = None,
        parameters: ParameterSchema | None = None,
    ) -> ToolSpecification:
        """Register *func*; name and description default to its ``__name__`` and docstring."""
        tool_name = name or func.__name__
        if tool_name in self._tools:
            raise DuplicateToolError(tool_name)
        spec = ToolSpecification(
            name=tool_name,
            description=description if description is not None else inspect.getdoc(func) or "",
            parameters=parameters,
        )
        self._tools[tool_name] = _RegisteredTool(spec=spec, func=func)
        return spec

    def tool(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        parameters: ParameterSchema | None = None,
    ) -> Callable[[ToolFunction], ToolFunction]:
        """Decorator form of :meth:`add`; returns the function unchanged."""

        def decorator(func: ToolFunction) -> ToolFunction:
            self.add(func, name=name, description=description, parameters=parameters)
            return func

        return decorator

    async def discover_tools(self) -> list[ToolSpecification]:
        return [registered.spec for registered in self._tools.values()]

    async def execute_tool(self, name: str, arguments: dict[str, JsonValue]) -> str:
        registered = self._tools.get(name)
        if registered is None:
            raise ToolNotFoundError(name)
        try:
            inspect.signature(registered.func).bind(**arguments)
        except TypeError as exc:
            raise ToolExecutionError(name, f"bad arguments: {exc}") from exc
        try:
            result = registered.func(**arguments)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            raise ToolExecutionError(name, str(exc)) from exc
        return _result_text(result)


def _result_text(result: Any) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(result, default=str, ensure_ascii=False)
