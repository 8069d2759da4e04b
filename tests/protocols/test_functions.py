"""Tests for FunctionToolProvider."""

from __future__ import annotations

import json

import pytest

from genbridge.core.interface.models import ParameterSchema
from genbridge.protocols import (
    DuplicateToolError,
    FunctionToolProvider,
    ToolExecutionError,
    ToolNotFoundError,
)


def _provider() -> FunctionToolProvider:
    tools = FunctionToolProvider()

    @tools.tool(
        description="Look up company information by name.",
        parameters=ParameterSchema.object_schema(
            {"company": ParameterSchema(type="string")}, required=["company"]
        ),
    )
    async def company_info(company: str) -> dict[str, str]:
        return {"name": company, "sector": "software"}

    @tools.tool(name="echo")
    def echo_text(text: str) -> str:
        """Repeat the input."""
        return text

    return tools


class TestRegistration:
    async def test_specs(self) -> None:
        specs = await _provider().discover_tools()
        assert [s.name for s in specs] == ["company_info", "echo"]
        assert specs[0].description == "Look up company information by name."
        assert specs[0].parameters is not None
        assert specs[0].parameters.required == ["company"]
        assert specs[1].description == "Repeat the input."

    def test_decorator_returns_function(self) -> None:
        tools = FunctionToolProvider()

        @tools.tool()
        def ping() -> str:
            return "pong"

        assert ping() == "pong"

    def test_duplicate_name(self) -> None:
        tools = FunctionToolProvider()
        tools.add(lambda: "a", name="x")
        with pytest.raises(DuplicateToolError):
            tools.add(lambda: "b", name="x")


class TestExecution:
    async def test_async_result_json_encoded(self) -> None:
        text = await _provider().execute_tool("company_info", {"company": "Acme"})
        assert json.loads(text) == {"name": "Acme", "sector": "software"}

    async def test_string_result_unchanged(self) -> None:
        assert await _provider().execute_tool("echo", {"text": "hi"}) == "hi"

    async def test_bad_arguments(self) -> None:
        with pytest.raises(ToolExecutionError, match="bad arguments"):
            await _provider().execute_tool("echo", {"wrong": 1})

    async def test_exception_wrapped(self) -> None:
        tools = FunctionToolProvider()

        @tools.tool()
        def fail() -> None:
            raise KeyError("missing")

        with pytest.raises(ToolExecutionError) as excinfo:
            await tools.execute_tool("fail", {})
        assert isinstance(excinfo.value.__cause__, KeyError)

    async def test_unknown(self) -> None:
        with pytest.raises(ToolNotFoundError):
            await _provider().execute_tool("nope", {})
