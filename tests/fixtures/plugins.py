"""Small plugins and tool definitions shared by the registry tests."""

from __future__ import annotations

from typing import Any

from forecast_agent.decorators import tool
from forecast_agent.plugins.base import DecoratorPlugin, Tool, ToolParameter, ToolParameterType


def sample_tool_parameters() -> list[ToolParameter]:
    """A required string and an optional integer with a default."""
    date = ToolParameter(
        name="date", type=ToolParameterType.STRING, description="Forecast date", required=True
    )
    days = ToolParameter(
        name="days", type=ToolParameterType.INTEGER, description="How many days ahead", default=1
    )
    return [date, days]


def create_test_tool(
    name: str = "test_tool",
    description: str = "Tool used in tests",
    parameters: list[ToolParameter] | None = None,
) -> Tool:
    parameters = parameters or sample_tool_parameters()
    return Tool(name=name, description=description, parameters=parameters)


class SampleTestPlugin(DecoratorPlugin):
    """Two trivial tools, one with an optional argument."""

    name = "sample_test"
    version = "1.0.0"
    description = "Echo and arithmetic tools"

    @tool(description="Return the message unchanged")
    async def echo(self, message: str) -> dict[str, Any]:
        """Args:
        message: Text to send back
        """
        return {"echo": message}

    @tool(description="Sum two integers")
    async def add_numbers(self, a: int, b: int = 0) -> dict[str, Any]:
        """Args:
        a: Left operand
        b: Right operand
        """
        return {"result": a + b}


class FailingTestPlugin(DecoratorPlugin):
    name = "failing_test"
    version = "1.0.0"
    description = "Every tool raises"

    @tool(description="Raise ValueError")
    async def always_fails(self) -> dict[str, Any]:
        raise ValueError("This tool always fails")


class FailingInitPlugin(DecoratorPlugin):
    name = "failing_init"
    version = "1.0.0"

    async def initialize(self) -> None:
        raise RuntimeError("Initialization failed")


class DependentPlugin(DecoratorPlugin):
    """Needs ``sample_test`` to be registered first."""

    name = "dependent"
    version = "1.0.0"
    dependencies = ["sample_test"]

    @tool(description="Report readiness")
    async def status(self) -> dict[str, Any]:
        return {"status": "ok"}


def create_test_plugin(
    name: str = "test_plugin",
    version: str = "1.0.0",
    description: str = "Plugin built by create_test_plugin",
) -> SampleTestPlugin:
    """A ``SampleTestPlugin`` with overridden metadata."""
    plugin = SampleTestPlugin()
    plugin.name = name
    plugin.version = version
    plugin.description = description
    return plugin
