"""Base plugin interface for the forecast agent."""

import inspect
from collections.abc import Callable
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from forecast_agent.errors import ErrorCode, ExecutionError


class ToolParameterType(str, Enum):
    """JSON schema types a tool parameter can take."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class ToolParameter(BaseModel):
    name: str
    type: ToolParameterType
    description: str
    required: bool = False
    default: Any | None = None
    enum: list[Any] | None = None

    def json_schema(self) -> dict[str, Any]:
        """JSON schema fragment for this parameter; ``enum`` and ``default`` only when set."""
        schema: dict[str, Any] = {"type": self.type.value, "description": self.description}
        if self.enum:
            schema["enum"] = self.enum
        if self.default is not None:
            schema["default"] = self.default
        return schema


class Tool(BaseModel):
    """A callable exposed by a plugin, described for function-calling hosts."""

    name: str
    description: str
    parameters: list[ToolParameter] = Field(default_factory=list)

    def required_parameters(self) -> list[str]:
        """Names of parameters that must be supplied on invocation."""
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": self.required_parameters(),
        }

    def to_openai_format(self) -> dict[str, Any]:
        """OpenAI ``tools`` entry."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema(),
            },
        }

    def to_mcp_format(self) -> dict[str, Any]:
        """MCP ``tools/list`` entry."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class PluginConfig(BaseModel):
    """Per-plugin options supplied by the host."""

    enabled: bool = True
    settings: dict[str, Any] = Field(default_factory=dict)


class AgentPlugin(ABC):
    """A named, versioned bundle of tools.

    ``PluginManager`` initializes a plugin once on registration, asks it for
    its ``Tool`` definitions and calls ``execute_tool`` with keyword
    arguments. ``name`` is the default registration name; hosts may register
    the same plugin under an alias instead.
    """

    def __init__(self, config: PluginConfig | None = None) -> None:
        self.config = config or PluginConfig()
        self._initialized = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Default registration name."""

    @property
    @abstractmethod
    def version(self) -> str:
        """Semantic version, e.g. ``"1.0.0"``."""

    @property
    def description(self) -> str:
        return ""

    @property
    def dependencies(self) -> list[str]:
        """Plugins that must be registered before this one."""
        return []

    async def initialize(self) -> None:
        """Acquire resources. Called once before first use."""
        self._initialized = True

    async def shutdown(self) -> None:
        """Release resources. Called when the last registration is removed."""
        self._initialized = False

    def is_initialized(self) -> bool:
        return self._initialized

    @abstractmethod
    async def get_tools(self) -> list[Tool]:
        """Tool definitions this plugin exposes."""

    @abstractmethod
    async def execute_tool(self, tool_name: str, **kwargs: Any) -> Any:
        """Run one of this plugin's tools.

        Raises:
            ExecutionError: If ``tool_name`` is not one of this plugin's tools
        """


class DecoratorPlugin(AgentPlugin):
    """Plugin whose tools are its public ``@tool`` methods.

    Example:
        ```python
        class ClimatePlugin(DecoratorPlugin):
            name = "climate"
            version = "1.0.0"

            @tool(description="Average temperature for a month")
            async def monthly_average(self, location: str, month: int) -> float:
                ...
        ```
    """

    def _discover(self) -> dict[str, tuple[Tool, Callable[..., Any]]]:
        """Map tool names to their definition and bound method."""
        from forecast_agent.decorators.tool import get_tool_from_function

        found = {}
        for attr_name in dir(type(self)):
            if attr_name.startswith("_"):
                continue
            tool_def = get_tool_from_function(getattr(type(self), attr_name))
            if tool_def is not None:
                found[tool_def.name] = (tool_def, getattr(self, attr_name))
        return found

    async def get_tools(self) -> list[Tool]:
        return [tool_def for tool_def, _ in self._discover().values()]

    async def execute_tool(self, tool_name: str, **kwargs: Any) -> Any:
        entry = self._discover().get(tool_name)
        if entry is None:
            raise ExecutionError(
                f"Tool '{tool_name}' not found in plugin '{self.name}'",
                code=ErrorCode.TOOL_NOT_FOUND,
                details={"tool": tool_name, "plugin": self.name},
            )

        result = entry[1](**kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result
