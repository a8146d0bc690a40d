"""Plugin system."""

from forecast_agent.plugins.base import (
    AgentPlugin,
    DecoratorPlugin,
    PluginConfig,
    Tool,
    ToolParameter,
    ToolParameterType,
)
from forecast_agent.plugins.manager import PluginManager
from forecast_agent.plugins.weather import WeatherForecastPlugin

__all__ = [
    "AgentPlugin",
    "DecoratorPlugin",
    "PluginConfig",
    "PluginManager",
    "Tool",
    "ToolParameter",
    "ToolParameterType",
    "WeatherForecastPlugin",
]
