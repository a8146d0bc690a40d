"""forecast-agent - a weather forecast plugin for conversational agents."""

from forecast_agent.config import Settings, get_settings
from forecast_agent.core import ForecastAgent
from forecast_agent.decorators import tool
from forecast_agent.forecast import Forecast, ForecastGenerator, WeatherSummary, get_forecast
from forecast_agent.plugins import (
    AgentPlugin,
    DecoratorPlugin,
    PluginConfig,
    PluginManager,
    Tool,
    ToolParameter,
    WeatherForecastPlugin,
)
from forecast_agent.streaming import StreamingResponse, StreamingSink

__version__ = "0.1.0"

__all__ = [
    "AgentPlugin",
    "DecoratorPlugin",
    "Forecast",
    "ForecastAgent",
    "ForecastGenerator",
    "PluginConfig",
    "PluginManager",
    "Settings",
    "StreamingResponse",
    "StreamingSink",
    "Tool",
    "ToolParameter",
    "WeatherForecastPlugin",
    "WeatherSummary",
    "get_forecast",
    "get_settings",
    "tool",
]
