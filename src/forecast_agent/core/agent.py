"""Main forecast agent class."""

from typing import Any

from forecast_agent.config import Settings, get_settings
from forecast_agent.forecast import RandomSource, create_random_source
from forecast_agent.logging import get_logger, setup_logging
from forecast_agent.plugins import AgentPlugin, PluginManager, Tool, WeatherForecastPlugin
from forecast_agent.streaming import StreamingSink
from forecast_agent.tracing import setup_tracing, shutdown_tracing

logger = get_logger(__name__)


class ForecastAgent:
    """Orchestrates configuration, logging, tracing and plugins.

    Example:
        ```python
        agent = ForecastAgent()
        response = StreamingResponse()
        await agent.add_weather_plugin(response)

        forecast = await agent.invoke(
            "Weather", "get_forecast_for_date", date="2025-12-25", location="Seattle"
        )
        ```
    """

    version = "0.1.0"

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

        setup_logging(
            log_level=self.settings.effective_log_level(),
            json_format=self.settings.use_json_logs(),
            enable_colors=self.settings.is_development(),
        )

        logger.info("Starting forecast agent", version=self.version, env=self.settings.env)

        if self.settings.otel_enabled:
            setup_tracing(
                self.settings,
                exporter_type="console" if self.settings.is_development() else "otlp",
            )

        self._plugin_manager = PluginManager()

    async def register_plugin(
        self, plugin: AgentPlugin, name: str | None = None
    ) -> str:
        """Register a plugin, optionally under an alias.

        Returns:
            The name the plugin was registered under
        """
        return await self._plugin_manager.register_plugin(plugin, name=name)

    async def add_weather_plugin(
        self,
        sink: StreamingSink,
        random_source: RandomSource | None = None,
        name: str | None = None,
    ) -> WeatherForecastPlugin:
        """Create and register the weather plugin.

        Args:
            sink: Streaming sink for the plugin's updates
            random_source: Random source (seeded from settings when omitted)
            name: Registration name (defaults to ``settings.plugin_name``)

        Returns:
            The registered plugin
        """
        if random_source is None and self.settings.random_seed is not None:
            random_source = create_random_source(self.settings.random_seed)

        plugin = WeatherForecastPlugin(sink, random_source=random_source)
        await self.register_plugin(plugin, name=name or self.settings.plugin_name)
        return plugin

    async def unregister_plugin(self, plugin_name: str) -> None:
        """Unregister a plugin."""
        await self._plugin_manager.unregister_plugin(plugin_name)

    def get_function(self, plugin_name: str, function_name: str) -> Tool:
        """Get the tool definition of a plugin function."""
        return self._plugin_manager.get_function(plugin_name, function_name)

    def list_plugins(self) -> list[dict[str, Any]]:
        """List all registered plugins."""
        return self._plugin_manager.list_plugins()

    def list_tools(self) -> list[dict[str, Any]]:
        """Tool definitions of every registered plugin, tagged with the plugin name."""
        return [
            {"plugin": plugin_name, **tool.model_dump(mode="json")}
            for plugin_name in (p["name"] for p in self._plugin_manager.list_plugins())
            for tool in self._plugin_manager.list_functions(plugin_name)
        ]

    async def invoke(
        self, plugin_name: str, function_name: str, **arguments: Any
    ) -> Any:
        """Invoke a plugin function by name.

        Args:
            plugin_name: Name the plugin was registered under
            function_name: Tool name within the plugin
            **arguments: Tool arguments

        Returns:
            Tool result
        """
        return await self._plugin_manager.invoke(plugin_name, function_name, **arguments)

    async def shutdown(self) -> None:
        """Unregister every plugin, then flush telemetry."""
        logger.info("Stopping forecast agent")
        await self._plugin_manager.shutdown_all()
        if self.settings.otel_enabled:
            shutdown_tracing()

    @property
    def plugin_manager(self) -> PluginManager:
        return self._plugin_manager
