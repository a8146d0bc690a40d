"""Plugin registry and tool dispatch."""

import time
from dataclasses import dataclass, field
from typing import Any

from forecast_agent.errors import ErrorCode, ExecutionError, PluginError
from forecast_agent.logging import get_logger
from forecast_agent.plugins.base import AgentPlugin, Tool
from forecast_agent.tracing import get_metrics_collector

logger = get_logger(__name__)
metrics = get_metrics_collector()


@dataclass
class _Registration:
    plugin: AgentPlugin
    tools: dict[str, Tool] = field(default_factory=dict)


class PluginManager:
    """Registers plugins by name and executes their tools.

    A plugin is registered under its own ``name`` or under an alias, so the
    same plugin class can be exposed as ``"Weather"`` in one agent and
    ``"WeatherService"`` in another. Tools are addressable either per plugin
    (``invoke``) or by bare tool name (``execute_tool``); for the latter the
    most recent registration wins on conflicts.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, _Registration] = {}
        self._tool_owners: dict[str, str] = {}  # tool name -> registration name

    async def register_plugin(self, plugin: AgentPlugin, name: str | None = None) -> str:
        """Initialize a plugin and register it.

        Args:
            plugin: Plugin instance
            name: Registration name, defaults to ``plugin.name``

        Returns:
            The registration name

        Raises:
            PluginError: On a duplicate name, a disabled plugin, a missing
                dependency, or a failure while initializing or listing tools
        """
        plugin_name = name or plugin.name
        if plugin_name in self._registrations:
            raise PluginError(
                f"A plugin is already registered as '{plugin_name}'",
                code=ErrorCode.PLUGIN_ALREADY_REGISTERED,
                details={"plugin": plugin_name},
            )

        if not plugin.config.enabled:
            raise PluginError(
                f"Plugin '{plugin_name}' is disabled",
                code=ErrorCode.PLUGIN_DISABLED,
                details={"plugin": plugin_name},
            )

        missing = [d for d in plugin.dependencies if d not in self._registrations]
        if missing:
            raise PluginError(
                f"Plugin '{plugin_name}' depends on unregistered plugin '{missing[0]}'",
                code=ErrorCode.PLUGIN_DEPENDENCY_MISSING,
                details={"plugin": plugin_name, "missing_dependency": missing[0]},
            )

        log = logger.bind(plugin=plugin_name, version=plugin.version)
        log.info("Registering plugin")

        if not plugin.is_initialized():
            try:
                await plugin.initialize()
            except Exception as e:
                raise PluginError(
                    f"Plugin '{plugin_name}' failed to initialize: {e}",
                    code=ErrorCode.PLUGIN_INIT_FAILED,
                    details={"plugin": plugin_name, "error": str(e)},
                ) from e

        try:
            tools = await plugin.get_tools()
        except Exception as e:
            raise PluginError(
                f"Plugin '{plugin_name}' failed to list its tools: {e}",
                code=ErrorCode.PLUGIN_LOAD_FAILED,
                details={"plugin": plugin_name, "error": str(e)},
            ) from e

        self._registrations[plugin_name] = _Registration(plugin, {t.name: t for t in tools})
        for tool in tools:
            previous = self._tool_owners.get(tool.name)
            if previous is not None:
                log.warning("Tool name already registered", tool=tool.name, previous=previous)
            self._tool_owners[tool.name] = plugin_name

        metrics.record_plugin_loaded(plugin_name, loaded=True)
        log.info("Plugin registered", tools=sorted(t.name for t in tools))
        return plugin_name

    async def unregister_plugin(self, plugin_name: str) -> None:
        """Remove a registration.

        The plugin is shut down unless another name still refers to the same
        instance. Shutdown errors are logged and swallowed. Bare tool names
        it owned pass to the latest remaining registration providing them.

        Raises:
            PluginError: If nothing is registered under ``plugin_name``
        """
        registration = self._get(plugin_name)
        del self._registrations[plugin_name]

        for tool_name in registration.tools:
            if self._tool_owners.get(tool_name) != plugin_name:
                continue
            heir = self._latest_provider(tool_name)
            if heir is None:
                del self._tool_owners[tool_name]
            else:
                self._tool_owners[tool_name] = heir

        shared = (r.plugin for r in self._registrations.values())
        still_registered = any(p is registration.plugin for p in shared)
        if not still_registered:
            try:
                await registration.plugin.shutdown()
            except Exception as e:
                logger.warning("Plugin shutdown failed", plugin=plugin_name, error=str(e))

        metrics.record_plugin_loaded(plugin_name, loaded=False)
        logger.info("Plugin unregistered", plugin=plugin_name)

    def get_plugin(self, plugin_name: str) -> AgentPlugin:
        """Return the plugin registered as ``plugin_name``.

        Raises:
            PluginError: If nothing is registered under that name
        """
        return self._get(plugin_name).plugin

    def list_plugins(self) -> list[dict[str, Any]]:
        return [
            {
                "name": plugin_name,
                "plugin": r.plugin.name,
                "version": r.plugin.version,
                "description": r.plugin.description,
                "initialized": r.plugin.is_initialized(),
                "tools": len(r.tools),
            }
            for plugin_name, r in self._registrations.items()
        ]

    def get_function(self, plugin_name: str, function_name: str) -> Tool:
        """Return one tool of one plugin.

        Raises:
            PluginError: If the plugin is not registered
            ExecutionError: If the plugin has no such tool
        """
        tool = self._get(plugin_name).tools.get(function_name)
        if tool is None:
            raise ExecutionError(
                f"Plugin '{plugin_name}' has no function '{function_name}'",
                code=ErrorCode.TOOL_NOT_FOUND,
                details={"tool": function_name, "plugin": plugin_name},
            )
        return tool

    def list_functions(self, plugin_name: str) -> list[Tool]:
        """Return the tools of one plugin.

        Raises:
            PluginError: If the plugin is not registered
        """
        return list(self._get(plugin_name).tools.values())

    def get_tool(self, tool_name: str) -> Tool:
        """Return a tool by bare name.

        Raises:
            ExecutionError: If no plugin provides it
        """
        return self.get_function(self._owner_of(tool_name), tool_name)

    def list_tools(self) -> list[Tool]:
        """All tools addressable by bare name."""
        return [
            self._registrations[owner].tools[tool_name]
            for tool_name, owner in self._tool_owners.items()
        ]

    async def execute_tool(self, tool_name: str, **kwargs: Any) -> Any:
        """Execute a tool by bare name.

        Raises:
            ExecutionError: If the tool is unknown, arguments are missing, or it fails
        """
        owner = self._owner_of(tool_name)
        return await self._execute(owner, self.get_function(owner, tool_name), kwargs)

    async def invoke(self, plugin_name: str, function_name: str, **kwargs: Any) -> Any:
        """Execute a tool of a specific plugin.

        Args:
            plugin_name: Registration name
            function_name: Tool name within that plugin
            **kwargs: Tool arguments

        Returns:
            Whatever the tool returns

        Raises:
            PluginError: If the plugin is not registered
            ExecutionError: If the tool is unknown, arguments are missing, or it fails
        """
        tool = self.get_function(plugin_name, function_name)
        return await self._execute(plugin_name, tool, kwargs)

    async def shutdown_all(self) -> None:
        """Unregister every plugin, logging failures."""
        logger.info("Unregistering all plugins", count=len(self._registrations))
        for plugin_name in list(self._registrations):
            try:
                await self.unregister_plugin(plugin_name)
            except Exception as e:
                logger.error("Failed to unregister plugin", plugin=plugin_name, error=str(e))

    def _get(self, plugin_name: str) -> _Registration:
        registration = self._registrations.get(plugin_name)
        if registration is None:
            raise PluginError(
                f"Plugin '{plugin_name}' is not registered",
                code=ErrorCode.PLUGIN_NOT_FOUND,
                details={"plugin": plugin_name},
            )
        return registration

    def _latest_provider(self, tool_name: str) -> str | None:
        """Most recently registered name that still provides ``tool_name``."""
        for plugin_name in reversed(self._registrations):
            if tool_name in self._registrations[plugin_name].tools:
                return plugin_name
        return None

    def _owner_of(self, tool_name: str) -> str:
        owner = self._tool_owners.get(tool_name)
        if owner is None:
            raise ExecutionError(
                f"Tool '{tool_name}' not found",
                code=ErrorCode.TOOL_NOT_FOUND,
                details={"tool": tool_name},
            )
        return owner

    async def _execute(self, plugin_name: str, tool: Tool, arguments: dict[str, Any]) -> Any:
        missing = [p for p in tool.required_parameters() if p not in arguments]
        if missing:
            raise ExecutionError(
                f"Tool '{tool.name}' is missing required arguments: {', '.join(missing)}",
                code=ErrorCode.VALIDATION_ERROR,
                details={"tool": tool.name, "plugin": plugin_name, "missing": missing},
            )

        plugin = self._registrations[plugin_name].plugin
        log = logger.bind(tool=tool.name, plugin=plugin_name)
        log.info("Executing tool", arguments=arguments)

        started = time.perf_counter()
        error_type: str | None = None
        try:
            result = await plugin.execute_tool(tool.name, **arguments)
        except Exception as e:
            error_type = type(e).__name__
            log.error("Tool failed", error=str(e), error_type=error_type)
            raise ExecutionError(
                f"Tool '{tool.name}' execution failed: {e}",
                code=ErrorCode.TOOL_EXECUTION_FAILED,
                details={"tool": tool.name, "plugin": plugin_name, "error": str(e)},
            ) from e
        finally:
            metrics.record_tool_execution(
                tool_name=tool.name,
                plugin_name=plugin_name,
                success=error_type is None,
                latency=time.perf_counter() - started,
                error_type=error_type,
            )

        log.info("Tool executed")
        return result
