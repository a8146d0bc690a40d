#!/usr/bin/env python
"""forecast-agent CLI.

Commands:
    forecast-agent forecast <date> <location>   Get a forecast through the weather plugin
    forecast-agent list                         List available tools
    forecast-agent version                      Show version information
"""

import asyncio
import json
from typing import Any

import click

from forecast_agent.config import Settings, get_settings
from forecast_agent.errors import format_error


def build_settings(seed: int | None = None, plugin_name: str | None = None) -> Settings:
    """Get environment settings with CLI overrides applied."""
    overrides: dict[str, Any] = {}
    if seed is not None:
        overrides["random_seed"] = seed
    if plugin_name:
        overrides["plugin_name"] = plugin_name
    settings = get_settings()
    return settings.model_copy(update=overrides) if overrides else settings


@click.group()
@click.version_option(version="0.1.0", prog_name="forecast-agent")
def cli() -> None:
    """forecast-agent - weather forecasts for conversational agents."""


@cli.command()
@click.argument("date")
@click.argument("location")
@click.option("--seed", type=int, default=None, help="Seed for reproducible forecasts")
@click.option("--plugin-name", default=None, help="Name to register the weather plugin under")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def forecast(
    date: str, location: str, seed: int | None, plugin_name: str | None, as_json: bool
) -> None:
    """Get the forecast for DATE at LOCATION.

    Examples:

        forecast-agent forecast 2025-12-25 Seattle

        forecast-agent forecast "December 25, 2025" London --json

        forecast-agent forecast 2025-12-25 Tokyo --seed 42
    """
    from forecast_agent.core import ForecastAgent
    from forecast_agent.streaming import StreamingResponse, StreamingUpdate

    def echo_update(update: StreamingUpdate) -> None:
        if not as_json:
            click.echo(click.style(f"... {update.message}", fg="yellow"))

    response = StreamingResponse(on_update=echo_update)

    async def _forecast(settings: Settings):
        agent = ForecastAgent(settings=settings)
        await agent.add_weather_plugin(response)
        try:
            return await agent.invoke(
                settings.plugin_name,
                "get_forecast_for_date",
                date=date,
                location=location,
            )
        finally:
            await response.end_stream()
            await agent.shutdown()

    try:
        result = asyncio.run(_forecast(build_settings(seed=seed, plugin_name=plugin_name)))
    except Exception as e:
        if as_json:
            click.echo(json.dumps(format_error(e), indent=2, default=str))
        else:
            click.echo(click.style(f"Error: {e}", fg="red"))
        raise SystemExit(1) from e

    if as_json:
        payload = {
            "forecast": result.model_dump(mode="json"),
            "updates": response.informative_updates,
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo()
    click.echo(click.style(f"Forecast for {location or '(no location)'}", fg="green", bold=True))
    click.echo(f"  Date:        {result.date}")
    click.echo(f"  Temperature: {result.temperature_c}°C / {result.temperature_f}°F")
    click.echo(f"  Summary:     {result.summary.value}")


@cli.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_tools(as_json: bool) -> None:
    """List available plugins and tools.

    Examples:

        forecast-agent list

        forecast-agent list --json
    """
    from forecast_agent.core import ForecastAgent
    from forecast_agent.streaming import StreamingResponse

    async def _list():
        agent = ForecastAgent(settings=build_settings())
        await agent.add_weather_plugin(StreamingResponse())
        try:
            return agent.list_tools()
        finally:
            await agent.shutdown()

    try:
        tools = asyncio.run(_list())
    except Exception as e:
        click.echo(click.style(f"Error loading tools: {e}", fg="red"))
        raise SystemExit(1) from e

    if as_json:
        click.echo(json.dumps(tools, indent=2))
        return

    click.echo(click.style(f"Found {len(tools)} tool(s)", fg="cyan"))
    click.echo()

    for tool in tools:
        qualified = f"{tool['plugin']}.{tool['name']}"
        click.echo(f"  {click.style(qualified, fg='cyan', bold=True)}")
        click.echo(f"    {tool['description'] or 'No description'}")

        params = tool.get("parameters", [])
        if params:
            click.echo("    Parameters:")
            for param in params:
                req_mark = "*" if param["required"] else ""
                click.echo(
                    f"      - {param['name']}{req_mark} ({param['type']}): {param['description']}"
                )
        click.echo()


@cli.command()
def version() -> None:
    """Show version information."""
    click.echo("forecast-agent v0.1.0")
    click.echo("Weather forecast plugin for conversational agents")


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
