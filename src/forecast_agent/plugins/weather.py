"""Weather forecast plugin."""

from typing import Annotated

from pydantic import Field

from forecast_agent.decorators import tool
from forecast_agent.forecast import Forecast, ForecastGenerator, RandomSource
from forecast_agent.plugins.base import DecoratorPlugin, PluginConfig
from forecast_agent.streaming import StreamingSink


class WeatherForecastPlugin(DecoratorPlugin):
    """Weather forecast plugin.

    Forecast data is fabricated. Each call reports its lookup through the
    streaming sink the plugin was constructed with.
    """

    def __init__(
        self,
        sink: StreamingSink,
        random_source: RandomSource | None = None,
        config: PluginConfig | None = None,
    ) -> None:
        """Initialize plugin.

        Args:
            sink: Receives one informative update per forecast
            random_source: Source for temperature and summary
            config: Plugin configuration
        """
        super().__init__(config)
        self._generator = ForecastGenerator(sink, random_source)

    @property
    def name(self) -> str:
        return "weather"

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def description(self) -> str:
        return "Get the weather forecast for a date and location"

    @tool(description="Get the weather forecast for a specified date and location")
    async def get_forecast_for_date(
        self,
        date: Annotated[str, Field(description="The date for the forecast")],
        location: Annotated[str, Field(description="The location for the forecast")],
    ) -> Forecast:
        """Get the weather forecast for a specified date and location."""
        return await self._generator.get_forecast(date, location)
