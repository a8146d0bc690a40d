"""Forecast generation.

A forecast is fabricated: the temperature and summary come from a random
source. Before the forecast is built, one informative update describing the
lookup is pushed to the caller's streaming sink.
"""

from forecast_agent.forecast.dates import resolve_date
from forecast_agent.forecast.models import (
    TEMPERATURE_MAX_C,
    TEMPERATURE_MIN_C,
    Forecast,
    WeatherSummary,
)
from forecast_agent.forecast.random_source import RandomSource, create_random_source
from forecast_agent.logging import get_logger
from forecast_agent.streaming import StreamingSink
from forecast_agent.tracing import get_metrics_collector, traced

logger = get_logger(__name__)

_SUMMARIES = tuple(WeatherSummary)


def lookup_message(location: str, long_date: str) -> str:
    """Build the informative update text for a forecast lookup."""
    return f"Looking up the weather in {location} for {long_date}"


class ForecastGenerator:
    """Generates forecasts and reports progress to a streaming sink.

    The generator holds no per-call state; one instance can serve any
    number of sequential or concurrent calls.
    """

    def __init__(
        self,
        sink: StreamingSink,
        random_source: RandomSource | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            sink: Receives one informative update per forecast
            random_source: Source for temperature and summary (unseeded by default)
        """
        self.sink = sink
        self.random_source = random_source or create_random_source()

    @traced(name="forecast.get_forecast")
    async def get_forecast(self, date: str, location: str) -> Forecast:
        """Get the forecast for a date and location.

        Never fails on input: an unrecognized ``date`` is shown as-is in the
        update text. Errors raised by the sink propagate unchanged.

        Args:
            date: Date to forecast, any string
            location: Location to forecast, any string

        Returns:
            Forecast whose ``date`` is exactly the ``date`` argument
        """
        parsed, long_date = resolve_date(date)

        await self.sink.queue_informative_update(lookup_message(location, long_date))

        forecast = Forecast(
            date=date,
            temperature_c=self.random_source.randint(TEMPERATURE_MIN_C, TEMPERATURE_MAX_C),
            summary=self.random_source.choice(_SUMMARIES),
        )

        logger.debug(
            "Forecast generated",
            location=location,
            date=date,
            date_parsed=parsed is not None,
            temperature_c=forecast.temperature_c,
            summary=forecast.summary.value,
        )
        get_metrics_collector().record_forecast(
            forecast.summary.value, date_parsed=parsed is not None
        )

        return forecast


async def get_forecast(
    date: str,
    location: str,
    sink: StreamingSink,
    random_source: RandomSource | None = None,
) -> Forecast:
    """Generate a single forecast without keeping a generator around.

    Args:
        date: Date to forecast, any string
        location: Location to forecast, any string
        sink: Receives the informative update
        random_source: Optional random source

    Returns:
        Generated forecast
    """
    return await ForecastGenerator(sink, random_source).get_forecast(date, location)
