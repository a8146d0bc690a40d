"""Forecast generation."""

from forecast_agent.forecast.dates import (
    format_long_date,
    parse_date,
    render_long_date,
    resolve_date,
)
from forecast_agent.forecast.generator import ForecastGenerator, get_forecast, lookup_message
from forecast_agent.forecast.models import (
    TEMPERATURE_MAX_C,
    TEMPERATURE_MIN_C,
    Forecast,
    WeatherSummary,
)
from forecast_agent.forecast.random_source import RandomSource, create_random_source

__all__ = [
    "TEMPERATURE_MAX_C",
    "TEMPERATURE_MIN_C",
    "Forecast",
    "ForecastGenerator",
    "RandomSource",
    "WeatherSummary",
    "create_random_source",
    "format_long_date",
    "get_forecast",
    "lookup_message",
    "parse_date",
    "render_long_date",
    "resolve_date",
]
