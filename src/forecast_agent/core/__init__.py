"""Forecast agent core."""

from forecast_agent.core.agent import ForecastAgent

__all__ = ["ForecastAgent"]
