"""Decorators for the forecast agent."""

from forecast_agent.decorators.tool import tool

__all__ = ["tool"]
