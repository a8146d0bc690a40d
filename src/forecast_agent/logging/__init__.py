"""Structured logging for the forecast agent."""

from forecast_agent.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
