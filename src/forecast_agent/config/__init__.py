"""Forecast agent configuration management."""

from forecast_agent.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
