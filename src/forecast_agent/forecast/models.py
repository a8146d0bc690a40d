"""Forecast data model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

TEMPERATURE_MIN_C = -20
TEMPERATURE_MAX_C = 55


class WeatherSummary(str, Enum):
    """Weather condition descriptors a forecast can carry."""

    FREEZING = "Freezing"
    BRACING = "Bracing"
    CHILLY = "Chilly"
    COOL = "Cool"
    MILD = "Mild"
    WARM = "Warm"
    BALMY = "Balmy"
    HOT = "Hot"
    SWELTERING = "Sweltering"
    SCORCHING = "Scorching"

    def __str__(self) -> str:
        return self.value


class Forecast(BaseModel):
    """A single-day forecast for a location.

    ``date`` is always the caller's input, exactly as given.
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Requested date, echoed verbatim")
    temperature_c: int = Field(
        ...,
        ge=TEMPERATURE_MIN_C,
        le=TEMPERATURE_MAX_C,
        description="Temperature in degrees Celsius",
    )
    summary: WeatherSummary = Field(..., description="Weather condition")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def temperature_f(self) -> int:
        """Temperature in degrees Fahrenheit."""
        return 32 + int(self.temperature_c / 0.5556)
