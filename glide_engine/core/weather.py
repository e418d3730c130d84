"""Ambient weather model for the glide performance engine."""

import math
from dataclasses import dataclass

from glide_engine.core.errors import ConstructionError


@dataclass(frozen=True)
class WeatherCondition:
    """Immutable snapshot of the conditions a glide is evaluated under.

    Attributes:
        wind_speed: Mean wind speed in m/s (>= 0.0).
        temperature: Air temperature in degrees Celsius.
        humidity: Relative humidity in percent (0.0-100.0).
        has_thermals: Whether significant thermal activity is present.
        visibility: Horizontal visibility in metres (>= 0.0).
    """

    wind_speed: float
    temperature: float
    humidity: float
    has_thermals: bool
    visibility: float

    def __post_init__(self) -> None:
        """Validate weather parameters."""
        if not math.isfinite(self.temperature):
            raise ConstructionError("temperature must be a finite number.")
        if not self.wind_speed >= 0.0:
            raise ConstructionError("wind_speed must be >= 0.0.")
        if not 0.0 <= self.humidity <= 100.0:
            raise ConstructionError("humidity must be between 0.0 and 100.0.")
        if not self.visibility >= 0.0:
            raise ConstructionError("visibility must be >= 0.0.")
