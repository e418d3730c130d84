"""Capability contract shared by every glide profile variant.

A variant is anything that can report a glide ratio, a descent rate for a
given altitude and airspeed, and whether it may fly in a given weather
snapshot.  Variants are free to ignore arguments their model has no use
for, but must still accept them so that callers can treat every variant
uniformly.
"""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

from glide_engine.core.weather import WeatherCondition


@runtime_checkable
class GlideCapability(Protocol):
    """Operations every glide profile supports."""

    def glide_ratio(self) -> float:
        """Horizontal distance per unit of altitude lost (> 0)."""
        ...

    def descent_rate(self, altitude: float, airspeed: float) -> float:
        """Vertical speed in m/s (>= 0) at *altitude* m and *airspeed* km/h."""
        ...

    def is_airworthy(self, conditions: WeatherCondition) -> bool:
        """Whether *conditions* fall inside the safe-operation envelope."""
        ...


def check_descent_arguments(altitude: float, airspeed: float) -> None:
    """Reject non-finite or negative descent-rate arguments.

    Raises:
        ValueError: If altitude or airspeed is NaN, infinite or negative.
    """
    if not math.isfinite(altitude):
        raise ValueError("altitude must be a finite number.")
    if not math.isfinite(airspeed):
        raise ValueError("airspeed must be a finite number.")
    if altitude < 0.0:
        raise ValueError("altitude must be >= 0.")
    if airspeed < 0.0:
        raise ValueError("airspeed must be >= 0.")
