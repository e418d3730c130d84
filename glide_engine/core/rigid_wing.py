"""Rigid-wing sailplane model for the glide performance engine."""

from dataclasses import dataclass

from glide_engine.core.capability import check_descent_arguments
from glide_engine.core.errors import ConstructionError
from glide_engine.core.weather import WeatherCondition

KMH_PER_MS: float = 3.6

MAX_WIND_SPEED: float = 15.0  # m/s
MIN_VISIBILITY: float = 5000.0  # m
MIN_TEMPERATURE: float = -10.0  # deg C
MAX_TEMPERATURE: float = 35.0  # deg C


@dataclass(frozen=True)
class RigidWingGlider:
    """Deterministic representation of a rigid-wing glider.

    The glide ratio is an empirical proxy driven by wing loading, not a
    lift/drag polar.  Typical sailplanes sit between 20:1 and 60:1; the
    proxy only tracks the trend.

    Attributes:
        wingspan: Wingspan in metres (>= 0.0).
        wing_area: Wing area in square metres (> 0.0).
        empty_weight: Empty weight in kg (> 0.0).
        max_takeoff_weight: Maximum takeoff weight in kg
            (>= empty_weight).
        best_glide_speed: Best-glide airspeed in km/h (>= 0.0).
    """

    wingspan: float
    wing_area: float
    empty_weight: float
    max_takeoff_weight: float
    best_glide_speed: float

    def __post_init__(self) -> None:
        """Validate glider parameters."""
        if not self.wingspan >= 0.0:
            raise ConstructionError("wingspan must be >= 0.0.")
        if not self.wing_area > 0.0:
            raise ConstructionError("wing_area must be > 0.0.")
        if not self.empty_weight > 0.0:
            raise ConstructionError("empty_weight must be > 0.0.")
        if not self.max_takeoff_weight >= self.empty_weight:
            raise ConstructionError("max_takeoff_weight must be >= empty_weight.")
        if not self.best_glide_speed >= 0.0:
            raise ConstructionError("best_glide_speed must be >= 0.0.")

    def glide_ratio(self) -> float:
        """Return ``(wing_area * 3 / empty_weight) * 20``."""
        return self.wing_area * 3.0 / self.empty_weight * 20.0

    def descent_rate(self, altitude: float, airspeed: float) -> float:
        """Sink rate in m/s for *airspeed* km/h along the glide path.

        Altitude does not enter this model; it is validated and otherwise
        ignored.

        Raises:
            ValueError: If altitude or airspeed is negative.
        """
        check_descent_arguments(altitude, airspeed)
        return airspeed / (self.glide_ratio() * KMH_PER_MS)

    def is_airworthy(self, conditions: WeatherCondition) -> bool:
        return (
            conditions.wind_speed < MAX_WIND_SPEED
            and conditions.visibility > MIN_VISIBILITY
            and MIN_TEMPERATURE < conditions.temperature < MAX_TEMPERATURE
        )
