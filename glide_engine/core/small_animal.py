"""Small gliding-mammal model (e.g. a sugar glider)."""

from dataclasses import dataclass

from glide_engine.core.capability import check_descent_arguments
from glide_engine.core.errors import ConstructionError
from glide_engine.core.weather import WeatherCondition

SPEED_SCALE: float = 2.5

MAX_WIND_SPEED: float = 5.0  # m/s
MIN_TEMPERATURE: float = 15.0  # deg C
MAX_TEMPERATURE: float = 30.0  # deg C


@dataclass(frozen=True)
class SmallAnimalGlider:
    """Deterministic representation of a membrane-winged animal.

    Units are deliberately small-scale: centimetres and grams.

    Attributes:
        body_length: Body length in cm (>= 0.0).
        membrane_area: Gliding membrane (patagium) area in cm^2 (> 0.0).
        weight: Body mass in grams (> 0.0).
        tail_length: Tail length in cm (>= 0.0).
    """

    body_length: float
    membrane_area: float
    weight: float
    tail_length: float

    def __post_init__(self) -> None:
        """Validate animal parameters."""
        if not self.body_length >= 0.0:
            raise ConstructionError("body_length must be >= 0.0.")
        if not self.membrane_area > 0.0:
            raise ConstructionError("membrane_area must be > 0.0.")
        if not self.weight > 0.0:
            raise ConstructionError("weight must be > 0.0.")
        if not self.tail_length >= 0.0:
            raise ConstructionError("tail_length must be >= 0.0.")

    def glide_ratio(self) -> float:
        """Return ``(membrane_area / (weight / 100)) * 0.15``."""
        return self.membrane_area / (self.weight / 100.0) * 0.15

    def descent_rate(self, altitude: float, airspeed: float) -> float:
        """Simplified sink rate in m/s; altitude is ignored.

        Raises:
            ValueError: If altitude or airspeed is negative.
        """
        check_descent_arguments(altitude, airspeed)
        return airspeed / (self.glide_ratio() * SPEED_SCALE)

    def is_airworthy(self, conditions: WeatherCondition) -> bool:
        return (
            conditions.wind_speed < MAX_WIND_SPEED
            and MIN_TEMPERATURE < conditions.temperature < MAX_TEMPERATURE
            and not conditions.has_thermals
        )
