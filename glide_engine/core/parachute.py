"""Parachute model for the glide performance engine.

Unlike the winged variants, a parachute's descent rate does not depend on
forward airspeed.  It is the terminal velocity at which drag on the canopy
balances the suspended weight::

    v_t = sqrt(2 * m * g / (rho(h) * A * C_d))

where ``rho(h)`` comes from :mod:`glide_engine.core.atmosphere`.  The
airspeed argument of :meth:`Parachute.descent_rate` is accepted for
interface uniformity and otherwise ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from glide_engine.core.atmosphere import GRAVITY, air_density
from glide_engine.core.capability import check_descent_arguments
from glide_engine.core.errors import ConstructionError, DomainError
from glide_engine.core.weather import WeatherCondition

MAX_WIND_SPEED: float = 10.0  # m/s
MIN_VISIBILITY: float = 3000.0  # m

# ---------------------------------------------------------------------------
# Canopy types
# ---------------------------------------------------------------------------


class CanopyType(Enum):
    """Canopy construction, which fixes the achievable glide ratio."""

    ROUND = "round"
    RAM_AIR = "ram-air"

    @classmethod
    def parse(cls, label: str) -> CanopyType:
        """Resolve a configuration label such as ``"RAM-air"``.

        Matching ignores case and treats ``-``, ``_`` and spaces alike, so
        ``"ram_air"``, ``"Ram Air"`` and ``"RamAir"`` all resolve to
        :attr:`RAM_AIR`.

        Raises:
            ConstructionError: If the label names no known canopy type.
        """
        key = "".join(ch for ch in label.lower() if ch not in "-_ ")
        for member in cls:
            if member.value.replace("-", "") == key:
                return member
        raise ConstructionError(f"Unknown canopy type: {label!r}")


GLIDE_RATIOS: dict[CanopyType, float] = {
    CanopyType.ROUND: 0.5,
    CanopyType.RAM_AIR: 3.0,
}

# ---------------------------------------------------------------------------
# Parachute
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Parachute:
    """Deterministic representation of a deployed parachute.

    Attributes:
        canopy_diameter: Nominal canopy diameter in metres (>= 0.0).
        canopy_area: Projected canopy area in square metres (> 0.0).
        total_weight: Suspended weight, jumper plus rig, in kg (> 0.0).
        canopy_type: :class:`CanopyType` of the canopy.
        drag_coefficient: Canopy drag coefficient (> 0.0).
    """

    canopy_diameter: float
    canopy_area: float
    total_weight: float
    canopy_type: CanopyType
    drag_coefficient: float

    def __post_init__(self) -> None:
        """Validate parachute parameters."""
        if not self.canopy_diameter >= 0.0:
            raise ConstructionError("canopy_diameter must be >= 0.0.")
        if not self.canopy_area > 0.0:
            raise ConstructionError("canopy_area must be > 0.0.")
        if not self.total_weight > 0.0:
            raise ConstructionError("total_weight must be > 0.0.")
        if not isinstance(self.canopy_type, CanopyType):
            raise ConstructionError(
                f"canopy_type must be a CanopyType, got {type(self.canopy_type).__name__}."
            )
        if not self.drag_coefficient > 0.0:
            raise ConstructionError("drag_coefficient must be > 0.0.")

    def glide_ratio(self) -> float:
        """Flat lookup by canopy type: 3.0 for ram-air, 0.5 for round."""
        return GLIDE_RATIOS[self.canopy_type]

    def descent_rate(self, altitude: float, airspeed: float) -> float:
        """Terminal velocity in m/s at *altitude* metres.

        Args:
            altitude: Altitude in metres (>= 0).
            airspeed: Ignored; a parachute sinks at terminal velocity
                regardless of forward speed.

        Returns:
            Terminal descent velocity in m/s.  ``math.inf`` once the air
            density underflows to zero at extreme altitude.

        Raises:
            ValueError: If altitude or airspeed is negative or not finite.
            DomainError: If canopy_area or drag_coefficient is not positive.
        """
        check_descent_arguments(altitude, airspeed)
        if not (self.canopy_area > 0.0 and self.drag_coefficient > 0.0):
            raise DomainError(
                "terminal velocity undefined: canopy_area and drag_coefficient "
                "must be > 0."
            )
        drag_term: float = air_density(altitude) * self.canopy_area * self.drag_coefficient
        if drag_term == 0.0:
            return math.inf
        return math.sqrt(2.0 * self.total_weight * GRAVITY / drag_term)

    def is_airworthy(self, conditions: WeatherCondition) -> bool:
        return (
            conditions.wind_speed < MAX_WIND_SPEED
            and conditions.visibility > MIN_VISIBILITY
            and not conditions.has_thermals
        )
