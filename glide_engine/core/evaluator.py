"""Performance evaluation over glide profiles.

The evaluator runs the capability set of one or two profiles against a
weather snapshot and returns plain result records.  Formatting and
display are left to the caller.

Descent rates are reported at a fixed reference point (1000 m altitude,
100 km/h airspeed) unless the caller overrides it.
"""

from __future__ import annotations

from dataclasses import dataclass

from glide_engine.core.capability import GlideCapability
from glide_engine.core.weather import WeatherCondition

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

REFERENCE_ALTITUDE: float = 1000.0  # m
REFERENCE_AIRSPEED: float = 100.0  # km/h

# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EvaluationResult:
    """Metrics for a single profile under one weather snapshot.

    Attributes:
        glide_ratio: Dimensionless glide ratio.
        descent_rate: Descent rate in m/s at ``altitude`` and ``airspeed``.
        airworthy: Airworthiness verdict for the conditions.
        altitude: Altitude in metres the descent rate was taken at.
        airspeed: Airspeed in km/h the descent rate was taken at.
    """

    glide_ratio: float
    descent_rate: float
    airworthy: bool
    altitude: float = REFERENCE_ALTITUDE
    airspeed: float = REFERENCE_AIRSPEED


@dataclass(frozen=True)
class ComparisonResult:
    """Side-by-side metrics for two profiles.

    Attributes:
        ratio_a: Glide ratio of the first profile.
        ratio_b: Glide ratio of the second profile.
        descent_rate_delta: Absolute difference of the two descent rates
            in m/s.  Independent of operand order.
        airworthy_a: Airworthiness verdict of the first profile.
        airworthy_b: Airworthiness verdict of the second profile.
        altitude: Altitude in metres the descent rates were taken at.
        airspeed: Airspeed in km/h the descent rates were taken at.
    """

    ratio_a: float
    ratio_b: float
    descent_rate_delta: float
    airworthy_a: bool
    airworthy_b: bool
    altitude: float = REFERENCE_ALTITUDE
    airspeed: float = REFERENCE_AIRSPEED


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def evaluate(
    profile: GlideCapability,
    conditions: WeatherCondition,
    altitude: float = REFERENCE_ALTITUDE,
    airspeed: float = REFERENCE_AIRSPEED,
) -> EvaluationResult:
    """Evaluate a single glide profile.

    Args:
        profile: Any glide profile variant.
        conditions: Weather snapshot for the airworthiness check.
        altitude: Altitude in metres for the descent rate (>= 0).
        airspeed: Airspeed in km/h for the descent rate (>= 0).

    Returns:
        An :class:`EvaluationResult` for *profile*.

    Raises:
        ValueError: If altitude or airspeed is negative.
    """
    return EvaluationResult(
        glide_ratio=profile.glide_ratio(),
        descent_rate=profile.descent_rate(altitude, airspeed),
        airworthy=profile.is_airworthy(conditions),
        altitude=altitude,
        airspeed=airspeed,
    )


def compare(
    profile_a: GlideCapability,
    profile_b: GlideCapability,
    conditions: WeatherCondition,
    altitude: float = REFERENCE_ALTITUDE,
    airspeed: float = REFERENCE_AIRSPEED,
) -> ComparisonResult:
    """Compare two glide profiles under the same conditions.

    The descent-rate delta is ``|descent_a - descent_b|``, so swapping the
    operands swaps ``ratio_a``/``ratio_b`` but leaves the delta unchanged.

    Args:
        profile_a: First glide profile.
        profile_b: Second glide profile.
        conditions: Shared weather snapshot.
        altitude: Altitude in metres for both descent rates (>= 0).
        airspeed: Airspeed in km/h for both descent rates (>= 0).

    Returns:
        A :class:`ComparisonResult`.

    Raises:
        ValueError: If altitude or airspeed is negative.
    """
    rate_a: float = profile_a.descent_rate(altitude, airspeed)
    rate_b: float = profile_b.descent_rate(altitude, airspeed)

    return ComparisonResult(
        ratio_a=profile_a.glide_ratio(),
        ratio_b=profile_b.glide_ratio(),
        descent_rate_delta=abs(rate_a - rate_b),
        airworthy_a=profile_a.is_airworthy(conditions),
        airworthy_b=profile_b.is_airworthy(conditions),
        altitude=altitude,
        airspeed=airspeed,
    )
