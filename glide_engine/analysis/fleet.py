"""Fleet-level tabulation of glide performance.

This module provides functions to:

1. Evaluate every named profile under every named weather scenario and
   collect the results into a :class:`pandas.DataFrame`.
2. Build the pairwise descent-rate delta matrix for a set of profiles.
3. Sweep a single profile's descent rate across an altitude grid.

Everything here is a thin layer over :mod:`glide_engine.core.evaluator`;
no new physics is introduced.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from glide_engine.core.capability import check_descent_arguments
from glide_engine.core.evaluator import (
    REFERENCE_AIRSPEED,
    REFERENCE_ALTITUDE,
    compare,
    evaluate,
)
from glide_engine.core.profile import GlideProfile, profile_kind
from glide_engine.core.weather import WeatherCondition

FLEET_COLUMNS: list[str] = [
    "profile",
    "kind",
    "condition",
    "glide_ratio",
    "descent_rate",
    "airworthy",
]

# ---------------------------------------------------------------------------
# Fleet table
# ---------------------------------------------------------------------------


def evaluate_fleet(
    profiles: Mapping[str, GlideProfile],
    conditions: Mapping[str, WeatherCondition],
    altitude: float = REFERENCE_ALTITUDE,
    airspeed: float = REFERENCE_AIRSPEED,
) -> pd.DataFrame:
    """Evaluate every profile under every weather scenario.

    Rows are ordered by profile (in mapping order), then by condition.

    Args:
        profiles: Mapping from profile name to glide profile.
        conditions: Mapping from scenario name to weather snapshot.
        altitude: Altitude in metres for the descent rate.
        airspeed: Airspeed in km/h for the descent rate.

    Returns:
        DataFrame with columns ``profile``, ``kind``, ``condition``,
        ``glide_ratio``, ``descent_rate`` and ``airworthy``.
    """
    rows: list[dict[str, object]] = []
    for profile_name, profile in profiles.items():
        kind: str = profile_kind(profile)
        for condition_name, weather in conditions.items():
            result = evaluate(profile, weather, altitude=altitude, airspeed=airspeed)
            rows.append(
                {
                    "profile": profile_name,
                    "kind": kind,
                    "condition": condition_name,
                    "glide_ratio": result.glide_ratio,
                    "descent_rate": result.descent_rate,
                    "airworthy": result.airworthy,
                }
            )
    return pd.DataFrame(rows, columns=FLEET_COLUMNS)


def compare_matrix(
    profiles: Mapping[str, GlideProfile],
    conditions: WeatherCondition,
    altitude: float = REFERENCE_ALTITUDE,
    airspeed: float = REFERENCE_AIRSPEED,
) -> pd.DataFrame:
    """Pairwise descent-rate deltas between all profiles.

    The matrix is symmetric with a zero diagonal, since
    :func:`~glide_engine.core.evaluator.compare` is order-independent in
    its delta.

    Returns:
        Square DataFrame indexed and columned by profile name.
    """
    names: list[str] = list(profiles)
    matrix = np.zeros((len(names), len(names)), dtype=float)
    for i, name_a in enumerate(names):
        for j in range(i + 1, len(names)):
            delta: float = compare(
                profiles[name_a],
                profiles[names[j]],
                conditions,
                altitude=altitude,
                airspeed=airspeed,
            ).descent_rate_delta
            matrix[i, j] = delta
            matrix[j, i] = delta
    return pd.DataFrame(matrix, index=names, columns=names)


# ---------------------------------------------------------------------------
# Altitude sweep
# ---------------------------------------------------------------------------


def descent_profile(
    profile: GlideProfile,
    altitudes: ArrayLike,
    airspeed: float = REFERENCE_AIRSPEED,
) -> NDArray[np.float64]:
    """Descent rate of *profile* at each altitude in *altitudes*.

    Only the parachute model varies with altitude; the winged variants
    return a constant array.

    Args:
        profile: Any glide profile variant.
        altitudes: Scalar or 1-D array of altitudes in metres.
        airspeed: Airspeed in km/h (>= 0).

    Returns:
        1-D float array aligned with *altitudes*.

    Raises:
        ValueError: If *altitudes* has more than one dimension, any altitude
            is negative, or airspeed is negative or not finite.
    """
    check_descent_arguments(0.0, airspeed)
    alt = np.atleast_1d(np.asarray(altitudes, dtype=float))
    if alt.ndim > 1:
        raise ValueError(f"altitudes must be 1-D, got {alt.ndim} dimensions.")
    if not np.all(alt >= 0.0):
        raise ValueError("All altitudes must be >= 0.")
    return np.array([profile.descent_rate(float(h), airspeed) for h in alt])
