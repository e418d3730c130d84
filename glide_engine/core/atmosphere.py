"""Exponential atmosphere model used by the terminal-velocity calculation.

Density falls off with altitude following a single scale height::

    rho(h) = SEA_LEVEL_DENSITY * exp(-h / SCALE_HEIGHT)

This is the only altitude effect in the engine.  The rigid-wing and
small-animal glide models do not consult it.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

SEA_LEVEL_DENSITY: float = 1.225  # kg/m^3
SCALE_HEIGHT: float = 10_000.0  # m
GRAVITY: float = 9.81  # m/s^2


def air_density(altitude: float) -> float:
    """Return air density in kg/m^3 at *altitude* metres.

    Raises:
        ValueError: If altitude < 0.
    """
    if not altitude >= 0.0:
        raise ValueError("altitude must be >= 0.")
    return SEA_LEVEL_DENSITY * math.exp(-altitude / SCALE_HEIGHT)


def air_density_profile(altitudes: ArrayLike) -> NDArray[np.float64]:
    """Vectorised :func:`air_density` over an array of altitudes.

    Args:
        altitudes: Scalar or array of altitudes in metres.

    Returns:
        Array of densities with the same shape as *altitudes*.

    Raises:
        ValueError: If any altitude is negative.
    """
    alt = np.asarray(altitudes, dtype=float)
    if not np.all(alt >= 0.0):
        raise ValueError("All altitudes must be >= 0.")
    return SEA_LEVEL_DENSITY * np.exp(-alt / SCALE_HEIGHT)
