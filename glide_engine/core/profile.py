"""Closed union of the supported glide profile variants."""

from __future__ import annotations

from typing import Union

from glide_engine.core.parachute import Parachute
from glide_engine.core.rigid_wing import RigidWingGlider
from glide_engine.core.small_animal import SmallAnimalGlider

GlideProfile = Union[RigidWingGlider, SmallAnimalGlider, Parachute]

PROFILE_TYPES: tuple[type, ...] = (RigidWingGlider, SmallAnimalGlider, Parachute)

_KIND_NAMES: dict[type, str] = {
    RigidWingGlider: "rigid_wing",
    SmallAnimalGlider: "small_animal",
    Parachute: "parachute",
}


def profile_kind(profile: GlideProfile) -> str:
    """Return the short kind label of *profile*.

    Raises:
        TypeError: If *profile* is not one of the supported variants.
    """
    try:
        return _KIND_NAMES[type(profile)]
    except KeyError:
        raise TypeError(
            f"Unsupported glide profile type: {type(profile).__name__}"
        ) from None
