"""Core calculation modules for the glide performance engine."""

from glide_engine.core.atmosphere import air_density, air_density_profile
from glide_engine.core.capability import GlideCapability
from glide_engine.core.errors import ConstructionError, DomainError
from glide_engine.core.evaluator import (
    REFERENCE_AIRSPEED,
    REFERENCE_ALTITUDE,
    ComparisonResult,
    EvaluationResult,
    compare,
    evaluate,
)
from glide_engine.core.parachute import CanopyType, Parachute
from glide_engine.core.profile import GlideProfile, profile_kind
from glide_engine.core.rigid_wing import RigidWingGlider
from glide_engine.core.small_animal import SmallAnimalGlider
from glide_engine.core.weather import WeatherCondition

__all__ = [
    "CanopyType",
    "ComparisonResult",
    "ConstructionError",
    "DomainError",
    "EvaluationResult",
    "GlideCapability",
    "GlideProfile",
    "Parachute",
    "REFERENCE_AIRSPEED",
    "REFERENCE_ALTITUDE",
    "RigidWingGlider",
    "SmallAnimalGlider",
    "WeatherCondition",
    "air_density",
    "air_density_profile",
    "compare",
    "evaluate",
    "profile_kind",
]
