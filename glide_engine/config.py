"""Configuration loader for the glide performance engine.

A fleet file lists named weather scenarios and named glide profiles::

    conditions:
      - name: calm_summer
        wind_speed: 5
        ...
    profiles:
      - name: club_sailplane
        kind: rigid_wing
        wing_area: 11
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from glide_engine.core.parachute import CanopyType, Parachute
from glide_engine.core.profile import GlideProfile
from glide_engine.core.rigid_wing import RigidWingGlider
from glide_engine.core.small_animal import SmallAnimalGlider
from glide_engine.core.weather import WeatherCondition

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
FLEET_PATH: Path = DATA_DIR / "fleet.yaml"

_CONDITION_FIELDS: tuple[str, ...] = (
    "wind_speed",
    "temperature",
    "humidity",
    "visibility",
)

_PROFILE_FIELDS: dict[str, tuple[str, ...]] = {
    "rigid_wing": (
        "wingspan",
        "wing_area",
        "empty_weight",
        "max_takeoff_weight",
        "best_glide_speed",
    ),
    "small_animal": (
        "body_length",
        "membrane_area",
        "weight",
        "tail_length",
    ),
    "parachute": (
        "canopy_diameter",
        "canopy_area",
        "total_weight",
        "drag_coefficient",
    ),
}


@dataclass(frozen=True)
class FleetConfig:
    """Named weather scenarios and glide profiles loaded from YAML.

    Attributes:
        conditions: Mapping from scenario name to weather snapshot.
        profiles: Mapping from profile name to glide profile.
    """

    conditions: dict[str, WeatherCondition]
    profiles: dict[str, GlideProfile]


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _label(section: str, idx: int, entry: dict[str, Any]) -> str:
    return f"{section} entry {idx} ({entry.get('name', '<unknown>')})"


def _numeric_fields(
    section: str,
    idx: int,
    entry: dict[str, Any],
    fields: tuple[str, ...],
) -> dict[str, float]:
    """Check that *fields* are present and numeric, returning them as floats."""
    values: dict[str, float] = {}
    for field in fields:
        if field not in entry:
            raise ValueError(
                f"{_label(section, idx, entry)} is missing required field '{field}'"
            )
        val = entry[field]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise ValueError(
                f"{_label(section, idx, entry)}: "
                f"'{field}' must be numeric, got {type(val).__name__}"
            )
        values[field] = float(val)
    return values


def _load_named(
    section: str,
    entries: list[dict[str, Any]],
    build: Callable[[int, dict[str, Any]], Any],
) -> dict[str, Any]:
    """Build each entry of a section, keyed by its unique name."""
    result: dict[str, Any] = {}
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"{section} entry {idx} must be a mapping")
        name = entry.get("name")
        if not name:
            raise ValueError(f"{section} entry {idx} is missing required field 'name'")
        key = str(name)
        if key in result:
            raise ValueError(f"{section} entry {idx}: duplicate name '{key}'")
        result[key] = build(idx, entry)
        logger.debug("Loaded %s entry %r", section, key)
    return result


# ---------------------------------------------------------------------------
# Entry builders
# ---------------------------------------------------------------------------


def _build_condition(idx: int, entry: dict[str, Any]) -> WeatherCondition:
    values = _numeric_fields("conditions", idx, entry, _CONDITION_FIELDS)
    has_thermals = entry.get("has_thermals", False)
    if not isinstance(has_thermals, bool):
        raise ValueError(
            f"{_label('conditions', idx, entry)}: "
            f"'has_thermals' must be a boolean, got {type(has_thermals).__name__}"
        )
    return WeatherCondition(has_thermals=has_thermals, **values)


def _build_profile(idx: int, entry: dict[str, Any]) -> GlideProfile:
    kind = entry.get("kind")
    if kind not in _PROFILE_FIELDS:
        raise ValueError(
            f"{_label('profiles', idx, entry)}: unknown kind {kind!r}, "
            f"expected one of {sorted(_PROFILE_FIELDS)}"
        )
    values = _numeric_fields("profiles", idx, entry, _PROFILE_FIELDS[kind])

    if kind == "rigid_wing":
        return RigidWingGlider(**values)
    if kind == "small_animal":
        return SmallAnimalGlider(**values)

    if "canopy_type" not in entry:
        raise ValueError(
            f"{_label('profiles', idx, entry)} is missing required field 'canopy_type'"
        )
    return Parachute(canopy_type=CanopyType.parse(str(entry["canopy_type"])), **values)


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_fleet(path: Path | None = None) -> FleetConfig:
    """Load weather scenarios and glide profiles from a YAML file.

    Args:
        path: Optional override for the fleet file path.

    Returns:
        A :class:`FleetConfig` with name-keyed conditions and profiles.

    Raises:
        FileNotFoundError: If the fleet file does not exist.
        ValueError: If an entry is missing fields, has non-numeric values,
            names an unknown profile kind, or repeats a name.
        ConstructionError: If an entry's values violate a model invariant.
    """
    fleet_path = path or FLEET_PATH
    if not fleet_path.exists():
        raise FileNotFoundError(f"Fleet file not found: {fleet_path}")

    with open(fleet_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    conditions: dict[str, WeatherCondition] = _load_named(
        "conditions", data.get("conditions") or [], _build_condition
    )
    profiles: dict[str, GlideProfile] = _load_named(
        "profiles", data.get("profiles") or [], _build_profile
    )

    logger.info(
        "Loaded %d conditions and %d profiles from %s",
        len(conditions),
        len(profiles),
        fleet_path,
    )
    return FleetConfig(conditions=conditions, profiles=profiles)
