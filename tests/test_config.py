"""Tests for YAML fleet configuration loading."""

from pathlib import Path

import pytest

from glide_engine.config import FleetConfig, load_fleet
from glide_engine.core.errors import ConstructionError
from glide_engine.core.parachute import CanopyType, Parachute
from glide_engine.core.rigid_wing import RigidWingGlider
from glide_engine.core.small_animal import SmallAnimalGlider
from glide_engine.core.weather import WeatherCondition

_CONDITION_YAML = """\
conditions:
  - name: calm
    wind_speed: 5
    temperature: 20
    humidity: 60
    has_thermals: false
    visibility: 10000
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "fleet.yaml"
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Default fleet
# ---------------------------------------------------------------------------


def test_default_fleet_loads() -> None:
    fleet = load_fleet()
    assert isinstance(fleet, FleetConfig)
    assert "calm_summer" in fleet.conditions
    assert {"club_sailplane", "sugar_glider", "sport_canopy"} <= set(fleet.profiles)


def test_default_fleet_types() -> None:
    fleet = load_fleet()
    assert isinstance(fleet.profiles["club_sailplane"], RigidWingGlider)
    assert isinstance(fleet.profiles["sugar_glider"], SmallAnimalGlider)
    canopy = fleet.profiles["sport_canopy"]
    assert isinstance(canopy, Parachute)
    assert canopy.canopy_type is CanopyType.RAM_AIR
    for weather in fleet.conditions.values():
        assert isinstance(weather, WeatherCondition)


def test_default_sailplane_reference_ratio() -> None:
    fleet = load_fleet()
    assert fleet.profiles["club_sailplane"].glide_ratio() == pytest.approx(2.2)


# ---------------------------------------------------------------------------
# Custom files
# ---------------------------------------------------------------------------


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Fleet file not found"):
        load_fleet(tmp_path / "absent.yaml")


def test_empty_file_gives_empty_fleet(tmp_path: Path) -> None:
    fleet = load_fleet(_write(tmp_path, ""))
    assert fleet.conditions == {}
    assert fleet.profiles == {}


def test_conditions_only(tmp_path: Path) -> None:
    fleet = load_fleet(_write(tmp_path, _CONDITION_YAML))
    assert fleet.conditions["calm"].visibility == 10000.0
    assert fleet.profiles == {}


def test_has_thermals_defaults_false(tmp_path: Path) -> None:
    text = _CONDITION_YAML.replace("    has_thermals: false\n", "")
    fleet = load_fleet(_write(tmp_path, text))
    assert fleet.conditions["calm"].has_thermals is False


def test_missing_field_reported(tmp_path: Path) -> None:
    text = _CONDITION_YAML.replace("    humidity: 60\n", "")
    with pytest.raises(ValueError, match="missing required field 'humidity'"):
        load_fleet(_write(tmp_path, text))


def test_non_numeric_field_reported(tmp_path: Path) -> None:
    text = _CONDITION_YAML.replace("wind_speed: 5", "wind_speed: breezy")
    with pytest.raises(ValueError, match="'wind_speed' must be numeric"):
        load_fleet(_write(tmp_path, text))


def test_non_boolean_thermals_reported(tmp_path: Path) -> None:
    text = _CONDITION_YAML.replace("has_thermals: false", "has_thermals: 1")
    with pytest.raises(ValueError, match="has_thermals"):
        load_fleet(_write(tmp_path, text))


def test_duplicate_names_reported(tmp_path: Path) -> None:
    text = _CONDITION_YAML + _CONDITION_YAML.replace("conditions:\n", "")
    with pytest.raises(ValueError, match="duplicate name 'calm'"):
        load_fleet(_write(tmp_path, text))


def test_unknown_kind_reported(tmp_path: Path) -> None:
    text = """\
profiles:
  - name: kite
    kind: hang_glider
"""
    with pytest.raises(ValueError, match="unknown kind 'hang_glider'"):
        load_fleet(_write(tmp_path, text))


def test_parachute_requires_canopy_type(tmp_path: Path) -> None:
    text = """\
profiles:
  - name: reserve
    kind: parachute
    canopy_diameter: 7
    canopy_area: 38
    total_weight: 100
    drag_coefficient: 0.8
"""
    with pytest.raises(ValueError, match="canopy_type"):
        load_fleet(_write(tmp_path, text))


def test_invalid_values_raise_construction_error(tmp_path: Path) -> None:
    text = """\
profiles:
  - name: broken
    kind: small_animal
    body_length: 20
    membrane_area: 0
    weight: 150
    tail_length: 15
"""
    with pytest.raises(ConstructionError, match="membrane_area"):
        load_fleet(_write(tmp_path, text))


def test_round_canopy_parsed(tmp_path: Path) -> None:
    text = """\
profiles:
  - name: reserve
    kind: parachute
    canopy_diameter: 7
    canopy_area: 38
    total_weight: 100
    canopy_type: Round
    drag_coefficient: 0.8
"""
    fleet = load_fleet(_write(tmp_path, text))
    assert fleet.profiles["reserve"].glide_ratio() == 0.5


def test_duplicate_names_differing_in_yaml_type(tmp_path: Path) -> None:
    """A numeric name collides with the same name written as a string."""
    text = """\
conditions:
  - name: "1"
    wind_speed: 5
    temperature: 20
    humidity: 60
    visibility: 10000
  - name: 1
    wind_speed: 8
    temperature: 10
    humidity: 70
    visibility: 9000
"""
    with pytest.raises(ValueError, match="duplicate name '1'"):
        load_fleet(_write(tmp_path, text))
