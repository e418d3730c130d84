"""Tests for single-profile evaluation and pairwise comparison."""

import pytest

from glide_engine.core.evaluator import (
    REFERENCE_AIRSPEED,
    REFERENCE_ALTITUDE,
    ComparisonResult,
    EvaluationResult,
    compare,
    evaluate,
)
from glide_engine.core.parachute import CanopyType, Parachute
from glide_engine.core.rigid_wing import RigidWingGlider
from glide_engine.core.small_animal import SmallAnimalGlider
from glide_engine.core.weather import WeatherCondition

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _sample_weather(wind_speed: float = 5.0) -> WeatherCondition:
    return WeatherCondition(
        wind_speed=wind_speed,
        temperature=20.0,
        humidity=60.0,
        has_thermals=False,
        visibility=10000.0,
    )


def _sailplane() -> RigidWingGlider:
    return RigidWingGlider(
        wingspan=15.0,
        wing_area=11.0,
        empty_weight=300.0,
        max_takeoff_weight=450.0,
        best_glide_speed=90.0,
    )


def _sugar_glider() -> SmallAnimalGlider:
    return SmallAnimalGlider(
        body_length=20.0,
        membrane_area=300.0,
        weight=150.0,
        tail_length=15.0,
    )


def _ram_air() -> Parachute:
    return Parachute(
        canopy_diameter=8.0,
        canopy_area=50.0,
        total_weight=100.0,
        canopy_type=CanopyType.RAM_AIR,
        drag_coefficient=1.2,
    )


# ---------------------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------------------


def test_reference_point_constants() -> None:
    assert REFERENCE_ALTITUDE == 1000.0
    assert REFERENCE_AIRSPEED == 100.0


def test_evaluate_sailplane() -> None:
    result = evaluate(_sailplane(), _sample_weather())
    assert isinstance(result, EvaluationResult)
    assert result.glide_ratio == pytest.approx(2.2)
    assert result.descent_rate == pytest.approx(12.6263, abs=1e-4)
    assert result.airworthy is True
    assert result.altitude == REFERENCE_ALTITUDE
    assert result.airspeed == REFERENCE_AIRSPEED


def test_evaluate_parachute() -> None:
    result = evaluate(_ram_air(), _sample_weather())
    assert result.glide_ratio == 3.0
    assert result.descent_rate == pytest.approx(5.4315, abs=1e-3)
    assert result.airworthy is True


def test_evaluate_sugar_glider_at_wind_limit() -> None:
    """At 5 m/s the sugar glider is grounded while the others may fly."""
    weather = _sample_weather(wind_speed=5.0)
    assert evaluate(_sugar_glider(), weather).airworthy is False
    assert evaluate(_sailplane(), weather).airworthy is True
    assert evaluate(_ram_air(), weather).airworthy is True


def test_all_variants_airworthy_in_light_wind() -> None:
    weather = _sample_weather(wind_speed=4.0)
    for profile in (_sailplane(), _sugar_glider(), _ram_air()):
        assert evaluate(profile, weather).airworthy is True


def test_evaluate_custom_point() -> None:
    result = evaluate(_sailplane(), _sample_weather(), altitude=0.0, airspeed=72.0)
    assert result.descent_rate == pytest.approx(72.0 / (2.2 * 3.6))
    assert result.altitude == 0.0
    assert result.airspeed == 72.0


def test_evaluate_is_deterministic() -> None:
    weather = _sample_weather()
    assert evaluate(_ram_air(), weather) == evaluate(_ram_air(), weather)


def test_evaluate_rejects_negative_altitude() -> None:
    with pytest.raises(ValueError, match="altitude"):
        evaluate(_sailplane(), _sample_weather(), altitude=-1.0)


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------


def test_compare_sailplane_vs_parachute() -> None:
    result = compare(_sailplane(), _ram_air(), _sample_weather())
    assert isinstance(result, ComparisonResult)
    assert result.ratio_a == pytest.approx(2.2)
    assert result.ratio_b == 3.0
    assert result.descent_rate_delta == pytest.approx(12.6263 - 5.4315, abs=1e-3)
    assert result.airworthy_a is True
    assert result.airworthy_b is True


@pytest.mark.parametrize(
    "build_a, build_b",
    [
        (_sailplane, _ram_air),
        (_sailplane, _sugar_glider),
        (_sugar_glider, _ram_air),
    ],
)
def test_compare_delta_symmetric(build_a, build_b) -> None:  # type: ignore[no-untyped-def]
    weather = _sample_weather()
    forward = compare(build_a(), build_b(), weather)
    backward = compare(build_b(), build_a(), weather)
    assert forward.descent_rate_delta == backward.descent_rate_delta
    assert forward.ratio_a == backward.ratio_b
    assert forward.ratio_b == backward.ratio_a


def test_compare_delta_non_negative() -> None:
    result = compare(_sugar_glider(), _sailplane(), _sample_weather())
    assert result.descent_rate_delta >= 0.0


def test_compare_with_itself_is_zero() -> None:
    result = compare(_ram_air(), _ram_air(), _sample_weather())
    assert result.descent_rate_delta == 0.0


def test_compare_custom_point() -> None:
    result = compare(_ram_air(), _sailplane(), _sample_weather(), altitude=0.0)
    expected = abs(_ram_air().descent_rate(0.0, 100.0) - _sailplane().descent_rate(0.0, 100.0))
    assert result.descent_rate_delta == pytest.approx(expected)
    assert result.altitude == 0.0
