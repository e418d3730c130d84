"""CLI entrypoint for the glide performance engine."""

from __future__ import annotations

import logging
import sys

from glide_engine import __version__
from glide_engine.config import load_fleet
from glide_engine.core.evaluator import (
    REFERENCE_AIRSPEED,
    REFERENCE_ALTITUDE,
    compare,
    evaluate,
)
from glide_engine.core.profile import profile_kind

_DEMO_CONDITION: str = "calm_summer"
_DEMO_PAIR: tuple[str, str] = ("club_sailplane", "sport_canopy")


def main() -> None:
    """Run a demonstration of the glide evaluation core."""
    logging.basicConfig(level=logging.WARNING)

    print(f"Glide Performance Engine v{__version__}")
    print("=" * 56)

    fleet = load_fleet()
    weather = fleet.conditions[_DEMO_CONDITION]
    print(
        f"\nConditions '{_DEMO_CONDITION}': wind {weather.wind_speed:.1f} m/s, "
        f"{weather.temperature:.1f} C, visibility {weather.visibility:.0f} m, "
        f"thermals {'yes' if weather.has_thermals else 'no'}"
    )
    print("-" * 56)

    # -- Single-profile analysis ----------------------------------------------
    for name, profile in fleet.profiles.items():
        result = evaluate(profile, weather)
        print(f"\n{name} ({profile_kind(profile)}):")
        print(f"  Glide Ratio: {result.glide_ratio:.2f}:1")
        print(
            f"  Descent Rate at {REFERENCE_ALTITUDE:.0f}m, "
            f"{REFERENCE_AIRSPEED:.0f}km/h: {result.descent_rate:.2f} m/s"
        )
        print(f"  Airworthy in current conditions: {result.airworthy}")

    # -- Comparison -----------------------------------------------------------
    name_a, name_b = _DEMO_PAIR
    cmp = compare(fleet.profiles[name_a], fleet.profiles[name_b], weather)
    print("\nComparative Analysis:")
    print(
        f"  {name_a} vs {name_b} Glide Ratio: "
        f"{cmp.ratio_a:.2f}:1 vs {cmp.ratio_b:.2f}:1"
    )
    print(f"  Descent Rate Difference: {cmp.descent_rate_delta:.2f} m/s")


if __name__ == "__main__":
    sys.exit(main() or 0)
