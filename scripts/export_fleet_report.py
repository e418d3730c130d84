#!/usr/bin/env python
"""Batch glide performance report over the configured fleet.

This script:

1. Loads weather scenarios and glide profiles from ``data/fleet.yaml``.
2. Evaluates every profile under every scenario at the reference point.
3. Builds the pairwise descent-rate delta matrix per scenario.
4. Saves ``results/fleet_report.json`` and ``results/fleet_report.csv``.
5. Prints a structured summary.

Usage
-----
::

    python scripts/export_fleet_report.py
"""

from __future__ import annotations

import json
import logging
import os
import sys

# Ensure the project root is on the import path.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from glide_engine.analysis.fleet import compare_matrix, evaluate_fleet  # noqa: E402
from glide_engine.config import load_fleet  # noqa: E402
from glide_engine.core.evaluator import (  # noqa: E402
    REFERENCE_AIRSPEED,
    REFERENCE_ALTITUDE,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

RESULTS_DIR: str = os.path.join(_project_root, "results")
JSON_PATH: str = os.path.join(RESULTS_DIR, "fleet_report.json")
CSV_PATH: str = os.path.join(RESULTS_DIR, "fleet_report.csv")


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------


def main() -> None:
    """Evaluate the configured fleet and write the report files."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("GLIDE PERFORMANCE FLEET REPORT")
    print("=" * 60)
    print()

    # -- Step 1: Load configuration -------------------------------------------
    print("[1/3] Loading fleet configuration")
    fleet = load_fleet()
    print(
        f"      {len(fleet.profiles)} profiles, "
        f"{len(fleet.conditions)} weather scenarios."
    )
    print()

    # -- Step 2: Evaluate -----------------------------------------------------
    print("[2/3] Evaluating profiles at reference point")
    table = evaluate_fleet(fleet.profiles, fleet.conditions)
    deltas: dict[str, dict[str, dict[str, float]]] = {
        name: compare_matrix(fleet.profiles, weather).to_dict()
        for name, weather in fleet.conditions.items()
    }
    print(f"      {len(table)} evaluations complete.")
    print()

    # -- Step 3: Save ---------------------------------------------------------
    print("[3/3] Saving results")
    os.makedirs(RESULTS_DIR, exist_ok=True)

    output: dict[str, object] = {
        "metadata": {
            "reference_altitude_m": REFERENCE_ALTITUDE,
            "reference_airspeed_kmh": REFERENCE_AIRSPEED,
            "profiles": list(fleet.profiles),
            "conditions": list(fleet.conditions),
        },
        "evaluations": json.loads(table.to_json(orient="records")),
        "descent_rate_deltas": deltas,
    }
    with open(JSON_PATH, "w", encoding="utf-8") as fh:
        json.dump(output, fh, indent=2, sort_keys=True)
    table.to_csv(CSV_PATH, index=False)
    logger.info("Report written to %s and %s", JSON_PATH, CSV_PATH)
    print()

    # -- Structured summary --------------------------------------------------
    print("=" * 60)
    print("AIRWORTHY PROFILES PER SCENARIO")
    print("=" * 60)
    for condition, group in table.groupby("condition", sort=False):
        flyable = group.loc[group["airworthy"], "profile"].tolist()
        print(f"  {condition:<20s}  {', '.join(flyable) or '(none)'}")
    print()
    print("Report complete.")


if __name__ == "__main__":
    main()
