"""Glide Performance Dashboard.

Interactive comparison of glide profiles built with Streamlit and Plotly.
Shows per-profile metrics for a chosen weather scenario, an airworthiness
matrix across all scenarios, pairwise descent-rate deltas, and a descent
rate versus altitude sweep.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
import streamlit as st

from glide_engine.analysis.fleet import compare_matrix, descent_profile, evaluate_fleet
from glide_engine.config import load_fleet
from glide_engine.core.weather import WeatherCondition

_MAX_SWEEP_ALTITUDE: float = 5000.0
_SWEEP_POINTS: int = 101


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(
        page_title="Glide Performance",
        layout="wide",
    )

    st.title("Glide Performance Dashboard")

    fleet = load_fleet()

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Evaluation Parameters")

    scenario: str = st.sidebar.selectbox(
        "Weather scenario",
        options=list(fleet.conditions),
        index=0,
    )
    base = fleet.conditions[scenario]

    wind_speed: float = st.sidebar.slider(
        "Wind speed (m/s)",
        min_value=0.0,
        max_value=25.0,
        value=float(base.wind_speed),
        step=0.5,
    )
    temperature: float = st.sidebar.slider(
        "Temperature (C)",
        min_value=-20.0,
        max_value=45.0,
        value=float(base.temperature),
        step=0.5,
    )
    visibility: float = st.sidebar.slider(
        "Visibility (m)",
        min_value=0.0,
        max_value=20000.0,
        value=float(base.visibility),
        step=500.0,
    )
    has_thermals: bool = st.sidebar.toggle("Thermals", value=base.has_thermals)

    altitude: float = st.sidebar.slider(
        "Altitude (m)",
        min_value=0.0,
        max_value=_MAX_SWEEP_ALTITUDE,
        value=1000.0,
        step=100.0,
    )
    airspeed: float = st.sidebar.slider(
        "Airspeed (km/h)",
        min_value=0.0,
        max_value=200.0,
        value=100.0,
        step=5.0,
    )

    weather = WeatherCondition(
        wind_speed=wind_speed,
        temperature=temperature,
        humidity=base.humidity,
        has_thermals=has_thermals,
        visibility=visibility,
    )

    # ── Section 1: Per-profile metrics ───────────────────────────────────
    st.header("1 -- Profile Metrics")

    table = evaluate_fleet(
        fleet.profiles, {scenario: weather}, altitude=altitude, airspeed=airspeed
    )
    cols = st.columns(len(table))
    for col, row in zip(cols, table.itertuples(index=False)):
        col.subheader(row.profile)
        col.metric("Glide ratio", f"{row.glide_ratio:.2f}:1")
        col.metric("Descent rate", f"{row.descent_rate:.2f} m/s")
        col.metric("Airworthy", "yes" if row.airworthy else "no")

    col_ratio, col_rate = st.columns(2)

    with col_ratio:
        fig_ratio = go.Figure(
            go.Bar(
                x=table["profile"],
                y=table["glide_ratio"],
                marker_color="#1f77b4",
            )
        )
        fig_ratio.update_layout(
            title="Glide Ratio",
            yaxis_title="Ratio (:1)",
            height=350,
        )
        st.plotly_chart(fig_ratio, use_container_width=True)

    with col_rate:
        fig_rate = go.Figure(
            go.Bar(
                x=table["profile"],
                y=table["descent_rate"],
                marker_color="#ff7f0e",
            )
        )
        fig_rate.update_layout(
            title=f"Descent Rate at {altitude:.0f} m, {airspeed:.0f} km/h",
            yaxis_title="m/s",
            height=350,
        )
        st.plotly_chart(fig_rate, use_container_width=True)

    # ── Section 2: Airworthiness across scenarios ────────────────────────
    st.header("2 -- Airworthiness by Scenario")

    all_scenarios = evaluate_fleet(fleet.profiles, fleet.conditions)
    matrix = all_scenarios.pivot(index="profile", columns="condition", values="airworthy")
    st.dataframe(matrix.replace({True: "yes", False: "no"}), use_container_width=True)

    # ── Section 3: Pairwise descent-rate deltas ──────────────────────────
    st.header("3 -- Descent Rate Differences")

    deltas = compare_matrix(fleet.profiles, weather, altitude=altitude, airspeed=airspeed)
    fig_delta = go.Figure(
        go.Heatmap(
            z=deltas.values,
            x=list(deltas.columns),
            y=list(deltas.index),
            colorscale="Blues",
            colorbar=dict(title="m/s"),
        )
    )
    fig_delta.update_layout(height=400, yaxis=dict(autorange="reversed"))
    st.plotly_chart(fig_delta, use_container_width=True)

    # ── Section 4: Altitude sweep ────────────────────────────────────────
    st.header("4 -- Descent Rate vs Altitude")

    altitudes = np.linspace(0.0, _MAX_SWEEP_ALTITUDE, _SWEEP_POINTS)
    fig_sweep = go.Figure()
    for name, profile in fleet.profiles.items():
        fig_sweep.add_trace(
            go.Scatter(
                x=altitudes,
                y=descent_profile(profile, altitudes, airspeed=airspeed),
                mode="lines",
                name=name,
            )
        )
    fig_sweep.update_layout(
        xaxis_title="Altitude (m)",
        yaxis_title="Descent rate (m/s)",
        height=400,
    )
    st.plotly_chart(fig_sweep, use_container_width=True)

    # ── Footer ───────────────────────────────────────────────────────────
    st.markdown("---")
    st.caption(
        "Glide Performance Engine -- dashboard. "
        "Core engine is not modified by this dashboard."
    )


if __name__ == "__main__":
    main()
