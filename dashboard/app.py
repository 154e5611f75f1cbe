"""Race Control — generate or author a scenario, then get and audit a strategy."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from pitwall import ScenarioOptions
from pitwall.models import StrategyAnalysis, TrackDegradation

from shared import (
    COMPOUND_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    TRACK_TYPES,
    WEATHER_PATTERNS,
    StrategyDataError,
    assign_driver_colors,
    format_lap_time,
    group_telemetry_by_driver,
    stint_rows,
)
from shared import session
from shared.constants import DEFAULT_RACE_LAPS, DEFAULT_TRACK, DEFAULT_WEATHER
from shared.resources import get_scenario_store, get_strategy_service
from shared.services import (
    ScenarioBundle,
    build_custom_scenario,
    default_grid,
    lead_driver_name,
    validate_custom_scenario,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="F1 Strategy Lab",
    page_icon="\U0001f3ce\ufe0f",
    layout="wide",
)

try:
    service = get_strategy_service()
except StrategyDataError as exc:
    st.error(str(exc))
    st.stop()

store = get_scenario_store()


def _load_bundle(bundle: ScenarioBundle) -> None:
    session.reset_from("scenario")
    session.put("scenario", bundle.scenario)
    session.put("telemetry", bundle.telemetry)


# ── Sidebar — saved scenarios ────────────────────────────────────────────────

st.sidebar.title("F1 Strategy Lab")
st.sidebar.subheader("Saved Scenarios")

try:
    saved = store.list_scenarios()
except StrategyDataError as exc:
    st.sidebar.error(str(exc))
    saved = []

if not saved:
    st.sidebar.info("No saved scenarios yet. Create and save a scenario to see it here.")

for item in saved:
    name_col, load_col, delete_col = st.sidebar.columns([4, 1, 1])
    name_col.caption(item.name)
    if load_col.button("Load", key=f"load-{item.id}"):
        with st.spinner("Generating telemetry for saved scenario..."):
            try:
                _load_bundle(service.load_custom_scenario(store.get(item.id)))
            except StrategyDataError as exc:
                session.reset_from("scenario")
                st.error(str(exc))
    if delete_col.button("✕", key=f"delete-{item.id}", help="Delete scenario"):
        try:
            store.delete(item.id)
        except StrategyDataError as exc:
            st.sidebar.error(f"Failed to delete scenario. {exc}")
        else:
            st.rerun()


# ── Scenario setup ───────────────────────────────────────────────────────────

st.title("Race Control")

mode = st.radio("Scenario source", ["AI", "Custom"], horizontal=True)

if mode == "AI":
    track_col, weather_col, deg_col = st.columns(3)
    track_type = track_col.selectbox("Track type", TRACK_TYPES)
    weather_pattern = weather_col.selectbox("Weather pattern", WEATHER_PATTERNS)
    degradation = deg_col.selectbox(
        "Track degradation",
        [d.value for d in TrackDegradation],
        index=1,
    )
    if st.button("Generate Scenario", type="primary"):
        options = ScenarioOptions(
            track_type=track_type,
            weather_pattern=weather_pattern,
            track_degradation=TrackDegradation(degradation),
        )
        with st.spinner("Generating scenario and telemetry..."):
            try:
                _load_bundle(service.generate_scenario(options))
            except StrategyDataError as exc:
                session.reset_from("scenario")
                st.error(str(exc))
else:
    with st.form("custom_scenario"):
        track_col, weather_col, laps_col = st.columns(3)
        track = track_col.text_input("Track", DEFAULT_TRACK)
        weather = weather_col.text_input("Weather", DEFAULT_WEATHER)
        race_laps = laps_col.text_input("Race laps", str(DEFAULT_RACE_LAPS))
        st.markdown("**Starting grid**")
        grid_cols = st.columns(4)
        drivers = [
            grid_cols[i % 4].text_input(f"P{i + 1}", name, key=f"grid-{i}")
            for i, name in enumerate(default_grid())
        ]
        submitted = st.form_submit_button("Use Scenario", type="primary")

    if submitted:
        errors = validate_custom_scenario(track, race_laps, drivers)
        for message in errors.values():
            st.error(message)
        if not errors:
            scenario = build_custom_scenario(track, weather, race_laps, drivers)
            with st.spinner("Generating telemetry..."):
                try:
                    _load_bundle(service.load_custom_scenario(scenario))
                except StrategyDataError as exc:
                    session.reset_from("scenario")
                    st.error(str(exc))

scenario = session.get("scenario")
telemetry = session.get("telemetry", [])
if scenario is None:
    st.info("Generate or author a scenario to begin.")
    st.stop()


# ── Scenario summary ─────────────────────────────────────────────────────────

st.subheader(f"{scenario.track} — {scenario.race_laps} laps")
kpi1, kpi2, kpi3, kpi4 = st.columns(4)
kpi1.metric("Weather", scenario.weather)
kpi2.metric("Degradation", str(scenario.track_degradation or "—"))
kpi3.metric("Pole", lead_driver_name(scenario) or "—")
kpi4.metric("Compounds", len(scenario.available_tires))

if st.button("Save Scenario"):
    try:
        saved_item = store.save(scenario)
    except StrategyDataError as exc:
        st.error(str(exc))
    else:
        st.success(f"Saved “{saved_item.name}”.")
        st.rerun()


# ── Telemetry charts ─────────────────────────────────────────────────────────

by_driver = group_telemetry_by_driver(telemetry)
colors = assign_driver_colors(list(by_driver))

col_times, col_wear = st.columns(2)

with col_times:
    st.subheader("Lap Times")
    fig_times = go.Figure()
    for driver, samples in by_driver.items():
        timed = [s for s in samples if s.lap_time is not None]
        fig_times.add_trace(go.Scatter(
            x=[s.lap for s in timed],
            y=[s.lap_time for s in timed],
            mode="markers+lines",
            name=driver,
            line=dict(color=colors[driver], width=2),
            text=[format_lap_time(s.lap_time) for s in timed],
            hovertemplate="Lap %{x}<br>%{text}<extra>" + driver + "</extra>",
        ))
    fig_times.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        xaxis_title="Lap",
        yaxis_title="Lap time (s)",
        height=360,
    )
    st.plotly_chart(fig_times, use_container_width=True)

with col_wear:
    st.subheader("Tire Wear")
    fig_wear = go.Figure()
    for driver, samples in by_driver.items():
        worn = [s for s in samples if s.tire_wear is not None]
        fig_wear.add_trace(go.Scatter(
            x=[s.lap for s in worn],
            y=[s.tire_wear for s in worn],
            mode="lines",
            name=driver,
            line=dict(color=colors[driver], width=2),
            hovertemplate="Lap %{x}<br>%{y:.1f}%<extra>" + driver + "</extra>",
        ))
    fig_wear.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        xaxis_title="Lap",
        yaxis_title="Wear (%)",
        height=360,
    )
    st.plotly_chart(fig_wear, use_container_width=True)


# ── Strategy analysis ────────────────────────────────────────────────────────

st.subheader("Strategy")

if st.button("Analyze Strategy", type="primary"):
    session.reset_from("strategy")
    with st.spinner("Analyzing strategy..."):
        try:
            report = service.analyze(scenario, telemetry)
        except StrategyDataError as exc:
            st.error(str(exc))
        else:
            session.put("strategy", report.analysis)
            session.put("warnings", report.warnings)

strategy: StrategyAnalysis | None = session.get("strategy")
if strategy is None:
    st.stop()

warnings = session.get("warnings", [])
if warnings:
    st.warning("**Strategy Warnings**\n\n" + "\n".join(f"- {w}" for w in warnings))

st.text(strategy.analysis_text)

fig_plan = go.Figure()
for plan in strategy.plans:
    for row in stint_rows(plan):
        fig_plan.add_trace(go.Bar(
            x=[row["laps"]],
            y=[row["plan"]],
            base=[row["start_lap"]],
            orientation="h",
            marker_color=COMPOUND_COLORS.get(row["compound"], COMPOUND_COLORS["Unknown"]),
            marker_line=dict(color="#333333", width=1),
            text=f"{row['compound']} ({row['laps']} laps)",
            textposition="inside",
            textfont=dict(
                color="#000000" if row["compound"] in ("Medium", "Hard", "Intermediate") else "#FFFFFF",
            ),
            hovertemplate=(
                f"{row['plan']}<br>Stint {row['stint']}: {row['compound']}<br>"
                f"Laps {row['start_lap']}–{row['end_lap']}<extra></extra>"
            ),
        ))
fig_plan.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    barmode="overlay",
    xaxis=dict(title="Lap", range=[0, scenario.race_laps + 1]),
    showlegend=False,
    height=200,
)
st.plotly_chart(fig_plan, use_container_width=True)

st.caption("Continue on the Race Simulation and Strategy Chat pages.")
