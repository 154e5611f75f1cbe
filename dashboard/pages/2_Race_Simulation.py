"""Race Simulation — lap-by-lap AI simulation of the analysed strategy."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    PLOTLY_LAYOUT_DEFAULTS,
    TIRE_CONDITION_COLORS,
    StrategyDataError,
    assign_driver_colors,
    compute_driver_stats,
    format_event,
    format_wear,
    position_history,
    sort_driver_stats,
)
from shared import session
from shared.constants import SEVERITY_COLORS
from shared.resources import get_strategy_service
from shared.services import SORTABLE_FIELDS

st.set_page_config(
    page_title="Race Simulation",
    page_icon="\U0001f3c1",
    layout="wide",
)

st.title("Race Simulation")

scenario = session.get("scenario")
strategy = session.get("strategy")
if scenario is None or strategy is None:
    st.info("Please analyze the strategy on the Race Control page before running the simulation.")
    st.stop()

try:
    service = get_strategy_service()
except StrategyDataError as exc:
    st.error(str(exc))
    st.stop()

if st.button("Simulate Race", type="primary"):
    session.reset_from("simulation")
    with st.spinner(f"Simulating {scenario.race_laps} laps at {scenario.track}..."):
        try:
            session.put("simulation", service.simulate(scenario, strategy))
        except StrategyDataError as exc:
            st.error(str(exc))

simulation = session.get("simulation")
if not simulation:
    st.stop()


# ── Final classification ─────────────────────────────────────────────────────

st.subheader("Final Classification")

sort_col, order_col = st.columns([3, 1])
sort_key = sort_col.selectbox(
    "Sort by", SORTABLE_FIELDS, index=SORTABLE_FIELDS.index("final_position"),
)
descending = order_col.toggle("Descending", value=False)

stats = sort_driver_stats(compute_driver_stats(simulation), sort_key, descending)
st.dataframe(
    [
        {
            "Pos": s.final_position,
            "Driver": s.driver,
            "Pit Stops": s.pit_stops,
            "Overtakes": s.overtakes,
            "DRS": s.drs_uses,
            "Fastest Lap": "⭐" if s.has_fastest_lap else "",
        }
        for s in stats
    ],
    hide_index=True,
    use_container_width=True,
)


# ── Position chart ───────────────────────────────────────────────────────────

st.subheader("Positions by Lap")

history = position_history(simulation)
colors = assign_driver_colors(list(history))
fig_positions = go.Figure()
for driver, points in history.items():
    fig_positions.add_trace(go.Scatter(
        x=[lap for lap, _ in points],
        y=[pos for _, pos in points],
        mode="lines",
        name=driver,
        line=dict(color=colors[driver], width=2),
        hovertemplate="Lap %{x}<br>P%{y}<extra>" + driver + "</extra>",
    ))
fig_positions.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    xaxis_title="Lap",
    yaxis=dict(title="Position", autorange="reversed", dtick=1),
    height=520,
)
st.plotly_chart(fig_positions, use_container_width=True)


# ── Lap-by-lap log ───────────────────────────────────────────────────────────

st.subheader("Lap-by-Lap")

lap_numbers = [lap.lap for lap in simulation]
selected_lap = st.select_slider("Lap", options=lap_numbers, value=lap_numbers[-1])
lap_data = next(lap for lap in simulation if lap.lap == selected_lap)

order_col, events_col = st.columns([2, 3])

with order_col:
    st.markdown("**Running order**")
    st.dataframe(
        [
            {
                "Pos": p.position,
                "Driver": p.driver,
                "Tire": p.tire_compound.value if p.tire_compound else "—",
                "Wear": format_wear(p.tire_wear),
                "Condition": p.tire_condition.value if p.tire_condition else "—",
            }
            for p in sorted(lap_data.positions, key=lambda p: p.position)
        ],
        hide_index=True,
        use_container_width=True,
    )

with events_col:
    st.markdown("**Events**")
    if not lap_data.events:
        st.caption("No notable events this lap.")
    for event in lap_data.events:
        if event.severity is not None:
            color = SEVERITY_COLORS[event.severity.value]
            st.markdown(
                f'- <span style="color:{color}">{format_event(event)}</span>',
                unsafe_allow_html=True,
            )
        else:
            st.markdown(f"- {format_event(event)}")

    worn = [
        p for p in lap_data.positions
        if p.tire_condition is not None and p.tire_condition.value in ("Worn", "Aged")
    ]
    if worn:
        st.markdown("**Tire alerts**")
        for p in worn:
            color = TIRE_CONDITION_COLORS[p.tire_condition.value]
            st.markdown(
                f'<span style="color:{color}">{p.driver}: '
                f"{p.tire_condition.value} ({format_wear(p.tire_wear)})</span>",
                unsafe_allow_html=True,
            )
