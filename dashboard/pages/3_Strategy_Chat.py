"""Strategy Chat — follow-up questions about the analysed strategy."""

from __future__ import annotations

import streamlit as st

from shared import StrategyDataError
from shared import session
from shared.resources import get_strategy_service

st.set_page_config(
    page_title="Strategy Chat",
    page_icon="\U0001f4ac",
    layout="wide",
)

st.title("Strategy Chat")

scenario = session.get("scenario")
strategy = session.get("strategy")
if scenario is None or strategy is None:
    st.info("Cannot start chat without a scenario and strategy analysis.")
    st.stop()

try:
    service = get_strategy_service()
except StrategyDataError as exc:
    st.error(str(exc))
    st.stop()

st.caption(f"{scenario.track} · {scenario.weather} · {scenario.race_laps} laps")

history = session.get("chat", [])
for message in history:
    with st.chat_message("user" if message.role == "user" else "assistant"):
        st.markdown(message.content)

question = st.chat_input("Ask about the strategy...")
if question:
    with st.chat_message("user"):
        st.markdown(question)
    with st.spinner("Thinking..."):
        history = service.ask(scenario, strategy, history, question)
    session.put("chat", history)
    with st.chat_message("assistant"):
        st.markdown(history[-1].content)
