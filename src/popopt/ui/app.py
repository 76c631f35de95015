"""popopt Streamlit application."""

from __future__ import annotations

import time

import streamlit as st

from popopt.models.config import Algorithm, SearchInterval, SessionConfig
from popopt.objectives.registry import get_registry
from popopt.session import OptimizationSession
from popopt.ui.components.function_plot import render_function_plot, render_history
from popopt.ui.components.progress_display import ProgressDisplay

st.set_page_config(
    page_title="Optimization Algorithms - GA & GWO",
    layout="wide",
)

TICK_SECONDS = 0.05


def render_sidebar() -> SessionConfig:
    """Render the control panel and return the selected configuration."""
    st.sidebar.header("Optimization Algorithm")
    algorithm = st.sidebar.radio(
        "Algorithm",
        list(Algorithm),
        format_func=lambda a: "Genetic Algorithm" if a == Algorithm.GA else "Grey Wolf Optimizer",
    )

    st.sidebar.header("Test Function")
    objectives = get_registry().list_all()
    objective = st.sidebar.selectbox(
        "Function", objectives, format_func=lambda o: o.display_name
    )

    st.sidebar.header("Common Parameters")
    population_size = st.sidebar.slider("Population Size", 10, 200, 50)
    max_generations = st.sidebar.slider("Max Generations", 10, 500, 100)
    search_min = st.sidebar.slider("Search Min", -10.0, -0.1, -10.0)
    search_max = st.sidebar.slider("Search Max", 0.1, 10.0, 10.0)

    crossover_rate, mutation_rate, chromosome_length = 0.8, 0.1, 16
    if algorithm == Algorithm.GA:
        st.sidebar.header("Genetic Algorithm Parameters")
        crossover_rate = st.sidebar.slider("Crossover Rate", 0.0, 1.0, 0.8, 0.01)
        mutation_rate = st.sidebar.slider("Mutation Rate", 0.0, 1.0, 0.1, 0.01)
        chromosome_length = st.sidebar.slider("Chromosome Length", 8, 32, 16)

    return SessionConfig(
        algorithm=algorithm,
        objective_id=objective.objective_id,
        population_size=population_size,
        max_generations=max_generations,
        interval=SearchInterval(min=search_min, max=search_max),
        crossover_rate=crossover_rate,
        mutation_rate=mutation_rate,
        chromosome_length=chromosome_length,
    )


def get_session(config: SessionConfig) -> OptimizationSession:
    """Fetch the session from state, restarting it when the configuration changed."""
    session: OptimizationSession | None = st.session_state.get("session")
    if session is None:
        session = OptimizationSession(config)
        st.session_state["session"] = session
    elif session.config != config:
        session.reconfigure(config)
    return session


def render_controls(session: OptimizationSession) -> None:
    st.subheader("Simulation Control")
    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("Pause" if session.is_running else "Start", use_container_width=True):
            session.toggle()
    with col2:
        if st.button("Reset", use_container_width=True):
            session.reset()
    with col3:
        if st.button("Step", use_container_width=True):
            session.step()


def main() -> None:
    st.title("Optimization Algorithms - GA & GWO")
    st.caption("Minimizing a function of one variable with a Genetic Algorithm or a Grey Wolf Optimizer")

    config = render_sidebar()
    session = get_session(config)

    render_controls(session)
    ProgressDisplay(session).render()

    st.divider()
    render_function_plot(session)
    render_history(session)

    if session.tick():
        time.sleep(TICK_SECONDS)
        st.rerun()


if __name__ == "__main__":
    main()
