"""Objective curve with the current best positions marked."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from popopt.objectives.sampling import sample_objective
from popopt.session import OptimizationSession

LEADER_LABELS = ["alpha", "beta", "delta"]
CURVE_LABEL = "f(x)"
CURVE_POINT_SIZE = 8
MARKER_SIZE = 160


def build_curve_frame(session: OptimizationSession) -> pd.DataFrame:
    """Sampled objective curve with columns x, f(x), series, size."""
    xs, ys = sample_objective(session.objective, session.config.interval)
    return pd.DataFrame(
        {"x": xs, "f(x)": ys, "series": CURVE_LABEL, "size": CURVE_POINT_SIZE}
    )


def build_solution_frame(session: OptimizationSession) -> pd.DataFrame:
    """Best positions on the curve, labelled by rank."""
    positions = session.best_positions
    if len(positions) == 1:
        labels = ["best"]
    else:
        labels = LEADER_LABELS[: len(positions)]
    return pd.DataFrame(
        {
            "x": pd.Series(positions, dtype=float),
            "f(x)": pd.Series([session.objective(x) for x in positions], dtype=float),
            "series": pd.Series(labels, dtype=object),
            "size": MARKER_SIZE,
        }
    )


def build_plot_frame(session: OptimizationSession) -> pd.DataFrame:
    """Curve samples and best-position markers layered in one frame."""
    curve = build_curve_frame(session)
    solutions = build_solution_frame(session)
    if solutions.empty:
        return curve
    return pd.concat([curve, solutions], ignore_index=True)


def render_function_plot(session: OptimizationSession) -> None:
    st.subheader(session.objective.display_name)
    if session.objective.description:
        st.caption(session.objective.description)
    st.scatter_chart(build_plot_frame(session), x="x", y="f(x)", color="series", size="size")

    if not session.best_positions:
        st.info("Press Start or Step to run the optimizer.")
        return
    solutions = build_solution_frame(session).drop(columns="size")
    st.dataframe(solutions, hide_index=True, use_container_width=True)


def render_history(session: OptimizationSession) -> None:
    if not session.history:
        return
    st.subheader("Convergence")
    st.line_chart({"best f(x)": session.history})
