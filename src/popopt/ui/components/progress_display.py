"""Progress display component for an optimization session."""

from __future__ import annotations

import streamlit as st

from popopt.session import OptimizationSession


class ProgressDisplay:
    """Shows the generation counter and the current best solution."""

    def __init__(self, session: OptimizationSession) -> None:
        self.session = session

    def render(self) -> None:
        session = self.session
        total = session.config.max_generations
        st.caption(f"Algorithm: {session.optimizer.name.upper()}")
        st.progress(min(session.generation / total, 1.0))

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Generation", f"{session.generation}/{total}")
        with col2:
            best_x = session.best_position
            st.metric("Best x", "-" if best_x is None else f"{best_x:.4f}")
        with col3:
            best_value = session.best_value
            st.metric("Best f(x)", "-" if best_value is None else f"{best_value:.6f}")
