"""Main view UI components (messages, visualization, model caption)."""

import html
import logging
import streamlit as st
from typing import TYPE_CHECKING

from word_verse.visualization.scatter import ScatterPlotBuilder
from word_verse.ui.state import AppState
from word_verse.ui.styles import render_error, render_success

if TYPE_CHECKING:
    from word_verse.core.controller import VisualizationController

logger = logging.getLogger(__name__)


def render_messages() -> None:
    """Render the latest error or success message."""
    if AppState.has_error():
        render_error(st.session_state.last_error)
    elif AppState.has_success():
        render_success(st.session_state.last_success)


def render_visualization(controller: "VisualizationController") -> None:
    """Render the part-of-speech scatter plot for the active model."""
    model = controller.active_model
    if model is None:
        render_getting_started()
        return

    point_sets = controller.point_sets()
    n_visible = sum(len(ps) for ps in point_sets)

    builder = ScatterPlotBuilder(dark_mode=AppState.is_dark_mode())
    fig = builder.build(
        point_sets,
        focus_word=st.session_state.focus_word,
        extent=model.coordinates() if st.session_state.pin_axes else None,
    )

    if controller.active_paragraph_id is not None:
        paragraph = controller.get_paragraph(controller.active_paragraph_id)
        if paragraph is not None:
            st.info(f'Showing only words from: "{paragraph.preview}"')

    if n_visible == 0:
        st.caption("No words visualized yet.")

    st.plotly_chart(fig, use_container_width=True, key="word_plot")
    st.markdown(
        f'<div class="wv-model-name">{html.escape(model.name)}</div>',
        unsafe_allow_html=True
    )


def render_getting_started() -> None:
    """Render getting started guide."""
    st.markdown("""
    ### Getting Started

    **Load a model:** Upload a CSV of `x, y, word` rows in the sidebar

    **Add words:** Type a word to place it on the plot

    **Analyze a paragraph:** Paste text to visualize every word the model knows

    **Filter:** Click a saved paragraph to show only its words

    Words are colored by part of speech, looked up from an online dictionary.
    Hover a point to read its definition.
    """)
