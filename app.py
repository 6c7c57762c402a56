"""
Word-Verse: Word Embedding Explorer
Main Streamlit application.

Run with: streamlit run app.py
"""

import logging

import streamlit as st

from word_verse.ui import AppState, init_session_state, inject_styles, render_header
from word_verse.ui import sidebar, main_view, docs
import config


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="Word-Verse",
    page_icon="🔤",
    layout="wide",
    initial_sidebar_state="expanded"
)


def main():
    """Main application entry point."""
    init_session_state()
    inject_styles(AppState.is_dark_mode())
    render_header()

    controller = AppState.controller()
    sidebar.render_sidebar(controller)

    tab_explore, tab_methodology = st.tabs(["Explore", "How It Works"])

    with tab_explore:
        main_view.render_messages()
        main_view.render_visualization(controller)

    with tab_methodology:
        docs.render_methodology_tab()


if __name__ == "__main__":
    main()
