"""Sidebar UI components for Word-Verse."""

import asyncio
import html
import logging
import streamlit as st
from typing import TYPE_CHECKING

from word_verse.core.errors import WordVerseError
from word_verse.loaders.csv_loader import CsvModelLoader, list_data_files
from word_verse.ui.state import AppState

if TYPE_CHECKING:
    from word_verse.core.controller import VisualizationController

logger = logging.getLogger(__name__)


def render_sidebar(controller: "VisualizationController") -> None:
    """Render the complete sidebar."""
    with st.sidebar:
        render_view_options()
        st.markdown("---")
        render_model_loader(controller)
        render_model_list(controller)
        st.markdown("---")
        render_word_search(controller)
        st.markdown("---")
        render_paragraph_input(controller)
        render_paragraph_list(controller)
        st.markdown("---")
        render_word_list(controller)


def render_view_options() -> None:
    """Render theme and axis toggles."""
    st.toggle("Dark mode", key="dark_mode")
    st.toggle(
        "Pin axes to model extent",
        key="pin_axes",
        help="Keep the axes fixed to the whole vocabulary instead of zooming to the visible words"
    )


def render_model_loader(controller: "VisualizationController") -> None:
    """Render CSV upload and bundled model selection."""
    st.markdown("### Load Model")

    uploaded = st.file_uploader(
        "CSV with x, y, word rows",
        type=["csv"],
        key=f"model_upload_{st.session_state.upload_counter}",
    )
    if uploaded is not None and st.button("Load Model", type="primary", use_container_width=True):
        _load_model(controller, CsvModelLoader(uploaded))
        AppState.reset_uploader()
        st.rerun()

    data_files = list_data_files()
    if data_files:
        selected = st.selectbox(
            "Or pick a bundled model:",
            data_files,
            format_func=lambda p: p.stem,
            key="bundled_model",
        )
        if st.button("Load Bundled Model", use_container_width=True):
            _load_model(controller, CsvModelLoader(selected))
            st.rerun()


def _load_model(controller: "VisualizationController", loader: CsvModelLoader) -> None:
    """Read rows and hand them to the controller."""
    try:
        with st.spinner(f"Loading {loader.name}..."):
            rows = loader.load()
            summary = controller.load_model(loader.name, rows)
        AppState.reset_for_model_change()
        AppState.set_success(summary.message)
    except WordVerseError as e:
        AppState.set_error(str(e))
    except Exception as e:
        logger.exception("Model load failed")
        AppState.set_error(f"Error parsing CSV file: {e}")


def render_model_list(controller: "VisualizationController") -> None:
    """Render loaded models with select and remove buttons."""
    models = controller.models
    if not models:
        st.caption("No models loaded yet.")
        return

    st.markdown("### Models")
    for index, model in enumerate(models):
        is_active = index == controller.active_index
        col1, col2 = st.columns([4, 1])
        with col1:
            if st.button(
                f"{'● ' if is_active else ''}{model.name} ({len(model):,})",
                key=f"select_model_{index}",
                type="primary" if is_active else "secondary",
                use_container_width=True,
            ) and not is_active:
                controller.select_model(index)
                AppState.reset_for_model_change()
                st.rerun()
        with col2:
            if st.button("✕", key=f"remove_model_{index}", help=f"Remove {model.name}"):
                controller.remove_model(index)
                AppState.reset_for_model_change()
                st.rerun()


def render_word_search(controller: "VisualizationController") -> None:
    """Render the single-word input."""
    st.markdown("### Add Word")

    with st.form("word_search", clear_on_submit=True, border=False):
        word = st.text_input(
            "Word",
            placeholder="Enter a word...",
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("Add Word", use_container_width=True)

    if submitted and word.strip():
        _add_word(controller, word)


def _add_word(controller: "VisualizationController", word: str) -> None:
    """Classify and highlight one word."""
    try:
        with st.spinner("Looking up word..."):
            asyncio.run(controller.add_word(word))
        AppState.set_success(f'Added the word "{word.strip().lower()}" to visualization')
    except WordVerseError as e:
        AppState.set_error(str(e))
    except Exception as e:
        logger.exception("Add word failed")
        AppState.set_error(f"Could not add word: {e}")
    st.rerun()


def render_paragraph_input(controller: "VisualizationController") -> None:
    """Render the paragraph text area."""
    st.markdown("### Analyze Paragraph")

    with st.form("paragraph_input", clear_on_submit=True, border=False):
        text = st.text_area(
            "Paragraph",
            placeholder="Paste a paragraph to visualize its words...",
            label_visibility="collapsed",
            height=120,
        )
        submitted = st.form_submit_button("Analyze Paragraph", use_container_width=True)

    if submitted and text.strip():
        _submit_paragraph(controller, text)


def _submit_paragraph(controller: "VisualizationController", text: str) -> None:
    """Run paragraph extraction with a progress bar."""
    progress_bar = st.progress(0.0, text="Classifying words...")

    def update_progress(done: int, total: int) -> None:
        progress_bar.progress(done / total, text=f"Classified {done}/{total} words")

    try:
        result = asyncio.run(controller.submit_paragraph(text, progress_callback=update_progress))
        AppState.set_success(result.summary())
    except WordVerseError as e:
        AppState.set_error(str(e))
    except Exception as e:
        logger.exception("Paragraph analysis failed")
        AppState.set_error(f"Paragraph analysis failed: {e}")
    finally:
        progress_bar.empty()
    st.rerun()


def render_paragraph_list(controller: "VisualizationController") -> None:
    """Render saved paragraphs with filter, expand and remove controls."""
    paragraphs = controller.paragraphs
    if not paragraphs:
        return

    st.markdown("### Paragraphs")
    for paragraph in paragraphs:
        is_active = controller.active_paragraph_id == paragraph.id
        is_expanded = controller.expanded_paragraph_id == paragraph.id

        col1, col2, col3 = st.columns([4, 1, 1])
        with col1:
            if st.button(
                f"{paragraph.preview} ({len(paragraph.words)})",
                key=f"toggle_para_{paragraph.id}",
                type="primary" if is_active else "secondary",
                help="Show only this paragraph's words" if not is_active else "Show all words",
                use_container_width=True,
            ):
                controller.toggle_active_paragraph(paragraph.id)
                st.rerun()
        with col2:
            if st.button("▾" if not is_expanded else "▴", key=f"expand_para_{paragraph.id}"):
                controller.toggle_expanded_paragraph(paragraph.id)
                st.rerun()
        with col3:
            if st.button("✕", key=f"remove_para_{paragraph.id}", help="Remove paragraph and its words"):
                controller.remove_paragraph(paragraph.id)
                st.rerun()

        if is_expanded:
            st.markdown(
                f'<div class="wv-item">{html.escape(paragraph.text)}</div>',
                unsafe_allow_html=True
            )


def render_word_list(controller: "VisualizationController") -> None:
    """Render visualized words with their part of speech."""
    if controller.active_model is None:
        return

    words = controller.highlighted
    st.markdown(f"### Visualized Words ({len(words)})")
    if not words:
        st.caption("Add a word or a paragraph to start.")
        return

    focus = st.selectbox(
        "Focus word:",
        [None] + words,
        format_func=lambda w: "-- none --" if w is None else w,
        index=([None] + words).index(st.session_state.focus_word)
        if st.session_state.focus_word in words else 0,
        key="focus_selector",
    )
    AppState.set_focus_word(focus)

    for word in words:
        pos = controller.pos_of(word).value
        definition = controller.definition_of(word)
        col1, col2 = st.columns([5, 1])
        with col1:
            st.markdown(
                f'<div class="wv-item" title="{html.escape(definition or "")}">'
                f'{html.escape(word)} <span class="wv-pos-{pos}">({pos})</span></div>',
                unsafe_allow_html=True
            )
        with col2:
            if st.button("✕", key=f"remove_word_{word}", help=f"Remove {word}"):
                controller.remove_word(word)
                if st.session_state.focus_word == word:
                    AppState.set_focus_word(None)
                st.rerun()
