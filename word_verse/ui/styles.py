"""
Theme constants and CSS injection for Word-Verse.
Light and dark palettes live here; everything else reads from them.
"""

import html

import streamlit as st
from dataclasses import dataclass

import config


@dataclass(frozen=True)
class Theme:
    """Central theme configuration - all colors in one place."""
    # Title gradient
    primary_start: str = "#007bff"
    primary_end: str = "#00ff9d"

    # Backgrounds
    bg_app: str = "#f5f5f5"
    bg_panel: str = "#ffffff"
    bg_item: str = "#f0f0f0"
    bg_item_hover: str = "#e0e0e0"

    # Text
    text_primary: str = "#333333"
    text_secondary: str = "#555555"
    text_muted: str = "#999999"

    # Messages
    accent_error: str = "#ff4d4d"
    accent_success: str = "#4CAF50"

    # Borders
    border_subtle: str = "#dddddd"


LIGHT_THEME = Theme()

DARK_THEME = Theme(
    bg_app="#1a1a1a",
    bg_panel="#2d2d2d",
    bg_item="#404040",
    bg_item_hover="#505050",
    text_primary="#ffffff",
    text_secondary="#e0e0e0",
    text_muted="#888888",
    border_subtle="#404040",
)


def get_theme(dark_mode: bool) -> Theme:
    return DARK_THEME if dark_mode else LIGHT_THEME


def get_css(theme: Theme) -> str:
    """Generate CSS using theme constants."""
    pos_rules = "\n".join(
        f"    .wv-pos-{pos} {{ color: {color}; font-weight: 600; }}"
        for pos, color in config.POS_COLORS.items()
    )
    return f"""
<style>
    [data-testid="stAppViewContainer"] {{
        background: {theme.bg_app};
        color: {theme.text_primary};
    }}

    [data-testid="stSidebar"] {{
        background: {theme.bg_panel};
    }}

    /* Header styling */
    .wv-header {{
        background: linear-gradient(45deg, {theme.primary_start}, {theme.primary_end});
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        background-clip: text;
        font-size: 2.2rem;
        font-weight: 700;
        margin-bottom: 0;
    }}

    .wv-subheader {{
        color: {theme.text_secondary};
        font-size: 1rem;
        margin-top: 0.25rem;
    }}

    /* Word and paragraph list items */
    .wv-item {{
        background: {theme.bg_item};
        color: {theme.text_primary};
        border-radius: 6px;
        padding: 0.5rem 0.75rem;
        margin: 0.25rem 0;
    }}

    .wv-item:hover {{
        background: {theme.bg_item_hover};
    }}

    .wv-item-active {{
        background: {theme.bg_item_hover};
        border-left: 3px solid {theme.primary_start};
    }}

    .wv-definition {{
        color: {theme.text_muted};
        font-size: 0.8rem;
    }}

{pos_rules}

    /* Model name caption under the plot */
    .wv-model-name {{
        color: {theme.text_muted};
        text-align: center;
        font-size: 1rem;
        font-weight: 500;
    }}

    /* Message styling */
    .wv-error {{
        color: {theme.accent_error};
        border-left: 3px solid {theme.accent_error};
        background: rgba(255, 77, 77, 0.08);
        border-radius: 6px;
        padding: 0.5rem 0.75rem;
        margin: 0.5rem 0;
        font-size: 0.9rem;
    }}

    .wv-success {{
        color: {theme.accent_success};
        border-left: 3px solid {theme.accent_success};
        background: rgba(76, 175, 80, 0.08);
        border-radius: 6px;
        padding: 0.5rem 0.75rem;
        margin: 0.5rem 0;
        font-size: 0.9rem;
    }}
</style>
"""


def inject_styles(dark_mode: bool = False) -> None:
    """Inject CSS styles into the Streamlit app."""
    st.markdown(get_css(get_theme(dark_mode)), unsafe_allow_html=True)


def render_header() -> None:
    """Render the styled application header."""
    st.markdown('<h1 class="wv-header">Word-Verse</h1>', unsafe_allow_html=True)
    st.markdown('<p class="wv-subheader">Word Embedding Explorer</p>', unsafe_allow_html=True)


def render_error(message: str) -> None:
    """Render a styled error message."""
    st.markdown(f'<div class="wv-error">{html.escape(message)}</div>', unsafe_allow_html=True)


def render_success(message: str) -> None:
    """Render a styled success message."""
    st.markdown(f'<div class="wv-success">{html.escape(message)}</div>', unsafe_allow_html=True)
