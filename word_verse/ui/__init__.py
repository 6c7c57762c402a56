"""UI components for Word-Verse Streamlit application."""

from .state import AppState, init_session_state
from .styles import inject_styles, render_header, get_theme
from . import sidebar
from . import main_view
from . import docs

__all__ = [
    "AppState",
    "init_session_state",
    "inject_styles",
    "render_header",
    "get_theme",
    "sidebar",
    "main_view",
    "docs",
]
