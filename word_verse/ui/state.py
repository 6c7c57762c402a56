"""
Centralized session state management for Word-Verse.
Provides typed accessors and clear state transition methods.
"""

from dataclasses import dataclass
from typing import Optional, Any
import streamlit as st

from word_verse.core.controller import VisualizationController


@dataclass
class StateDefaults:
    """Default values for all session state variables."""
    controller: Optional[Any] = None
    last_error: Optional[str] = None
    last_success: Optional[str] = None
    dark_mode: bool = False
    focus_word: Optional[str] = None
    pin_axes: bool = False
    upload_counter: int = 0  # Bumped to reset the file uploader widget


class AppState:
    """
    Wrapper around Streamlit session state with type hints and defaults.
    Provides clear API for state transitions.
    """

    @classmethod
    def init(cls) -> None:
        """Initialize all session state with defaults."""
        defaults = StateDefaults()
        for field_name in defaults.__dataclass_fields__:
            if field_name not in st.session_state:
                st.session_state[field_name] = getattr(defaults, field_name)
        if st.session_state.controller is None:
            st.session_state.controller = VisualizationController()

    @staticmethod
    def controller() -> VisualizationController:
        """The session's state owner (one per browser session)."""
        return st.session_state.controller

    @classmethod
    def set_error(cls, message: str) -> None:
        """Record an error for display, replacing any success message."""
        st.session_state.last_error = message
        st.session_state.last_success = None

    @classmethod
    def set_success(cls, message: str) -> None:
        """Record a success message, replacing any error."""
        st.session_state.last_success = message
        st.session_state.last_error = None

    @classmethod
    def clear_messages(cls) -> None:
        """Clear any recorded error or success message."""
        st.session_state.last_error = None
        st.session_state.last_success = None

    @classmethod
    def set_focus_word(cls, word: Optional[str]) -> None:
        st.session_state.focus_word = word

    @classmethod
    def reset_for_model_change(cls) -> None:
        """Clear transient state when the active model changes."""
        st.session_state.focus_word = None
        cls.clear_messages()

    @classmethod
    def reset_uploader(cls) -> None:
        st.session_state.upload_counter += 1

    # Property-style accessors for common checks
    @staticmethod
    def has_error() -> bool:
        return st.session_state.get("last_error") is not None

    @staticmethod
    def has_success() -> bool:
        return st.session_state.get("last_success") is not None

    @staticmethod
    def is_dark_mode() -> bool:
        return st.session_state.get("dark_mode", False)


def init_session_state() -> None:
    """Convenience function to initialize session state."""
    AppState.init()
