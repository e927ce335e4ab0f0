"""Session state management for the pack calculator app.

Each browser session gets its own PackService (and therefore its own pack
size configuration), plus the last calculation result and error.
"""

import streamlit as st
from typing import Optional

from pack_calculator.api import build_service
from pack_calculator.config import AppConfig
from pack_calculator.models import PackResponse
from pack_calculator.service import PackService


def initialize_session_state():
    """Initialize all session state variables with defaults."""
    defaults = {
        'pack_service': None,
        'last_result': None,
        'last_error': None,
        'flash_message': None,
    }

    for key, default_value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default_value

    if st.session_state.pack_service is None:
        st.session_state.pack_service = build_service(AppConfig.from_env())


def get_pack_service() -> PackService:
    """Return the session's PackService."""
    return st.session_state.pack_service


def store_result(result: PackResponse):
    """Store a successful calculation."""
    st.session_state.last_result = result
    st.session_state.last_error = None


def store_error(message: str):
    """Store a failed calculation or update."""
    st.session_state.last_result = None
    st.session_state.last_error = message


def get_result() -> Optional[PackResponse]:
    """Return the last successful calculation, if any."""
    return st.session_state.get('last_result')


def clear_result():
    """Clear the last calculation and error."""
    st.session_state.last_result = None
    st.session_state.last_error = None
