"""
Session state helpers for Streamlit.
"""

import streamlit as st


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "search_query" not in st.session_state:
        st.session_state["search_query"] = ""
    if "search_page" not in st.session_state:
        st.session_state["search_page"] = 1
    if "favorites_page" not in st.session_state:
        st.session_state["favorites_page"] = 1


def set_search_query(query: str) -> None:
    """Start a new search; always from the first page."""
    st.session_state["search_query"] = query.strip()
    st.session_state["search_page"] = 1


def set_page(key: str, page: int) -> None:
    """Set search_page or favorites_page."""
    st.session_state[key] = max(1, int(page))
