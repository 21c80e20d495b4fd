"""
Streamlit main app for Movie Favorites.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import streamlit as st

from app.ui.utils.session_state import init_session_state

st.set_page_config(
    page_title="Movie Favorites",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 Movie Favorites")
st.markdown("Search movies and keep a list of your favorites.")

# Check API health
try:
    from app.ui.utils.api_client import health_check
    health = health_check()
    if health.get("status") == "healthy":
        st.success(f"API connected ({health.get('favorites', 0)} favorites)")
    else:
        st.warning("API may not be fully ready")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn app.api.main:app --host 0.0.0.0 --port 3001")

st.divider()

col1, col2 = st.columns(2)
with col1:
    if st.button("🔍 Search Movies", use_container_width=True):
        st.switch_page("pages/1_search.py")
with col2:
    if st.button("❤️ My Favorites", use_container_width=True):
        st.switch_page("pages/2_favorites.py")
