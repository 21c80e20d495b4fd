"""
Favorites page - paginated list of favorite movies.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from app.ui.utils.api_client import ApiError, get_favorites, remove_from_favorites
from app.ui.utils.session_state import init_session_state, set_page
from app.ui.components.movie_card import render_movie_card
from app.ui.components.pagination import render_pagination

GRID_COLUMNS = 5

init_session_state()

st.title("❤️ My Favorites")


def handle_remove(movie: dict, is_favorite: bool) -> None:
    """Callback when a favorite is removed."""
    try:
        remove_from_favorites(movie["imdbID"])
        st.toast(f"Removed {movie['title']} from favorites")
    except ApiError as e:
        st.error(str(e))
        return
    st.rerun()


page = st.session_state["favorites_page"]
try:
    data = get_favorites(page)
except Exception as e:
    st.error(f"Failed to load favorites: {e}")
    st.info("Make sure the API is running: uvicorn app.api.main:app --host 0.0.0.0 --port 3001")
    st.stop()

favorites = data.get("favorites", [])
total_pages = data.get("totalPages", 0)

# Last item on the last page was removed
if not favorites and page > 1 and total_pages:
    set_page("favorites_page", total_pages)
    st.rerun()

if not favorites:
    st.info("No favorites yet. Search for movies and add some!")
    if st.button("Search Movies"):
        st.switch_page("pages/1_search.py")
    st.stop()

st.caption(f"{data.get('totalResults', '0')} favorites, page {page} of {total_pages}")

for row_start in range(0, len(favorites), GRID_COLUMNS):
    columns = st.columns(GRID_COLUMNS)
    for col, movie in zip(columns, favorites[row_start:row_start + GRID_COLUMNS]):
        with col:
            render_movie_card(
                movie,
                is_favorite=True,
                on_toggle_favorite=handle_remove,
                key_prefix="favorites",
            )

selected = render_pagination(page, total_pages, key="favorites")
if selected is not None:
    set_page("favorites_page", selected)
    st.rerun()
