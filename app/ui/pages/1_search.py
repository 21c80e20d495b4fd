"""
Search page - find movies and add them to favorites.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from app.ui.utils.api_client import (
    ApiError,
    search_movies,
    add_to_favorites,
    remove_from_favorites,
)
from app.ui.utils.session_state import init_session_state, set_page, set_search_query
from app.ui.components.movie_card import render_movie_card
from app.ui.components.pagination import render_pagination

GRID_COLUMNS = 5

init_session_state()

st.title("🔍 Search Movies")


def handle_toggle(movie: dict, is_favorite: bool) -> None:
    """Callback when the favorite button on a card is pressed."""
    try:
        if is_favorite:
            remove_from_favorites(movie["imdbID"])
            st.toast(f"Removed {movie['title']} from favorites")
        else:
            add_to_favorites(movie)
            st.toast(f"Added {movie['title']} to favorites")
    except ApiError as e:
        st.error(str(e))
        return
    st.rerun()


with st.form("search_form"):
    query = st.text_input("Title", value=st.session_state["search_query"])
    submitted = st.form_submit_button("Search")
if submitted:
    set_search_query(query)

query = st.session_state["search_query"]
if not query:
    st.info("Enter a title to start searching.")
    st.stop()

page = st.session_state["search_page"]
try:
    data = search_movies(query, page)
except ApiError as e:
    st.error(f"Search failed: {e}")
    st.stop()
except Exception as e:
    st.error(f"Search failed: {e}")
    st.info("Make sure the API is running: uvicorn app.api.main:app --host 0.0.0.0 --port 3001")
    st.stop()

movies = data.get("movies", [])
if not movies:
    st.info(f"No movies found for \"{query}\".")
    st.stop()

st.caption(f"{data.get('totalResults', '0')} results, page {page} of {data.get('totalPages', 1)}")

for row_start in range(0, len(movies), GRID_COLUMNS):
    columns = st.columns(GRID_COLUMNS)
    for col, movie in zip(columns, movies[row_start:row_start + GRID_COLUMNS]):
        with col:
            render_movie_card(
                movie,
                is_favorite=movie.get("isFavorite", False),
                on_toggle_favorite=handle_toggle,
                key_prefix="search",
            )

selected = render_pagination(page, data.get("totalPages", 0), key="search")
if selected is not None:
    set_page("search_page", selected)
    st.rerun()
