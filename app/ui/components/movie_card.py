"""
Movie display card component.
"""

import streamlit as st

from app.core.identity import UNKNOWN_YEAR


def render_movie_card(
    movie: dict,
    is_favorite: bool,
    on_toggle_favorite: callable = None,
    key_prefix: str = "movie",
) -> None:
    """
    Render a movie card with poster and a favorite toggle button.

    Args:
        movie: Movie dict with title, imdbID, year, poster
        is_favorite: Whether the movie is currently a favorite
        on_toggle_favorite: Callback(movie, is_favorite) when the button is pressed
        key_prefix: Prefix for widget keys (cards appear on several pages)
    """
    with st.container(border=True):
        poster = movie.get("poster")
        if poster and poster != "N/A":
            st.image(poster, use_container_width=True)
        else:
            st.caption("No poster available")

        st.markdown(f"**{movie.get('title', 'Untitled')}**")
        year = movie.get("year")
        if year and year != UNKNOWN_YEAR:
            st.caption(str(year))

        if on_toggle_favorite:
            label = "💔 Remove from favorites" if is_favorite else "❤️ Add to favorites"
            if st.button(label, key=f"{key_prefix}_fav_{movie['imdbID']}", use_container_width=True):
                on_toggle_favorite(movie, is_favorite)
