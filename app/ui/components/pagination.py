"""
Pagination control component.
"""

import streamlit as st

from app.core.pagination import page_range


def render_pagination(current_page: int, total_pages: int, key: str) -> int | None:
    """
    Render previous/next buttons and a window of page numbers.

    The first and last pages are always reachable; gaps are shown as an
    ellipsis. Nothing is rendered for a single page.

    Args:
        current_page: Page being displayed
        total_pages: Total number of pages
        key: Unique widget key prefix

    Returns:
        The page the user selected, or None if no button was pressed
    """
    if total_pages <= 1:
        return None

    pages = page_range(current_page, total_pages)
    start_page, end_page = pages[0], pages[-1]

    # Controls in display order: (label, target page or None for an ellipsis)
    controls = [("‹", current_page - 1)]
    if start_page > 1:
        controls.append(("1", 1))
    if start_page > 2:
        controls.append(("…", None))
    controls.extend((str(p), p) for p in pages)
    if end_page < total_pages - 1:
        controls.append(("…", None))
    if end_page < total_pages:
        controls.append((str(total_pages), total_pages))
    controls.append(("›", current_page + 1))

    selected = None
    columns = st.columns(len(controls))
    for i, (col, (label, target)) in enumerate(zip(columns, controls)):
        with col:
            if target is None:
                st.markdown("…")
                continue
            disabled = target < 1 or target > total_pages or target == current_page
            if st.button(
                label,
                key=f"{key}_page_{i}_{label}",
                disabled=disabled,
                type="primary" if target == current_page and label.isdigit() else "secondary",
            ):
                selected = target
    return selected
