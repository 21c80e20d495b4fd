"""
Movie Favorites application package.

Contains the API, the core favorites/search logic, the Streamlit UI and
shared utilities.
"""

__version__ = "1.0.0"
