"""
Shared utilities package.

Currently holds the logging configuration used by the API and UI.
"""

from app.utils.logging_config import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
