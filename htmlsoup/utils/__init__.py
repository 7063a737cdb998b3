"""
Utility modules for htmlsoup.
"""

# Import key utilities for easy access
from htmlsoup.utils.config import Config
from htmlsoup.utils.logging import setup_logging, log_exception
from htmlsoup.utils.network import create_session, fetch

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'create_session',
    'fetch',
]
