"""Utility modules for Styledown.

Provides:
- logger: get_logger for namespaced logging
"""

from styledown.utils.logger import get_logger

__all__ = [
    "get_logger",
]
