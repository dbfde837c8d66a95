"""Utility modules for Bracemark.

Provides:
- logger: get_logger for logging
"""

from bracemark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
