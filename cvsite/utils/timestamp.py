"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Compact local timestamp for directory and file names.

    Returns:
        Timestamp like "20251114_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
