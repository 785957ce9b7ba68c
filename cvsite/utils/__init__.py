"""
Shared utilities for cvsite.

Common functionality used across contexts:
- Logger setup
- Settings loading
- Line-split rule and structural comparison
- Clipboard access
"""

from cvsite.utils.settings import load_settings
from cvsite.utils.text_processing import join_lines, split_lines
from cvsite.utils.timestamp import now

__all__ = ["load_settings", "join_lines", "split_lines", "now"]
