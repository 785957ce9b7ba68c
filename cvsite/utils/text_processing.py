"""
Text processing utilities shared by the editor and the validators.

The line-split rule lets a list of short strings travel through a single
multi-line text widget: lists are joined with newlines on the way in and
split back, with blank lines discarded, on the way out.
"""

import re
from typing import Any, Iterable, List, Tuple

_LINE_BREAK = re.compile(r"\r\n|\n")


def join_lines(items: Iterable[Any]) -> str:
    """
    Join list items into newline-separated text for a multi-line widget.

    Args:
        items: List items (non-string items are converted with str())

    Returns:
        Items joined with "\\n"

    Example:
        >>> join_lines(["Python", "SQL"])
        'Python\\nSQL'
    """
    return "\n".join(item if isinstance(item, str) else str(item) for item in items or [])


def split_lines(text: str) -> List[str]:
    """
    Split multi-line widget text back into list items.

    Lines are kept as typed; lines that are empty or whitespace-only are dropped.
    Both "\\n" and "\\r\\n" count as line breaks (browsers post textareas with CRLF).

    Args:
        text: Raw widget text

    Returns:
        Non-blank lines in order

    Example:
        >>> split_lines("Did X\\n\\n  \\nDid Y")
        ['Did X', 'Did Y']
    """
    if not text:
        return []
    return [line for line in _LINE_BREAK.split(text) if line.strip() != ""]


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty or whitespace-only."""
    return value is None or (isinstance(value, str) and value.strip() == "")


def compare_structured(expected: Any, actual: Any, path: str = "$") -> Tuple[List[str], int]:
    """
    Compare two JSON-like structures and describe every difference.

    Dict key order is ignored; list order is significant.

    Args:
        expected: Reference structure
        actual: Structure to check
        path: Location prefix used in messages (JSONPath-like)

    Returns:
        Tuple of (diff_lines, num_differences)

    Example:
        >>> compare_structured({"a": [1, 2]}, {"a": [1, 3]})
        (['$.a[1]: expected 2, got 3'], 1)
    """
    diffs: List[str] = []
    _collect_diffs(expected, actual, path, diffs)
    return diffs, len(diffs)


def _collect_diffs(expected: Any, actual: Any, path: str, diffs: List[str]) -> None:
    if isinstance(expected, dict) and isinstance(actual, dict):
        for key in expected:
            if key not in actual:
                diffs.append(f"{path}.{key}: missing")
            else:
                _collect_diffs(expected[key], actual[key], f"{path}.{key}", diffs)
        for key in actual:
            if key not in expected:
                diffs.append(f"{path}.{key}: unexpected key")
    elif isinstance(expected, list) and isinstance(actual, list):
        if len(expected) != len(actual):
            diffs.append(f"{path}: expected {len(expected)} items, got {len(actual)}")
        for i, (exp_item, act_item) in enumerate(zip(expected, actual)):
            _collect_diffs(exp_item, act_item, f"{path}[{i}]", diffs)
    elif expected != actual:
        diffs.append(f"{path}: expected {expected!r}, got {actual!r}")
