"""
Clipboard access through the platform's command-line clipboard tools.

Copying is opportunistic: callers must keep the text visible elsewhere
because no tool may be installed (headless servers, containers).
"""

import shutil
import subprocess
import sys
from typing import List, Optional

# Candidate commands in order of preference; the first one found on PATH is used
CLIPBOARD_COMMANDS = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


def find_clipboard_command() -> Optional[List[str]]:
    """
    Find an available clipboard command.

    Returns:
        Command argv list, or None if no clipboard tool is installed
    """
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]) is not None:
            return cmd
    return None


def copy_to_clipboard(text: str) -> tuple[bool, str]:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy

    Returns:
        Tuple of (success, message). On failure the message says why.
    """
    cmd = find_clipboard_command()
    if cmd is None:
        return False, "No clipboard tool found (tried pbcopy, wl-copy, xclip, xsel, clip)"

    # clip.exe reads the console code page, everything else takes UTF-8
    encoding = "utf-16" if cmd[0] == "clip" and sys.platform == "win32" else "utf-8"

    try:
        result = subprocess.run(
            cmd,
            input=text.encode(encoding),
            capture_output=True,
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        return False, f"Could not copy to clipboard: {e}"

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        return False, f"Could not copy to clipboard: {cmd[0]} exited with {result.returncode} {stderr}".rstrip()

    return True, f"Copied to clipboard with {cmd[0]}"
