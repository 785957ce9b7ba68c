"""
Session logging for the cvsite front ends.

Each CLI run that asks for a log (render_resume.py build --log,
edit_resume.py generate --log, ...) gets its own directory under outs/logs/
with one <context>.log file. The file opens with a header saying which
front end ran, on what, and with which cvsite version, so a generated
index.html or resume.json can be traced back to the run that produced it.

Context prefixes ([document], [editor], [render]) are added by the wrappers in
contexts/<context>/logger.py; this module only owns the sinks and the header.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

import cvsite

load_dotenv()

# Console verbosity; the file sink always records DEBUG
CONSOLE_LOG_LEVEL = os.getenv("CVSITE_LOG_LEVEL", "INFO")

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

HEADER_RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Route loguru output to a per-run log file and the console.

    Args:
        context_name: Front end writing the log ("render" or "editor"); names the file
        log_dir: Directory for this run, created if missing
        extra_provenance: Header lines specific to the front end (e.g., {"Source": "resume.json"})
        level_colors: Console color overrides merged over LEVEL_COLORS

    Returns:
        Path to the log file

    Example:
        from cvsite.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="editor",
            log_dir=Path("outs/logs/generate_20251114_123456"),
            extra_provenance={"Action": "generate"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG")

    # stderr keeps stdout free for JSON printed by edit_resume.py --show
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=CONSOLE_LOG_LEVEL,
        colorize=True,
    )

    log_run_header(context_name, extra_provenance)

    return log_file


def log_run_header(context_name: str, extra_context: dict = None) -> None:
    """Write the run header: cvsite version, front end, command line, resume source override."""
    logger.info(HEADER_RULE)
    logger.info(f"cvsite {cvsite.__version__} ({context_name})")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    if os.getenv("RESUME_PATH"):
        logger.info(f"RESUME_PATH: {os.getenv('RESUME_PATH')}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(HEADER_RULE)
