"""
Document context logger.

Provides logging interface for the document context with automatic [document] prefix.
All document modules should import from this module, not from loguru directly.
File sinks are configured by the front end (site build, editor) that runs the load.
"""

from loguru import logger

CONTEXT_PREFIX = "[document]"


# Wrapper functions with automatic [document] prefix


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [document] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [document] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [document] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_start(source: str) -> None:
    _log_debug(f"Loading resume from {source}")


def log_load_result(source: str, document, elapsed_time: float) -> None:
    """
    Log a successful load with a short summary of what was read.

    Args:
        source: Path or URL
        document: Loaded ResumeDocument
        elapsed_time: Seconds spent fetching and parsing
    """
    section_types = ", ".join(section.type for section in document.sections) or "none"
    _log_success(f"Loaded {source} ({elapsed_time:.2f}s)")
    _log_debug(f"  Sections: {section_types}")
