"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvsite.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, source: str = "") -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        source: Resume path or URL being rendered

    Returns:
        Path to log file

    Example:
        from cvsite.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, source="resume.json")
        _log_info("Starting build...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(source: str, output_dir: Path, log_file: Path = None) -> None:
    """Log start of a site build."""
    _log_info(f"Building site from {source}")
    if log_file:
        _log_info(f"Log file: {log_file}")
    _log_debug(f"Output directory: {output_dir}")


def log_build_result(result) -> None:
    """
    Log site build result.

    Args:
        result: BuildResult from build_site()
    """
    if result.success:
        _log_success(f"Site built ({result.time_s:.2f}s)")
        _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to build site ({result.time_s:.2f}s)")
        _log_error(f"  Error: {result.error}")
        if result.output_path:
            _log_info(f"  Error page: {result.output_path}")
