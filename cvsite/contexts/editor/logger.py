"""
Editor context logger.

Provides logging interface for the editor context with automatic [editor] prefix.
All editor modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvsite.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[editor]"


def setup_editor_logger(log_dir: Path, action: str = "edit") -> Path:
    """
    Setup logger for editor context.

    Args:
        log_dir: Directory for this editing session
        action: Action name for provenance (e.g., "generate", "validate")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="editor",
        log_dir=log_dir,
        extra_provenance={"Action": action},
    )


# Wrapper functions with automatic [editor] prefix


def _log_info(message: str) -> None:
    """Log info message with [editor] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [editor] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [editor] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [editor] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [editor] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level editor-specific logging helpers


def log_projection_result(item_counts: dict) -> None:
    """Log how many widget groups each list-typed section received."""
    counts = ", ".join(f"{section_type}: {count}" for section_type, count in item_counts.items())
    _log_info(f"Form populated ({counts})")


def log_export_result(result) -> None:
    """
    Log where generated JSON went.

    Args:
        result: ExportResult from publish_json()
    """
    if result.output_path:
        _log_info(f"JSON written to {result.output_path}")
    if result.copied:
        _log_success("JSON generated and copied to clipboard")
    else:
        _log_warning(f"JSON generated; copy it manually ({result.message})")


def log_roundtrip_result(result) -> None:
    """Log round-trip validation outcome (RoundtripResult)."""
    if result.success:
        _log_success("Roundtrip validation passed")
    else:
        _log_error(f"Roundtrip validation failed ({result.num_diffs} diffs)")
        for line in result.diffs:
            _log_debug(f"  {line}")
