"""
Site Builder

Viewer front end: loads resume.json, renders the page and writes it to the
output directory. A load failure is caught here, once, and turned into an
error page plus a failed BuildResult; nothing is partially rendered.
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from omegaconf import DictConfig

from cvsite.contexts.document.exceptions import FetchError, ResumeParseError
from cvsite.contexts.document.session import ResumeSession
from cvsite.contexts.rendering.logger import log_build_result, log_build_start, setup_rendering_logger
from cvsite.contexts.rendering.renderer import ResumeRenderer
from cvsite.utils.settings import load_settings

load_dotenv()
SITE_OUTPUT_PATH = Path(os.getenv("SITE_OUTPUT_PATH", "outs/site"))


@dataclass
class BuildResult:
    """Result from build_site()."""

    success: bool
    source: Optional[str] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def build_site(
    source: Union[str, Path] = None,
    output_dir: Path = None,
    settings: DictConfig = None,
    log_dir: Path = None,
    session: ResumeSession = None,
) -> BuildResult:
    """
    Load a resume and write its rendered page.

    Args:
        source: resume.json path or URL (defaults to settings source.resume_path)
        output_dir: Directory for the page (defaults to SITE_OUTPUT_PATH)
        settings: Settings (loaded when None)
        log_dir: When given, a log file for this build is written there
        session: Session to load into (a fresh one when None)

    Returns:
        BuildResult; on load failure success is False and an error page is written
    """
    start_time = time.time()
    settings = settings if settings is not None else load_settings()
    source = str(source if source is not None else settings.source.resume_path)
    output_dir = output_dir if output_dir is not None else SITE_OUTPUT_PATH
    session = session or ResumeSession()

    log_file = setup_rendering_logger(log_dir, source=source) if log_dir is not None else None
    log_build_start(source, output_dir, log_file)

    renderer = ResumeRenderer(settings=settings)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / settings.rendering.page_filename

    try:
        document = session.load(source, timeout=settings.source.request_timeout)
    except (FetchError, ResumeParseError) as e:
        session.load_error = str(e)
        output_path.write_text(renderer.render_error_page(), encoding="utf-8")
        result = BuildResult(
            success=False,
            source=source,
            output_path=output_path,
            error=e.message,
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )
        log_build_result(result)
        return result

    output_path.write_text(renderer.render_page(document), encoding="utf-8")
    result = BuildResult(
        success=True,
        source=source,
        output_path=output_path,
        time_s=time.time() - start_time,
        log_dir=log_dir,
    )
    log_build_result(result)
    return result
