"""
Resume Loader

Fetches resume.json from a file path or an http(s) URL and parses it into a
ResumeDocument. Fails with ResumeNotFoundError / FetchError when the resource
cannot be retrieved and with ResumeParseError when the bytes are not a resume
JSON object. There are no retries and no partial results.
"""

import json
import os
import time
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from cvsite.contexts.document.exceptions import FetchError, ResumeNotFoundError, ResumeParseError
from cvsite.contexts.document.logger import _log_error, log_load_result, log_load_start
from cvsite.contexts.document.model import ResumeDocument

load_dotenv()
RESUME_PATH = os.getenv("RESUME_PATH", "resume.json")

URL_SCHEMES = ("http://", "https://")


def is_url(source: Union[str, Path]) -> bool:
    return isinstance(source, str) and source.lower().startswith(URL_SCHEMES)


def fetch_bytes(source: Union[str, Path], timeout: Optional[float] = None) -> bytes:
    """
    Fetch raw bytes from a file path or URL.

    Args:
        source: Filesystem path or http(s) URL
        timeout: Request timeout in seconds for URLs (None waits indefinitely)

    Returns:
        Raw bytes

    Raises:
        ResumeNotFoundError: File missing or non-success HTTP status
        FetchError: File unreadable or network failure
    """
    if is_url(source):
        import requests  # lazy import

        try:
            response = requests.get(source, timeout=timeout)
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch resume: {e}", source=str(source)) from e

        if not response.ok:
            raise ResumeNotFoundError(
                f"Failed to fetch resume: {response.reason or 'non-success status'}",
                source=str(source),
                status_code=response.status_code,
            )
        return response.content

    path = Path(source)
    if not path.is_file():
        raise ResumeNotFoundError("Resume file not found", source=str(path))
    try:
        return path.read_bytes()
    except OSError as e:
        raise FetchError(f"Failed to read resume: {e}", source=str(path)) from e


def parse_resume_bytes(raw: bytes, source: str = "") -> ResumeDocument:
    """
    Parse resume.json bytes.

    Args:
        raw: UTF-8 encoded JSON (a leading BOM is tolerated)
        source: Origin, used in error messages

    Returns:
        ResumeDocument owning the parsed object

    Raises:
        ResumeParseError: Invalid UTF-8, invalid JSON, root is not an object,
            or "sections" is present but not a list
    """
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ResumeParseError(f"Resume is not valid UTF-8: {e.reason}", source=source) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResumeParseError(
            f"Resume is not valid JSON: {e.msg}", source=source, line=e.lineno, column=e.colno
        ) from e

    if not isinstance(data, dict):
        raise ResumeParseError(
            f"Resume root must be a JSON object, got {type(data).__name__}", source=source
        )
    if "sections" in data and not isinstance(data["sections"], list):
        raise ResumeParseError("Resume 'sections' must be a list", source=source)

    return ResumeDocument(data)


def load_resume(source: Union[str, Path] = None, timeout: Optional[float] = None) -> ResumeDocument:
    """
    Load and parse resume.json.

    Args:
        source: Path or URL (defaults to RESUME_PATH env variable, then "resume.json")
        timeout: Request timeout in seconds for URLs

    Returns:
        Loaded ResumeDocument

    Raises:
        FetchError: Resource unreachable (ResumeNotFoundError for missing / non-success)
        ResumeParseError: Malformed content
    """
    if source is None:
        source = RESUME_PATH

    start_time = time.time()
    log_load_start(str(source))

    try:
        raw = fetch_bytes(source, timeout=timeout)
        document = parse_resume_bytes(raw, source=str(source))
    except (FetchError, ResumeParseError) as e:
        _log_error(f"Failed to load {source}: {e.message}")
        raise

    log_load_result(str(source), document, time.time() - start_time)
    return document
