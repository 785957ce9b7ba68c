"""
JSON Export

Formats a document as pretty-printed resume.json text and hands it to the user:
the text is always made visible (written to a file and/or returned for display),
then copied to the clipboard when possible. A clipboard failure never loses the text.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cvsite.contexts.document.model import ResumeDocument
from cvsite.contexts.editor.logger import log_export_result
from cvsite.utils.clipboard import copy_to_clipboard

COPIED_MESSAGE = "JSON generated and copied to clipboard! Paste it into your resume.json file."
MANUAL_COPY_MESSAGE = "JSON generated! Please copy it from the output below."


@dataclass
class ExportResult:
    """
    Result of publishing generated JSON.

    Attributes:
        text: The generated JSON text
        copied: Whether the clipboard copy succeeded
        message: User-facing notice
        output_path: File the text was written to (None when only displayed)
        document: The serialized document, when produced by an editor session
    """

    text: str
    copied: bool = False
    message: str = ""
    output_path: Optional[Path] = None
    document: Optional[ResumeDocument] = None


def export_json(document: ResumeDocument, indent: int = 2) -> str:
    """
    Pretty-print a document as resume.json text.

    Non-ASCII characters are written as-is.

    Args:
        document: Document to format
        indent: Spaces per indentation level

    Returns:
        JSON text ending with a newline
    """
    return json.dumps(document.data, indent=indent, ensure_ascii=False) + "\n"


def publish_json(text: str, output_path: Path = None, copy: bool = True) -> ExportResult:
    """
    Make generated JSON available to the user.

    Args:
        text: JSON text from export_json()
        output_path: Optional file to write the text to
        copy: Try to copy the text to the clipboard

    Returns:
        ExportResult describing where the text went
    """
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")

    copied = False
    detail = "clipboard copy disabled"
    if copy:
        copied, detail = copy_to_clipboard(text)

    result = ExportResult(
        text=text,
        copied=copied,
        message=COPIED_MESSAGE if copied else f"{MANUAL_COPY_MESSAGE} ({detail})",
        output_path=output_path,
    )
    log_export_result(result)
    return result
