"""Exceptions shared by the document, editor and rendering contexts."""

from typing import Optional


class CvsiteError(Exception):
    """Base class for all cvsite errors."""


class FetchError(CvsiteError):
    """
    Exception raised when the resume document cannot be retrieved.

    Attributes:
        message: Error description
        source: Path or URL that was requested
        status_code: HTTP status for URL sources (None for files and network failures)
    """

    def __init__(self, message: str, source: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message
        self.source = source
        self.status_code = status_code

        parts = [message]
        if source:
            parts.append(f"Source: {source}")
        if status_code is not None:
            parts.append(f"Status: {status_code}")

        super().__init__("\n".join(parts))


class ResumeNotFoundError(FetchError):
    """Raised when the resume file does not exist or the server answers with a non-success status."""


class ResumeParseError(CvsiteError, ValueError):
    """
    Exception raised when fetched bytes are not a valid resume JSON document.

    Attributes:
        message: Error description
        source: Path or URL the bytes came from
        line: Line of the JSON syntax error (if known)
        column: Column of the JSON syntax error (if known)
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.message = message
        self.source = source
        self.line = line
        self.column = column

        parts = [message]
        if source:
            parts.append(f"Source: {source}")
        if line is not None:
            parts.append(f"At line {line}, column {column}")

        super().__init__("\n".join(parts))


class MissingSectionError(CvsiteError, LookupError):
    """
    Raised when a section type required by the caller is absent from the document.

    Attributes:
        section_type: The section type that was looked up
    """

    def __init__(self, section_type: str):
        self.section_type = section_type
        super().__init__(f"Resume has no '{section_type}' section")


class WidgetAccessError(CvsiteError, KeyError):
    """Raised when serialization needs a widget value the form state does not hold."""

    def __init__(self, widget_id: str):
        self.widget_id = widget_id
        super().__init__(f"Form has no widget '{widget_id}'")

    def __str__(self) -> str:
        return self.args[0]


class SessionError(CvsiteError, RuntimeError):
    """Raised when a session is used before a document has been loaded into it."""
