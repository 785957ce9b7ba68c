"""
Resume Session

Holds the document a front end is working on. Replaces a process-wide
"loaded data" global: the session is created by the front end, passed to
whoever needs the document, and updated only by swapping the whole document.
"""

from pathlib import Path
from typing import Optional, Union

from cvsite.contexts.document.exceptions import SessionError
from cvsite.contexts.document.loader import load_resume
from cvsite.contexts.document.logger import _log_debug
from cvsite.contexts.document.model import ResumeDocument


class ResumeSession:
    """
    Single-writer holder of the current ResumeDocument.

    Attributes:
        source: Where the current document came from (None for in-memory documents)
        load_error: Message of the last failed load, if the front end fell back to a default
    """

    def __init__(self, document: Optional[ResumeDocument] = None, source: Optional[str] = None):
        self._document = document
        self.source = source
        self.load_error: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    @property
    def document(self) -> ResumeDocument:
        """
        The current document.

        Raises:
            SessionError: If nothing has been loaded yet
        """
        if self._document is None:
            raise SessionError("No resume loaded in this session")
        return self._document

    def replace(self, document: ResumeDocument, source: Optional[str] = None) -> None:
        """Swap in a new document wholesale."""
        self._document = document
        if source is not None:
            self.source = source
        _log_debug(f"Session document replaced (source: {self.source})")

    def load(self, source: Union[str, Path], timeout: Optional[float] = None) -> ResumeDocument:
        """
        Load a document and make it current.

        Raises:
            FetchError, ResumeParseError: Propagated from the loader; the session is left unchanged
        """
        document = load_resume(source, timeout=timeout)
        self.replace(document, source=str(source))
        self.load_error = None
        return document
