"""
Document Context

Responsibilities:
- Defines the resume schema (ResumeDocument, section types, typed item views)
- Loads resume.json from a path or URL
- Holds the current document for a front end (ResumeSession)

Owns: Resume schema, loading, error taxonomy
Never: Produces markup or form widgets
"""

from cvsite.contexts.document.defaults import (
    MissingSectionPolicy,
    get_default_document,
    get_missing_section_policy,
)
from cvsite.contexts.document.exceptions import (
    CvsiteError,
    FetchError,
    MissingSectionError,
    ResumeNotFoundError,
    ResumeParseError,
    SessionError,
    WidgetAccessError,
)
from cvsite.contexts.document.loader import load_resume
from cvsite.contexts.document.model import ResumeDocument, ResumeSection, SectionType
from cvsite.contexts.document.session import ResumeSession

__all__ = [
    # Data structures
    "ResumeDocument",
    "ResumeSection",
    "SectionType",
    "ResumeSession",
    # Loading and defaults
    "load_resume",
    "get_default_document",
    "get_missing_section_policy",
    "MissingSectionPolicy",
    # Errors
    "CvsiteError",
    "FetchError",
    "ResumeNotFoundError",
    "ResumeParseError",
    "MissingSectionError",
    "WidgetAccessError",
    "SessionError",
]
