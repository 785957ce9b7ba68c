"""
Resume Document Structure

Defines the structured representation of the resume document (resume.json).

The raw JSON object stays the source of truth so that fields no front end knows
about survive a load/save cycle. Typed views (PersonalInfo, ResumeSection and the
per-type item classes) are built on demand for readers; missing text reads as ""
and missing lists read as [].
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from cvsite.contexts.document.exceptions import MissingSectionError


class SectionType:
    """Enum-like class for the closed set of section types"""

    SUMMARY = "summary"
    TECHNOLOGIES = "technologies"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    EDUCATION = "education"

    @classmethod
    def all_types(cls) -> List[str]:
        """Return every section type in canonical display order"""
        return [cls.SUMMARY, cls.TECHNOLOGIES, cls.EXPERIENCE, cls.PROJECTS, cls.EDUCATION]

    @classmethod
    def list_types(cls) -> List[str]:
        """Return the section types whose payload is an ordered list of items"""
        return [cls.TECHNOLOGIES, cls.EXPERIENCE, cls.PROJECTS, cls.EDUCATION]

    @classmethod
    def is_known(cls, section_type: str) -> bool:
        return section_type in cls.all_types()


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _text_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return ["" if item is None else str(item) for item in value]


@dataclass
class Contact:
    """Contact line shown under the name."""

    location: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    github: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Contact":
        data = data or {}
        return cls(
            location=_text(data, "location"),
            phone=_text(data, "phone"),
            email=_text(data, "email"),
            linkedin=_text(data, "linkedin"),
            github=_text(data, "github"),
        )


@dataclass
class PersonalInfo:
    """
    Personal information block.

    Attributes:
        name: Full name
        title: Professional title shown under the name
        contact: Contact details
    """

    name: str = ""
    title: str = ""
    contact: Contact = field(default_factory=Contact)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PersonalInfo":
        data = data or {}
        return cls(
            name=_text(data, "name"),
            title=_text(data, "title"),
            contact=Contact.from_dict(data.get("contact")),
        )


@dataclass
class TechnologyItem:
    """One skill category (technologies section)."""

    category: str = ""
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TechnologyItem":
        return cls(category=_text(data, "category"), skills=_text_list(data, "skills"))


@dataclass
class ExperienceItem:
    """One job (experience section)."""

    company: str = ""
    role: str = ""
    period: str = ""
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceItem":
        return cls(
            company=_text(data, "company"),
            role=_text(data, "role"),
            period=_text(data, "period"),
            achievements=_text_list(data, "achievements"),
        )


@dataclass
class ProjectItem:
    """One project; url is optional and may be empty."""

    name: str = ""
    url: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectItem":
        return cls(
            name=_text(data, "name"),
            url=_text(data, "url"),
            description=_text(data, "description"),
        )


@dataclass
class EducationItem:
    """One degree or certificate."""

    degree: str = ""
    institution: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationItem":
        return cls(degree=_text(data, "degree"), institution=_text(data, "institution"))


ITEM_CLASSES = {
    SectionType.TECHNOLOGIES: TechnologyItem,
    SectionType.EXPERIENCE: ExperienceItem,
    SectionType.PROJECTS: ProjectItem,
    SectionType.EDUCATION: EducationItem,
}


@dataclass
class ResumeSection:
    """
    Read-only view of one section of the document.

    Attributes:
        type: Section type discriminator (see SectionType)
        title: Display label
        data: The raw section object (shared with the document, do not mutate)
        position: Index of the section in the document's sections list
    """

    type: str
    title: str
    data: Dict[str, Any] = field(default_factory=dict, repr=False)
    position: int = 0

    @property
    def content(self) -> str:
        """Text of a summary section ("" for other types)."""
        return _text(self.data, "content")

    @property
    def raw_items(self) -> List[Dict[str, Any]]:
        """Raw item objects of a list-typed section, skipping anything that is not an object."""
        items = self.data.get("items")
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, dict)]

    @property
    def items(self) -> list:
        """
        Typed items for list-typed sections.

        Returns:
            List of TechnologyItem / ExperienceItem / ProjectItem / EducationItem,
            or [] for summary and unknown types
        """
        item_class = ITEM_CLASSES.get(self.type)
        if item_class is None:
            return []
        return [item_class.from_dict(item) for item in self.raw_items]


class ResumeDocument:
    """
    Structured representation of a complete resume document.

    Wraps the parsed resume.json object. The editor writes new documents by
    copying and overwriting the raw object; readers use the typed views.

    Example:
        doc = ResumeDocument.from_dict(json.loads(text))
        experience = doc.get_section(SectionType.EXPERIENCE)
        if experience is not None:
            for job in experience.items:
                print(job.company)
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        """
        Args:
            data: Parsed resume.json object. Not copied; use from_dict() for a private copy.
        """
        self.data: Dict[str, Any] = data if data is not None else {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeDocument":
        """Create a document from a deep copy of a raw JSON object."""
        return cls(copy.deepcopy(data))

    def to_dict(self) -> Dict[str, Any]:
        """Deep copy of the raw JSON object."""
        return copy.deepcopy(self.data)

    def copy(self) -> "ResumeDocument":
        return ResumeDocument(self.to_dict())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResumeDocument):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"ResumeDocument(name={self.personal_info.name!r}, sections={len(self.sections)})"

    @property
    def meta(self) -> Dict[str, Any]:
        """Page metadata (title, description, social, structuredData). Opaque to the editor core."""
        meta = self.data.get("meta")
        return meta if isinstance(meta, dict) else {}

    @property
    def personal_info(self) -> PersonalInfo:
        return PersonalInfo.from_dict(self.data.get("personalInfo"))

    @property
    def sections(self) -> List[ResumeSection]:
        """Sections in document order. Entries that are not objects are skipped."""
        raw_sections = self.data.get("sections")
        if not isinstance(raw_sections, list):
            return []

        sections = []
        for position, raw in enumerate(raw_sections):
            if not isinstance(raw, dict):
                continue
            sections.append(
                ResumeSection(
                    type=_text(raw, "type"),
                    title=_text(raw, "title"),
                    data=raw,
                    position=position,
                )
            )
        return sections

    def sections_by_type(self) -> Dict[str, ResumeSection]:
        """
        Map each section type to its first section.

        Later sections of an already-seen type are ignored (lookup is by first match).
        """
        by_type: Dict[str, ResumeSection] = {}
        for section in self.sections:
            by_type.setdefault(section.type, section)
        return by_type

    def get_section(self, section_type: str) -> Optional[ResumeSection]:
        """
        Find the first section of a type.

        Args:
            section_type: Section type (see SectionType)

        Returns:
            ResumeSection if present, None otherwise
        """
        return self.sections_by_type().get(section_type)

    def require_section(self, section_type: str) -> ResumeSection:
        """
        Find the first section of a type, failing when absent.

        Raises:
            MissingSectionError: If the document has no section of this type
        """
        section = self.get_section(section_type)
        if section is None:
            raise MissingSectionError(section_type)
        return section

    @property
    def table_of_contents(self) -> str:
        """Formatted listing of sections with their types and item counts."""
        sections = self.sections
        if not sections:
            return "No sections found."

        lines = []
        for i, section in enumerate(sections, 1):
            count = "" if section.type == SectionType.SUMMARY else f"{len(section.raw_items)} items"
            lines.append(f"{i:2}. {section.title:30} | {section.type:13} | {count}")
        return "\n".join(lines)
