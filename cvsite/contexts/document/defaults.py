"""
Default values for the resume document structure.

Provides shared defaults used by:
- the editor (blank form when resume.json cannot be loaded)
- the serializer (titles for sections it has to create)
- both front ends (missing-section policy)
"""

from typing import Any, Dict

from omegaconf import DictConfig

from cvsite.contexts.document.model import ResumeDocument, SectionType

DEFAULT_SECTION_TITLES = {
    SectionType.SUMMARY: "Summary",
    SectionType.TECHNOLOGIES: "Technologies",
    SectionType.EXPERIENCE: "Experience",
    SectionType.PROJECTS: "Projects",
    SectionType.EDUCATION: "Education",
}


class MissingSectionPolicy:
    """Enum-like class for handling a section type absent from the document"""

    SKIP = "skip"
    ERROR = "error"

    @classmethod
    def get_all_policies(cls) -> set:
        return {cls.SKIP, cls.ERROR}


def get_missing_section_policy(settings: DictConfig = None, section_type: str = None) -> str:
    """
    Resolve the missing-section policy for a section type.

    Per-type entries in document.section_policies win over document.missing_sections.

    Args:
        settings: Loaded settings (None means the built-in default, "skip")
        section_type: Section type being looked up

    Returns:
        MissingSectionPolicy.SKIP or MissingSectionPolicy.ERROR

    Raises:
        ValueError: If the configured value is not a known policy
    """
    if settings is None:
        return MissingSectionPolicy.SKIP

    document_settings = settings.get("document", {}) or {}
    policy = document_settings.get("missing_sections", MissingSectionPolicy.SKIP)
    per_type = document_settings.get("section_policies", {}) or {}
    if section_type is not None and section_type in per_type:
        policy = per_type[section_type]

    if policy not in MissingSectionPolicy.get_all_policies():
        raise ValueError(
            f"Invalid missing-section policy '{policy}' for '{section_type}'. "
            f"Must be one of {sorted(MissingSectionPolicy.get_all_policies())}"
        )
    return policy


def get_empty_section(section_type: str) -> Dict[str, Any]:
    """
    Build an empty section object for a type.

    Returns:
        {"type", "title", "content": ""} for summary, {"type", "title", "items": []} otherwise
    """
    section = {"type": section_type, "title": DEFAULT_SECTION_TITLES.get(section_type, section_type.title())}
    if section_type == SectionType.SUMMARY:
        section["content"] = ""
    else:
        section["items"] = []
    return section


def get_default_data() -> Dict[str, Any]:
    """
    Get the complete empty resume structure with every expected field.

    Returns:
        Raw resume.json object with empty strings, empty lists and one empty section per type
    """
    return {
        "meta": {
            "title": "",
            "description": "",
            "keywords": "",
            "social": {
                "ogTitle": "",
                "ogDescription": "",
                "twitterDescription": "",
                "imageUrl": "",
                "resumeUrl": "",
            },
            "structuredData": {
                "name": "",
                "jobTitle": "",
                "image": "",
                "addressLocality": "",
                "addressCountry": "",
                "email": "",
                "telephone": "",
                "sameAs": [],
                "knowsAbout": [],
            },
        },
        "personalInfo": {
            "name": "",
            "title": "",
            "contact": {"location": "", "phone": "", "email": "", "linkedin": "", "github": ""},
        },
        "sections": [get_empty_section(section_type) for section_type in SectionType.all_types()],
    }


def get_default_document() -> ResumeDocument:
    """Empty document used when no resume could be loaded."""
    return ResumeDocument(get_default_data())
