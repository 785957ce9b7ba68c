"""
Presentation Renderer

Converts a ResumeDocument to read-only HTML markup. Each section type has its
own fragment template (templates/sections/{type}.html.jinja); sections of
unknown type render as nothing. Missing optional fields render as empty text.
The renderer holds no document state and never modifies the document.
"""

from typing import Any, Dict

from markupsafe import Markup
from omegaconf import DictConfig

from cvsite.contexts.document.model import PersonalInfo, ResumeDocument, ResumeSection, SectionType
from cvsite.contexts.rendering.logger import _log_debug
from cvsite.contexts.rendering.metadata import build_meta_tags, build_structured_data
from cvsite.contexts.rendering.registries import TemplateRegistry
from cvsite.utils.settings import load_settings


class ResumeRenderer:
    """Converts a ResumeDocument to HTML."""

    def __init__(self, template_registry: TemplateRegistry = None, settings: DictConfig = None):
        self.template_registry = template_registry or TemplateRegistry()
        self.settings = settings if settings is not None else load_settings()

    def _fragment_options(self) -> Dict[str, Any]:
        rendering = self.settings.rendering
        return {
            "skill_bullet": rendering.skill_bullet,
            # Separator is configured as markup (e.g. "&nbsp;")
            "skill_separator": Markup(rendering.skill_separator),
        }

    def render_header(self, personal_info: PersonalInfo) -> str:
        """
        Render the header block: name, title and contact line.

        Args:
            personal_info: Typed personal info view

        Returns:
            HTML for the header
        """
        template = self.template_registry.get_template("header")
        return template.render(info=personal_info, contact=personal_info.contact)

    def render_section(self, section: ResumeSection) -> str:
        """
        Render one section wrapped in its titled block.

        Args:
            section: Section view

        Returns:
            HTML for the section, or "" when the section type is unknown
        """
        if not SectionType.is_known(section.type):
            _log_debug(f"Skipping section '{section.title}' of unknown type '{section.type}'")
            return ""

        fragment = self.template_registry.get_template(f"sections/{section.type}")
        content = fragment.render(section=section, items=section.items, **self._fragment_options())

        wrapper = self.template_registry.get_template("section")
        return wrapper.render(title=section.title, content=Markup(content))

    def render(self, document: ResumeDocument) -> str:
        """
        Render the resume body: header followed by every section in document order.

        Args:
            document: Document to render

        Returns:
            HTML markup for the resume body
        """
        header = self.render_header(document.personal_info)
        blocks = [self.render_section(section) for section in document.sections]

        template = self.template_registry.get_template("body")
        return template.render(
            header=Markup(header),
            sections=[Markup(block) for block in blocks if block],
        )

    def render_metadata(self, meta: Dict[str, Any]) -> str:
        """
        Render <head> metadata: title, meta tags and JSON-LD.

        Args:
            meta: The document's meta object

        Returns:
            HTML for the <head>, or "" when there is no meta block
        """
        if not meta:
            return ""

        title = meta.get("title")
        template = self.template_registry.get_template("metadata")
        return template.render(
            title="" if title is None else str(title),
            tags=build_meta_tags(meta),
            structured_data=build_structured_data(meta),
        )

    def render_page(self, document: ResumeDocument) -> str:
        """
        Render a complete HTML page for the document.

        Returns:
            Full HTML document text
        """
        rendering = self.settings.rendering
        template = self.template_registry.get_template("page")
        return template.render(
            lang=rendering.get("lang", "en"),
            metadata=Markup(self.render_metadata(document.meta)),
            fallback_title=document.personal_info.name or "Resume",
            stylesheet=rendering.stylesheet,
            body=Markup(self.render(document)),
        ) + "\n"

    def render_error_page(self, message: str = None) -> str:
        """Render the page shown when the resume could not be loaded."""
        rendering = self.settings.rendering
        template = self.template_registry.get_template("error_page")
        return template.render(
            lang=rendering.get("lang", "en"),
            error_message=message or rendering.error_message,
            stylesheet=rendering.stylesheet,
        ) + "\n"


# Convenience functions


def render(document: ResumeDocument, settings: DictConfig = None) -> str:
    """Render the resume body markup for a document."""
    return ResumeRenderer(settings=settings).render(document)


def render_section(section: ResumeSection, settings: DictConfig = None) -> str:
    """Render one section ("" for unknown types)."""
    return ResumeRenderer(settings=settings).render_section(section)
