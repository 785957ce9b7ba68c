"""
Rendering Context

Responsibilities:
- Renders the resume document as read-only HTML (one fragment template per section type)
- Renders page metadata (meta tags, JSON-LD)
- Builds the static page (viewer front end)

Owns: HTML templates, presentation markup, site output
Never: Modifies the document
"""

from cvsite.contexts.rendering.registries import TemplateRegistry
from cvsite.contexts.rendering.renderer import ResumeRenderer, render, render_section
from cvsite.contexts.rendering.site import BuildResult, build_site

__all__ = [
    "ResumeRenderer",
    "render",
    "render_section",
    "TemplateRegistry",
    "build_site",
    "BuildResult",
]
