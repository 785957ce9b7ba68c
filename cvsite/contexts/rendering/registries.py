"""
Rendering Registries

Registry for loading and caching the Jinja2 templates that produce HTML.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("CVSITE_TEMPLATES_PATH", Path(__file__).resolve().parent / "templates"))

TEMPLATE_SUFFIX = ".html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored as {templates_path}/{template_name}.html.jinja, e.g.
    sections/experience.html.jinja for the experience section fragment.
    Output is autoescaped; values that are already markup must be wrapped in
    markupsafe.Markup by the caller.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base directory of the templates. Defaults to
                           CVSITE_TEMPLATES_PATH from environment, then the packaged templates
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def get_template(self, template_name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            template_name: Name without suffix (e.g., 'sections/projects')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        template_path = f"{template_name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{template_name}' at {self.templates_path / template_path}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_template_path(self, template_name: str) -> Path:
        """
        Get the file path for a template.

        Args:
            template_name: Name without suffix (e.g., 'sections/projects')

        Returns:
            Path to template file
        """
        return self.templates_path / f"{template_name}{TEMPLATE_SUFFIX}"

    def has_template(self, template_name: str) -> bool:
        return self.get_template_path(template_name).is_file()

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            template_name: Name of the template

        Returns:
            True if cached, False otherwise
        """
        return template_name in self._cache
