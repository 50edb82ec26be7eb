"""
Kiln Render - Jinja2 rendering of the scaffold templates

Templates only substitute variables; the casing filters are registered so
custom template directories can derive other spellings themselves.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
from jinja2 import TemplateNotFound as JinjaTemplateNotFound

from kiln.errors import TemplateNotFound
from kiln.naming import to_kebab, to_upper_camel

PACKAGE_TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_jinja_env(templates_dir: Path) -> Environment:
    """Create Jinja2 environment with the casing filters."""

    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )

    env.filters["kebab_case"] = to_kebab
    env.filters["upper_camel_case"] = to_upper_camel

    return env


class TemplateRenderer:
    """Renders named templates from a directory, or raw template text."""

    def __init__(self, templates_dir: Path | None = None):
        self.templates_dir = Path(templates_dir) if templates_dir else PACKAGE_TEMPLATES_DIR
        self.env = create_jinja_env(self.templates_dir)

    def render_string(self, template_text: str, bindings: Mapping[str, Any]) -> str:
        return self.env.from_string(template_text).render(**bindings)

    def load(self, template_name: str) -> Template:
        try:
            return self.env.get_template(template_name)
        except JinjaTemplateNotFound as e:
            raise TemplateNotFound(template_name, self.templates_dir) from e

    def render(self, template_name: str, bindings: Mapping[str, Any]) -> str:
        return self.load(template_name).render(**bindings)

    def path_of(self, template_name: str) -> Path:
        """Location of a template that is copied verbatim rather than rendered."""
        path = self.templates_dir / template_name
        if not path.is_file():
            raise TemplateNotFound(template_name, self.templates_dir)
        return path
