"""
Template resolution.

Templates are looked up on the configured loader path first, then in the
templates bundled with entitygen.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from entitygen.codegen import filters
from entitygen.config import GeneratorSettings
from entitygen.core.errors import RenderError, TemplateNotFound, TemplateSyntaxError

BUNDLED_TEMPLATES = Path(__file__).resolve().parent.parent / "templates"


@dataclass(frozen=True)
class TemplateHandle:
    """A resolved, parsed template."""

    name: str
    template: jinja2.Template

    def render(self, variables: Mapping[str, Any]) -> str:
        """
        Render the template.

        Raises:
            TemplateNotFound: If the template includes a missing template
            RenderError: If a variable is undefined or substitution fails
                for any other reason
        """
        try:
            return self.template.render(variables)
        except jinja2.TemplateNotFound as e:
            raise TemplateNotFound(e.name or self.name) from e
        except jinja2.UndefinedError as e:
            raise RenderError(self.name, e.message or "undefined variable") from e
        except jinja2.TemplateError as e:
            raise RenderError(self.name, str(e)) from e
        except Exception as e:  # user templates can raise anything
            raise RenderError(self.name, f"{type(e).__name__}: {e}") from e


class TemplateResolver:
    """
    Resolves template names to parsed templates.

    Undefined variables are errors, never empty strings.
    """

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        """
        Initialize the resolver.

        Args:
            settings: Generator settings; only template options are used
        """
        self.settings = settings or GeneratorSettings()
        self.search_path = [*self.settings.template_path, str(BUNDLED_TEMPLATES)]
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(self.search_path),
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            trim_blocks=self.settings.trim_blocks,
            lstrip_blocks=self.settings.lstrip_blocks,
            keep_trailing_newline=True,
            cache_size=400 if self.settings.template_cache else 0,
        )
        self.env.filters.update(filters.FILTERS)

    def resolve(self, name: str | None = None) -> TemplateHandle:
        """
        Resolve a template by name.

        Args:
            name: Template name (defaults to the configured template)

        Raises:
            TemplateNotFound: If no directory on the search path has it
            TemplateSyntaxError: If the template cannot be parsed
        """
        name = name or self.settings.template_name
        try:
            template = self.env.get_template(name)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateSyntaxError(e.name or name, e.message or str(e), e.lineno) from e
        except jinja2.TemplateNotFound as e:
            raise TemplateNotFound(name, self.search_path) from e
        return TemplateHandle(name=name, template=template)

    def from_string(self, source: str, name: str = "<string>") -> TemplateHandle:
        """
        Parse a template from text, using the same environment.

        Raises:
            TemplateSyntaxError: If the template cannot be parsed
        """
        try:
            template = self.env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateSyntaxError(name, e.message or str(e), e.lineno) from e
        return TemplateHandle(name=name, template=template)
