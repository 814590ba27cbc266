"""
Entity rendering.

Turns an EntityDescriptor into source text through a template. Template
variables come from a typed RenderContext that is validated before the
template runs, so a malformed descriptor fails before any output exists.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from entitygen.codegen.templates import TemplateHandle
from entitygen.core.errors import RenderError
from entitygen.core.types import EntityDescriptor, FieldEntry


class RenderContext(BaseModel):
    """
    Variables available to entity templates.

    ``fields`` is in field table order; ``field_names``, ``field_types``
    and ``field_id`` give the same information keyed by name.
    """

    package_name: str
    entity_name: str
    impl_name: str
    qualified_name: str
    fields: tuple[FieldEntry, ...] = ()
    field_names: tuple[str, ...] = ()
    field_types: dict[str, str] = Field(default_factory=dict)
    field_id: dict[str, bool] = Field(default_factory=dict)
    id_fields: tuple[FieldEntry, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("entity_name", "impl_name", "qualified_name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def from_descriptor(cls, descriptor: EntityDescriptor) -> "RenderContext":
        """
        Build the render context for a descriptor.

        Raises:
            RenderError: If the descriptor does not make a valid context
        """
        fields = tuple(descriptor.fields)
        try:
            return cls(
                package_name=descriptor.package_name,
                entity_name=descriptor.source_type_name,
                impl_name=descriptor.generated_type_name,
                qualified_name=descriptor.qualified_generated_name,
                fields=fields,
                field_names=tuple(f.name for f in fields),
                field_types={f.name: f.type_name for f in fields},
                field_id={f.name: f.is_identifier for f in fields},
                id_fields=tuple(f for f in fields if f.is_identifier),
            )
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise RenderError(
                descriptor.qualified_generated_name or "<unnamed>",
                f"invalid render context: {location} {first['msg']}",
            ) from e

    def variables(self) -> dict[str, Any]:
        """Template variables, with field entries kept as models."""
        return {name: getattr(self, name) for name in type(self).model_fields}


def render(descriptor: EntityDescriptor, template: TemplateHandle) -> str:
    """
    Render a descriptor through a template.

    Raises:
        RenderError: If the context is invalid or substitution fails
        TemplateNotFound: If the template includes a template that is missing
    """
    context = RenderContext.from_descriptor(descriptor)
    return template.render(context.variables())
