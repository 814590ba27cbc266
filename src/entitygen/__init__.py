"""
entitygen - implementation class generator for annotated accessor interfaces.

entitygen reads interfaces that declare only getters and setters, infers
their fields from the accessor names, and renders a complete implementation
class for each one from a template.
"""

__version__ = "0.1.0"

from entitygen.core.descriptor import assemble_descriptor
from entitygen.core.errors import (
    EmissionIOError,
    EntityGenError,
    RenderError,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)
from entitygen.core.fields import build_field_table
from entitygen.core.types import (
    BatchEntry,
    EntityDescriptor,
    FieldEntry,
    FieldTable,
    MethodDescriptor,
)

__all__ = [
    # Version
    "__version__",
    # Pipeline
    "build_field_table",
    "assemble_descriptor",
    # Types
    "MethodDescriptor",
    "FieldEntry",
    "FieldTable",
    "EntityDescriptor",
    "BatchEntry",
    # Errors
    "EntityGenError",
    "TemplateError",
    "TemplateNotFound",
    "TemplateSyntaxError",
    "RenderError",
    "EmissionIOError",
]
