"""
entitygen Core Module.

Contains the field model, descriptor assembly, error taxonomy, and shared types.
"""

from entitygen.core.descriptor import assemble_descriptor
from entitygen.core.errors import (
    ConfigurationError,
    DiscoveryError,
    EmissionIOError,
    EntityGenError,
    MalformedMethodShape,
    RenderError,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)
from entitygen.core.fields import build_field_table, derive_field_name, infer_field
from entitygen.core.types import (
    IMPL_SUFFIX,
    VOID_TYPE,
    BatchEntry,
    EntityDescriptor,
    FieldEntry,
    FieldTable,
    MethodDescriptor,
)

__all__ = [
    # Fields
    "build_field_table",
    "derive_field_name",
    "infer_field",
    # Descriptor
    "assemble_descriptor",
    # Errors
    "EntityGenError",
    "MalformedMethodShape",
    "TemplateError",
    "TemplateNotFound",
    "TemplateSyntaxError",
    "RenderError",
    "EmissionIOError",
    "DiscoveryError",
    "ConfigurationError",
    # Types
    "IMPL_SUFFIX",
    "VOID_TYPE",
    "MethodDescriptor",
    "FieldEntry",
    "FieldTable",
    "EntityDescriptor",
    "BatchEntry",
]
